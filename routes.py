import logging
from flask import request, jsonify, current_app
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename

from analysis_service import analyze, generate_fix
from exceptions import DataQualityError, MalformedInputError
from models import Issue, attach_fix_code


def register_routes(app):
    """Register all routes with the Flask app"""

    @app.errorhandler(RequestEntityTooLarge)
    def handle_file_too_large(e):
        """Uploads over MAX_CONTENT_LENGTH"""
        limit = current_app.config.get('MAX_CONTENT_LENGTH')
        logging.warning(f"Rejected upload larger than {limit} bytes")
        return jsonify({
            'status': 'error',
            'message': f'File too large (limit {limit} bytes)'
        }), 413

    @app.route('/api/health')
    def api_health():
        """Liveness probe"""
        return jsonify({'status': 'success'})

    @app.route('/api/analyze', methods=['POST'])
    def api_analyze_file():
        """API endpoint to analyze one uploaded CSV or JSON file"""
        file = request.files.get('file')
        if file is None:
            files = request.files.getlist('files[]')
            file = files[0] if files else None

        if not file or file.filename == '':
            return jsonify({
                'status': 'error',
                'message': 'No file provided'
            }), 400

        filename = secure_filename(file.filename) or file.filename

        try:
            result = analyze(
                file.read(),
                filename,
                summarizer=current_app.extensions.get('summarizer'),
                sample_size=current_app.config['SUMMARY_SAMPLE_SIZE']
            )
            logging.info(f"Analysis of {filename} finished with score {result.overall_score}")

            return jsonify({
                'status': 'success',
                'fileName': filename,
                **result.to_dict()
            })

        except DataQualityError as e:
            logging.warning(f"Analysis of {filename} rejected: {e.message}")
            return jsonify(e.to_dict()), e.status_code

        except Exception as e:
            logging.error(f"Analysis error: {str(e)}")
            return jsonify({
                'status': 'error',
                'message': f'Analysis failed: {str(e)}'
            }), 500

    @app.route('/api/generate-fix', methods=['POST'])
    def api_generate_fix():
        """API endpoint to generate remediation code for one issue"""
        payload = request.get_json(silent=True)

        try:
            if not isinstance(payload, dict) or 'issue' not in payload:
                raise MalformedInputError("Request body must contain an issue")

            issue = Issue.from_dict(payload['issue'])
            fix_code = generate_fix(issue, payload.get('fileName'))
            response = {
                'status': 'success',
                'fixCode': fix_code
            }

            if isinstance(payload.get('issues'), list):
                issues = [Issue.from_dict(item) for item in payload['issues']]
                updated = attach_fix_code(issues, issue.column, issue.type, fix_code)
                response['issues'] = [item.to_dict() for item in updated]

            return jsonify(response)

        except DataQualityError as e:
            logging.warning(f"Fix generation rejected: {e.message}")
            return jsonify(e.to_dict()), e.status_code

        except Exception as e:
            logging.error(f"Fix generation error: {str(e)}")
            return jsonify({
                'status': 'error',
                'message': f'Fix generation failed: {str(e)}'
            }), 500
