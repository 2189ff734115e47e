import logging

from analyzers.issue_detector import IssueDetector
from analyzers.quality_scorer import compute_overall_score
from models import AnalysisResult
from parsers.file_parser import FileParserFactory
from utils.fix_generator import FixCodeGenerator
from utils.summarizer import DEFAULT_SAMPLE_SIZE, TemplateSummarizer, run_summarizer


def analyze(file_content, file_name, summarizer=None, sample_size=DEFAULT_SAMPLE_SIZE):
    """Parse, profile and score one dataset.

    Raises NoDataError (including UnsupportedFormatError), MalformedInputError
    or GenerationError; nothing is returned on failure.
    """
    parser = FileParserFactory().get_parser(file_name)
    parsed = parser.read(file_content)
    rows = parsed.rows

    logging.info(f"Analyzing {file_name}: {len(rows)} rows")

    issues = IssueDetector().detect_all(rows)
    summary = run_summarizer(summarizer or TemplateSummarizer(), rows, sample_size)

    return AnalysisResult(
        summary=summary,
        total_rows=len(rows),
        total_columns=len(rows[0]),
        issues=issues,
        overall_score=compute_overall_score(issues),
        skipped_rows=parsed.skipped_rows
    )


def generate_fix(issue, file_name):
    """Remediation code for one issue"""
    return FixCodeGenerator().generate(issue, file_name)
