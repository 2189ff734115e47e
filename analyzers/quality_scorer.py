from models import Severity

CRITICAL_PENALTY = 20
WARNING_PENALTY = 10


def count_severities(issues):
    """Tally issues by severity"""
    counts = {severity: 0 for severity in Severity}
    for issue in issues:
        counts[issue.severity] += 1
    return counts


def compute_overall_score(issues):
    """100 minus 20 per critical and 10 per warning issue, clamped to [0, 100]"""
    counts = count_severities(issues)
    score = 100 - counts[Severity.CRITICAL] * CRITICAL_PENALTY - counts[Severity.WARNING] * WARNING_PENALTY
    return max(0, min(100, score))
