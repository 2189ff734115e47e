import json
import logging
import numpy as np

from models import Issue, IssueType, Severity
from .column_profiler import ColumnProfiler

IQR_MULTIPLIER = 1.5


class IssueDetector:
    """Detects missing values, duplicate identifiers and IQR outliers per column"""

    def __init__(self, profiler=None):
        self.profiler = profiler or ColumnProfiler()

    def detect_all(self, rows):
        """Run every detector over every column, columns in first-row order"""
        issues = []
        for profile in self.profiler.profile_all(rows):
            issues.extend(self.detect(profile))

        logging.info(f"Detected {len(issues)} issues across {len(self.profiler.discover_columns(rows))} columns")
        return issues

    def detect(self, profile):
        """Run the detectors for one column in their fixed order"""
        checks = [
            self._check_missing_values,
            self._check_duplicate_values,
            self._check_outliers
        ]

        issues = []
        for check in checks:
            issue = check(profile)
            if issue is not None:
                issues.append(issue)
        return issues

    def _check_missing_values(self, profile):
        if profile.missing_count == 0:
            return None

        column = profile.column
        percentage = profile.missing_percentage

        if percentage > 20:
            severity = Severity.CRITICAL
        elif percentage > 5:
            severity = Severity.WARNING
        else:
            severity = Severity.INFO

        if percentage > 10:
            recommendation = f"Consider data imputation strategies or investigate data collection process for {column}."
        else:
            recommendation = f"Monitor {column} data collection to prevent further missing values."

        return Issue(
            column=column,
            type=IssueType.MISSING_VALUES,
            severity=severity,
            count=profile.missing_count,
            percentage=percentage,
            description=f"{profile.missing_count} missing values found",
            explanation=f"Missing values in {column} column likely indicate incomplete data collection or integration issues.",
            recommendation=recommendation
        )

    def _check_duplicate_values(self, profile):
        """Only columns whose name contains 'id' are treated as keys"""
        if 'id' not in profile.column.lower() or not profile.values:
            return None

        distinct_values = {_hashable(value) for value in profile.values}
        duplicate_count = profile.non_missing_count - len(distinct_values)
        if duplicate_count <= 0:
            return None

        column = profile.column
        return Issue(
            column=column,
            type=IssueType.DUPLICATE_VALUES,
            severity=Severity.CRITICAL,
            count=duplicate_count,
            percentage=duplicate_count / profile.total_rows * 100,
            description=f"{duplicate_count} duplicate values in ID column",
            explanation="Duplicate IDs indicate data integrity issues that can cause incorrect analysis results.",
            recommendation=f"Implement unique constraints and data deduplication process for {column}."
        )

    def _check_outliers(self, profile):
        if not profile.numeric_values:
            return None

        data = np.asarray(profile.numeric_values, dtype=float)
        lower_bound, upper_bound = iqr_bounds(data)
        outlier_count = int(((data < lower_bound) | (data > upper_bound)).sum())
        if outlier_count == 0:
            return None

        column = profile.column
        percentage = outlier_count / len(data) * 100

        return Issue(
            column=column,
            type=IssueType.OUTLIERS,
            severity=Severity.WARNING if percentage > 10 else Severity.INFO,
            count=outlier_count,
            percentage=percentage,
            description=f"{outlier_count} potential outliers detected",
            explanation=f"Statistical outliers in {column} may indicate data entry errors or genuine extreme values.",
            recommendation=f"Review outlier values in {column} to determine if they are valid or require correction."
        )


def nearest_rank_quartiles(values):
    """Q1 and Q3 taken at indexes floor(0.25 n) and floor(0.75 n) of the sorted values"""
    data = np.sort(np.asarray(values, dtype=float))
    n = len(data)
    if n == 0:
        raise ValueError("Cannot compute quartiles of an empty sequence")
    q1 = data[int(np.floor(n * 0.25))]
    q3 = data[int(np.floor(n * 0.75))]
    return float(q1), float(q3)


def iqr_bounds(values):
    """Lower and upper outlier fences using nearest-rank quartiles"""
    q1, q3 = nearest_rank_quartiles(values)
    iqr = q3 - q1
    return q1 - IQR_MULTIPLIER * iqr, q3 + IQR_MULTIPLIER * iqr


def _hashable(value):
    """Lists and objects from JSON compare by their canonical text"""
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True, default=str)
    if isinstance(value, bool):
        # True == 1 in Python
        return ('bool', value)
    return value
