from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
import numpy as np
import pandas as pd

from exceptions import MalformedInputError


class IssueType(str, Enum):
    """Kinds of data quality issues, valued by their wire names"""
    MISSING_VALUES = "Missing Values"
    DUPLICATE_VALUES = "Duplicate Values"
    OUTLIERS = "Outliers"
    OTHER = "Other"

    @classmethod
    def from_value(cls, value):
        """Resolve a wire or member name, falling back to OTHER"""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text in (member.value, member.name) or text.replace(' ', '') == member.value.replace(' ', ''):
                return member
        return cls.OTHER


class Severity(str, Enum):
    CRITICAL = "Critical"
    WARNING = "Warning"
    INFO = "Info"


def make_row(values):
    """Freeze a parsed mapping into a read-only row record"""
    return MappingProxyType(dict(values))


def make_json_serializable(obj):
    """Convert numpy types and other non-serializable objects to JSON-compatible types"""
    if isinstance(obj, (dict, MappingProxyType)):
        return {key: make_json_serializable(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_json_serializable(item) for item in obj]
    elif isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, (np.bool_, bool)):
        return bool(obj)
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif obj is None or isinstance(obj, (str, int, float)):
        return obj
    elif pd.isna(obj):
        return None
    elif hasattr(obj, 'isoformat'):  # datetime objects
        return obj.isoformat()
    return obj


@dataclass(frozen=True)
class ParsedData:
    """Rows produced by a parser plus the number of source lines it dropped"""
    rows: list
    skipped_rows: int = 0


@dataclass(frozen=True)
class Issue:
    """One data quality finding for one column"""
    column: str
    type: IssueType
    severity: Severity
    count: int
    percentage: float
    description: str = ""
    explanation: str = ""
    recommendation: str = ""
    fix_code: str = None

    @property
    def key(self):
        return (self.column, self.type)

    def with_fix_code(self, fix_code):
        return replace(self, fix_code=fix_code)

    def to_dict(self):
        data = {
            'column': self.column,
            'severity': self.severity.value,
            'type': self.type.value,
            'description': self.description,
            'count': int(self.count),
            'percentage': float(self.percentage),
            'explanation': self.explanation,
            'recommendation': self.recommendation
        }
        if self.fix_code is not None:
            data['fixCode'] = self.fix_code
        return data

    @classmethod
    def from_dict(cls, data):
        """Build an Issue from its wire form; column and type are required"""
        if not isinstance(data, dict):
            raise MalformedInputError("Issue must be a JSON object")

        missing = [name for name in ('column', 'type') if data.get(name) in (None, '')]
        if missing:
            raise MalformedInputError(f"Issue is missing required fields: {', '.join(missing)}")

        try:
            severity = Severity(data.get('severity', Severity.INFO.value))
        except ValueError:
            severity = Severity.INFO

        try:
            count = int(data.get('count', 0) or 0)
            percentage = float(data.get('percentage', 0) or 0)
        except (TypeError, ValueError):
            raise MalformedInputError("Issue count and percentage must be numeric")

        return cls(
            column=str(data['column']),
            type=IssueType.from_value(data['type']),
            severity=severity,
            count=count,
            percentage=percentage,
            description=data.get('description', ''),
            explanation=data.get('explanation', ''),
            recommendation=data.get('recommendation', ''),
            fix_code=data.get('fixCode')
        )


def attach_fix_code(issues, column, issue_type, fix_code):
    """Return a new issue list where every (column, type) match carries fix_code"""
    key = (column, IssueType.from_value(issue_type))
    return [issue.with_fix_code(fix_code) if issue.key == key else issue for issue in issues]


@dataclass(frozen=True)
class AnalysisResult:
    """Complete data quality report for one dataset"""
    summary: str
    total_rows: int
    total_columns: int
    issues: list = field(default_factory=list)
    overall_score: int = 100
    skipped_rows: int = 0

    def with_fix(self, column, issue_type, fix_code):
        return replace(self, issues=attach_fix_code(self.issues, column, issue_type, fix_code))

    def to_dict(self):
        return make_json_serializable({
            'summary': self.summary,
            'totalRows': self.total_rows,
            'totalColumns': self.total_columns,
            'issues': [issue.to_dict() for issue in self.issues],
            'overallScore': self.overall_score,
            'skippedRows': self.skipped_rows
        })
