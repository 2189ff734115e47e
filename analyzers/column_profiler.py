from dataclasses import dataclass, field
import numpy as np
import pandas as pd

MISSING_MARKERS = ('', 'null', 'undefined')


@dataclass(frozen=True)
class ColumnProfile:
    """Statistics for one column, consumed by the issue detectors"""
    column: str
    total_rows: int
    missing_count: int
    values: list = field(default_factory=list)
    numeric_values: list = field(default_factory=list)

    @property
    def non_missing_count(self):
        return len(self.values)

    @property
    def missing_percentage(self):
        return self.missing_count / self.total_rows * 100 if self.total_rows else 0.0


class ColumnProfiler:
    """Computes per-column counts and numeric casts over parsed row records"""

    def discover_columns(self, rows):
        """Columns in the order they appear in the first row"""
        if not rows:
            return []
        return list(rows[0].keys())

    def profile_all(self, rows):
        return [self.profile(rows, column) for column in self.discover_columns(rows)]

    def profile(self, rows, column):
        """Profile a single column; rows without the column count as missing"""
        values = []
        missing_count = 0

        for row in rows:
            value = row.get(column)
            if is_missing(value):
                missing_count += 1
            else:
                values.append(value)

        return ColumnProfile(
            column=column,
            total_rows=len(rows),
            missing_count=missing_count,
            values=values,
            numeric_values=self._numeric_values(values)
        )

    def _numeric_values(self, values):
        """Values that parse as finite floats, in source order"""
        candidates = [
            value for value in values
            if isinstance(value, (str, int, float)) and not isinstance(value, bool)
        ]
        if not candidates:
            return []

        numeric_series = pd.to_numeric(pd.Series(candidates, dtype=object), errors='coerce')
        numeric_series = numeric_series[np.isfinite(numeric_series.astype(float))]
        return numeric_series.astype(float).tolist()


def is_missing(value):
    """Absent, null, empty, or one of the literal null markers"""
    if value is None:
        return True
    if isinstance(value, str):
        return value in MISSING_MARKERS
    return False
