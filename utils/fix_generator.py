import logging

from exceptions import MalformedInputError
from models import Issue, IssueType
from parsers.file_parser import get_file_type


class FixCodeGenerator:
    """Builds remediation code templates for a single data quality issue"""

    def generate(self, issue, file_name):
        """Return a pandas script or SQL statement fixing the issue"""
        if isinstance(issue, dict):
            issue = Issue.from_dict(issue)
        if not isinstance(issue, Issue):
            raise MalformedInputError("Issue must be an Issue or a JSON object")

        file_name = file_name or 'data.csv'
        is_tabular = get_file_type(file_name) == 'csv'
        column = issue.column

        logging.info(f"Generating fix for {issue.type.value} in {column!r} ({'pandas' if is_tabular else 'sql'})")

        if issue.type == IssueType.MISSING_VALUES:
            if is_tabular:
                return self._missing_values_script(column, file_name)
            return self._missing_values_sql(column)
        elif issue.type == IssueType.DUPLICATE_VALUES:
            if is_tabular:
                return self._duplicate_values_script(column, file_name)
            return self._duplicate_values_sql(column)
        elif issue.type == IssueType.OUTLIERS:
            return self._outliers_script(column, file_name)
        return self._generic_script(column, file_name)

    def _missing_values_script(self, column, file_name):
        output_name = derive_output_name(file_name, '_cleaned')
        return f"""# Fix missing values in {column}
import pandas as pd

# Load the dataset
df = pd.read_csv({file_name!r})

# Option 1: Fill with median (for numeric columns)
df[{column!r}] = df[{column!r}].fillna(df[{column!r}].median())

# Option 2: Fill with mode (for categorical columns)
# df[{column!r}] = df[{column!r}].fillna(df[{column!r}].mode()[0])

# Option 3: Forward fill
# df[{column!r}] = df[{column!r}].ffill()

# Save the cleaned dataset
df.to_csv({output_name!r}, index=False)"""

    def _missing_values_sql(self, column):
        return f"""-- SQL fix for missing values in {column}
UPDATE your_table
SET {column} = (
    SELECT AVG({column})
    FROM your_table
    WHERE {column} IS NOT NULL
)
WHERE {column} IS NULL;"""

    def _duplicate_values_script(self, column, file_name):
        output_name = derive_output_name(file_name, '_deduped')
        return f"""# Remove duplicates based on {column}
import pandas as pd

# Load the dataset
df = pd.read_csv({file_name!r})

# Remove duplicates keeping the first occurrence
df_cleaned = df.drop_duplicates(subset=[{column!r}], keep='first')

# Save the cleaned dataset
df_cleaned.to_csv({output_name!r}, index=False)

print(f"Removed {{len(df) - len(df_cleaned)}} duplicate rows")"""

    def _duplicate_values_sql(self, column):
        return f"""-- SQL fix for duplicate values in {column}
WITH RankedData AS (
    SELECT *,
           ROW_NUMBER() OVER (PARTITION BY {column} ORDER BY id) AS rn
    FROM your_table
)
DELETE FROM your_table
WHERE id IN (
    SELECT id FROM RankedData WHERE rn > 1
);"""

    def _outliers_script(self, column, file_name):
        output_name = derive_output_name(file_name, '_outliers_fixed')
        return f"""# Handle outliers in {column}
import pandas as pd
import numpy as np

# Load the dataset
df = pd.read_csv({file_name!r})

# Non-numeric cells are left untouched
numeric = pd.to_numeric(df[{column!r}], errors='coerce')
mask = numeric.notna()

# Calculate IQR (nearest-rank quartiles on the sorted values)
values = np.sort(numeric[mask].to_numpy())
Q1 = values[int(len(values) * 0.25)]
Q3 = values[int(len(values) * 0.75)]
IQR = Q3 - Q1

# Define outlier bounds
lower_bound = Q1 - 1.5 * IQR
upper_bound = Q3 + 1.5 * IQR

# Option 1: Cap outliers
df[{column!r}] = df[{column!r}].mask(mask, numeric.clip(lower_bound, upper_bound))

# Option 2: Remove outliers
# df = df[~mask | ((numeric >= lower_bound) & (numeric <= upper_bound))]

# Save the cleaned dataset
df.to_csv({output_name!r}, index=False)"""

    def _generic_script(self, column, file_name):
        output_name = derive_output_name(file_name, '_cleaned')
        return f"""# Generic data cleaning for {column}
import pandas as pd

# Load the dataset
df = pd.read_csv({file_name!r})

# Inspect the column
print(df[{column!r}].describe())
print(df[{column!r}].value_counts())

# Apply appropriate cleaning based on your analysis
# df[{column!r}] = df[{column!r}].str.strip()  # Remove whitespace
# df[{column!r}] = df[{column!r}].str.lower()  # Normalize case

# Save the cleaned dataset
df.to_csv({output_name!r}, index=False)"""


def derive_output_name(file_name, suffix):
    """data.csv -> data<suffix>.csv; names without a .csv suffix get one appended"""
    if file_name.lower().endswith('.csv'):
        return f"{file_name[:-4]}{suffix}.csv"
    return f"{file_name}{suffix}.csv"
