import logging
from abc import ABC, abstractmethod

from analyzers.column_profiler import ColumnProfiler
from exceptions import GenerationError

DEFAULT_SAMPLE_SIZE = 3


class Summarizer(ABC):
    """Produces a natural-language description of a dataset from a few sample rows"""

    @abstractmethod
    def summarize(self, sample_rows, max_sample=DEFAULT_SAMPLE_SIZE):
        """Return a summary string for the sample"""
        pass


class TemplateSummarizer(Summarizer):
    """Deterministic summarizer describing the columns seen in the sample"""

    def __init__(self):
        self.profiler = ColumnProfiler()

    def summarize(self, sample_rows, max_sample=DEFAULT_SAMPLE_SIZE):
        sample = list(sample_rows[:max_sample])
        if not sample:
            return "The dataset sample is empty."

        profiles = self.profiler.profile_all(sample)
        numeric_columns = [p.column for p in profiles if p.values and len(p.numeric_values) == len(p.values)]
        text_columns = [p.column for p in profiles if p.values and p.column not in numeric_columns]
        id_columns = [p.column for p in profiles if 'id' in p.column.lower()]

        sentences = [
            f"Based on a sample of {len(sample)} rows, the dataset has {len(profiles)} columns: "
            f"{', '.join(p.column for p in profiles)}."
        ]
        if numeric_columns:
            sentences.append(f"Found {len(numeric_columns)} numeric columns for statistical analysis ({', '.join(numeric_columns)}).")
        if text_columns:
            sentences.append(f"Identified {len(text_columns)} text columns ({', '.join(text_columns)}).")
        if id_columns:
            sentences.append(f"Columns {', '.join(id_columns)} appear to hold record identifiers.")

        return ' '.join(sentences)


def run_summarizer(summarizer, rows, sample_size=DEFAULT_SAMPLE_SIZE):
    """Invoke the summarizer on a prefix of the rows; any failure becomes GenerationError"""
    sample = list(rows[:sample_size])
    try:
        summary = summarizer.summarize(sample, sample_size)
    except GenerationError:
        raise
    except Exception as e:
        logging.error(f"Summary generation failed: {str(e)}")
        raise GenerationError(f"Summary generation failed: {str(e)}") from e

    if not isinstance(summary, str):
        raise GenerationError("Summary generation returned no text")
    return summary
