"""gtrends_csv: section extraction for Google Trends CSV exports."""

from .config import CsvConfig, GtrendsConfig, LoggingConfig, load_config
from .errors import ConfigurationError, GtrendsCsvError, SectionReadError
from .parser import SECTION_TOP_SEARCHES_FOR, SectionedCsvParser, split_lines
from .types import SectionFound, SectionNotFound, SectionResult, SectionSpan

__all__ = [
    "ConfigurationError",
    "CsvConfig",
    "GtrendsConfig",
    "GtrendsCsvError",
    "LoggingConfig",
    "SECTION_TOP_SEARCHES_FOR",
    "SectionFound",
    "SectionNotFound",
    "SectionReadError",
    "SectionResult",
    "SectionSpan",
    "SectionedCsvParser",
    "load_config",
    "split_lines",
]
