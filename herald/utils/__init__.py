"""
Shared utilities for HERALD.

Common functionality used across contexts:
- Text processing (blank lines, line deletion)
- Markdown stripping
- Japanese date formatting
- Logger configuration
"""

from herald.utils.date_formatting import format_date, format_date_time, format_period
from herald.utils.markdown import strip_markdown

__all__ = ["format_date", "format_date_time", "format_period", "strip_markdown"]
