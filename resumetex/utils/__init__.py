"""
Shared utilities for resumetex.

Common functionality used across contexts:
- Text processing
- Logging setup
- PDF inspection
- Timestamps
"""

from resumetex.utils.text_processing import slugify_name, truncate
from resumetex.utils.timestamp import now

__all__ = ["now", "slugify_name", "truncate"]
