"""
Markdown frontmatter models.

This subpackage contains the format enum, the Pydantic result models and
the runtime configuration.

Key models:
    - FrontmatterFormat: Closed set of JSON, TOML and YAML formats
    - SplitResult: Raw frontmatter text and body produced by split()
    - ParsedFrontmatter: Decoded frontmatter and body produced by parse()
    - Config: Enabled formats and log level loaded from environment
"""

from .format import FrontmatterFormat
from .split_result import SplitResult
from .parsed import ParsedFrontmatter
from .config import Config, load_env

__all__ = [
    "FrontmatterFormat",
    "SplitResult",
    "ParsedFrontmatter",
    "Config",
    "load_env",
]
