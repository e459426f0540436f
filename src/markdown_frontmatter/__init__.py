"""
Markdown Frontmatter - split and decode JSON, TOML or YAML frontmatter.

Main entry points:
    - markdown_frontmatter.split: raw frontmatter text and body
    - markdown_frontmatter.parse: frontmatter decoded into a target type
    - markdown_frontmatter.models.config: Config and load_env()
"""

from markdown_frontmatter.core import (
    LineSpan,
    decode,
    iter_lines,
    parse,
    parse_or_default,
    split,
)
from markdown_frontmatter.errors import (
    AbsentClosingDelimiterError,
    DecodeError,
    DeserializeMismatchError,
    DisabledFormatError,
    FrontmatterError,
    InvalidSyntaxError,
)
from markdown_frontmatter.models import (
    Config,
    FrontmatterFormat,
    ParsedFrontmatter,
    SplitResult,
    load_env,
)
from markdown_frontmatter.utils import configure_logging, get_logger

__all__ = [
    "split",
    "parse",
    "parse_or_default",
    "decode",
    "iter_lines",
    "LineSpan",
    "FrontmatterFormat",
    "SplitResult",
    "ParsedFrontmatter",
    "Config",
    "load_env",
    "FrontmatterError",
    "DisabledFormatError",
    "AbsentClosingDelimiterError",
    "DecodeError",
    "InvalidSyntaxError",
    "DeserializeMismatchError",
    "configure_logging",
    "get_logger",
]
