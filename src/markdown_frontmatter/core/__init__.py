"""Core splitting and decoding logic.

Key modules:
    - lines: Line scanner producing LineSpan values
    - splitter: split() separating raw frontmatter from the body
    - decoders: Format decoder dispatch and target validation
    - parser: parse() and parse_or_default()
"""

from markdown_frontmatter.core.lines import LineSpan, iter_lines
from markdown_frontmatter.core.splitter import split
from markdown_frontmatter.core.decoders import decode, decode_raw
from markdown_frontmatter.core.parser import parse, parse_or_default

__all__ = [
    # lines
    "LineSpan",
    "iter_lines",
    # splitter
    "split",
    # decoders
    "decode",
    "decode_raw",
    # parser
    "parse",
    "parse_or_default",
]
