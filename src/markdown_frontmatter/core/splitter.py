"""
Frontmatter splitting.

Separates a leading JSON, TOML or YAML block from the rest of a
document without interpreting it. The format is chosen from the first
line only and the block ends at the first line equal to the closing
delimiter; delimiter lines inside the payload cannot be escaped.
"""

from __future__ import annotations

import re

from markdown_frontmatter.core.lines import iter_lines
from markdown_frontmatter.errors import AbsentClosingDelimiterError
from markdown_frontmatter.models.format import FrontmatterFormat
from markdown_frontmatter.models.split_result import SplitResult
from markdown_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)

# Unicode White_Space characters; str.isspace also matches \x1c-\x1f
LEADING_WHITESPACE_RE = re.compile(
    r"[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]*")


def split(content: str) -> SplitResult:
	"""
	Split a document into raw frontmatter and body.

	Leading whitespace is dropped first and every returned slice refers
	to the trimmed text. JSON keeps its braces in the frontmatter so the
	payload stays valid JSON; TOML and YAML drop their delimiter lines.

	Parameters:
		content: The full document text.

	Returns:
		SplitResult with format and frontmatter set when a block was found,
		otherwise only the trimmed body.

	Raises:
		AbsentClosingDelimiterError: If the block is opened but never closed.
	"""
	content = content[LEADING_WHITESPACE_RE.match(content).end():]
	lines = iter_lines(content)

	first = next(lines, None)
	if first is None:
		# Empty document
		return SplitResult(body=content)

	fmt = FrontmatterFormat.detect(first.text)
	if fmt is None:
		return SplitResult(body=content)
	logger.debug("detected %s frontmatter", fmt.value)

	if fmt is FrontmatterFormat.JSON:
		matter_start = first.start
	else:
		matter_start = first.next_start

	closing = fmt.closing_delimiter
	for span in lines:
		if span.text != closing:
			continue
		if fmt is FrontmatterFormat.JSON:
			matter = content[matter_start:span.next_start]
		else:
			matter = content[matter_start:span.start]
		return SplitResult(body=content[span.next_start:],
		                   format=fmt,
		                   frontmatter=matter)

	logger.debug("no closing %r line for %s frontmatter", closing, fmt.value)
	raise AbsentClosingDelimiterError(fmt)


__all__ = ["split"]
