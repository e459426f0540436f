"""
Frontmatter parsing.

Combines the splitter with decoder dispatch. ``parse`` reports a missing
block as ``format=None``; ``parse_or_default`` instead decodes an empty
block of the first enabled format, so targets with optional fields
always get an instance.
"""

from __future__ import annotations

from typing import Any

from markdown_frontmatter.core.decoders import EMPTY_DOCUMENTS, decode
from markdown_frontmatter.core.splitter import split
from markdown_frontmatter.models.config import Config
from markdown_frontmatter.models.parsed import ParsedFrontmatter
from markdown_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)


def parse(content: str,
          target: Any = None,
          *,
          config: Config | None = None,
          strict: bool = True) -> ParsedFrontmatter:
	"""
	Parse a document's frontmatter into ``target`` and return the body.

	Parameters:
		content: The full document text.
		target: Type to decode the frontmatter into. None keeps the
			decoded mapping as is.
		config: Configuration with the enabled formats. Loaded from the
			environment when omitted.
		strict: Forwarded to pydantic validation. Pass False to allow
			lax coercion.

	Returns:
		ParsedFrontmatter; ``format`` and ``frontmatter`` are None when the
		document has no frontmatter.

	Raises:
		AbsentClosingDelimiterError: If the block is never closed.
		DisabledFormatError: If the detected format is not enabled.
		InvalidSyntaxError: If the frontmatter is malformed.
		DeserializeMismatchError: If it does not fit ``target``.
	"""
	result = split(content)
	if result.format is None:
		return ParsedFrontmatter(body=result.body)

	cfg = config or Config()
	frontmatter = decode(result.format,
	                     result.frontmatter,
	                     target,
	                     enabled=cfg.formats,
	                     strict=strict)
	return ParsedFrontmatter(body=result.body,
	                         format=result.format,
	                         frontmatter=frontmatter)


def parse_or_default(content: str,
                     target: Any = None,
                     *,
                     config: Config | None = None,
                     strict: bool = True) -> ParsedFrontmatter:
	"""
	Parse like ``parse`` but substitute an empty block when there is none.

	The substitute uses the first enabled format (JSON, then TOML, then
	YAML) and is decoded into ``target`` like real frontmatter, so a
	target with required fields fails with DeserializeMismatchError.
	"""
	cfg = config or Config()
	parsed = parse(content, target, config=cfg, strict=strict)
	if parsed.format is not None:
		return parsed

	fmt = cfg.default_format
	logger.debug("no frontmatter, substituting empty %s block", fmt.value)
	frontmatter = decode(fmt,
	                     EMPTY_DOCUMENTS[fmt],
	                     target,
	                     enabled=cfg.formats,
	                     strict=strict)
	return ParsedFrontmatter(body=parsed.body,
	                         format=fmt,
	                         frontmatter=frontmatter)


__all__ = ["parse", "parse_or_default"]
