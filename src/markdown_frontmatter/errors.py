"""
Exception hierarchy for frontmatter splitting and decoding.

Every error carries the detected ``format``. Decode errors also keep the
underlying decoder exception as ``source``.
"""

from __future__ import annotations

from markdown_frontmatter.models.format import FrontmatterFormat


class FrontmatterError(Exception):
	"""Base exception for all frontmatter errors."""

	def __init__(self, fmt: FrontmatterFormat, message: str) -> None:
		super().__init__(message)
		self.format = fmt


class DisabledFormatError(FrontmatterError):
	"""Raised when the decoder for a detected format is disabled."""

	def __init__(self, fmt: FrontmatterFormat) -> None:
		super().__init__(
		    fmt,
		    f"disabled format {fmt.value}, enable it in FRONTMATTER_FORMATS")


class AbsentClosingDelimiterError(FrontmatterError):
	"""Raised when an opening delimiter is never closed."""

	def __init__(self, fmt: FrontmatterFormat) -> None:
		super().__init__(fmt, f"absent closing {fmt.value} delimiter")


class DecodeError(FrontmatterError):
	"""Base error for failures reported by a format decoder."""

	def __init__(self, fmt: FrontmatterFormat, source: Exception,
	             message: str) -> None:
		super().__init__(fmt, message)
		self.source = source


class InvalidSyntaxError(DecodeError):
	"""Raised when frontmatter text is not well-formed for its format."""

	def __init__(self, fmt: FrontmatterFormat, source: Exception) -> None:
		super().__init__(fmt, source, f"invalid {fmt.label} syntax")


class DeserializeMismatchError(DecodeError):
	"""Raised when well-formed frontmatter does not fit the target type."""

	def __init__(self, fmt: FrontmatterFormat, source: Exception) -> None:
		super().__init__(fmt, source, f"couldn't deserialize {fmt.label}")


__all__ = [
    "FrontmatterError",
    "DisabledFormatError",
    "AbsentClosingDelimiterError",
    "DecodeError",
    "InvalidSyntaxError",
    "DeserializeMismatchError",
]
