"""
Frontmatter format model.

Defines the closed set of frontmatter formats together with the
delimiter lines that open and close each of them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class FrontmatterFormat(str, Enum):
	"""
	Format of a frontmatter block.

	JSON: Block denoted by ``{`` ... ``}`` lines, braces kept in the payload.
	TOML: Block denoted by ``+++`` ... ``+++`` lines.
	YAML: Block denoted by ``---`` ... ``---`` lines.
	"""

	JSON = "json"
	TOML = "toml"
	YAML = "yaml"

	@property
	def delimiters(self) -> tuple[str, str]:
		"""Return the (opening, closing) delimiter lines."""
		return _DELIMITERS[self]

	@property
	def opening_delimiter(self) -> str:
		return _DELIMITERS[self][0]

	@property
	def closing_delimiter(self) -> str:
		return _DELIMITERS[self][1]

	@property
	def label(self) -> str:
		"""Return the upper-case name used in error messages."""
		return self.value.upper()

	@classmethod
	def detect(cls, first_line: str) -> Optional["FrontmatterFormat"]:
		"""
		Detect the format from the first line of a document.

		Members are tried in declaration order and the whole line must
		equal the opening delimiter.

		Parameters:
			first_line: The first line, without its terminator.

		Returns:
			The matching format, or None if the line opens no block.
		"""
		for fmt in cls:
			if first_line == fmt.opening_delimiter:
				return fmt
		return None


_DELIMITERS: dict[FrontmatterFormat, tuple[str, str]] = {
    FrontmatterFormat.JSON: ("{", "}"),
    FrontmatterFormat.TOML: ("+++", "+++"),
    FrontmatterFormat.YAML: ("---", "---"),
}

__all__ = ["FrontmatterFormat"]
