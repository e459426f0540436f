"""
Parsed frontmatter model.

Defines the generic ParsedFrontmatter result of decoding a document's
frontmatter into a caller-supplied type.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .format import FrontmatterFormat

T = TypeVar("T")


class ParsedFrontmatter(BaseModel, Generic[T]):
	"""
	Result of parsing a document.

	``frontmatter`` holds the decoded value (an instance of the requested
	target type, or the raw decoded mapping when no target was given).
	It is None only when the document has no frontmatter.
	"""

	model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

	body: str = Field(description="Document body after the frontmatter")
	format: Optional[FrontmatterFormat] = Field(
	    default=None, description="Detected frontmatter format")
	frontmatter: Optional[T] = Field(default=None,
	                                 description="Decoded frontmatter")

	@property
	def has_frontmatter(self) -> bool:
		return self.format is not None


__all__ = ["ParsedFrontmatter"]
