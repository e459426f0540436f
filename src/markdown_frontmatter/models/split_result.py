"""
Split result model.

Defines the SplitResult returned by the splitter: the raw frontmatter
text, its format and the document body.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .format import FrontmatterFormat


class SplitResult(BaseModel):
	"""
	Outcome of splitting a document.

	All text fields are slices of the left-trimmed input. ``format`` and
	``frontmatter`` are either both set or both None.
	"""

	model_config = ConfigDict(frozen=True)

	body: str = Field(description="Document body after the frontmatter")
	format: FrontmatterFormat | None = Field(
	    default=None, description="Detected frontmatter format")
	frontmatter: str | None = Field(
	    default=None, description="Raw frontmatter text")

	@model_validator(mode="after")
	def check_format_pairing(self) -> "SplitResult":
		if (self.format is None) != (self.frontmatter is None):
			raise ValueError("format and frontmatter must be set together")
		return self

	@property
	def has_frontmatter(self) -> bool:
		return self.format is not None


__all__ = ["SplitResult"]
