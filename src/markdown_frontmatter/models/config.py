from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .format import FrontmatterFormat


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="",
	                                  case_sensitive=False,
	                                  populate_by_name=True)

	formats: Any = Field(
	    default_factory=lambda: list(FrontmatterFormat),
	    alias="FRONTMATTER_FORMATS",
	    description="Formats whose decoders are enabled (json,toml,yaml)",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level for configure_logging")

	@field_validator("formats", mode="before")
	@classmethod
	def split_formats(cls, v: Any) -> list[str]:
		"""Normalize enabled formats to a list regardless of input format."""
		if v is None:
			return []
		if isinstance(v, (list, tuple, set, frozenset)):
			items = [str(getattr(p, "value", p)) for p in v]
		else:
			# fallback: comma-separated string
			items = str(v).split(",")
		return [p.strip().lower() for p in items if p.strip()]

	@field_validator("formats", mode="after")
	@classmethod
	def parse_formats(cls, v: list[str]) -> list[FrontmatterFormat]:
		"""Resolve names to formats, dropping repeats and keeping order."""
		resolved: list[FrontmatterFormat] = []
		for name in v:
			try:
				fmt = FrontmatterFormat(name)
			except ValueError:
				raise ValueError(
				    f"unknown frontmatter format: {name!r}") from None
			if fmt not in resolved:
				resolved.append(fmt)
		if not resolved:
			raise ValueError(
			    "at least one of the formats json, toml or yaml must be enabled")
		return resolved

	def is_enabled(self, fmt: FrontmatterFormat) -> bool:
		"""Return True when decoding of ``fmt`` is enabled."""
		return fmt in self.formats

	@property
	def default_format(self) -> FrontmatterFormat:
		"""Return the first enabled format in declaration order."""
		return next(fmt for fmt in FrontmatterFormat if fmt in self.formats)


__all__ = ["Config", "load_env"]
