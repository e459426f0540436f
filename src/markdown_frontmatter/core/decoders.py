"""
Format decoder dispatch.

Routes raw frontmatter text to the decoder selected by its format and
validates the decoded data against a caller-supplied target type.

Decoding happens in two stages so failures stay distinguishable:
the format's own parser reports syntax errors, then pydantic reports
data that is well-formed but does not fit the target.
"""

from __future__ import annotations

import json
import tomllib
from typing import Any, Iterable

import yaml
from pydantic import TypeAdapter, ValidationError

from markdown_frontmatter.errors import (
    DeserializeMismatchError,
    DisabledFormatError,
    InvalidSyntaxError,
)
from markdown_frontmatter.models.config import Config
from markdown_frontmatter.models.format import FrontmatterFormat
from markdown_frontmatter.utils.logging import get_logger
from markdown_frontmatter.utils.protocols import DecoderProtocol

logger = get_logger(__name__)

DECODERS: dict[FrontmatterFormat, DecoderProtocol] = {
    FrontmatterFormat.JSON: json.loads,
    FrontmatterFormat.TOML: tomllib.loads,
    FrontmatterFormat.YAML: yaml.safe_load,
}

SYNTAX_ERRORS: dict[FrontmatterFormat, type[Exception]] = {
    FrontmatterFormat.JSON: json.JSONDecodeError,
    FrontmatterFormat.TOML: tomllib.TOMLDecodeError,
    FrontmatterFormat.YAML: yaml.YAMLError,
}

# Payload standing in for a document without frontmatter
EMPTY_DOCUMENTS: dict[FrontmatterFormat, str] = {
    FrontmatterFormat.JSON: "{}",
    FrontmatterFormat.TOML: "",
    FrontmatterFormat.YAML: "{}",
}


def decode_raw(fmt: FrontmatterFormat, text: str) -> Any:
	"""
	Decode frontmatter text into plain Python data.

	An empty YAML payload decodes to an empty mapping, like TOML.

	Raises:
		InvalidSyntaxError: If the text is not well-formed for ``fmt``.
	"""
	decoder = DECODERS[fmt]
	try:
		value = decoder(text)
	except SYNTAX_ERRORS[fmt] as exc:
		raise InvalidSyntaxError(fmt, exc) from exc
	if value is None and fmt is FrontmatterFormat.YAML:
		return {}
	return value


def decode(
    fmt: FrontmatterFormat,
    text: str,
    target: Any = None,
    *,
    enabled: Iterable[FrontmatterFormat] | None = None,
    strict: bool = True,
) -> Any:
	"""
	Decode frontmatter text of a known format, optionally into a type.

	Parameters:
		fmt: Format reported by the splitter.
		text: Raw frontmatter text.
		target: Type to validate into (pydantic model, dataclass,
			TypedDict, ``dict[str, int]``...). None returns the raw data.
		enabled: Formats whose decoders may run. Defaults to the formats
			enabled in ``Config``.
		strict: Validate without type coercion, so `true` never becomes
			`1` and `"3"` never becomes `3`. Dataclass targets only accept
			dicts with strict=False.

	Returns:
		Decoded value, an instance of ``target`` when one was given.

	Raises:
		DisabledFormatError: If ``fmt`` is not enabled.
		InvalidSyntaxError: If the text is not well-formed.
		DeserializeMismatchError: If the data does not fit ``target``.
	"""
	allowed = list(enabled) if enabled is not None else Config().formats
	if fmt not in allowed:
		raise DisabledFormatError(fmt)

	value = decode_raw(fmt, text)
	if target is None:
		return value

	logger.debug("validating %s frontmatter as %r", fmt.value, target)
	try:
		return TypeAdapter(target).validate_python(value, strict=strict)
	except ValidationError as exc:
		raise DeserializeMismatchError(fmt, exc) from exc


__all__ = [
    "DECODERS",
    "SYNTAX_ERRORS",
    "EMPTY_DOCUMENTS",
    "decode",
    "decode_raw",
]
