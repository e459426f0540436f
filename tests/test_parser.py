from typing import Optional

import pytest
from pydantic import BaseModel

from markdown_frontmatter import (
    AbsentClosingDelimiterError,
    Config,
    DeserializeMismatchError,
    DisabledFormatError,
    FrontmatterFormat,
    InvalidSyntaxError,
    ParsedFrontmatter,
    parse,
    parse_or_default,
    split,
)


class OptionalFrontmatter(BaseModel):
	foo: Optional[bool] = None


class RequiredFrontmatter(BaseModel):
	foo: bool


class EmptyFrontmatter(BaseModel):
	pass


class Count(BaseModel):
	foo: int


EMPTY_DOCUMENT = ""
DOCUMENT_WITHOUT_FRONTMATTER = "hello world"

VALID_DOCUMENTS = {
    FrontmatterFormat.JSON: '{\n\t"foo": true\n}\nhello world',
    FrontmatterFormat.TOML: "+++\nfoo = true\n+++\nhello world",
    FrontmatterFormat.YAML: "---\nfoo: true\n---\nhello world",
}
INVALID_SYNTAX = {
    FrontmatterFormat.JSON: "{\n1\n}",
    FrontmatterFormat.TOML: "+++\nfoobar\n+++\n",
    FrontmatterFormat.YAML: "---\nfoo: [1, 2\n---\n",
}
INVALID_TYPE = {
    FrontmatterFormat.JSON: '{\n\t"foo": 0\n}',
    FrontmatterFormat.TOML: "+++\nfoo = 123\n+++\n",
    FrontmatterFormat.YAML: "---\nfoo: 123\n---\n",
}

FORMATS = list(FrontmatterFormat)


@pytest.fixture
def config():
	return Config(formats=FORMATS)


class TestParse:
	"""parse() reports missing frontmatter as None."""

	def test_empty_document(self, config):
		parsed = parse(EMPTY_DOCUMENT, RequiredFrontmatter, config=config)
		assert isinstance(parsed, ParsedFrontmatter)
		assert parsed.format is None
		assert parsed.frontmatter is None
		assert parsed.body == ""
		assert not parsed.has_frontmatter

	def test_document_without_frontmatter(self, config):
		parsed = parse(DOCUMENT_WITHOUT_FRONTMATTER, RequiredFrontmatter,
		               config=config)
		assert parsed.format is None
		assert parsed.frontmatter is None
		assert parsed.body == DOCUMENT_WITHOUT_FRONTMATTER

	@pytest.mark.parametrize("fmt", FORMATS)
	def test_required_frontmatter_in_valid_document(self, fmt, config):
		parsed = parse(VALID_DOCUMENTS[fmt], RequiredFrontmatter,
		               config=config)
		assert parsed.frontmatter == RequiredFrontmatter(foo=True)
		assert parsed.format is fmt
		assert parsed.body == "hello world"
		assert parsed.has_frontmatter

	@pytest.mark.parametrize("fmt", FORMATS)
	def test_optional_frontmatter_in_valid_document(self, fmt, config):
		parsed = parse(VALID_DOCUMENTS[fmt], OptionalFrontmatter,
		               config=config)
		assert parsed.frontmatter == OptionalFrontmatter(foo=True)

	@pytest.mark.parametrize("fmt", FORMATS)
	def test_invalid_syntax(self, fmt, config):
		for target in (OptionalFrontmatter, RequiredFrontmatter):
			with pytest.raises(InvalidSyntaxError) as exc_info:
				parse(INVALID_SYNTAX[fmt], target, config=config)
			assert exc_info.value.format is fmt

	@pytest.mark.parametrize("fmt", FORMATS)
	def test_invalid_type(self, fmt, config):
		for target in (OptionalFrontmatter, RequiredFrontmatter):
			with pytest.raises(DeserializeMismatchError) as exc_info:
				parse(INVALID_TYPE[fmt], target, config=config)
			assert exc_info.value.format is fmt

	def test_yaml_bool_into_integer_is_shape_mismatch(self, config):
		with pytest.raises(DeserializeMismatchError) as exc_info:
			parse("---\nfoo: true\n---\n", Count, config=config)
		assert not isinstance(exc_info.value, InvalidSyntaxError)

	def test_lax_validation_is_opt_in(self, config):
		"""strict=False lets pydantic coerce 0 into False."""
		parsed = parse(INVALID_TYPE[FrontmatterFormat.JSON],
		               RequiredFrontmatter,
		               config=config,
		               strict=False)
		assert parsed.frontmatter == RequiredFrontmatter(foo=False)
		parsed = parse("---\nfoo: true\n---\n", Count, config=config,
		               strict=False)
		assert parsed.frontmatter == Count(foo=1)

	def test_without_target_returns_mapping(self, config):
		parsed = parse("---\ntitle: Hello\ntags: [a, b]\n---\nWorld\n",
		               config=config)
		assert parsed.frontmatter == {"title": "Hello", "tags": ["a", "b"]}
		assert parsed.body == "World\n"

	def test_unclosed_block_raises(self, config):
		with pytest.raises(AbsentClosingDelimiterError) as exc_info:
			parse("+++\nfoo = true\n", RequiredFrontmatter, config=config)
		assert exc_info.value.format is FrontmatterFormat.TOML

	def test_disabled_format_still_detected(self):
		"""Disabling YAML gates decoding only, not splitting."""
		config = Config(formats=["json", "toml"])
		doc = VALID_DOCUMENTS[FrontmatterFormat.YAML]
		assert split(doc).format is FrontmatterFormat.YAML
		with pytest.raises(DisabledFormatError) as exc_info:
			parse(doc, RequiredFrontmatter, config=config)
		assert exc_info.value.format is FrontmatterFormat.YAML

	def test_config_loaded_from_environment(self, monkeypatch):
		monkeypatch.setenv("FRONTMATTER_FORMATS", "json")
		with pytest.raises(DisabledFormatError):
			parse(VALID_DOCUMENTS[FrontmatterFormat.TOML], RequiredFrontmatter)
		parsed = parse(VALID_DOCUMENTS[FrontmatterFormat.JSON],
		               RequiredFrontmatter)
		assert parsed.frontmatter.foo is True


class TestParseOrDefault:
	"""parse_or_default() substitutes an empty block of the first format."""

	@pytest.mark.parametrize("document",
	                         [EMPTY_DOCUMENT, DOCUMENT_WITHOUT_FRONTMATTER])
	def test_empty_frontmatter(self, document, config):
		parsed = parse_or_default(document, EmptyFrontmatter, config=config)
		assert parsed.frontmatter == EmptyFrontmatter()
		assert parsed.format is FrontmatterFormat.JSON
		assert parsed.body == document

	@pytest.mark.parametrize("document",
	                         [EMPTY_DOCUMENT, DOCUMENT_WITHOUT_FRONTMATTER])
	def test_optional_frontmatter(self, document, config):
		parsed = parse_or_default(document, OptionalFrontmatter, config=config)
		assert parsed.frontmatter == OptionalFrontmatter(foo=None)

	@pytest.mark.parametrize("document",
	                         [EMPTY_DOCUMENT, DOCUMENT_WITHOUT_FRONTMATTER])
	def test_required_frontmatter(self, document, config):
		with pytest.raises(DeserializeMismatchError) as exc_info:
			parse_or_default(document, RequiredFrontmatter, config=config)
		assert exc_info.value.format is FrontmatterFormat.JSON

	@pytest.mark.parametrize("enabled,expected", [
	    (["toml"], FrontmatterFormat.TOML),
	    (["yaml"], FrontmatterFormat.YAML),
	    (["yaml", "toml"], FrontmatterFormat.TOML),
	])
	def test_default_follows_first_enabled_format(self, enabled, expected):
		config = Config(formats=enabled)
		parsed = parse_or_default(DOCUMENT_WITHOUT_FRONTMATTER,
		                          OptionalFrontmatter,
		                          config=config)
		assert parsed.format is expected
		assert parsed.frontmatter == OptionalFrontmatter()
		with pytest.raises(DeserializeMismatchError) as exc_info:
			parse_or_default(EMPTY_DOCUMENT, RequiredFrontmatter, config=config)
		assert exc_info.value.format is expected

	def test_present_frontmatter_is_used(self, config):
		parsed = parse_or_default(VALID_DOCUMENTS[FrontmatterFormat.YAML],
		                          RequiredFrontmatter,
		                          config=config)
		assert parsed.format is FrontmatterFormat.YAML
		assert parsed.frontmatter == RequiredFrontmatter(foo=True)
		assert parsed.body == "hello world"
