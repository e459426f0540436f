"""
Protocol definitions for format decoders.

Defines the callable shape every raw decoder in the dispatch table must
have, so tests can swap in fakes.
"""

from __future__ import annotations

from typing import Any, Protocol


class DecoderProtocol(Protocol):
	"""
	Protocol for a raw format decoder.

	Turns frontmatter text into plain Python data (dicts, lists,
	scalars) or raises the format's syntax error.
	"""

	def __call__(self, text: str) -> Any:
		...


__all__ = ["DecoderProtocol"]
