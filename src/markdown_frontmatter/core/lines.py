"""
Line scanning over a text buffer.

Yields one LineSpan per line without normalizing the buffer; offsets
always refer to the buffer as given.
``\\n``, ``\\r\\n`` and a lone ``\\r`` are all line terminators.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

# CRLF must be tried before a lone CR
TERMINATOR_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class LineSpan:
	"""A single line of a buffer and where the next one starts."""

	start: int
	next_start: int
	text: str  # excludes the terminator

	@property
	def end(self) -> int:
		"""Return the offset just past the line text."""
		return self.start + len(self.text)


def iter_lines(buffer: str) -> Iterator[LineSpan]:
	"""
	Lazily scan ``buffer`` line by line.

	The spans are contiguous and cover the whole buffer; the last span's
	``next_start`` equals ``len(buffer)``. An empty buffer yields nothing,
	a buffer holding only a terminator yields one empty line.

	Parameters:
		buffer: The text to scan.

	Yields:
		LineSpan for each line, in order.
	"""
	size = len(buffer)
	pos = 0
	while pos < size:
		m = TERMINATOR_RE.search(buffer, pos)
		if m is None:
			line_end = next_start = size
		else:
			line_end, next_start = m.start(), m.end()
		yield LineSpan(start=pos,
		               next_start=next_start,
		               text=buffer[pos:line_end])
		pos = next_start


__all__ = ["LineSpan", "iter_lines"]
