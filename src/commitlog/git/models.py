"""Commit record model produced by the log parser."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class CommitEntry:
	"""
	One commit parsed from a line of ``git log`` output.

	Entries are built fresh by every query and are never mutated.

	"""

	hash: str
	"""Full commit hash."""

	short_hash: str
	"""Abbreviated hash, a prefix of ``hash``."""

	message: str
	"""Subject line of the commit message."""

	author: str
	"""Author display name."""

	date: str
	"""Relative author date, e.g. ``2 hours ago``."""

	date_iso: str
	"""Strict ISO-8601 author date with offset, usable for ordering."""

	parents: tuple[str, ...] = ()
	"""Parent hashes, first parent first. Empty for a root commit."""

	refs: str = ""
	"""Raw ref decorations (``HEAD -> main, tag: v1.0``), unparsed."""

	graph: str = ""
	"""Graph glyph prefix drawn by ``git log --graph`` for this line."""

	@property
	def is_root(self) -> bool:
		"""Whether this commit has no parents."""
		return not self.parents

	@property
	def is_merge(self) -> bool:
		"""Whether this commit has two or more parents."""
		return len(self.parents) >= 2  # noqa: PLR2004

	def to_dict(self) -> dict[str, Any]:
		"""Return a JSON-friendly dict of this entry."""
		data = asdict(self)
		data["parents"] = list(self.parents)
		return data
