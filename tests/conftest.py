"""Global test fixtures and configuration."""

from __future__ import annotations

import pytest

from commitlog.git.commands import FIELD_SEPARATOR

HASH_A = "a" * 40
HASH_B = "b" * 40
HASH_C = "c" * 40
HASH_D = "d" * 40


def make_line(
	graph: str,
	full_hash: str,
	message: str,
	parents: str = "",
	refs: str = "",
	author: str = "Jane Doe",
) -> str:
	"""Build one line of log output in the commitlog format."""
	fields = [full_hash, full_hash[:7], message, author, "3 days ago", "2026-02-10T10:00:00+05:30", parents, refs]
	return graph + FIELD_SEPARATOR.join(fields)


@pytest.fixture
def graph_log_output() -> str:
	"""Log output of a small history with one merge, as drawn by git log --graph."""
	lines = [
		make_line("*   ", HASH_D, "Merge branch 'feature'", parents=f"{HASH_B} {HASH_C}", refs="HEAD -> main"),
		"|\\  ",
		make_line("| * ", HASH_C, "feat: add search", parents=HASH_A, refs="feature"),
		make_line("* | ", HASH_B, "fix: handle empty refs", parents=HASH_A),
		"|/  ",
		make_line("* ", HASH_A, "Initial commit", refs="tag: v0.1.0"),
	]
	return "\n".join(lines) + "\n"
