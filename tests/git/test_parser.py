"""Tests for the git log line parser."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from commitlog.git.commands import FIELD_SEPARATOR
from commitlog.git.parser import parse_log_line, parse_log_output, split_graph_and_data
from tests.conftest import HASH_A, HASH_B, HASH_C, HASH_D, make_line

SAMPLE_LINE = (
	"* abc123def456abc123def456abc123def456abc123\x1fabc123d\x1ffeat: add login\x1fJohn"
	"\x1f2 hours ago\x1f2026-02-10T10:00:00+05:30\x1f\x1fHEAD -> main\n"
)


@pytest.mark.unit
class TestSplitGraphAndData:
	"""Test cases for separating the graph prefix from the data segment."""

	def test_split_simple_prefix(self) -> None:
		"""Test a commit line with a few columns of graph."""
		graph, data = split_graph_and_data("* | abc123")
		assert graph == "* | "
		assert data == "abc123"

	def test_split_without_graph(self) -> None:
		"""Test a line from a log run without --graph."""
		graph, data = split_graph_and_data("abc123\x1fabc")
		assert graph == ""
		assert data == "abc123\x1fabc"

	def test_split_graph_only_line(self) -> None:
		"""Test a continuation line made only of graph glyphs."""
		graph, data = split_graph_and_data("| |_|/ \\ ")
		assert graph == "| |_|/ \\ "
		assert data == ""

	@pytest.mark.parametrize(
		"line",
		[
			"",
			"*",
			"* abc",
			"|\\  ",
			"| * " + "f" * 40 + "\x1fmsg with * and | inside",
			"  _ / deadbeef",
			"no graph at all",
		],
	)
	def test_split_rejoins_to_original(self, line: str) -> None:
		"""Test that graph + data always reproduces the line."""
		graph, data = split_graph_and_data(line)
		assert graph + data == line

	def test_split_stops_at_first_data_character(self) -> None:
		"""Test that glyphs after the hash stay in the data segment."""
		graph, data = split_graph_and_data("* 0abc | /")
		assert graph == "* "
		assert data == "0abc | /"


@pytest.mark.unit
class TestParseLogLine:
	"""Test cases for parsing a single line."""

	def test_parse_sample_line(self) -> None:
		"""Test the reference sample line."""
		entries = parse_log_output(SAMPLE_LINE)

		assert len(entries) == 1
		entry = entries[0]
		assert entry.hash == "abc123def456abc123def456abc123def456abc123"
		assert entry.short_hash == "abc123d"
		assert entry.message == "feat: add login"
		assert entry.author == "John"
		assert entry.date == "2 hours ago"
		assert entry.date_iso == "2026-02-10T10:00:00+05:30"
		assert entry.refs == "HEAD -> main"
		assert entry.graph == "* "
		assert entry.parents == ()
		assert entry.hash.startswith(entry.short_hash)

	def test_parse_merge_parents_in_order(self) -> None:
		"""Test that parents keep first-parent order."""
		entry = parse_log_line(make_line("*   ", HASH_D, "Merge", parents=f"{HASH_B} {HASH_C}"))

		assert entry is not None
		assert entry.parents == (HASH_B, HASH_C)
		assert entry.is_merge
		assert not entry.is_root

	def test_parse_parent_field_whitespace(self) -> None:
		"""Test parent splitting on arbitrary whitespace."""
		entry = parse_log_line(make_line("", HASH_D, "Merge", parents="a  b"))

		assert entry is not None
		assert entry.parents == ("a", "b")

	def test_parse_root_commit(self) -> None:
		"""Test a commit with no parents."""
		entry = parse_log_line(make_line("* ", HASH_A, "Initial commit"))

		assert entry is not None
		assert entry.parents == ()
		assert entry.is_root
		assert not entry.is_merge

	def test_parse_empty_refs(self) -> None:
		"""Test that missing decorations give an empty refs string."""
		entry = parse_log_line(make_line("* ", HASH_B, "fix", parents=HASH_A))

		assert entry is not None
		assert entry.refs == ""

	def test_parse_refs_kept_verbatim(self) -> None:
		"""Test that decorations are not split or cleaned."""
		refs = "HEAD -> main, origin/main, tag: v1.0"
		entry = parse_log_line(make_line("* ", HASH_B, "fix", refs=refs))

		assert entry is not None
		assert entry.refs == refs

	def test_parse_message_with_graph_characters(self) -> None:
		"""Test a subject containing glyph characters."""
		entry = parse_log_line(make_line("| * ", HASH_C, "docs: use * and | in tables"))

		assert entry is not None
		assert entry.message == "docs: use * and | in tables"
		assert entry.graph == "| * "

	def test_parse_extra_fields_ignored(self) -> None:
		"""Test that fields past the eighth are ignored."""
		line = make_line("* ", HASH_A, "msg", refs="main") + FIELD_SEPARATOR + "extra"
		entry = parse_log_line(line)

		assert entry is not None
		assert entry.refs == "main"

	def test_parse_too_few_fields(self) -> None:
		"""Test that a line with fewer than eight fields is dropped."""
		line = FIELD_SEPARATOR.join([HASH_A, HASH_A[:7], "msg", "author", "now", "2026-01-01T00:00:00Z", ""])
		assert parse_log_line("* " + line) is None

	@pytest.mark.parametrize("line", ["", "*", "| |", "|\\  ", "|/  ", " _|_ "])
	def test_parse_graph_only_line(self, line: str) -> None:
		"""Test that graph-only lines produce no entry."""
		assert parse_log_line(line) is None

	def test_parse_plain_text_line(self) -> None:
		"""Test that unrelated text without delimiters is dropped."""
		assert parse_log_line("warning: something odd") is None


@pytest.mark.unit
class TestParseLogOutput:
	"""Test cases for parsing full log output."""

	def test_parse_graph_history(self, graph_log_output: str) -> None:
		"""Test a history with a merge and continuation lines."""
		entries = parse_log_output(graph_log_output)

		assert [entry.hash for entry in entries] == [HASH_D, HASH_C, HASH_B, HASH_A]
		assert [entry.graph for entry in entries] == ["*   ", "| * ", "* | ", "* "]
		assert entries[0].refs == "HEAD -> main"
		assert entries[0].parents == (HASH_B, HASH_C)
		assert entries[3].refs == "tag: v0.1.0"

	def test_parse_empty_output(self) -> None:
		"""Test empty output."""
		assert parse_log_output("") == []

	def test_parse_crlf_line_endings(self) -> None:
		"""Test that a trailing carriage return doesn't leak into refs."""
		output = make_line("* ", HASH_A, "msg", refs="main") + "\r\n"
		entries = parse_log_output(output)

		assert len(entries) == 1
		assert entries[0].refs == "main"

	def test_parse_does_not_split_on_unicode_separators(self) -> None:
		"""Test that a subject containing a line separator stays one record."""
		output = make_line("* ", HASH_A, "odd\u2028subject", refs="main") + "\n"
		entries = parse_log_output(output)

		assert len(entries) == 1
		assert entries[0].message == "odd\u2028subject"
		assert entries[0].refs == "main"

	def test_parse_skips_malformed_lines_only(self) -> None:
		"""Test that a malformed line doesn't affect its neighbours."""
		output = "\n".join(
			[
				make_line("* ", HASH_B, "second", parents=HASH_A),
				"* " + FIELD_SEPARATOR.join([HASH_C, "ccccccc", "truncated"]),
				make_line("* ", HASH_A, "first"),
			]
		)
		entries = parse_log_output(output)

		assert [entry.message for entry in entries] == ["second", "first"]


@pytest.mark.unit
class TestCommitEntry:
	"""Test cases for the parsed entry model."""

	def test_entry_is_hashable(self) -> None:
		"""Test that entries can be used in sets and as dict keys."""
		entry = parse_log_line(make_line("*   ", HASH_D, "Merge", parents=f"{HASH_B} {HASH_C}"))

		assert entry is not None
		assert hash(entry) == hash(parse_log_line(make_line("*   ", HASH_D, "Merge", parents=f"{HASH_B} {HASH_C}")))
		assert len({entry, entry}) == 1

	def test_entry_parents_cannot_be_mutated(self) -> None:
		"""Test that the parent sequence is immutable."""
		entry = parse_log_line(make_line("* ", HASH_B, "fix", parents=HASH_A))

		assert entry is not None
		assert isinstance(entry.parents, tuple)
		with pytest.raises(AttributeError):
			entry.parents.append("extra")  # type: ignore[attr-defined]
		with pytest.raises(FrozenInstanceError):
			entry.parents = ()  # type: ignore[misc]

	def test_to_dict_lists_parents(self) -> None:
		"""Test the JSON-friendly form."""
		entry = parse_log_line(make_line("*   ", HASH_D, "Merge", parents=f"{HASH_B} {HASH_C}", refs="main"))

		assert entry is not None
		data = entry.to_dict()
		assert data["parents"] == [HASH_B, HASH_C]
		assert data["refs"] == "main"
		assert data["graph"] == "*   "
