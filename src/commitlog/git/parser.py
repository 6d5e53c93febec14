"""
Parser for ``git log --graph`` output in the commitlog format.

Each line carries an optional graph prefix (``*``, ``|``, ``/``, ``\\``, ``_``
and spaces) followed by the fields of :data:`~commitlog.git.commands.LOG_FORMAT`
joined by the unit separator. Lines that don't carry a full record, such as
graph-only continuation lines, are dropped.

"""

from __future__ import annotations

import logging

from commitlog.git.commands import FIELD_SEPARATOR, LOG_FIELDS
from commitlog.git.models import CommitEntry

logger = logging.getLogger(__name__)

GRAPH_CHARS = frozenset("*|/\\_ ")
MIN_FIELDS = len(LOG_FIELDS)


def split_graph_and_data(line: str) -> tuple[str, str]:
	"""
	Split a log line into its graph prefix and its data segment.

	None of the graph characters are hex digits, and the data segment always
	starts with a commit hash, so the first non-graph character marks the
	boundary. ``graph + data == line`` always holds.

	Args:
	        line: A single line of log output

	Returns:
	        Tuple of (graph prefix, data segment)

	"""
	index = 0
	for char in line:
		if char not in GRAPH_CHARS:
			break
		index += 1
	return line[:index], line[index:]


def parse_log_line(line: str) -> CommitEntry | None:
	"""
	Parse a single log line into a CommitEntry.

	Args:
	        line: A single line of log output, without its newline

	Returns:
	        The parsed entry, or None if the line holds no complete record

	"""
	graph, data = split_graph_and_data(line)
	if not data:
		return None

	parts = data.split(FIELD_SEPARATOR)
	if len(parts) < MIN_FIELDS:
		logger.debug("Skipping log line with %d fields: %r", len(parts), line)
		return None

	return CommitEntry(
		hash=parts[0],
		short_hash=parts[1],
		message=parts[2],
		author=parts[3],
		date=parts[4],
		date_iso=parts[5],
		parents=tuple(parts[6].split()),
		refs=parts[7],
		graph=graph,
	)


def parse_log_output(output: str) -> list[CommitEntry]:
	"""
	Parse the full output of a log command.

	Lines are split on ``\\n`` only, since ``str.splitlines`` would also break
	on separators that may legitimately appear inside commit subjects.

	Args:
	        output: Captured stdout of ``git log``

	Returns:
	        Parsed entries in output order

	"""
	entries = []
	for raw_line in output.split("\n"):
		line = raw_line.removesuffix("\r")
		entry = parse_log_line(line)
		if entry is not None:
			entries.append(entry)
	return entries
