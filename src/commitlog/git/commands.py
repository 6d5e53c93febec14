"""Argument lists for the read-only git queries used by commitlog."""

from __future__ import annotations

FIELD_SEPARATOR = "\x1f"

# hash, short hash, subject, author name, relative date, ISO date, parents, decorations
LOG_FIELDS = ("%H", "%h", "%s", "%an", "%ar", "%aI", "%P", "%D")
LOG_FORMAT = FIELD_SEPARATOR.join(LOG_FIELDS)


def build_log_command(count: int, skip: int = 0, branch: str | None = None) -> list[str]:
	"""
	Build a paginated ``git log --graph`` command.

	Args:
	        count: Maximum number of commits to return
	        skip: Number of commits to skip before the first one returned
	        branch: Optional branch (or any revision) to restrict the log to. It is
	                always read as a revision, never as an option.

	Returns:
	        Command argument list

	"""
	command = ["git", "log", f"-{count}", f"--skip={skip}", f"--format={LOG_FORMAT}", "--graph"]
	if branch:
		command.extend(["--end-of-options", branch])
	return command


def build_count_command() -> list[str]:
	"""Build the command counting commits reachable from HEAD."""
	return ["git", "rev-list", "--count", "HEAD"]


def build_search_command(query: str, count: int) -> list[str]:
	"""
	Build a case-insensitive commit message search.

	The graph flag is omitted since matches are not contiguous history.

	"""
	return ["git", "log", f"-{count}", f"--format={LOG_FORMAT}", f"--grep={query}", "-i"]
