"""Read-only commit history queries."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from commitlog.git.commands import build_count_command, build_log_command, build_search_command
from commitlog.git.parser import parse_log_output
from commitlog.utils.git_utils import GitRunner, run_git_command

if TYPE_CHECKING:
	from pathlib import Path

	from commitlog.git.models import CommitEntry

logger = logging.getLogger(__name__)


def _resolve_runner(runner: GitRunner | None, cwd: Path | None) -> GitRunner:
	if runner is not None:
		return runner
	return functools.partial(run_git_command, cwd=cwd)


def get_log(
	count: int,
	skip: int = 0,
	branch: str | None = None,
	*,
	runner: GitRunner | None = None,
	cwd: Path | None = None,
) -> list[CommitEntry]:
	"""
	Fetch commit log entries with graph prefixes, paginated.

	Args:
	        count: Maximum number of entries
	        skip: Number of entries to skip
	        branch: Optional branch to restrict the log to
	        runner: Callable executing git, defaults to run_git_command
	        cwd: Repository directory used by the default runner

	Returns:
	        Entries in git's output order

	Raises:
	        GitError: If the git command fails

	"""
	run = _resolve_runner(runner, cwd)
	output = run(build_log_command(count, skip, branch))
	entries = parse_log_output(output)
	logger.debug("Parsed %d log entries (count=%d, skip=%d, branch=%s)", len(entries), count, skip, branch)
	return entries


def get_recent_commits(
	count: int,
	*,
	runner: GitRunner | None = None,
	cwd: Path | None = None,
) -> list[CommitEntry]:
	"""Get the last ``count`` commits, same as ``get_log(count, 0, None)``."""
	return get_log(count, 0, None, runner=runner, cwd=cwd)


def commit_count(*, runner: GitRunner | None = None, cwd: Path | None = None) -> int:
	"""
	Count the commits reachable from HEAD.

	Returns 0 if git's output is not a number.

	Raises:
	        GitError: If the git command fails

	"""
	run = _resolve_runner(runner, cwd)
	output = run(build_count_command())
	try:
		return int(output.strip())
	except ValueError:
		logger.warning("Unexpected commit count output: %r", output)
		return 0


def search_commits(
	query: str,
	count: int,
	*,
	runner: GitRunner | None = None,
	cwd: Path | None = None,
) -> list[CommitEntry]:
	"""
	Search commit messages case-insensitively.

	Args:
	        query: Text matched against commit messages by ``git log --grep``
	        count: Maximum number of matches
	        runner: Callable executing git, defaults to run_git_command
	        cwd: Repository directory used by the default runner

	Returns:
	        Matching entries, without graph prefixes

	Raises:
	        GitError: If the git command fails

	"""
	run = _resolve_runner(runner, cwd)
	output = run(build_search_command(query, count))
	return parse_log_output(output)
