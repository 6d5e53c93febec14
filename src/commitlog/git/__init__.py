"""Commit history queries built on ``git log``."""

from commitlog.git.commands import (
	FIELD_SEPARATOR,
	LOG_FORMAT,
	build_count_command,
	build_log_command,
	build_search_command,
)
from commitlog.git.log import commit_count, get_log, get_recent_commits, search_commits
from commitlog.git.models import CommitEntry
from commitlog.git.parser import parse_log_line, parse_log_output, split_graph_and_data
from commitlog.utils.git_utils import GitError, GitRunner

__all__ = [
	"FIELD_SEPARATOR",
	"LOG_FORMAT",
	"CommitEntry",
	"GitError",
	"GitRunner",
	"build_count_command",
	"build_log_command",
	"build_search_command",
	"commit_count",
	"get_log",
	"get_recent_commits",
	"parse_log_line",
	"parse_log_output",
	"search_commits",
	"split_graph_and_data",
]
