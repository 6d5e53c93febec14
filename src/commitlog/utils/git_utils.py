"""Git utilities for commitlog."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

GitRunner = Callable[[list[str]], str]
"""Runs a git command (argument list) and returns stdout, raising GitError on failure."""


class GitError(Exception):
	"""Custom exception for Git-related errors."""


def run_git_command(command: list[str], cwd: Path | None = None) -> str:
	"""
	Run a Git command and return its output.

	Args:
	        command: Git command to run
	        cwd: Working directory (optional)

	Returns:
	        Command output as string

	Raises:
	        GitError: If the command fails or git cannot be started

	"""
	logger.debug("Running git command: %s", " ".join(command))
	try:
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			encoding="utf-8",
			errors="replace",
			check=True,
		)
	except subprocess.CalledProcessError as e:
		error_msg = f"Git command failed: {' '.join(command)}\nError: {e.stderr}"
		logger.exception(error_msg)
		raise GitError(error_msg) from e
	except OSError as e:
		error_msg = f"Unable to run git command: {' '.join(command)}\nError: {e}"
		logger.exception(error_msg)
		raise GitError(error_msg) from e
	else:
		return result.stdout


def get_repo_root(path: Path | None = None) -> Path:
	"""
	Get the root directory of the Git repository.

	Args:
	        path: Optional path to start searching from

	Returns:
	        Path to repository root

	Raises:
	        GitError: If not in a Git repository

	"""
	try:
		result = run_git_command(["git", "rev-parse", "--show-toplevel"], path)
		return Path(result.strip())
	except GitError as e:
		msg = "Not in a Git repository"
		raise GitError(msg) from e


def validate_repo_path(path: Path | None = None) -> Path | None:
	"""
	Validate and return the repository path.

	Args:
	        path: Optional path to validate (defaults to current directory)

	Returns:
	        Path to the repository root if valid, None otherwise

	"""
	try:
		if path is None:
			path = Path.cwd()
		return get_repo_root(path)
	except GitError:
		return None
