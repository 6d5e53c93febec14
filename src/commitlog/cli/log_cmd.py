"""Implementation of the history commands: log, recent, count and search."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Annotated

import typer
from rich.table import Table
from rich.text import Text

from commitlog.git import GitError, commit_count, get_log, get_recent_commits, search_commits
from commitlog.utils.cli_utils import console, exit_with_error, handle_keyboard_interrupt
from commitlog.utils.config_loader import ConfigError, ConfigLoader
from commitlog.utils.git_utils import validate_repo_path

if TYPE_CHECKING:
	from collections.abc import Callable
	from pathlib import Path

	from commitlog.git import CommitEntry

logger = logging.getLogger(__name__)

CountOpt = Annotated[
	int | None,
	typer.Option("--count", "-n", min=1, help="Maximum number of commits (overrides config)"),
]

SkipOpt = Annotated[
	int | None,
	typer.Option("--skip", "-s", min=0, help="Number of commits to skip (overrides config)"),
]

BranchOpt = Annotated[
	str | None,
	typer.Option("--branch", "-b", help="Restrict the log to this branch"),
]

JsonFlag = Annotated[
	bool,
	typer.Option("--json", help="Print entries as JSON instead of a table"),
]

QueryArg = Annotated[
	str,
	typer.Argument(help="Text to look for in commit messages (case-insensitive)"),
]


def _load_config(ctx: typer.Context) -> ConfigLoader:
	config_file = ctx.meta.get("config_file")
	try:
		return ConfigLoader(str(config_file) if config_file else None)
	except ConfigError as e:
		exit_with_error("Invalid configuration.", exception=e)


def _resolve_repo(ctx: typer.Context) -> Path:
	repo_path = validate_repo_path(ctx.meta.get("repo"))
	if repo_path is None:
		exit_with_error("Not a Git repository. Use --repo to point at one.")
	return repo_path


def render_entries(entries: list[CommitEntry], *, show_graph: bool = True, date_style: str = "relative") -> Table:
	"""
	Build a rich table for a list of entries.

	The graph prefix is printed verbatim in a monospaced column.

	"""
	table = Table(box=None, show_header=True, header_style="bold", pad_edge=False)
	if show_graph:
		table.add_column("Graph", no_wrap=True, style="magenta")
	table.add_column("Hash", no_wrap=True, style="yellow")
	table.add_column("Message")
	table.add_column("Author", style="cyan")
	table.add_column("Date", no_wrap=True, style="green")
	table.add_column("Refs", style="bold blue")

	for entry in entries:
		date = entry.date_iso if date_style == "iso" else entry.date
		row = [Text(entry.short_hash), Text(entry.message), Text(entry.author), Text(date), Text(entry.refs)]
		if show_graph:
			row.insert(0, Text(entry.graph))
		table.add_row(*row)
	return table


def _print_entries(entries: list[CommitEntry], config: ConfigLoader, *, as_json: bool, show_graph: bool = True) -> None:
	if as_json:
		typer.echo(json.dumps([entry.to_dict() for entry in entries], indent=2))
		return
	if not entries:
		console.print("[yellow]No commits found.[/yellow]")
		return
	console.print(
		render_entries(
			entries,
			show_graph=show_graph and config.get("display.show_graph", True),
			date_style=config.get("display.date_style", "relative"),
		)
	)


def _run_query(query: Callable[[], None]) -> None:
	try:
		query()
	except GitError as e:
		exit_with_error("Git command failed.", exception=e)
	except KeyboardInterrupt:
		handle_keyboard_interrupt()


def register_command(app: typer.Typer) -> None:
	"""Register the history commands with the CLI app."""

	@app.command(name="log")
	def log_command(
		ctx: typer.Context,
		count: CountOpt = None,
		skip: SkipOpt = None,
		branch: BranchOpt = None,
		as_json: JsonFlag = False,
	) -> None:
		"""Show a page of the commit graph."""
		config = _load_config(ctx)
		repo_path = _resolve_repo(ctx)
		page_size = count or config.get("log.count", 50)
		offset = skip if skip is not None else config.get("log.skip", 0)

		def query() -> None:
			entries = get_log(page_size, offset, branch, cwd=repo_path)
			_print_entries(entries, config, as_json=as_json)

		_run_query(query)

	@app.command(name="recent")
	def recent_command(
		ctx: typer.Context,
		count: CountOpt = None,
		as_json: JsonFlag = False,
	) -> None:
		"""Show the most recent commits."""
		config = _load_config(ctx)
		repo_path = _resolve_repo(ctx)

		def query() -> None:
			entries = get_recent_commits(count or config.get("recent.count", 10), cwd=repo_path)
			_print_entries(entries, config, as_json=as_json)

		_run_query(query)

	@app.command(name="count")
	def count_command(ctx: typer.Context) -> None:
		"""Print the number of commits reachable from HEAD."""
		repo_path = _resolve_repo(ctx)

		def query() -> None:
			typer.echo(str(commit_count(cwd=repo_path)))

		_run_query(query)

	@app.command(name="search")
	def search_command(
		ctx: typer.Context,
		query_text: QueryArg,
		count: CountOpt = None,
		as_json: JsonFlag = False,
	) -> None:
		"""Search commit messages."""
		config = _load_config(ctx)
		repo_path = _resolve_repo(ctx)

		def query() -> None:
			entries = search_commits(query_text, count or config.get("search.count", 50), cwd=repo_path)
			_print_entries(entries, config, as_json=as_json, show_graph=False)

		_run_query(query)
