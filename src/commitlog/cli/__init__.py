"""Command-line interface package for commitlog."""

from __future__ import annotations

import datetime
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from commitlog import __version__
from commitlog.utils.log_setup import setup_logging

from .log_cmd import register_command as register_log_command

logger = logging.getLogger(__name__)

for dotenv_name in (".env.local", ".env"):
	if Path(dotenv_name).exists():
		load_dotenv(dotenv_path=Path(dotenv_name))
		break

app = typer.Typer(
	help=f"commitlog - structured git history for dashboards\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"commitlog version: {__version__}")
		raise typer.Exit


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	repo: Annotated[
		Path | None,
		typer.Option("--repo", "-r", help="Path inside the Git repository (defaults to the current directory)."),
	] = None,
	config_file: Annotated[
		Path | None,
		typer.Option("--config", "-c", help="Path to config file."),
	] = None,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option(
			"--save-log",
			help="Enable logging to a file. Logs to logs/commitlog_{datetime}.log.",
		),
	] = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["repo"] = repo
	ctx.meta["config_file"] = config_file

	log_file_path_to_use: Path | None = None
	if is_output_log:
		current_time = datetime.datetime.now(tz=datetime.UTC).strftime("%Y-%m-%d_%H-%M-%S")
		log_file_path_to_use = Path("logs") / f"commitlog_{current_time}.log"

	setup_logging(is_verbose=is_verbose or is_output_log, log_file_path=log_file_path_to_use)


register_log_command(app)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
