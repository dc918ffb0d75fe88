import logging
import os

import click
from dotenv import load_dotenv

from openpr.cli.ensure import ensure_tools_installed
from openpr.cli.output import machine_output, user_output
from openpr.core.config import ConfigError, load_config
from openpr.core.context import OpenPrContext, create_context
from openpr.core.open_pr import OpenPrError, OpenPrOptions, OpenPrSkipped, execute_open_pr

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"
DEFAULT_LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(debug: bool) -> None:
    """Send log records to stderr; DEBUG shows every command openpr runs."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=DEFAULT_LOG_FORMAT)


def _build_context() -> OpenPrContext:
    load_dotenv()
    try:
        config = load_config(os.environ)
    except ConfigError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None
    ensure_tools_installed()
    return create_context(config)


def _report_error(error: OpenPrError) -> None:
    user_output(click.style("Error: ", fg="red") + error.message)
    stderr = error.details.get("stderr", "")
    if stderr:
        user_output(stderr.rstrip("\n"))


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="openpr")
@click.argument("target", required=False)
@click.option(
    "-y",
    "--yes",
    "skip_confirmation",
    is_flag=True,
    help="Push and open the PR without asking for confirmation.",
)
@click.option(
    "--no-reviewers",
    "skip_reviewers",
    is_flag=True,
    help="Do not fetch organization members or ask for reviewers.",
)
@click.option("--debug", is_flag=True, help="Log every command and request made.")
@click.pass_context
def cli(
    ctx: click.Context,
    target: str | None,
    skip_confirmation: bool,
    skip_reviewers: bool,
    debug: bool,
) -> None:
    """Draft and open a pull request for the current branch.

    TARGET is the branch to merge into (default: main, or master if there is no main).
    """
    configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = _build_context()

    options = OpenPrOptions(
        target_branch=target,
        skip_confirmation=skip_confirmation,
        skip_reviewers=skip_reviewers,
    )
    try:
        result = execute_open_pr(ctx.obj, options)
    except KeyboardInterrupt:
        user_output("\nInterrupted by user")
        raise SystemExit(130) from None

    if isinstance(result, OpenPrError):
        _report_error(result)
        raise SystemExit(1)
    if isinstance(result, OpenPrSkipped):
        return

    machine_output(click.style(result.message, fg="green"))


def main() -> None:
    """CLI entry point used by the `openpr` console script."""
    cli()
