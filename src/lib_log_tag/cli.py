"""Click command line interface for lib_log_tag.

Purpose
-------
Expose the metadata banner, the severity table, and a one-shot ``emit``
command that pushes a message through the full tagging pipeline, so packaging
smoke tests and operators can observe tags and visibility decisions.

Contents
--------
* :func:`cli` – click group (``info``, ``levels``, ``emit``).
* :func:`main` – test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .adapters.console.rich_console import RichConsoleSink
from .domain import Severity
from .runtime import LoggingContext, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_SEVERITY_NAMES = [severity.name.lower() for severity in Severity]


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(version)s",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool) -> None:
    """Call-site aware tagging logger."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info")
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("levels")
def cli_levels() -> None:
    """List severities in order with their sink codes."""

    for severity in Severity:
        click.echo(f"{severity.name:<5} ordinal={severity.value} code={severity.code}")


@cli.command("emit")
@click.argument("message")
@click.option("--level", type=click.Choice(_SEVERITY_NAMES, case_sensitive=False), default="info", show_default=True)
@click.option("--default-tag", default=__init__conf__.name, show_default=True, help="Tag used in release mode.")
@click.option("--debug/--release", "debug_mode", default=False, show_default=True)
@click.option("--always", is_flag=True, help="Bypass the release cutoff for TRACE/DEBUG.")
@click.option("--function-names", is_flag=True, help="Append the calling function to the tag.")
@click.option("--line-numbers", is_flag=True, help="Append (file:line) to the tag.")
@click.option("--important", is_flag=True, help="Escalate TRACE/DEBUG to INFO in debug mode.")
@click.option("--threshold", type=click.Choice(_SEVERITY_NAMES, case_sensitive=False), default="trace", show_default=True)
@click.option("--no-color", is_flag=True, help="Disable Rich styling.")
@click.pass_context
def emit(
    ctx: click.Context,
    message: str,
    level: str,
    default_tag: str,
    debug_mode: bool,
    always: bool,
    function_names: bool,
    line_numbers: bool,
    important: bool,
    threshold: str,
    no_color: bool,
) -> None:
    """Send MESSAGE through a fresh logging context; exit 1 when it is dropped."""

    tag, debug_flag = log_config.apply_env_overrides(default_tag, debug_mode)
    context = LoggingContext(RichConsoleSink(no_color=no_color))
    context.initialize(tag, debug_flag)
    context.set_include_function_names(function_names)
    context.set_include_line_numbers(line_numbers)
    context.get_logger(__name__).set_threshold(threshold).set_important(important)

    result = context.log(level, message, force_visible=always)
    if not result["ok"]:
        click.echo(f"dropped: {result['reason']}", err=True)
        ctx.exit(1)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the click group in a test-friendly manner and return the exit code.

    Examples
    --------
    >>> main(["--version"])
    0.1.0
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return result if isinstance(result, int) else 0


__all__ = ["cli", "main"]
