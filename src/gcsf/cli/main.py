"""Command line interface: ``gcsf run SPEC [IMPLEMENTATION]``."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import click

from gcsf import __version__, bootstrap
from gcsf.session import RunOptions, build_operations, run_spec
from gcsf.spec import load_spec

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass
class CliState:
    verbose: bool = False
    plugins: List[str] = field(default_factory=list)

    def trace(self, message: str) -> None:
        """Echo run details to stderr when ``--verbose`` is on."""

        if self.verbose:
            click.echo(message, err=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", is_flag=True, help="Log engine activity and show loaded plugins/operations.")
@click.version_option(__version__, "--version", prog_name="gcsf")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Interpret conformance specs against Python implementations."""

    configure_logging(verbose)
    ctx.obj = CliState(verbose=verbose, plugins=bootstrap())


@cli.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("implementation", required=False)
@click.option("--select", "select_patterns", multiple=True, help="Glob over group/.../id paths; repeatable.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
)
@click.option("--report-path", help="Destination file for --report json.")
@click.option("--no-color", is_flag=True, help="Plain terminal output.")
@click.option("--list", "list_only", is_flag=True, help="Print the selected case paths and exit.")
@click.pass_obj
def run(
    state: CliState,
    spec_path: str,
    implementation: Optional[str],
    select_patterns: Tuple[str, ...],
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
    list_only: bool,
) -> None:
    """Run the cases of SPEC_PATH against IMPLEMENTATION (a .py file or module name).

    Without IMPLEMENTATION only plugin-registered operations are available.
    Exits 0 when no case failed or errored, 1 otherwise.
    """

    options = RunOptions(
        select=select_patterns,
        report_format=report_format,
        report_path=report_path,
        use_color=not no_color,
        list_only=list_only,
    )
    try:
        spec = load_spec(spec_path)
        operations = build_operations(implementation)
        state.trace(f"plugins: {', '.join(state.plugins) or '(none)'}")
        state.trace(f"operations: {', '.join(sorted(operations)) or '(none)'}")
        exit_code = run_spec(spec, operations, options)
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


def main(argv: Optional[List[str]] = None) -> int:
    """Console-script entry; returns the exit code instead of exiting."""

    try:
        result = cli.main(args=argv, prog_name="gcsf", standalone_mode=False)
    except click.ClickException as err:
        err.show()
        return err.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
