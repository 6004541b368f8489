"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from xsd_mirror.mirror_execution import MirrorRequest, MirrorRunError, execute_schema_mirror_run

LOG_FORMAT = "%(levelname)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="xsd-mirror")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML file with fetch settings (timeout, user agent, TLS verification)",
)
@click.argument("destination", type=click.Path(file_okay=False, path_type=str))
@click.argument("urls", nargs=-1, required=True)
def cli(config_path: str | None, destination: str, urls: tuple[str, ...]) -> None:
    """Download XSD schemas and every schema they include or import.

    DESTINATION is the directory receiving one file per schema. URLS are
    http(s):// or file:// schema locations. References between downloaded
    schemas are rewritten to the local filenames.
    """
    _configure_logging()
    try:
        outcome = execute_schema_mirror_run(
            MirrorRequest(destination=destination, urls=tuple(urls), config_path=config_path)
        )
    except MirrorRunError as exc:
        raise CliError(str(exc)) from exc
    click.echo(
        f"Done! {outcome.schema_count} schema file(s) written to {outcome.destination}"
        f" (roots: {', '.join(outcome.root_names)})"
    )


def _configure_logging() -> None:
    logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
