"""trellis-conf command-line interface.

Checks, dumps and re-formats trellis configuration text files::

    trellis-conf check design.config
    trellis-conf dump --json design.config
    trellis-conf format design.config -o normalised.config
"""

import io
import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from trellis_conf.actions import AcceptAllAction, ConfigWriter, RecordCollector
from trellis_conf.core import ConfigAction, ParseContext, ParseResult, parse_file
from trellis_conf.utils.exceptions import InvalidFileType
from trellis_conf.utils.settings import get_context, init_context

app = typer.Typer(help="Read and check trellis FPGA configuration text.")


def setup_logger(level: str) -> None:
    """Send log output to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level:<8}</level> | {message}")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info level messages.")
    ] = False,
    debug: Annotated[
        bool, typer.Option("--debug", help="Show debug level messages.")
    ] = False,
    env_file: Annotated[
        Path | None, typer.Option("--env-file", help="Read settings from this .env file.")
    ] = None,
) -> None:
    """Read and check trellis FPGA configuration text."""
    settings = init_context(env_file)
    if debug:
        setup_logger("DEBUG")
    elif verbose:
        setup_logger("INFO")
    else:
        setup_logger(settings.log_level)


def _check_file(path: Path) -> None:
    if not path.is_file():
        raise InvalidFileType(f"{path} is not a file")


def _run(path: Path, action: ConfigAction) -> ParseResult:
    try:
        _check_file(path)
    except InvalidFileType as e:
        logger.error(str(e))
        raise typer.Exit(code=2) from e
    context = ParseContext(action, max_error_length=get_context().max_error_length)
    logger.debug(f"Parsing {path}")
    result = parse_file(context, path)
    if not result:
        logger.error(f"{path}: {result.describe()}")
        raise typer.Exit(code=1)
    return result


@app.command()
def check(
    path: Annotated[Path, typer.Argument(help="Configuration file to check.")],
) -> None:
    """Parse a file and report the first error, if any."""
    _run(path, AcceptAllAction())
    typer.echo(f"{path}: ok")


@app.command()
def dump(
    path: Annotated[Path, typer.Argument(help="Configuration file to dump.")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the records as a JSON list.")
    ] = False,
) -> None:
    """Print every record of a file, one per line."""
    collector = RecordCollector()
    _run(path, collector)

    if as_json:
        typer.echo(json.dumps(collector.as_dicts(), indent=2))
        return
    for record in collector.records:
        typer.echo(repr(record))


@app.command("format")
def format_(
    path: Annotated[Path, typer.Argument(help="Configuration file to re-format.")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write here instead of standard output."),
    ] = None,
) -> None:
    """Re-emit a file in canonical form."""
    buffer = io.StringIO()
    _run(path, ConfigWriter(buffer, get_context().bram_values_per_line))

    # nothing is written unless the whole input was read, so -o may name the input
    if output is None:
        typer.echo(buffer.getvalue(), nl=False)
        return
    output.write_text(buffer.getvalue(), encoding="utf-8")
    logger.info(f"Wrote {output}")
