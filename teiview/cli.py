import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from teiview import parser
from teiview.json_utils import json_dumps
from teiview.markdown import render_markdown
from teiview.parser.tag_classifier import TAG_TABLE
from teiview.parser.types import MAX_DEPTH

try:
    __version__ = version("teiview")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="TEIVIEW_LOG_FILE",
)
@click.version_option(__version__, prog_name="teiview")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


@cli.command()
@click.argument(
    "source", type=click.Path(exists=True, file_okay=True, dir_okay=False)
)
@click.option(
    "--shape",
    type=click.Choice(parser.SHAPES),
    default=parser.DEFAULT_SHAPE,
    show_default=True,
    envvar="TEIVIEW_SHAPE",
    help="Parser used for XML input; JSON input is read as an object tree.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "markdown"]),
    default="json",
    help="Output format.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=MAX_DEPTH,
    show_default=True,
    envvar="TEIVIEW_MAX_DEPTH",
    help="Maximum element nesting accepted.",
)
def convert(
    source: str,
    shape: str = "etree",
    output_path: Optional[str] = None,
    output_format: str = "json",
    max_depth: int = MAX_DEPTH,
) -> None:
    """Convert a TEI letter to its semantic document model.

    Args:
        source: TEI XML file, or JSON file holding a parsed object tree.
        shape: Upstream parser used for XML input.
        output_path: Optional file or directory path for the converted data.
            If a directory is provided, the file name is generated from the
            source file name.
        output_format: Format of the converted data.
        max_depth: Maximum element nesting accepted.
    """

    source_path = Path(source)

    # Parse and extract, reporting document problems as CLI errors.
    try:
        document = parser.read_document(source_path, shape, max_depth)
    except parser.TeiViewError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "markdown":
        content = render_markdown(document)
    elif output_format == "yaml":
        content = yaml.safe_dump(
            parser.document_to_dict(document),
            allow_unicode=True,
            sort_keys=False,
        )
    else:
        content = json_dumps(parser.document_to_dict(document), indent=True)

    if not output_path:
        click.echo(content)
        return

    # When the user passes a directory, name the file after the source.
    final_path = Path(output_path)
    if final_path.is_dir():
        extensions = {"json": ".json", "yaml": ".yaml", "markdown": ".md"}
        name = f"{source_path.stem}{extensions[output_format]}"
        final_path = final_path / name

    final_path.write_text(content, encoding="utf-8")
    logging.info(f"Wrote {output_format} output to {final_path}")


@cli.command()
def tags() -> None:
    """List the TEI tags with special meaning and their roles."""

    for tag, descriptor in TAG_TABLE.items():
        kind = descriptor.kind or "-"
        click.echo(f"{tag:<14}{descriptor.role.value:<12}{kind}")
