import logging
from pathlib import Path
from typing import Optional, Union

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from .config import Config
from .core.errors import ConfigurationError, GFAParseError
from .core.gfa1 import GFA1Document
from .core.io import write_gfa, write_segments_fasta
from .core.models import GFA2Document
from .parsers import load_gfa

app = typer.Typer(
    name="gfa2",
    help="Parse, validate and re-write GFA2 (and GFA1) assembly graph files.",
    add_completion=False,
    no_args_is_help=True
)

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="YAML configuration file")]
NumericIdsOption = Annotated[bool, typer.Option("--numeric-ids", help="Fold identifiers into integers")]
NoTagsOption = Annotated[bool, typer.Option("--no-tags", help="Drop optional tags while parsing")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")]


def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level),
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load_document(gfa_file: Path, config_file: Optional[Path], numeric_ids: bool,
                   no_tags: bool, verbose: bool) -> Union[GFA1Document, GFA2Document]:
    """Apply configuration and parse ``gfa_file``, exiting with code 1 on any error."""
    overrides = {
        "identifiers": "numeric" if numeric_ids else None,
        "keep_tags": False if no_tags else None,
        "log_level": "DEBUG" if verbose else None,
    }
    try:
        config = Config().load(str(config_file) if config_file else None, overrides)
    except ConfigurationError as e:
        typer.echo(f"Configuration Error: {e}", err=True)
        raise typer.Exit(code=1)

    setup_logging(config.get("log_level"))

    try:
        return load_gfa(str(gfa_file), config.representation(), progress=config.get("progress"))
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except GFAParseError as e:
        typer.echo(f"Parse error in {gfa_file}: {e}", err=True)
        raise typer.Exit(code=1)


def _format_counts(document: Union[GFA1Document, GFA2Document]) -> str:
    return ", ".join(f"{count} {kind}" for kind, count in document.counts().items())


@app.command()
def validate(
    gfa_file: Annotated[Path, typer.Argument(help="GFA file to check")],
    config: ConfigOption = None,
    numeric_ids: NumericIdsOption = False,
    no_tags: NoTagsOption = False,
    verbose: VerboseOption = False
):
    """Parse a GFA file and report whether every line is well formed."""
    document = _load_document(gfa_file, config, numeric_ids, no_tags, verbose)
    version = "GFA1" if isinstance(document, GFA1Document) else "GFA2"
    typer.echo(f"{gfa_file}: valid {version} ({_format_counts(document)})")


@app.command("format")
def format_gfa(
    gfa_file: Annotated[Path, typer.Argument(help="GFA file to re-write")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file (default: stdout)")] = None,
    config: ConfigOption = None,
    numeric_ids: NumericIdsOption = False,
    no_tags: NoTagsOption = False,
    verbose: VerboseOption = False
):
    """Re-write a GFA file in canonical form, records grouped by kind."""
    document = _load_document(gfa_file, config, numeric_ids, no_tags, verbose)
    if output:
        write_gfa(document, str(output))
        typer.echo(f"Formatted GFA written to {output}")
    else:
        typer.echo(document.to_gfa(), nl=False)


@app.command()
def stats(
    gfa_file: Annotated[Path, typer.Argument(help="GFA file to summarize")],
    config: ConfigOption = None,
    verbose: VerboseOption = False
):
    """Show a table of record counts."""
    document = _load_document(gfa_file, config, False, False, verbose)

    table = Table(title=str(gfa_file))
    table.add_column("Record kind")
    table.add_column("Count", justify="right")
    for kind, count in document.counts().items():
        table.add_row(kind, str(count))

    headers = [h for h in document.headers if h.version is not None]
    if headers:
        table.caption = f"Version {headers[0].version_number}"
    Console().print(table)


@app.command()
def fasta(
    gfa_file: Annotated[Path, typer.Argument(help="GFA file with segment sequences")],
    output: Annotated[Path, typer.Option("--output", "-o", help="Output FASTA file")],
    config: ConfigOption = None,
    verbose: VerboseOption = False
):
    """Export segment sequences as FASTA."""
    document = _load_document(gfa_file, config, False, True, verbose)
    count = write_segments_fasta(document, str(output))
    typer.echo(f"Wrote {count} sequences to {output}")


def main():
    app()


if __name__ == "__main__":
    main()
