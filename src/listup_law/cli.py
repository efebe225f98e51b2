import typer
from pathlib import Path
from typing import Optional

from .config import STRATEGIES, load_settings
from .errors import CorpusIOError
from .utils.log import setup_logging

app = typer.Typer(add_completion=False)


@app.command()
def build(
    work: Path = typer.Option(..., help="Path to the e-Gov bulk download directory (法令データ一式)"),
    output: Path = typer.Option(..., help="Path to the output JSON file"),
    registry: Optional[Path] = typer.Option(None, help="Path to all_law_list.csv (law number -> law id)"),
    strategy: Optional[str] = typer.Option(None, help="per_law (latest version per law) or per_file"),
    config: Optional[Path] = typer.Option(None, help="Path to a YAML settings file"),
    report: bool = typer.Option(True, help="Write <output>.report.json"),
):
    """
    List up law XML files and write promulgation date, title, number and revision history as JSON.
    """
    from .core.builder import IndexBuilder

    try:
        settings = load_settings(config)
    except (FileNotFoundError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")
    setup_logging(settings.log_level, settings.log_file)

    if strategy is not None and strategy not in STRATEGIES:
        raise typer.BadParameter(f"Invalid strategy: {strategy}. Must be one of {STRATEGIES}.")

    try:
        builder = IndexBuilder(work, output, registry_path=registry, strategy=strategy, settings=settings)
        result = builder.build()
    except CorpusIOError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if report:
        builder.write_report()
    typer.echo(f"{result.written} laws written to {output} ({result.skipped} skipped, {result.dropped} dropped)")


@app.command()
def show(
    index: Path = typer.Option(..., help="Path to a JSON index written by build"),
    law_id: str = typer.Option(..., help="Law ID, e.g. 129AC0000000089"),
):
    """
    Show one law and its revision history from a written index.
    """
    from .utils.jsonio import load_index

    records = [r for r in load_index(index) if r.id == law_id]
    if not records:
        typer.echo(f"Not found: {law_id}", err=True)
        raise typer.Exit(code=1)

    for record in records:
        typer.echo(f"{record.name}（{record.num}）")
        typer.echo(f"  ID: {record.id}")
        typer.echo(f"  公布: {record.date.label()} ({record.date.ad_year})")
        typer.echo(f"  file: {record.file}")
        for patch in record.patch:
            d = patch.patch_date
            typer.echo(
                f"  - {d.ad_year:04d}-{d.month or 0:02d}-{d.day or 0:02d} {d.label()} "
                f"{patch.patch_id or '-'} {patch.dir_name}/{patch.file_name}"
            )


if __name__ == "__main__":
    app()
