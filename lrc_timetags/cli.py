from __future__ import annotations

import json
from pathlib import Path
import typer

from lrc_timetags.config import EXPORT_FORMATS, load_config, save_config_value
from lrc_timetags.logging_setup import setup_logging
from lrc_timetags.lrc.errors import TimeTagError
from lrc_timetags.lrc.export import export_json, export_lrc, export_srt, lyric_to_dict
from lrc_timetags.lrc.lines import LrcLyricParser
from lrc_timetags.lrc.parse import parse_lrc_with_stats


app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.command()
def parse(
    lrc_path: Path,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Parse LRC and print stats."""
    setup_logging(debug)
    cfg = load_config()
    text = lrc_path.read_text(encoding=cfg.encoding)
    try:
        doc, stats = parse_lrc_with_stats(text)
    except TimeTagError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"lines_total={stats.lines_total}")
    typer.echo(f"lyrics_total={stats.lyrics_total}")
    typer.echo(f"lines_with_start_times={stats.lines_with_start_times}")
    typer.echo(f"lines_with_word_tags={stats.lines_with_word_tags}")
    typer.echo(f"rubies_total={stats.rubies_total}")
    typer.echo(f"lines_ignored={stats.lines_ignored}")
    typer.echo(f"offset_ms={doc.offset_ms}")
    typer.echo(f"tags={doc.tags or {}}")


@app.command()
def export(
    lrc_path: Path,
    fmt: str | None = typer.Option(None, "--format", case_sensitive=False, help="lrc|srt|json"),
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Export LRC to LRC (re-encoded), SRT or JSON."""
    setup_logging(debug)
    cfg = load_config()
    fmt_l = (fmt or cfg.export_format).lower()
    if fmt_l not in EXPORT_FORMATS:
        raise typer.BadParameter("format must be one of: lrc, srt, json")

    text = lrc_path.read_text(encoding=cfg.encoding)
    try:
        doc, _stats = parse_lrc_with_stats(text)
        if fmt_l == "json":
            data = export_json(doc)
        elif fmt_l == "lrc":
            data = export_lrc(doc)
        else:
            data = export_srt(doc, last_line_duration_ms=cfg.srt_last_line_ms)
    except TimeTagError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if out:
        out.write_text(data, encoding=cfg.encoding)
    else:
        typer.echo(data, nl=False)


@app.command()
def decode(
    line: str,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Decode one lyric line and print it as JSON."""
    setup_logging(debug)
    parser = LrcLyricParser()
    if not parser.can_decode(line):
        typer.echo("Error: empty line", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(lyric_to_dict(parser.decode(line)), ensure_ascii=False, indent=2))


@app.command()
def config(
    fmt: str | None = typer.Option(None, "--format", help="Default export format: lrc|srt|json"),
    encoding: str | None = typer.Option(None, "--encoding", help="Default file encoding"),
):
    """Show or update saved defaults."""
    if fmt is not None:
        if fmt.lower() not in EXPORT_FORMATS:
            raise typer.BadParameter("format must be one of: lrc, srt, json")
        save_config_value("export_format", fmt.lower())
    if encoding is not None:
        save_config_value("encoding", encoding)

    cfg = load_config()
    typer.echo(f"config_dir={cfg.config_dir}")
    typer.echo(f"encoding={cfg.encoding}")
    typer.echo(f"export_format={cfg.export_format}")
    typer.echo(f"srt_last_line_ms={cfg.srt_last_line_ms}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
