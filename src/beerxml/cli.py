from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import jsonschema
import typer

from beerxml.config import CodecConfig, load_codec_config
from beerxml.mash.errors import MashStepError
from beerxml.mash.jsoncodec import mashsteps_to_json
from beerxml.mash.render import render_mash_summary
from beerxml.mash.schema import validate_mashsteps_doc
from beerxml.mash.types import MashSteps
from beerxml.mash.xmlcodec import mashsteps_from_xml, mashsteps_to_xml

app = typer.Typer(help="beerxml CLI")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        logging.getLogger("beerxml").setLevel(logging.DEBUG)


def _fail(msg: str) -> None:
    typer.secho(msg, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _read_steps(path: Path) -> MashSteps:
    path = path.expanduser().resolve()
    if not path.is_file():
        _fail(f"No such file: {path}")
    try:
        return mashsteps_from_xml(path.read_bytes())
    except MashStepError as e:
        _fail(f"{path}: {e}")


def _write_or_echo(text: str, out: Optional[Path]) -> None:
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        typer.secho(f"Wrote {out}", fg=typer.colors.GREEN)
    else:
        typer.echo(text)


# -----------------------------
# Conversion
# -----------------------------

@app.command("mash-json")
def mash_json(
    xml_path: Path = typer.Argument(..., help="BeerXML file with <MASH_STEPS> or a <MASH_STEP>"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write JSON to this path"),
):
    """Convert markup mash steps to a JSON array."""
    steps = _read_steps(xml_path)
    try:
        text = mashsteps_to_json(steps)
    except MashStepError as e:
        _fail(str(e))
    _write_or_echo(text, out)


@app.command("mash-xml")
def mash_xml(
    xml_path: Path = typer.Argument(..., help="BeerXML file with <MASH_STEPS> or a <MASH_STEP>"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write markup to this path"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Codec config YAML"),
):
    """Re-emit mash steps as normalized <MASH_STEPS> markup."""
    cfg = load_codec_config(config) if config else CodecConfig()
    cfg.apply_logging()
    steps = _read_steps(xml_path)
    _write_or_echo(mashsteps_to_xml(steps, config=cfg).rstrip("\n"), out)


# -----------------------------
# Validation / display
# -----------------------------

@app.command("mash-validate")
def mash_validate(
    json_path: Path = typer.Argument(..., help="JSON array of serialized mash steps"),
):
    """Validate serialized mash steps against the mash step JSON schema."""
    json_path = json_path.expanduser().resolve()
    try:
        docs = json.loads(json_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        _fail(f"No such file: {json_path}")
    except json.JSONDecodeError as e:
        _fail(f"{json_path}: invalid JSON: {e}")

    try:
        validate_mashsteps_doc(docs)
    except (ValueError, jsonschema.ValidationError) as e:
        msg = e.message if isinstance(e, jsonschema.ValidationError) else str(e)
        _fail(f"{json_path}: {msg}")

    typer.secho(f"OK: {len(docs)} mash step(s)", fg=typer.colors.GREEN)


@app.command("mash-summary")
def mash_summary(
    xml_path: Path = typer.Argument(..., help="BeerXML file with <MASH_STEPS> or a <MASH_STEP>"),
):
    """Print a one-line-per-step summary."""
    steps = _read_steps(xml_path)
    typer.echo(render_mash_summary(steps).rstrip("\n"))


if __name__ == "__main__":
    app()
