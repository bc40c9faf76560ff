from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from beerxml.mash.types import MashSteps

SUMMARY_TEMPLATE = "mash_summary.txt.j2"


def get_template_env() -> Environment:
    """
    Jinja environment for the packaged text templates.
    """
    here = Path(__file__).resolve()
    for p in here.parents:
        cand = p / "templates"
        if (cand / SUMMARY_TEMPLATE).is_file():
            return Environment(
                loader=FileSystemLoader(str(cand)),
                undefined=StrictUndefined,
                autoescape=False,
                trim_blocks=True,
                lstrip_blocks=True,
            )

    raise RuntimeError("Could not locate beerxml templates directory")


def render_mash_summary(steps: MashSteps) -> str:
    """One line per step: name, type, target temp/time, optional ramp and infusion."""
    tpl = get_template_env().get_template(SUMMARY_TEMPLATE)
    return tpl.render(steps=list(steps))
