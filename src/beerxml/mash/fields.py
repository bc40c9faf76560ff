# beerxml/mash/fields.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class FieldSpec:
    """
    External names of one MashStep attribute.

    kind is one of: str | int | float
    optional fields hold None when absent; only None counts as empty for them.
    """

    attr: str
    xml_tag: str
    json_key: str
    kind: str = "str"
    optional: bool = False
    omit_empty: bool = True


MASH_STEP_TAG = "MASH_STEP"
MASH_STEPS_TAG = "MASH_STEPS"
MASH_STEPS_JSON_KEY = "mash_step"


# Declaration order is the emission order for both formats.
MASH_STEP_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("name", "NAME", "name"),
    FieldSpec("version", "VERSION", "version", kind="int"),
    FieldSpec("type", "TYPE", "type"),
    FieldSpec("infuse_amount", "INFUSE_AMOUNT", "infuse_amount", kind="float", optional=True),
    FieldSpec("step_temp", "STEP_TEMP", "step_temp", kind="float"),
    FieldSpec("step_time", "STEP_TIME", "step_time", kind="int"),
    FieldSpec("ramp_time", "RAMP_TIME", "ramp_time", kind="int", optional=True),
    FieldSpec("end_temp", "END_TEMP", "end_temp", kind="float", optional=True),
    # extensions
    FieldSpec("description", "DESCRIPTION", "description"),
    FieldSpec("water_grain_ratio", "WATER_GRAIN_RATIO", "water_grain_ratio"),
    FieldSpec("decoction_amt", "DECOCTION_AMT", "decoction_amt"),
    FieldSpec("infuse_temp", "INFUSE_TEMP", "infuse_temp"),
    FieldSpec("display_step_temp", "DISPLAY_STEP_TEMP", "display_step_temp"),
    FieldSpec("display_infuse_amt", "DISPLAY_INFUSE_AMT", "display_infuse_amt"),
)

_BY_XML: Dict[str, FieldSpec] = {f.xml_tag: f for f in MASH_STEP_FIELDS}
_BY_JSON: Dict[str, FieldSpec] = {f.json_key: f for f in MASH_STEP_FIELDS}


def field_by_xml_tag(tag: str) -> Optional[FieldSpec]:
    return _BY_XML.get(tag)


def field_by_json_key(key: str) -> Optional[FieldSpec]:
    return _BY_JSON.get(key)


def is_empty(spec: FieldSpec, value) -> bool:
    """True when `value` is the zero value the JSON encoder omits."""
    if spec.optional:
        return value is None
    if spec.kind == "str":
        return value == ""
    return value == 0
