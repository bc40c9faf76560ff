# beerxml/mash/schema.py

from __future__ import annotations

from typing import Any, Dict, List

import jsonschema

from beerxml.mash.fields import MASH_STEP_FIELDS

_JSON_TYPES = {"str": "string", "int": "integer", "float": "number"}


def mashstep_json_schema() -> Dict[str, Any]:
    """
    JSON Schema (draft-07) for one serialized MashStep object.

    This validates the *serialized* representation, not the model. No key is
    required since empty values are omitted on output.
    """
    props: Dict[str, Any] = {}
    for spec in MASH_STEP_FIELDS:
        props[spec.json_key] = {"type": _JSON_TYPES[spec.kind]}

    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": "MashStep",
        "type": "object",
        "properties": props,
        "additionalProperties": False,
    }


def validate_mashstep_doc(doc: Dict[str, Any]) -> None:
    jsonschema.validate(instance=doc, schema=mashstep_json_schema())


def validate_mashsteps_doc(docs: List[Dict[str, Any]]) -> None:
    if not isinstance(docs, list):
        raise ValueError("Mash step collection payload must be a JSON array")
    schema = mashstep_json_schema()
    for doc in docs:
        jsonschema.validate(instance=doc, schema=schema)
