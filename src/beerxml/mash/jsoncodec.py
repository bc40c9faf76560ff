# beerxml/mash/jsoncodec.py

from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict

from pydantic import ValidationError

from beerxml.mash.errors import MashStepDecodeError, MashStepEncodeError
from beerxml.mash.fields import MASH_STEP_FIELDS, field_by_json_key, is_empty
from beerxml.mash.types import MashStep, MashSteps

logger = logging.getLogger("beerxml")


def _json_number(key: str, value: Any) -> Any:
    """
    Normalize a numeric value for compact output.

    Integral floats are written without a fractional part (65.0 -> 65).
    NaN / inf have no JSON representation.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            raise MashStepEncodeError(f"{key}: unsupported float value {value!r}")
        if value.is_integer() and abs(value) < 1e21:
            return int(value)
    return value


def mashstep_to_dict(step: MashStep) -> Dict[str, Any]:
    """
    Serialized representation of a single MashStep.

    Empty strings, zero numerics and absent optionals are left out; a
    present optional zero (e.g. infuse_amount=0.0) is kept.
    """
    out: Dict[str, Any] = {}
    for spec in MASH_STEP_FIELDS:
        value = getattr(step, spec.attr)
        if spec.omit_empty and is_empty(spec, value):
            continue
        if spec.kind in ("int", "float"):
            value = _json_number(spec.json_key, value)
        out[spec.json_key] = value
    return out


def mashstep_to_json(step: MashStep) -> str:
    d = mashstep_to_dict(step)
    try:
        return json.dumps(d, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise MashStepEncodeError(f"Failed to encode mash step {step.name!r}: {e}") from e


def mashsteps_to_json(steps: MashSteps) -> str:
    """
    Encode a collection as a bare JSON array of step objects.

    Empty collection -> "[]". Any failing step aborts the whole encode.
    """
    parts = []
    for i, step in enumerate(steps.mash_step):
        try:
            parts.append(mashstep_to_json(step))
        except MashStepEncodeError as e:
            raise MashStepEncodeError(f"mash_step[{i}]: {e}") from e
    logger.debug("Encoded %d mash step(s) to JSON", len(parts))
    return "[" + ",".join(parts) + "]"


def mashsteps_from_json(steps: MashSteps, data: Any) -> None:
    """
    Collection JSON decode hook.

    Intentionally a no-op: the payload is not parsed, `steps` is left
    untouched and no error is reported for any input.
    """
    size = len(data) if hasattr(data, "__len__") else 0
    logger.debug("Ignoring %d byte(s) of mash step JSON; collection decode is a no-op", size)
    return None


def mashstep_from_dict(d: Dict[str, Any]) -> MashStep:
    """
    Build a MashStep from its serialized (JSON object) form.

    Unknown keys are ignored, missing keys keep their defaults.
    """
    if not isinstance(d, dict):
        raise MashStepDecodeError("Mash step payload must be a JSON object")

    kwargs: Dict[str, Any] = {}
    for key, value in d.items():
        spec = field_by_json_key(key)
        if spec is None:
            logger.debug("Skipping unknown mash step key %r", key)
            continue
        kwargs[spec.attr] = value

    try:
        return MashStep.model_validate(kwargs)
    except ValidationError as e:
        raise MashStepDecodeError(f"Invalid mash step payload: {e}") from e
