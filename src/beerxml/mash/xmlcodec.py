# beerxml/mash/xmlcodec.py

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from beerxml.config import CodecConfig
from beerxml.mash.errors import MashStepDecodeError
from beerxml.mash.fields import (
    MASH_STEP_FIELDS,
    MASH_STEP_TAG,
    MASH_STEPS_TAG,
    FieldSpec,
    field_by_xml_tag,
)
from beerxml.mash.types import MashStep, MashSteps

logger = logging.getLogger("beerxml")

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------

def _format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def mashstep_to_element(step: MashStep) -> ET.Element:
    """
    Build a <MASH_STEP> element.

    Every field gets a child element, except optional numerics that are absent.
    """
    elem = ET.Element(MASH_STEP_TAG)
    for spec in MASH_STEP_FIELDS:
        value = getattr(step, spec.attr)
        if spec.optional and value is None:
            continue
        child = ET.SubElement(elem, spec.xml_tag)
        child.text = _format_value(value)
    return elem


def mashsteps_to_element(steps: MashSteps) -> ET.Element:
    root = ET.Element(MASH_STEPS_TAG)
    for step in steps:
        root.append(mashstep_to_element(step))
    return root


def mashsteps_to_xml(steps: MashSteps, *, config: Optional[CodecConfig] = None) -> str:
    config = config or CodecConfig()
    root = mashsteps_to_element(steps)
    if config.xml_indent:
        ET.indent(root, space=config.xml_indent)
    text = ET.tostring(root, encoding="unicode")
    if config.xml_declaration:
        text = XML_DECLARATION + "\n" + text
    logger.debug("Wrote %d mash step(s) as markup", len(steps))
    return text + "\n" if config.xml_indent else text


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------

def _parse_number(spec: FieldSpec, text: str) -> Union[int, float]:
    try:
        if spec.kind == "int":
            try:
                return int(text)
            except ValueError:
                # tolerate "60.000" style integers written by some tools
                f = float(text)
                if not f.is_integer():
                    raise
                return int(f)
        return float(text)
    except ValueError as e:
        raise MashStepDecodeError(f"{spec.xml_tag}: not a valid {spec.kind}: {text!r}") from e


def mashstep_from_element(elem: ET.Element) -> MashStep:
    """
    Read a <MASH_STEP> element.

    Unknown children are ignored; string text is kept as written; an empty
    numeric element reads as a present zero, optional or not.
    """
    kwargs: Dict[str, Any] = {}
    for child in elem:
        spec = field_by_xml_tag(child.tag)
        if spec is None:
            logger.debug("Skipping unknown mash step element <%s>", child.tag)
            continue

        if spec.kind == "str":
            kwargs[spec.attr] = child.text or ""
            continue

        text = (child.text or "").strip()
        if text == "":
            kwargs[spec.attr] = 0
        else:
            kwargs[spec.attr] = _parse_number(spec, text)

    try:
        return MashStep.model_validate(kwargs)
    except ValidationError as e:
        raise MashStepDecodeError(f"Invalid <{MASH_STEP_TAG}>: {e}") from e


def mashsteps_from_element(elem: ET.Element) -> MashSteps:
    steps = MashSteps()
    for i, child in enumerate(elem.findall(MASH_STEP_TAG)):
        try:
            steps.append(mashstep_from_element(child))
        except MashStepDecodeError as e:
            raise MashStepDecodeError(f"{MASH_STEP_TAG}[{i}]: {e}") from e
    return steps


def mashsteps_from_xml(text: Union[str, bytes]) -> MashSteps:
    """
    Parse mash steps from markup.

    Accepts a <MASH_STEPS> root, a single <MASH_STEP> root, or any document
    containing a <MASH_STEPS> element (the first one found is used).
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise MashStepDecodeError(f"Malformed markup: {e}") from e

    if root.tag == MASH_STEPS_TAG:
        container = root
    elif root.tag == MASH_STEP_TAG:
        return MashSteps(mash_step=[mashstep_from_element(root)])
    else:
        container = root.find(f".//{MASH_STEPS_TAG}")
        if container is None:
            raise MashStepDecodeError(
                f"No <{MASH_STEPS_TAG}> element found under <{root.tag}>"
            )

    steps = mashsteps_from_element(container)
    logger.debug("Read %d mash step(s) from markup", len(steps))
    return steps
