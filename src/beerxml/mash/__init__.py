"""
BeerXML mash step record and its collection wrapper.

Exports the public API:
- MashStep, MashSteps
- JSON codec (mashsteps_to_json, mashsteps_from_json, ...)
- markup codec (mashsteps_to_xml, mashsteps_from_xml, ...)
"""
from .types import MashStep, MashSteps
from .errors import MashStepError, MashStepEncodeError, MashStepDecodeError
from .jsoncodec import (
    mashstep_to_dict,
    mashstep_to_json,
    mashstep_from_dict,
    mashsteps_to_json,
    mashsteps_from_json,
)
from .xmlcodec import (
    mashstep_to_element,
    mashstep_from_element,
    mashsteps_to_xml,
    mashsteps_from_xml,
)
