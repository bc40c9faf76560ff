import json
import math

import pytest

from beerxml.mash.errors import MashStepDecodeError, MashStepEncodeError
from beerxml.mash.jsoncodec import (
    mashstep_from_dict,
    mashstep_to_dict,
    mashstep_to_json,
)
from beerxml.mash.types import MashStep


def _infusion_step(**overrides):
    base = dict(
        name="Saccharification",
        version=1,
        type="Infusion",
        infuse_amount=12.5,
        step_temp=66.0,
        step_time=60,
        ramp_time=2,
        description="Infuse 12.5 l of water at 74.2 C",
        water_grain_ratio="3.0 l/kg",
        infuse_temp="74.2 C",
        display_step_temp="66 C",
        display_infuse_amt="12.5 l",
    )
    base.update(overrides)
    return MashStep(**base)


def test_only_step_temp_set():
    assert mashstep_to_json(MashStep(step_temp=65.0)) == '{"step_temp":65}'


def test_default_step_encodes_to_empty_object():
    assert mashstep_to_json(MashStep()) == "{}"


def test_keys_follow_field_order():
    d = mashstep_to_dict(_infusion_step())
    assert list(d) == [
        "name",
        "version",
        "type",
        "infuse_amount",
        "step_temp",
        "step_time",
        "ramp_time",
        "description",
        "water_grain_ratio",
        "infuse_temp",
        "display_step_temp",
        "display_infuse_amt",
    ]
    assert "end_temp" not in d
    assert "decoction_amt" not in d


def test_compact_output():
    text = mashstep_to_json(_infusion_step())
    assert text == json.dumps(json.loads(text), separators=(",", ":"), ensure_ascii=False)
    assert json.loads(text)["infuse_amount"] == 12.5


def test_present_zero_is_not_absent():
    zero = MashStep(step_temp=66.0, infuse_amount=0.0)
    absent = MashStep(step_temp=66.0)

    assert zero.infuse_amount == 0.0
    assert absent.infuse_amount is None
    assert zero != absent

    assert mashstep_to_dict(zero) == {"infuse_amount": 0, "step_temp": 66}
    assert mashstep_to_dict(absent) == {"step_temp": 66}


def test_required_zero_is_omitted():
    d = mashstep_to_dict(MashStep(name="Mash out", step_temp=76.0, step_time=0))
    assert "step_time" not in d


def test_present_zero_ramp_time_is_kept():
    assert mashstep_to_dict(MashStep(ramp_time=0)) == {"ramp_time": 0}


def test_fractional_float_is_kept():
    assert mashstep_to_json(MashStep(step_temp=66.5, end_temp=64.25)) == '{"step_temp":66.5,"end_temp":64.25}'


def test_non_ascii_text_is_raw():
    assert mashstep_to_json(MashStep(name="Eiweißrast")) == '{"name":"Eiweißrast"}'


def test_nan_fails_to_encode():
    with pytest.raises(MashStepEncodeError, match="step_temp"):
        mashstep_to_json(MashStep(step_temp=math.nan))


def test_from_dict_roundtrip():
    step = _infusion_step(end_temp=64.0)
    loaded = mashstep_from_dict(json.loads(mashstep_to_json(step)))
    assert loaded == step


def test_from_dict_ignores_unknown_keys():
    step = mashstep_from_dict({"step_temp": 65, "color": "blue"})
    assert step.step_temp == 65.0
    assert step.infuse_amount is None


def test_from_dict_rejects_bad_types():
    with pytest.raises(MashStepDecodeError):
        mashstep_from_dict({"step_time": "an hour"})


def test_from_dict_requires_object():
    with pytest.raises(MashStepDecodeError, match="JSON object"):
        mashstep_from_dict(["not", "a", "dict"])
