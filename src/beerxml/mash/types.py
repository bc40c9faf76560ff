from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, Field, model_serializer


class MashStep(BaseModel):
    # One step of a multi-step mash profile (BeerXML <MASH_STEP>)
    name: str = ""
    version: int = 0
    type: str = ""                         # Infusion | Temperature | Decoction
    infuse_amount: Optional[float] = None  # liters
    step_temp: float = 0.0                 # C
    step_time: int = 0                     # min
    ramp_time: Optional[int] = None        # min
    end_temp: Optional[float] = None       # C

    # Extensions (display / derived text, units included)
    description: str = ""
    water_grain_ratio: str = ""
    decoction_amt: str = ""
    infuse_temp: str = ""
    display_step_temp: str = ""
    display_infuse_amt: str = ""

    @model_serializer
    def ser_model(self) -> Dict[str, Any]:
        # same omit-empty shape as mashstep_to_json
        from beerxml.mash.jsoncodec import mashstep_to_dict

        return mashstep_to_dict(self)


class MashSteps(BaseModel):
    """
    Ordered list of mash steps, as held by a mash profile.

    Serialized as repeated <MASH_STEP> elements under <MASH_STEPS> and as a
    bare JSON array (see beerxml.mash.jsoncodec.mashsteps_to_json).
    """

    mash_step: List[MashStep] = Field(default_factory=list)

    @model_serializer
    def ser_model(self) -> List[Dict[str, Any]]:
        from beerxml.mash.jsoncodec import mashstep_to_dict

        return [mashstep_to_dict(s) for s in self.mash_step]

    def __len__(self) -> int:
        return len(self.mash_step)

    def __iter__(self) -> Iterator[MashStep]:  # type: ignore[override]
        return iter(self.mash_step)

    def __getitem__(self, i: int) -> MashStep:
        return self.mash_step[i]

    def append(self, step: MashStep) -> None:
        self.mash_step.append(step)
