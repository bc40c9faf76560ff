from __future__ import annotations


class MashStepError(ValueError):
    """Base error for mash step (de)serialization."""


class MashStepEncodeError(MashStepError):
    pass


class MashStepDecodeError(MashStepError):
    pass
