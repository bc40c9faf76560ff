from .mash import MashStep, MashSteps

__all__ = ["MashStep", "MashSteps"]
