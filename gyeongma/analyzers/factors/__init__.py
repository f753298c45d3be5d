"""Factor modules"""

from gyeongma.analyzers.factors.base import BaseFactor, RaceEntry
from gyeongma.analyzers.factors.bloodline import BloodlineFactor
from gyeongma.analyzers.factors.burden import BurdenFactor
from gyeongma.analyzers.factors.combo import ComboFactor

__all__ = [
    "BaseFactor",
    "RaceEntry",
    "BloodlineFactor",
    "BurdenFactor",
    "ComboFactor",
]
