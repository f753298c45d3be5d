"""BurdenFactor - 부담중량 Factor"""

from gyeongma.analyzers.burden import get_burden_score_for_prediction
from gyeongma.analyzers.factors.base import BaseFactor, RaceEntry


class BurdenFactor(BaseFactor):
    """마체중 대비 부담중량 적합도 (마체중이 없으면 중립값 50)"""

    name = "burden"
    required_fields = ("burden_weight",)

    def _score(self, entry: RaceEntry) -> float:
        return get_burden_score_for_prediction(
            entry.burden_weight, entry.horse_weight or 0
        )
