"""BloodlineFactor - 혈통 적성 Factor"""

from gyeongma.analyzers.bloodline import (
    calculate_distance_fit_score,
    calculate_surface_fit_score,
    get_bloodline_for_prediction,
)
from gyeongma.analyzers.factors.base import BaseFactor, RaceEntry


class BloodlineFactor(BaseFactor):
    """혈통에 기반한 점수 계산

    부마/외조부마에서 추정한 거리 적성과 레이스 거리의 적합도를 사용하고,
    주로가 주어지면 주로 적합도와 평균한다.
    """

    name = "bloodline"
    required_fields = ("sire", "distance")

    def _score(self, entry: RaceEntry) -> float:
        bloodline = get_bloodline_for_prediction(entry.sire, entry.dam, entry.grandsire)
        distance_score = calculate_distance_fit_score(
            bloodline["distance_aptitude"], entry.distance
        )
        if entry.surface is None:
            return float(distance_score)

        surface_score = calculate_surface_fit_score(
            bloodline["dirt_aptitude"], entry.surface
        )
        return round((distance_score + surface_score) / 2, 1)
