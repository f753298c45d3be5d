"""ScoreCalculator - 출전마별 종합 점수 계산"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from gyeongma.analyzers.factors import (
    BaseFactor,
    BloodlineFactor,
    BurdenFactor,
    ComboFactor,
    RaceEntry,
)
from gyeongma.config.weights import FACTOR_NAMES, FACTOR_WEIGHTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryScore:
    """출전마 한 마리의 Factor별 점수와 종합 점수"""

    horse_id: str
    factor_scores: Mapping[str, float | None]
    total: float | None


class ScoreCalculator:
    """혈통/부담중량/콤보 Factor를 가중 합계해 출전마를 채점한다

    점수를 내지 못한 Factor (입력 부족)는 제외하고,
    남은 Factor의 가중치로 정규화한다.
    """

    def __init__(
        self,
        weights: Mapping[str, float] | None = None,
        factors: Sequence[BaseFactor] | None = None,
    ):
        """ScoreCalculator를 초기화한다

        Args:
            weights: Factor 가중치 (None이면 FACTOR_WEIGHTS). 키는 FACTOR_NAMES 중에서만
            factors: 사용할 Factor (None이면 혈통/부담중량/콤보 전부)

        Raises:
            ValueError: 알 수 없는 Factor 이름이나 음수 가중치가 있는 경우
        """
        weights = dict(FACTOR_WEIGHTS if weights is None else weights)
        unknown = sorted(set(weights) - set(FACTOR_NAMES))
        if unknown:
            raise ValueError(f"Unknown factor weights: {', '.join(unknown)}")
        negative = sorted(name for name, weight in weights.items() if weight < 0)
        if negative:
            raise ValueError(f"Negative factor weights: {', '.join(negative)}")

        self._weights = MappingProxyType(weights)
        if factors is None:
            factors = (BloodlineFactor(), BurdenFactor(), ComboFactor())
        self._factors = tuple(factors)

    def get_weights(self) -> dict[str, float]:
        """가중치 설정의 사본"""
        return dict(self._weights)

    def score_factors(self, entry: RaceEntry) -> dict[str, float | None]:
        """각 Factor의 점수를 계산한다 (입력 부족은 None)"""
        scores = {}
        for factor in self._factors:
            missing = factor.missing_fields(entry)
            if missing:
                logger.debug(
                    "Skipping %s for %s: missing %s",
                    factor.name,
                    entry.horse_id,
                    ", ".join(missing),
                )
            scores[factor.name] = factor.calculate(entry)
        return scores

    def calculate_total(self, factor_scores: Mapping[str, float | None]) -> float | None:
        """가중 합계 점수 (0-100, 소수 첫째 자리). 점수가 하나도 없으면 None"""
        used = {
            name: score
            for name, score in factor_scores.items()
            if score is not None and self._weights.get(name, 0) > 0
        }
        total_weight = sum(self._weights[name] for name in used)
        if total_weight == 0:
            return None

        total = sum(score * self._weights[name] for name, score in used.items())
        return round(total / total_weight, 1)

    def score_entry(self, entry: RaceEntry) -> EntryScore:
        """출전마 한 마리를 채점한다"""
        factor_scores = self.score_factors(entry)
        return EntryScore(
            horse_id=entry.horse_id,
            factor_scores=MappingProxyType(factor_scores),
            total=self.calculate_total(factor_scores),
        )

    def score_entries(self, entries: Sequence[RaceEntry]) -> list[EntryScore]:
        """출전마 전원을 입력 순서대로 채점한다"""
        return [self.score_entry(entry) for entry in entries]
