"""부담중량 분석

마체중 대비 부담비율로 적합도를 평가한다. 1kg ≈ 1마신 (2.5m) 차이로 환산한다.
"""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from gyeongma.analyzers.scoring import (
    CategoryBand,
    clamp,
    classify,
    deviation_to_score,
    pearson_correlation,
    round_half_up,
)
from gyeongma.config.thresholds import BURDEN_CONSTANTS

logger = logging.getLogger(__name__)

# 허용 편차를 넘는 양(+)의 편차 구분
HEAVY_BANDS = (
    CategoryBand("slightly_heavy", BURDEN_CONSTANTS["SLIGHTLY_HEAVY_MAX"]),
    CategoryBand("heavy", BURDEN_CONSTANTS["HEAVY_MAX"]),
    CategoryBand("very_heavy", math.inf),
)

ASSESSMENTS = (
    "very_light",
    "light",
    "optimal",
    "slightly_heavy",
    "heavy",
    "very_heavy",
)

# 3착 이내를 입상 구간으로 본다
PLACING_POSITION = 3


@dataclass(frozen=True)
class BurdenAnalysis:
    """부담중량 분석 결과"""

    horse_name: str
    burden_weight: float  # kg
    horse_weight: float  # kg
    burden_ratio: float  # %
    optimal_ratio: float  # %
    deviation: float  # %p
    expected_impact: float  # 마신 (양수 = 불리)
    fit_score: float  # 0-100
    assessment: str
    reasoning: tuple[str, ...]


@dataclass(frozen=True)
class BurdenHistory:
    """과거 출전 시 부담중량 기록"""

    date: str
    burden: float
    horse_weight: float
    position: int
    distance: int


@dataclass(frozen=True)
class BurdenOptimization:
    """부담중량 최적화 결과"""

    current_burden: float
    optimal_burden: int
    difference: float
    expected_position_change: float
    recommendation: str


@dataclass(frozen=True)
class RatioRange:
    min: float
    max: float


@dataclass(frozen=True)
class HistoricalBurdenSummary:
    """과거 부담중량 성적 요약"""

    avg_burden: float
    avg_ratio: float
    best_performance_burden: float
    winning_ratio_range: RatioRange
    correlation: float


def _burden_ratio(burden: float, horse_weight: float) -> float:
    if horse_weight <= 0:
        return 0.0
    return burden * 100 / horse_weight


def analyze_burden(
    horse_name: str,
    burden_weight: float,
    horse_weight: float,
    age: int | None = None,
) -> BurdenAnalysis:
    """부담중량 분석을 수행한다

    Args:
        horse_name: 마명
        burden_weight: 부담중량 (kg)
        horse_weight: 마체중 (kg), 0이면 비율을 계산하지 않는다
        age: 마령 (어린 말은 최적 비율을 낮춘다)

    Returns:
        부담중량 분석 결과
    """
    if horse_weight <= 0:
        logger.debug("Horse weight missing for %s, burden ratio set to 0", horse_name)

    burden_ratio = _burden_ratio(burden_weight, horse_weight)
    optimal_ratio = get_optimal_ratio(age)
    deviation = burden_ratio - optimal_ratio
    expected_impact = calculate_impact(deviation, horse_weight)

    return BurdenAnalysis(
        horse_name=horse_name,
        burden_weight=burden_weight,
        horse_weight=horse_weight,
        burden_ratio=burden_ratio,
        optimal_ratio=optimal_ratio,
        deviation=deviation,
        expected_impact=expected_impact,
        fit_score=calculate_fit_score(deviation),
        assessment=get_assessment(deviation),
        reasoning=_build_reasoning(
            burden_weight, horse_weight, burden_ratio, deviation, expected_impact
        ),
    )


def get_optimal_ratio(
    age: int | None = None, base_ratio: float = BURDEN_CONSTANTS["OPTIMAL_RATIO"]
) -> float:
    """최적 부담비율 (%)을 반환한다

    Args:
        age: 마령 (YOUNG_AGE 이하이면 비율을 낮춘다)
        base_ratio: 기준 비율

    Returns:
        최적 부담비율 (%)
    """
    if age and age <= BURDEN_CONSTANTS["YOUNG_AGE"]:
        return base_ratio - BURDEN_CONSTANTS["YOUNG_RATIO_ADJUSTMENT"]
    return base_ratio


def calculate_impact(deviation: float, horse_weight: float) -> float:
    """편차 (%p)를 kg으로 환산해 예상 영향 (마신)을 계산한다"""
    kg_deviation = deviation * horse_weight / 100
    return kg_deviation * BURDEN_CONSTANTS["KG_PER_LENGTH"]


def calculate_fit_score(deviation: float) -> float:
    """편차로부터 적합도 점수를 계산한다

    허용 편차 이내는 100점, 1%p 편차는 87.5점, 2%p 편차는 62.5점.
    """
    return deviation_to_score(
        deviation,
        tolerance=BURDEN_CONSTANTS["ACCEPTABLE_DEVIATION"],
        slope=BURDEN_CONSTANTS["SCORE_PER_DEVIATION"],
    )


def get_assessment(deviation: float) -> str:
    """편차로 부담중량을 판정한다"""
    tolerance = BURDEN_CONSTANTS["ACCEPTABLE_DEVIATION"]
    if abs(deviation) <= tolerance:
        return "optimal"
    if deviation < -tolerance:
        return "light"
    return classify(deviation, HEAVY_BANDS)


def _build_reasoning(
    burden: float,
    horse_weight: float,
    ratio: float,
    deviation: float,
    impact: float,
) -> tuple[str, ...]:
    reasons = [f"부담중량 {burden}kg / 마체중 {horse_weight}kg = {ratio:.1f}%"]

    if horse_weight <= 0:
        reasons.append("마체중 정보 없음 - 부담비율 계산 불가")
    elif abs(deviation) <= BURDEN_CONSTANTS["ACCEPTABLE_DEVIATION"]:
        reasons.append("최적 부담비율 범위 내")
    elif deviation > 0:
        reasons.append(
            f"최적 비율 대비 {deviation:.1f}% 초과 (약 {abs(impact):.1f}마신 불리)"
        )
    else:
        reasons.append(
            f"최적 비율 대비 {abs(deviation):.1f}% 미만 (약 {abs(impact):.1f}마신 유리)"
        )

    return tuple(reasons)


def find_optimal_burden(horse_weight: float, age: int | None = None) -> int:
    """마체중에 대한 최적 부담중량 (kg, 정수 반올림)을 계산한다"""
    return round_half_up(horse_weight * get_optimal_ratio(age) / 100)


def optimize_burden(
    current_burden: float, horse_weight: float, age: int | None = None
) -> BurdenOptimization:
    """현재 부담중량을 최적 부담중량과 비교한다

    Args:
        current_burden: 현재 부담중량 (kg)
        horse_weight: 마체중 (kg)
        age: 마령

    Returns:
        부담중량 최적화 결과
    """
    optimal_burden = find_optimal_burden(horse_weight, age)
    difference = current_burden - optimal_burden
    expected_position_change = difference * BURDEN_CONSTANTS["KG_PER_LENGTH"]

    if difference == 0:
        recommendation = "현재 부담중량 적정"
    elif abs(difference) <= BURDEN_CONSTANTS["RECOMMENDATION_TOLERANCE_KG"]:
        recommendation = f"현재 부담중량 적정 범위 (최적 대비 {difference:+g}kg)"
    elif difference > 0:
        recommendation = (
            f"{difference:g}kg 초과 - 약 {expected_position_change:.1f}마신 불리 예상"
        )
    else:
        recommendation = (
            f"{abs(difference):g}kg 미만 - 약 {abs(expected_position_change):.1f}마신 유리 예상"
        )

    return BurdenOptimization(
        current_burden=current_burden,
        optimal_burden=optimal_burden,
        difference=difference,
        expected_position_change=expected_position_change,
        recommendation=recommendation,
    )


def analyze_historical_burden(
    history: Sequence[BurdenHistory],
) -> HistoricalBurdenSummary:
    """과거 부담중량과 성적의 관계를 분석한다

    Args:
        history: 과거 출전 기록

    Returns:
        평균 부담중량/비율, 최고 성적 시 부담중량, 입상 시 비율 범위,
        부담중량-착순 상관계수 (양수 = 무거울수록 착순이 나쁨).
        기록이 없으면 모두 0
    """
    if not history:
        return HistoricalBurdenSummary(
            avg_burden=0.0,
            avg_ratio=0.0,
            best_performance_burden=0.0,
            winning_ratio_range=RatioRange(min=0.0, max=0.0),
            correlation=0.0,
        )

    ratios = [_burden_ratio(h.burden, h.horse_weight) for h in history]
    avg_burden = sum(h.burden for h in history) / len(history)
    avg_ratio = sum(ratios) / len(ratios)

    best_race = min(history, key=lambda h: h.position)

    # 입상 (3착 이내) 기록이 없으면 최고 착순 기록을 사용
    placing_ratios = [
        ratio for h, ratio in zip(history, ratios) if h.position <= PLACING_POSITION
    ]
    if not placing_ratios:
        placing_ratios = [
            ratio
            for h, ratio in zip(history, ratios)
            if h.position == best_race.position
        ]

    correlation = pearson_correlation(
        [h.burden for h in history], [h.position for h in history]
    )

    return HistoricalBurdenSummary(
        avg_burden=avg_burden,
        avg_ratio=avg_ratio,
        best_performance_burden=best_race.burden,
        winning_ratio_range=RatioRange(min=min(placing_ratios), max=max(placing_ratios)),
        correlation=correlation,
    )


def get_burden_score_for_prediction(burden_weight: float, horse_weight: float) -> float:
    """예측 엔진용 부담중량 점수를 반환한다 (마체중 불명이면 중립값 50)"""
    if horse_weight <= 0:
        return 50.0
    return analyze_burden("", burden_weight, horse_weight).fit_score


def compare_burden_advantage(
    burden: float, opponent_burdens: Sequence[float]
) -> float:
    """출전마 평균 대비 부담중량 우위를 점수화한다

    Args:
        burden: 대상 마의 부담중량 (kg)
        opponent_burdens: 상대 마들의 부담중량 (kg)

    Returns:
        0-100 범위의 점수 (평균보다 가벼우면 50 초과, 상대가 없으면 50)
    """
    if not opponent_burdens:
        return 50.0

    avg_opponent = sum(opponent_burdens) / len(opponent_burdens)
    advantage = (avg_opponent - burden) * BURDEN_CONSTANTS["ADVANTAGE_PER_KG"]
    return clamp(50.0 + advantage)
