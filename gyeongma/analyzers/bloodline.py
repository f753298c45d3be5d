"""혈통 적성 분석

부마와 외조부마의 씨수마 적성을 7:3으로 합성해 거리/주로 적성을 추정한다.
"""

import logging
import math
from dataclasses import dataclass

from gyeongma.analyzers.scoring import (
    CategoryBand,
    blend,
    clamp,
    classify,
    round_half_up,
)
from gyeongma.config.sire_master import (
    KNOWN_SIRE_OFFSPRING,
    UNKNOWN_SIRE_OFFSPRING,
    get_sire_aptitude,
    is_known_sire,
)
from gyeongma.config.thresholds import DISTANCE_CATEGORIES, DISTANCE_FIT_TABLE
from gyeongma.config.weights import BLOODLINE_WEIGHTS

logger = logging.getLogger(__name__)

DEFAULT_APTITUDE = 3
DEFAULT_OPTIMAL_DISTANCE = 1600

# sprint/mile/middle 은 상한 포함, long 은 상한 없음
DISTANCE_BANDS = (
    CategoryBand("sprint", DISTANCE_CATEGORIES["sprint"]["max"]),
    CategoryBand("mile", DISTANCE_CATEGORIES["mile"]["max"]),
    CategoryBand("middle", DISTANCE_CATEGORIES["middle"]["max"]),
    CategoryBand("long", math.inf),
)


@dataclass(frozen=True)
class SireProfile:
    """씨수마 적성 프로필"""

    name: str
    distance_aptitude: int  # 1=단거리 ~ 5=장거리
    optimal_distance: int  # m
    dirt_aptitude: int  # 1=잔디 특화 ~ 5=더트 특화
    sprint_aptitude: int
    stayer_aptitude: int
    offspring: int  # 자마 수
    known: bool  # 마스터 등록 여부


@dataclass(frozen=True)
class BloodlineAnalysis:
    """혈통 분석 결과"""

    horse_name: str
    sire: str | None
    dam: str | None
    grandsire: str | None
    sire_stats: SireProfile | None
    grandsire_stats: SireProfile | None
    distance_aptitude: int
    dirt_aptitude: int
    turf_aptitude: int
    optimal_distance: int
    reliability: str  # high / medium / low
    reasoning: tuple[str, ...]


def get_sire_stats(sire_name: str) -> SireProfile:
    """씨수마 프로필을 조회한다

    Args:
        sire_name: 씨수마명

    Returns:
        씨수마 프로필 (미등록 씨수마는 기본 적성)
    """
    known = is_known_sire(sire_name)
    if not known:
        logger.debug("Unknown sire %s, using default aptitude", sire_name)

    aptitude = get_sire_aptitude(sire_name)
    return SireProfile(
        name=sire_name,
        distance_aptitude=aptitude["distance_aptitude"],
        optimal_distance=aptitude["optimal_distance"],
        dirt_aptitude=aptitude["dirt_aptitude"],
        sprint_aptitude=aptitude["sprint_aptitude"],
        stayer_aptitude=aptitude["stayer_aptitude"],
        offspring=KNOWN_SIRE_OFFSPRING if known else UNKNOWN_SIRE_OFFSPRING,
        known=known,
    )


def analyze_bloodline(
    horse_name: str,
    sire: str | None = None,
    dam: str | None = None,
    grandsire: str | None = None,
) -> BloodlineAnalysis:
    """혈통 분석을 수행한다

    Args:
        horse_name: 마명
        sire: 부마명
        dam: 모마명 (현재 적성 계산에는 사용하지 않음)
        grandsire: 외조부마명

    Returns:
        혈통 분석 결과
    """
    sire_stats = get_sire_stats(sire) if sire else None
    grandsire_stats = get_sire_stats(grandsire) if grandsire else None

    distance_aptitude = _weighted_value(
        sire_stats.distance_aptitude if sire_stats else None,
        grandsire_stats.distance_aptitude if grandsire_stats else None,
        DEFAULT_APTITUDE,
    )
    dirt_aptitude = _weighted_value(
        sire_stats.dirt_aptitude if sire_stats else None,
        grandsire_stats.dirt_aptitude if grandsire_stats else None,
        DEFAULT_APTITUDE,
    )
    optimal_distance = _weighted_value(
        sire_stats.optimal_distance if sire_stats else None,
        grandsire_stats.optimal_distance if grandsire_stats else None,
        DEFAULT_OPTIMAL_DISTANCE,
    )

    return BloodlineAnalysis(
        horse_name=horse_name,
        sire=sire,
        dam=dam,
        grandsire=grandsire,
        sire_stats=sire_stats,
        grandsire_stats=grandsire_stats,
        distance_aptitude=distance_aptitude,
        dirt_aptitude=dirt_aptitude,
        # 잔디 적성은 더트 적성의 역수 (한 축으로 모델링)
        turf_aptitude=6 - dirt_aptitude,
        optimal_distance=optimal_distance,
        reliability=_get_reliability(sire_stats, grandsire_stats),
        reasoning=_build_reasoning(
            sire_stats, grandsire_stats, distance_aptitude, dirt_aptitude
        ),
    )


def _weighted_value(
    sire_value: int | None, grandsire_value: int | None, default: int
) -> int:
    """부마 70% + 외조부마 30%로 합성한다 (한쪽만 있으면 그 값)"""
    if sire_value is not None and grandsire_value is not None:
        return round_half_up(
            blend(
                sire_value,
                BLOODLINE_WEIGHTS["sire"],
                grandsire_value,
                BLOODLINE_WEIGHTS["grandsire"],
            )
        )
    if sire_value is not None:
        return sire_value
    if grandsire_value is not None:
        return grandsire_value
    return default


def _get_reliability(
    sire_stats: SireProfile | None, grandsire_stats: SireProfile | None
) -> str:
    """자마 수로 분석 신뢰도를 판정한다 (부마가 미등록이면 항상 low)"""
    if sire_stats is None or not sire_stats.known:
        return "low"

    if grandsire_stats:
        total_offspring = sire_stats.offspring + grandsire_stats.offspring
        if total_offspring >= 100:
            return "high"
        if total_offspring >= 30:
            return "medium"

    if sire_stats.offspring >= 30:
        return "medium"
    return "low"


def _build_reasoning(
    sire_stats: SireProfile | None,
    grandsire_stats: SireProfile | None,
    distance_aptitude: int,
    dirt_aptitude: int,
) -> tuple[str, ...]:
    reasons = []

    if sire_stats is None and grandsire_stats is None:
        reasons.append("혈통 정보 부족 - 기본값 적용")

    if sire_stats is not None:
        if sire_stats.known:
            reasons.append(
                f"부마 {sire_stats.name}: 최적거리 {sire_stats.optimal_distance}m, "
                f"더트 적성 {sire_stats.dirt_aptitude}점"
            )
        else:
            reasons.append(f"부마 {sire_stats.name}: 데이터 없음 - 기본값 적용")

    if grandsire_stats is not None:
        if sire_stats is not None:
            reasons.append(
                f"외조부마 {grandsire_stats.name}: 거리적성 "
                f"{grandsire_stats.distance_aptitude}점 (30% 반영)"
            )
        else:
            reasons.append(
                f"외조부마 {grandsire_stats.name}: 거리적성 "
                f"{grandsire_stats.distance_aptitude}점 (부마 정보 없음)"
            )

    if distance_aptitude >= 4:
        distance_desc = "장거리 적성"
    elif distance_aptitude <= 2:
        distance_desc = "단거리 적성"
    else:
        distance_desc = "중거리 적성"
    reasons.append(f"종합 {distance_desc} ({distance_aptitude}점)")

    if dirt_aptitude >= 4:
        surface_desc = "더트 강점"
    elif dirt_aptitude <= 2:
        surface_desc = "잔디 선호"
    else:
        surface_desc = "주로 중립"
    reasons.append(f"{surface_desc} ({dirt_aptitude}점)")

    return tuple(reasons)


def get_distance_category(distance: float) -> str:
    """거리에서 거리 카테고리(sprint/mile/middle/long)를 판정한다"""
    return classify(distance, DISTANCE_BANDS)


def calculate_distance_fit_score(aptitude: float, race_distance: float) -> int:
    """혈통 거리 적성과 레이스 거리의 적합도를 계산한다

    Args:
        aptitude: 거리 적성 (1=단거리, 3=중거리, 5=장거리)
        race_distance: 레이스 거리 (m)

    Returns:
        0-100 범위의 점수
    """
    category = get_distance_category(race_distance)
    level = round_half_up(clamp(aptitude, 1, 5))
    return DISTANCE_FIT_TABLE[category][level]


def calculate_surface_fit_score(dirt_aptitude: float, surface: str) -> float:
    """더트 적성과 주로의 적합도를 계산한다

    Args:
        dirt_aptitude: 더트 적성 (1=잔디 특화, 5=더트 특화)
        surface: 주로 ("dirt" 또는 "turf")

    Returns:
        0-100 범위의 점수 (적성 3은 주로와 무관하게 50)
    """
    if surface == "dirt":
        return clamp((dirt_aptitude - 1) * 25)
    if surface == "turf":
        return clamp((5 - dirt_aptitude) * 25)
    raise ValueError(f"Unknown surface: {surface}")


def get_bloodline_for_prediction(
    sire: str | None = None,
    dam: str | None = None,
    grandsire: str | None = None,
) -> dict:
    """예측 엔진 입력용 혈통 데이터를 반환한다

    Returns:
        sire, dam, grandsire, distance_aptitude, dirt_aptitude 의 딕셔너리
    """
    analysis = analyze_bloodline("", sire, dam, grandsire)
    return {
        "sire": sire,
        "dam": dam,
        "grandsire": grandsire,
        "distance_aptitude": analysis.distance_aptitude,
        "dirt_aptitude": analysis.dirt_aptitude,
    }
