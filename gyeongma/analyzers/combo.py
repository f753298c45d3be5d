"""기수-조교사 콤보 시너지 분석

콤보 승률을 기수/조교사 개별 승률의 평균과 비교해 시너지 점수와 등급을 산정한다.
"""

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

from gyeongma.analyzers.scoring import CategoryBand, clamp, classify, round_half_up
from gyeongma.config.thresholds import (
    COMBO_CONSTANTS,
    SYNERGY_GRADE_ORDER,
    SYNERGY_GRADE_THRESHOLDS,
)
from gyeongma.constants import DEFAULT_MEET, MEET_NAMES

logger = logging.getLogger(__name__)

# 점수 오름차순, 각 등급의 최저 점수 미만이면 아래 등급
SYNERGY_GRADE_BANDS = (
    CategoryBand("D", SYNERGY_GRADE_THRESHOLDS["C"], inclusive=False),
    CategoryBand("C", SYNERGY_GRADE_THRESHOLDS["B"], inclusive=False),
    CategoryBand("B", SYNERGY_GRADE_THRESHOLDS["A"], inclusive=False),
    CategoryBand("A", SYNERGY_GRADE_THRESHOLDS["S"], inclusive=False),
    CategoryBand("S", math.inf),
)

SORT_KEYS = {
    "synergy_score": lambda c: c.synergy_score,
    "win_rate": lambda c: c.win_rate,
    "starts": lambda c: c.starts,
    "uplift": lambda c: c.uplift_percent,
}

TOP_PERFORMERS = 5


@dataclass(frozen=True)
class ComboStats:
    """기수-조교사 콤보 통계 (id는 "<기수ID>-<조교사ID>" 형식)"""

    id: str
    name: str
    starts: int
    wins: int
    rate: float


@dataclass(frozen=True)
class ComboExtra:
    """콤보 분석 추가 데이터

    seconds/thirds 가 없으면 복승률은 1착만으로 계산하고,
    recent_form 이 없으면 최근 폼 점수는 기본값을 사용한다.
    recent_form 은 최근 경주부터 나열한 착순이다.
    """

    seconds: int = 0
    thirds: int = 0
    recent_form: tuple[int, ...] = ()
    by_distance: Mapping[str, Mapping[str, float]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    by_class: Mapping[str, Mapping[str, float]] = field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclass(frozen=True)
class ComboAnalysis:
    """콤보 상세 분석 결과"""

    jockey_id: str
    jockey_name: str
    trainer_id: str
    trainer_name: str
    starts: int
    wins: int
    seconds: int
    thirds: int
    win_rate: float  # %
    place_rate: float  # %
    jockey_win_rate: float  # %
    trainer_win_rate: float  # %
    synergy_score: int  # 0-100
    synergy_grade: str  # S/A/B/C/D
    uplift_percent: float  # 기대 승률 대비 상승률 (%)
    recent_form: tuple[int, ...]
    by_distance: Mapping[str, Mapping[str, float]]
    by_class: Mapping[str, Mapping[str, float]]


@dataclass(frozen=True)
class ComboSearchFilters:
    """콤보 검색 필터 (None은 조건 없음)"""

    min_starts: int | None = None
    min_win_rate: float | None = None
    synergy_grade: str | None = None


@dataclass(frozen=True)
class ComboSummary:
    """콤보 통계 요약"""

    total_combos: int
    avg_win_rate: float
    avg_synergy_score: float
    grade_distribution: Mapping[str, int]
    top_performers: tuple[ComboAnalysis, ...]


@dataclass(frozen=True)
class JockeyTrainerCombo:
    """예측 입력용 기수-조교사 콤보 정보"""

    jockey_id: str
    jockey_name: str
    trainer_id: str
    trainer_name: str
    meet: str
    meet_name: str


def calculate_uplift(
    combo_win_rate: float, jockey_win_rate: float, trainer_win_rate: float
) -> float:
    """개별 승률 평균 대비 콤보 승률의 상승률 (%)을 계산한다"""
    expected_rate = (jockey_win_rate + trainer_win_rate) / 2
    if expected_rate <= 0:
        return 0.0
    return (combo_win_rate - expected_rate) / expected_rate * 100


def calculate_synergy_score(
    combo_win_rate: float,
    jockey_win_rate: float,
    trainer_win_rate: float,
    sample_size: int,
    recent_form: Sequence[int] = (),
) -> int:
    """시너지 점수를 계산한다

    구성:
    - 상승률 (40점): +50% 이상 = 40점, -50% 이하 = 0점
    - 표본 수 (30점): 출전 1회당 0.6점, 최소 1점
    - 최근 폼 (20점): 최근 5경주 평균 착순 1위 = 18점, 10위 이하 = 0점, 없으면 10점
    - 기본 점수 (10점)

    Args:
        combo_win_rate: 콤보 승률 (%)
        jockey_win_rate: 기수 개별 승률 (%)
        trainer_win_rate: 조교사 개별 승률 (%)
        sample_size: 콤보 출전 수
        recent_form: 최근 착순 (최근 경주부터)

    Returns:
        0-100 범위의 정수 점수
    """
    uplift = calculate_uplift(combo_win_rate, jockey_win_rate, trainer_win_rate)
    uplift_score = clamp((uplift + 50) * 0.4, 0, 40)

    sample_score = clamp(sample_size * 0.6, 1, 30)

    form_score = 10.0
    recent = list(recent_form)[: COMBO_CONSTANTS["RECENT_FORM_RACES"]]
    if recent:
        avg_finish = sum(recent) / len(recent)
        form_score = clamp((10 - avg_finish) * 2, 0, 20)

    base_score = 10
    return round_half_up(clamp(uplift_score + sample_score + form_score + base_score))


def get_synergy_grade(score: float) -> str:
    """시너지 점수에서 등급을 산정한다"""
    return classify(score, SYNERGY_GRADE_BANDS)


def _split_pair(value: str) -> tuple[str, str]:
    """A-B 형식을 첫 번째 "-"에서 나눈다 ("-"가 없으면 두 번째는 빈 문자열)"""
    first, _, second = value.partition("-")
    return first.strip(), second.strip()


def _freeze_breakdown(
    breakdown: Mapping[str, Mapping[str, float]],
) -> Mapping[str, Mapping[str, float]]:
    return MappingProxyType(
        {key: MappingProxyType(dict(stats)) for key, stats in breakdown.items()}
    )


def analyze_combo(
    stats: ComboStats,
    jockey_win_rate: float,
    trainer_win_rate: float,
    extra: ComboExtra | None = None,
) -> ComboAnalysis:
    """콤보 통계에서 상세 분석을 생성한다

    Args:
        stats: 콤보 통계
        jockey_win_rate: 기수 개별 승률 (%)
        trainer_win_rate: 조교사 개별 승률 (%)
        extra: 2착/3착 수, 최근 폼 등 추가 데이터

    Returns:
        콤보 분석 결과
    """
    extra = extra or ComboExtra()

    win_rate = stats.wins * 100 / stats.starts if stats.starts > 0 else 0.0
    places = stats.wins + extra.seconds + extra.thirds
    place_rate = places * 100 / stats.starts if stats.starts > 0 else 0.0

    synergy_score = calculate_synergy_score(
        win_rate, jockey_win_rate, trainer_win_rate, stats.starts, extra.recent_form
    )

    jockey_id, trainer_id = _split_pair(stats.id)
    jockey_name, trainer_name = _split_pair(stats.name)

    return ComboAnalysis(
        jockey_id=jockey_id,
        jockey_name=jockey_name,
        trainer_id=trainer_id,
        trainer_name=trainer_name,
        starts=stats.starts,
        wins=stats.wins,
        seconds=extra.seconds,
        thirds=extra.thirds,
        win_rate=win_rate,
        place_rate=place_rate,
        jockey_win_rate=jockey_win_rate,
        trainer_win_rate=trainer_win_rate,
        synergy_score=synergy_score,
        synergy_grade=get_synergy_grade(synergy_score),
        uplift_percent=calculate_uplift(win_rate, jockey_win_rate, trainer_win_rate),
        recent_form=tuple(extra.recent_form),
        by_distance=_freeze_breakdown(extra.by_distance),
        by_class=_freeze_breakdown(extra.by_class),
    )


def filter_synergistic_combos(
    combos: Sequence[ComboAnalysis], filters: ComboSearchFilters | None = None
) -> list[ComboAnalysis]:
    """조건을 모두 만족하는 콤보를 추출한다

    synergy_grade 는 "그 등급 이상" (S > A > B > C > D)을 의미한다.
    """
    filters = filters or ComboSearchFilters()
    target_index = (
        SYNERGY_GRADE_ORDER.index(filters.synergy_grade)
        if filters.synergy_grade is not None
        else None
    )

    result = []
    for combo in combos:
        if filters.min_starts is not None and combo.starts < filters.min_starts:
            continue
        if filters.min_win_rate is not None and combo.win_rate < filters.min_win_rate:
            continue
        if (
            target_index is not None
            and SYNERGY_GRADE_ORDER.index(combo.synergy_grade) > target_index
        ):
            continue
        result.append(combo)
    return result


def rank_combos(
    combos: Sequence[ComboAnalysis],
    sort_by: str = "synergy_score",
    order: str = "desc",
) -> list[ComboAnalysis]:
    """콤보를 정렬한 새 리스트를 반환한다 (안정 정렬, 입력은 변경하지 않음)

    Args:
        combos: 콤보 분석 결과 리스트
        sort_by: synergy_score / win_rate / starts / uplift
        order: desc / asc

    Returns:
        정렬된 리스트
    """
    if sort_by not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort_by}")
    if order not in ("asc", "desc"):
        raise ValueError(f"Unknown sort order: {order}")

    return sorted(combos, key=SORT_KEYS[sort_by], reverse=order == "desc")


def summarize_combo_stats(combos: Sequence[ComboAnalysis]) -> ComboSummary:
    """콤보 통계를 요약한다"""
    grade_distribution = {grade: 0 for grade in SYNERGY_GRADE_ORDER}

    if not combos:
        return ComboSummary(
            total_combos=0,
            avg_win_rate=0.0,
            avg_synergy_score=0.0,
            grade_distribution=MappingProxyType(grade_distribution),
            top_performers=(),
        )

    for combo in combos:
        grade_distribution[combo.synergy_grade] += 1

    return ComboSummary(
        total_combos=len(combos),
        avg_win_rate=sum(c.win_rate for c in combos) / len(combos),
        avg_synergy_score=sum(c.synergy_score for c in combos) / len(combos),
        grade_distribution=MappingProxyType(grade_distribution),
        top_performers=tuple(
            rank_combos(combos, "synergy_score", "desc")[:TOP_PERFORMERS]
        ),
    )


def to_jockey_trainer_combo(
    analysis: ComboAnalysis,
    meet: str = DEFAULT_MEET,
    meet_name: str | None = None,
) -> JockeyTrainerCombo:
    """예측 입력용 콤보 정보로 변환한다 (meet_name 생략 시 경마장 코드에서 결정)"""
    return JockeyTrainerCombo(
        jockey_id=analysis.jockey_id,
        jockey_name=analysis.jockey_name,
        trainer_id=analysis.trainer_id,
        trainer_name=analysis.trainer_name,
        meet=meet,
        meet_name=meet_name if meet_name is not None else MEET_NAMES.get(meet, ""),
    )


def get_combo_score_for_prediction(
    combo_win_rate: float | None,
    jockey_win_rate: float,
    trainer_win_rate: float,
    starts: int,
    recent_form: Sequence[int] = (),
) -> float:
    """예측 엔진용 콤보 시너지 점수를 반환한다

    콤보 승률이 없거나 출전 수가 최소 표본 미만이면 중립값 50을 반환한다.
    """
    if combo_win_rate is None or starts < COMBO_CONSTANTS["MIN_STARTS_FOR_PREDICTION"]:
        logger.debug("Insufficient combo sample (starts=%s), using neutral score", starts)
        return 50.0

    return float(
        calculate_synergy_score(
            combo_win_rate, jockey_win_rate, trainer_win_rate, starts, recent_form
        )
    )


def is_positive_synergy(
    combo_win_rate: float, jockey_win_rate: float, trainer_win_rate: float
) -> bool:
    """기대 승률보다 10% 넘게 높은 경우만 양(+)의 시너지로 판정한다"""
    expected_rate = (jockey_win_rate + trainer_win_rate) / 2
    return combo_win_rate > expected_rate * COMBO_CONSTANTS["POSITIVE_SYNERGY_MARGIN"]


def get_combo_reliability(starts: int) -> str:
    """출전 수로 콤보 신뢰도를 판정한다"""
    if starts >= COMBO_CONSTANTS["HIGH_RELIABILITY_STARTS"]:
        return "high"
    if starts >= COMBO_CONSTANTS["MEDIUM_RELIABILITY_STARTS"]:
        return "medium"
    return "low"
