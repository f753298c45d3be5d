"""점수 계산 공통 순수 함수

혈통/부담중량/콤보 분석에서 공통으로 사용하는 수치 계산을 한 곳에 모은다.
도메인 지식은 포함하지 않는다.
"""

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class CategoryBand:
    """분류 구간

    upper 이하(inclusive=False이면 미만)의 값이 이 구간에 속한다.
    구간은 upper 오름차순으로 나열하고, 마지막 구간의 upper는 math.inf로 한다.
    """

    name: str
    upper: float
    inclusive: bool = True

    def admits(self, value: float) -> bool:
        if self.inclusive:
            return value <= self.upper
        return value < self.upper


def classify(value: float, bands: Sequence[CategoryBand]) -> str:
    """값이 속하는 구간명을 반환한다

    Args:
        value: 분류 대상 값
        bands: upper 오름차순의 구간 목록

    Returns:
        처음으로 값을 받아들이는 구간명

    Raises:
        ValueError: 어느 구간에도 속하지 않는 경우 (NaN 또는 상한이 막힌 구간 목록)
    """
    for band in bands:
        if band.admits(value):
            return band.name
    raise ValueError(f"Value {value!r} is not covered by bands {[b.name for b in bands]}")


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    """값을 [lower, upper] 범위로 제한한다"""
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """0.5를 올림하는 정수 반올림"""
    return int(math.floor(value + 0.5))


def deviation_to_score(
    deviation: float, tolerance: float = 0.5, slope: float = 25.0
) -> float:
    """이상값으로부터의 편차를 0-100 적합도 점수로 변환한다

    허용 편차 이내이면 100점, 그 밖에서는 초과분 1단위당 slope점씩 감점한다.

    Args:
        deviation: 이상값과의 편차 (부호 무관)
        tolerance: 허용 편차
        slope: 허용 편차 초과 1단위당 감점

    Returns:
        0-100 범위의 점수
    """
    abs_deviation = abs(deviation)
    if abs_deviation <= tolerance:
        return 100.0
    return clamp(100.0 - (abs_deviation - tolerance) * slope)


def blend(a: float, weight_a: float, b: float, weight_b: float) -> float:
    """두 값의 가중 합성 (weight_a + weight_b = 1 인 고정 가중치)"""
    return a * weight_a + b * weight_b


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    """피어슨 상관계수를 계산한다

    Args:
        xs: 변수 X
        ys: 변수 Y (xs와 같은 길이)

    Returns:
        -1.0 ~ 1.0의 상관계수. 길이 불일치, 2점 미만, 분산 0인 경우 0.0
    """
    if len(xs) != len(ys) or len(xs) < 2:
        return 0.0

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    dx = x - x.mean()
    dy = y - y.mean()

    denominator = math.sqrt(float(np.sum(dx * dx)) * float(np.sum(dy * dy)))
    if denominator == 0:
        return 0.0

    return float(np.sum(dx * dy)) / denominator
