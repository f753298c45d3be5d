"""Factor 기저 클래스와 출전마 입력"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RaceEntry:
    """예측에 사용하는 출전마 한 마리의 입력 (None은 정보 없음)"""

    horse_id: str
    sire: str | None = None
    dam: str | None = None
    grandsire: str | None = None
    distance: int | None = None  # m
    surface: str | None = None  # "dirt" / "turf"
    burden_weight: float | None = None  # kg
    horse_weight: float | None = None  # kg
    combo_win_rate: float | None = None  # %
    jockey_win_rate: float | None = None  # %
    trainer_win_rate: float | None = None  # %
    combo_starts: int = 0
    recent_form: tuple[int, ...] = ()  # 최근 경주부터


class BaseFactor(ABC):
    """출전마 입력을 0-100 점수로 바꾸는 Factor

    하위 클래스는 name, required_fields, _score를 정의한다.
    required_fields 중 하나라도 None이면 calculate는 점수 대신 None을 반환하고,
    ScoreCalculator는 그 Factor를 가중 합계에서 제외한다.
    """

    name: str
    required_fields: tuple[str, ...] = ()

    def missing_fields(self, entry: RaceEntry) -> tuple[str, ...]:
        """입력에 빠져 있는 필수 항목"""
        return tuple(f for f in self.required_fields if getattr(entry, f) is None)

    def calculate(self, entry: RaceEntry) -> float | None:
        """점수를 계산한다 (필수 항목이 빠져 있으면 None)"""
        if self.missing_fields(entry):
            return None
        return self._score(entry)

    @abstractmethod
    def _score(self, entry: RaceEntry) -> float:
        """필수 항목이 모두 있는 입력의 점수 (0-100)"""
