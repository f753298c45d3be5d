"""예측용 Factor (factors)의 테스트"""

from abc import ABC

import pytest

from gyeongma.analyzers.factors import (
    BaseFactor,
    BloodlineFactor,
    BurdenFactor,
    ComboFactor,
    RaceEntry,
)


class TestBaseFactor:
    """BaseFactor 기저 클래스의 테스트"""

    def test_is_abstract_class(self):
        """BaseFactor는 추상 클래스이다"""
        assert issubclass(BaseFactor, ABC)

    def test_cannot_instantiate_directly(self):
        """BaseFactor는 직접 인스턴스화할 수 없다"""
        with pytest.raises(TypeError):
            BaseFactor()

    def test_required_fields_gate_score(self):
        """필수 항목이 빠지면 _score를 부르지 않고 None"""

        class DistanceFactor(BaseFactor):
            name = "distance_only"
            required_fields = ("distance",)

            def _score(self, entry):
                return entry.distance / 100

        factor = DistanceFactor()
        assert factor.calculate(RaceEntry("H1", distance=1200)) == 12
        assert factor.calculate(RaceEntry("H1")) is None
        assert factor.missing_fields(RaceEntry("H1")) == ("distance",)


class TestBloodlineFactor:
    """BloodlineFactor의 테스트"""

    @pytest.fixture
    def factor(self):
        return BloodlineFactor()

    def test_name(self, factor):
        """name은 'bloodline'"""
        assert factor.name == "bloodline"

    def test_requires_sire_and_distance(self, factor):
        """부마 또는 거리가 없으면 None"""
        assert factor.calculate(RaceEntry("H1", distance=1200)) is None
        assert factor.calculate(RaceEntry("H1", sire="블루치퍼")) is None

    def test_distance_and_surface(self, factor):
        """블루치퍼 (거리 2, 더트 5)의 1200m 더트: (75 + 100) / 2"""
        entry = RaceEntry("H1", sire="블루치퍼", distance=1200, surface="dirt")
        assert factor.calculate(entry) == 87.5

    def test_distance_only(self, factor):
        """주로가 없으면 거리 적합도만 사용한다"""
        entry = RaceEntry("H1", sire="블루치퍼", distance=1200)
        assert factor.calculate(entry) == 75.0


class TestBurdenFactor:
    """BurdenFactor의 테스트"""

    @pytest.fixture
    def factor(self):
        return BurdenFactor()

    def test_name(self, factor):
        """name은 'burden'"""
        assert factor.name == "burden"

    def test_requires_burden(self, factor):
        """부담중량이 없으면 None"""
        assert factor.calculate(RaceEntry("H1", horse_weight=500)) is None

    def test_optimal_burden(self, factor):
        """최적 부담중량은 100점"""
        entry = RaceEntry("H1", burden_weight=55, horse_weight=500)
        assert factor.calculate(entry) == 100

    def test_unknown_horse_weight_is_neutral(self, factor):
        """마체중이 없으면 50"""
        assert factor.calculate(RaceEntry("H1", burden_weight=55)) == 50


class TestComboFactor:
    """ComboFactor의 테스트"""

    @pytest.fixture
    def factor(self):
        return ComboFactor()

    def test_name(self, factor):
        """name은 'combo'"""
        assert factor.name == "combo"

    def test_requires_individual_win_rates(self, factor):
        """기수/조교사 승률이 없으면 None"""
        assert factor.calculate(RaceEntry("H1", combo_win_rate=25)) is None

    def test_synergy_score(self, factor):
        """충분한 표본이면 시너지 점수"""
        entry = RaceEntry(
            "H1",
            combo_win_rate=25,
            jockey_win_rate=15,
            trainer_win_rate=10,
            combo_starts=30,
        )
        assert factor.calculate(entry) == 78

    def test_small_sample_is_neutral(self, factor):
        """표본이 적으면 50"""
        entry = RaceEntry(
            "H1",
            combo_win_rate=25,
            jockey_win_rate=15,
            trainer_win_rate=10,
            combo_starts=2,
        )
        assert factor.calculate(entry) == 50
