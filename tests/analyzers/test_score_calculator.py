"""ScoreCalculator의 테스트"""

import logging

import pytest

from gyeongma.analyzers.factors import BurdenFactor, RaceEntry
from gyeongma.analyzers.score_calculator import ScoreCalculator
from gyeongma.config.weights import FACTOR_NAMES, FACTOR_WEIGHTS


@pytest.fixture
def full_entry():
    # 혈통 75 (블루치퍼, 1200m), 부담중량 100 (55/500), 콤보 78
    return RaceEntry(
        "H1",
        sire="블루치퍼",
        distance=1200,
        burden_weight=55,
        horse_weight=500,
        combo_win_rate=25,
        jockey_win_rate=15,
        trainer_win_rate=10,
        combo_starts=30,
    )


class TestWeights:
    """가중치 설정의 테스트"""

    def test_default_weights(self):
        """기본값은 FACTOR_WEIGHTS"""
        assert ScoreCalculator().get_weights() == FACTOR_WEIGHTS

    def test_get_weights_returns_copy(self):
        """반환된 가중치를 바꿔도 설정은 변하지 않는다"""
        calculator = ScoreCalculator()
        weights = calculator.get_weights()
        weights["combo"] = 0.0

        assert calculator.get_weights()["combo"] == FACTOR_WEIGHTS["combo"]

    def test_unknown_factor_weight_raises(self):
        """FACTOR_NAMES에 없는 가중치는 에러"""
        with pytest.raises(ValueError, match="odds"):
            ScoreCalculator(weights={"burden": 0.5, "odds": 0.5})

    def test_negative_weight_raises(self):
        """음수 가중치는 에러"""
        with pytest.raises(ValueError):
            ScoreCalculator(weights={"burden": -1.0})

    def test_partial_weights_allowed(self):
        """FACTOR_NAMES의 일부만 지정할 수 있다"""
        calculator = ScoreCalculator(weights={"burden": 1.0})
        assert set(calculator.get_weights()) <= set(FACTOR_NAMES)


class TestCalculateTotal:
    """calculate_total의 테스트"""

    def test_weighted_total(self):
        """80*0.3 + 100*0.3 + 50*0.4 = 74"""
        calculator = ScoreCalculator()
        total = calculator.calculate_total({"bloodline": 80, "burden": 100, "combo": 50})
        assert total == pytest.approx(74.0)

    def test_none_scores_are_ignored(self):
        """None은 제외하고 남은 가중치로 정규화한다"""
        calculator = ScoreCalculator()
        total = calculator.calculate_total({"bloodline": 80, "burden": 100, "combo": None})
        assert total == pytest.approx(90.0)

    def test_all_none(self):
        """모두 None이면 None"""
        calculator = ScoreCalculator()
        assert calculator.calculate_total({"bloodline": None, "burden": None}) is None

    def test_unweighted_factor_ignored(self):
        """가중치가 없는 Factor의 점수는 합계에 들어가지 않는다"""
        calculator = ScoreCalculator(weights={"burden": 1.0})
        assert calculator.calculate_total({"bloodline": 0, "burden": 40}) == pytest.approx(40.0)


class TestScoreEntry:
    """score_entry / score_entries의 테스트"""

    def test_all_factors(self, full_entry):
        """75*0.3 + 100*0.3 + 78*0.4 = 83.7"""
        result = ScoreCalculator().score_entry(full_entry)

        assert result.horse_id == "H1"
        assert result.factor_scores["bloodline"] == 75
        assert result.factor_scores["burden"] == 100
        assert result.factor_scores["combo"] == 78
        assert result.total == pytest.approx(83.7)

    def test_missing_combo_is_excluded(self):
        """기수/조교사 승률이 없으면 혈통과 부담중량만으로 정규화한다"""
        entry = RaceEntry(
            "H2", sire="블루치퍼", distance=1200, burden_weight=55, horse_weight=500
        )

        result = ScoreCalculator().score_entry(entry)

        assert result.factor_scores["combo"] is None
        assert result.total == pytest.approx(87.5)

    def test_no_inputs(self):
        """입력이 없으면 종합 점수도 None"""
        result = ScoreCalculator().score_entry(RaceEntry("H3"))

        assert set(result.factor_scores) == set(FACTOR_NAMES)
        assert all(score is None for score in result.factor_scores.values())
        assert result.total is None

    def test_factor_scores_are_read_only(self, full_entry):
        """결과의 Factor 점수는 변경할 수 없다"""
        result = ScoreCalculator().score_entry(full_entry)
        with pytest.raises(TypeError):
            result.factor_scores["combo"] = 0

    def test_custom_factors(self, full_entry):
        """사용할 Factor를 지정할 수 있다"""
        calculator = ScoreCalculator(factors=[BurdenFactor()])

        result = calculator.score_entry(full_entry)

        assert list(result.factor_scores) == ["burden"]
        assert result.total == pytest.approx(100.0)

    def test_score_entries_keeps_order(self, full_entry):
        """입력 순서대로 채점한다"""
        results = ScoreCalculator().score_entries([full_entry, RaceEntry("H3")])
        assert [r.horse_id for r in results] == ["H1", "H3"]

    def test_missing_inputs_are_logged(self, caplog):
        """입력 부족으로 건너뛴 Factor는 DEBUG 로그로 남는다"""
        with caplog.at_level(logging.DEBUG, logger="gyeongma.analyzers.score_calculator"):
            ScoreCalculator().score_entry(RaceEntry("H3", burden_weight=55))

        assert "Skipping bloodline for H3: missing sire, distance" in caplog.text
