"""weights.py 의 설정값 테스트"""


class TestBloodlineWeights:
    """BLOODLINE_WEIGHTS 의 설정 테스트"""

    def test_sire_weight(self):
        """부마 가중치는 70%"""
        from gyeongma.config.weights import BLOODLINE_WEIGHTS

        assert BLOODLINE_WEIGHTS["sire"] == 0.7

    def test_grandsire_weight(self):
        """외조부마 가중치는 30%"""
        from gyeongma.config.weights import BLOODLINE_WEIGHTS

        assert BLOODLINE_WEIGHTS["grandsire"] == 0.3

    def test_sum_to_one(self):
        """합계가 정확히 1"""
        from gyeongma.config.weights import BLOODLINE_WEIGHTS

        assert BLOODLINE_WEIGHTS["sire"] + BLOODLINE_WEIGHTS["grandsire"] == 1


class TestFactorWeights:
    """FACTOR_WEIGHTS / FACTOR_NAMES 의 설정 테스트"""

    def test_factor_weights_sum_to_one(self):
        """FACTOR_WEIGHTS 의 합계가 1.0"""
        from gyeongma.config.weights import FACTOR_WEIGHTS

        total = sum(FACTOR_WEIGHTS.values())
        assert abs(total - 1.0) < 0.001  # 부동소수점 오차 허용

    def test_factor_names_match_weights(self):
        """FACTOR_NAMES 가 FACTOR_WEIGHTS 의 키 순서와 일치한다"""
        from gyeongma.config.weights import FACTOR_NAMES, FACTOR_WEIGHTS

        assert FACTOR_NAMES == tuple(FACTOR_WEIGHTS.keys())

    def test_factor_names_match_factor_classes(self):
        """각 Factor 클래스의 name 이 가중치 키와 일치한다"""
        from gyeongma.analyzers.factors import BloodlineFactor, BurdenFactor, ComboFactor
        from gyeongma.config.weights import FACTOR_NAMES

        names = {BloodlineFactor.name, BurdenFactor.name, ComboFactor.name}
        assert names == set(FACTOR_NAMES)

    def test_combo_has_largest_weight(self):
        """콤보 시너지가 가장 높은 가중치를 가진다"""
        from gyeongma.config.weights import FACTOR_WEIGHTS

        other_weights = [v for k, v in FACTOR_WEIGHTS.items() if k != "combo"]
        assert FACTOR_WEIGHTS["combo"] > max(other_weights)
