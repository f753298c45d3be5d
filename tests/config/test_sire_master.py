"""씨수마 마스터 (sire_master)의 테스트"""

import pytest

from gyeongma.config.sire_master import (
    DEFAULT_SIRE_APTITUDE,
    FAMOUS_SIRES,
    get_sire_aptitude,
    is_known_sire,
)


class TestFamousSires:
    """FAMOUS_SIRES 의 테스트"""

    def test_includes_key_sires(self):
        """주요 씨수마가 등록되어 있다"""
        for sire in ("에이피인디", "타핏", "블루치퍼"):
            assert sire in FAMOUS_SIRES

    @pytest.mark.parametrize("sire", list(FAMOUS_SIRES))
    def test_aptitudes_in_range(self, sire):
        """적성은 1-5 범위"""
        aptitude = FAMOUS_SIRES[sire]
        for key in ("distance_aptitude", "dirt_aptitude", "sprint_aptitude", "stayer_aptitude"):
            assert 1 <= aptitude[key] <= 5

    def test_read_only(self):
        """마스터는 변경할 수 없다"""
        with pytest.raises(TypeError):
            FAMOUS_SIRES["새씨수마"] = DEFAULT_SIRE_APTITUDE
        with pytest.raises(TypeError):
            FAMOUS_SIRES["타핏"]["distance_aptitude"] = 1


class TestGetSireAptitude:
    """get_sire_aptitude / is_known_sire 의 테스트"""

    def test_known(self):
        """블루치퍼는 더트 5"""
        assert is_known_sire("블루치퍼")
        assert get_sire_aptitude("블루치퍼")["dirt_aptitude"] == 5

    def test_unknown_returns_default(self):
        """미등록 씨수마는 기본값"""
        assert not is_known_sire("미등록씨수마")
        assert get_sire_aptitude("미등록씨수마") == DEFAULT_SIRE_APTITUDE
        assert DEFAULT_SIRE_APTITUDE["optimal_distance"] == 1600
