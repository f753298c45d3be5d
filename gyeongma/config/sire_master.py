"""씨수마 마스터 데이터

국내 주요 씨수마의 거리/주로 적성을 정의한다. 프로세스 시작 시 한 번 생성되며
이후 변경되지 않는다.
"""

from types import MappingProxyType

# 미등록 씨수마에 적용하는 기본 적성
DEFAULT_SIRE_APTITUDE = MappingProxyType(
    {
        "distance_aptitude": 3,
        "optimal_distance": 1600,
        "dirt_aptitude": 3,
        "sprint_aptitude": 3,
        "stayer_aptitude": 3,
    }
)

# 자마 수 (신뢰도 판정용 표본 크기)
KNOWN_SIRE_OFFSPRING = 50
UNKNOWN_SIRE_OFFSPRING = 10

# 씨수마별 적성 (1-5)
FAMOUS_SIRES = MappingProxyType(
    {
        "에이피인디": MappingProxyType(
            {
                "distance_aptitude": 3,
                "optimal_distance": 1600,
                "dirt_aptitude": 4,
                "sprint_aptitude": 2,
                "stayer_aptitude": 3,
            }
        ),
        "타핏": MappingProxyType(
            {
                "distance_aptitude": 4,
                "optimal_distance": 1800,
                "dirt_aptitude": 4,
                "sprint_aptitude": 2,
                "stayer_aptitude": 4,
            }
        ),
        "메니피크": MappingProxyType(
            {
                "distance_aptitude": 3,
                "optimal_distance": 1400,
                "dirt_aptitude": 4,
                "sprint_aptitude": 3,
                "stayer_aptitude": 2,
            }
        ),
        "블루치퍼": MappingProxyType(
            {
                "distance_aptitude": 2,
                "optimal_distance": 1200,
                "dirt_aptitude": 5,
                "sprint_aptitude": 5,
                "stayer_aptitude": 1,
            }
        ),
        "퓨처윈": MappingProxyType(
            {
                "distance_aptitude": 3,
                "optimal_distance": 1600,
                "dirt_aptitude": 4,
                "sprint_aptitude": 3,
                "stayer_aptitude": 3,
            }
        ),
    }
)


def is_known_sire(sire_name: str) -> bool:
    """씨수마가 마스터에 등록되어 있는지 확인한다"""
    return sire_name in FAMOUS_SIRES


def get_sire_aptitude(sire_name: str) -> MappingProxyType:
    """씨수마의 적성 데이터를 취득한다

    Args:
        sire_name: 씨수마명

    Returns:
        적성 데이터 (미등록 씨수마는 기본값)
    """
    return FAMOUS_SIRES.get(sire_name, DEFAULT_SIRE_APTITUDE)
