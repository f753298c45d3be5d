"""Constants for Korean horse racing (KRA) analytics."""

# 한국마사회 경마장 코드
MEET_NAMES: dict[str, str] = {
    "1": "서울",
    "2": "제주",
    "3": "부산경남",
}

# 경마장명에서 코드로의 매핑
MEET_CODE_MAP: dict[str, str] = {name: code for code, name in MEET_NAMES.items()}

# 기본 경마장 (서울)
DEFAULT_MEET = "1"

# 주로 종류
SURFACES: tuple[str, ...] = ("dirt", "turf")
