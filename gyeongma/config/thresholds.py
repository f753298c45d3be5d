"""분석 임계값 설정

거리 구분, 부담중량 상수, 콤보 시너지 등급 경계를 정의한다.
"""

# 거리 카테고리 (m, 양끝 포함)
DISTANCE_CATEGORIES = {
    "sprint": {"min": 0, "max": 1200, "label": "단거리"},
    "mile": {"min": 1201, "max": 1600, "label": "마일"},
    "middle": {"min": 1601, "max": 2000, "label": "중거리"},
    "long": {"min": 2001, "max": 9999, "label": "장거리"},
}

# 혈통 적성 카테고리별 거리 적합도 (적성 1=단거리 ... 5=장거리)
DISTANCE_FIT_TABLE: dict[str, dict[int, int]] = {
    "sprint": {1: 100, 2: 75, 3: 50, 4: 30, 5: 10},
    "mile": {1: 60, 2: 90, 3: 80, 4: 90, 5: 50},
    "middle": {1: 30, 2: 60, 3: 100, 4: 80, 5: 70},
    "long": {1: 10, 2: 40, 3: 70, 4: 85, 5: 100},
}

BURDEN_CONSTANTS = {
    "OPTIMAL_RATIO": 11.0,  # 마체중 대비 최적 부담비율 (%)
    "ACCEPTABLE_DEVIATION": 0.5,  # 허용 편차 (%p)
    "SCORE_PER_DEVIATION": 25.0,  # 허용 편차 초과 1%p당 감점
    "KG_PER_LENGTH": 1.0,  # 1kg ≈ 1마신
    "LENGTH_METERS": 2.5,  # 1마신 거리 (m)
    "YOUNG_AGE": 3,  # 이 연령 이하는 최적 비율을 낮춘다
    "YOUNG_RATIO_ADJUSTMENT": 0.3,
    "SLIGHTLY_HEAVY_MAX": 1.0,
    "HEAVY_MAX": 2.0,
    "ADVANTAGE_PER_KG": 10.0,  # 상대 평균 대비 1kg 경량 = +10점
    "RECOMMENDATION_TOLERANCE_KG": 1.0,  # 최적 부담중량과의 차이가 이 이내면 적정 범위
}

# 시너지 등급별 최저 점수
SYNERGY_GRADE_THRESHOLDS = {
    "S": 85,
    "A": 70,
    "B": 50,
    "C": 30,
    "D": 0,
}

# 등급 순서 (좋은 순)
SYNERGY_GRADE_ORDER = ("S", "A", "B", "C", "D")

COMBO_CONSTANTS = {
    "MIN_STARTS_FOR_PREDICTION": 3,  # 이 미만이면 예측에 중립값 사용
    "POSITIVE_SYNERGY_MARGIN": 1.1,  # 기대 승률 대비 10% 이상 상승
    "HIGH_RELIABILITY_STARTS": 30,
    "MEDIUM_RELIABILITY_STARTS": 10,
    "RECENT_FORM_RACES": 5,
}
