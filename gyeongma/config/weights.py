"""가중치 설정

혈통 합성 비율과 예측용 Factor 가중치를 정의한다. 각각 합계는 1.0이 되어야 한다.
"""

# 부마:외조부마 = 7:3 (부계가 거리/주로 적성을 주도한다는 연구 결과)
BLOODLINE_WEIGHTS = {
    "sire": 0.7,  # 부마: 70%
    "grandsire": 0.3,  # 외조부마: 30%
}

FACTOR_WEIGHTS = {
    "bloodline": 0.3,  # 혈통 적성: 30%
    "burden": 0.3,  # 부담중량 적합도: 30%
    "combo": 0.4,  # 기수-조교사 시너지: 40% (특정 콤보는 승률 30-40% 상승)
}

# FACTOR_WEIGHTS의 키를 이뮤터블한 튜플로 제공
FACTOR_NAMES = tuple(FACTOR_WEIGHTS.keys())
