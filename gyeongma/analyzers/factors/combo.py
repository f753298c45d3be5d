"""ComboFactor - 기수-조교사 콤보 Factor"""

from gyeongma.analyzers.combo import get_combo_score_for_prediction
from gyeongma.analyzers.factors.base import BaseFactor, RaceEntry


class ComboFactor(BaseFactor):
    """기수-조교사 콤보 시너지에 기반한 점수 계산

    콤보 승률이 없거나 표본이 적으면 get_combo_score_for_prediction 이 중립값 50을 준다.
    """

    name = "combo"
    required_fields = ("jockey_win_rate", "trainer_win_rate")

    def _score(self, entry: RaceEntry) -> float:
        return get_combo_score_for_prediction(
            entry.combo_win_rate,
            entry.jockey_win_rate,
            entry.trainer_win_rate,
            entry.combo_starts,
            entry.recent_form,
        )
