# Chara Engine - Core modules
from .signs import SIGNS, Direction, Sign, sign_at, position_of, is_odd_sign, sign_from_longitude
from .durations import sign_dasha_years, resolve_lord_positions
from .sequence import sign_sequence
from .partition import PeriodNode, partition, years_to_days
from .chara_dasha import PeriodTree, build_period_tree, active_periods_at, active_path_at
from .karakas import compute_chara_karakas, karakamsha
from .errors import CharaEngineError, MissingLordPositionError, EmptyPartitionError

__all__ = [
    "SIGNS", "Direction", "Sign", "sign_at", "position_of", "is_odd_sign", "sign_from_longitude",
    "sign_dasha_years", "resolve_lord_positions",
    "sign_sequence",
    "PeriodNode", "partition", "years_to_days",
    "PeriodTree", "build_period_tree", "active_periods_at", "active_path_at",
    "compute_chara_karakas", "karakamsha",
    "CharaEngineError", "MissingLordPositionError", "EmptyPartitionError",
]
