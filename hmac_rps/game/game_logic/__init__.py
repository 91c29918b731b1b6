"""
游戏逻辑模块
Game Logic Module
"""
from .move_set import MoveSet
from .outcome_table import Outcome, OutcomeTable, build_outcome_table, resolve
from .statistics import GameStatistics

__all__ = [
    'MoveSet',
    'Outcome',
    'OutcomeTable',
    'build_outcome_table',
    'resolve',
    'GameStatistics'
]
