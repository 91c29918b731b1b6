"""
游戏逻辑模块
Game Logic Module
"""
from .game_session import GameSession
from .arbiter import Arbiter, RoundHandle, RoundResult
from .game_logic import MoveSet, Outcome, OutcomeTable, GameStatistics, build_outcome_table, resolve
from .commitment import (
    RandomSource, SecureRandomSource, Commitment, CommitmentEngine, compute_digest, verify_commitment
)
from .state_machine import RoundState, RoundStateMachine
from .help_table import render_help_table

__all__ = [
    'GameSession',
    'Arbiter',
    'RoundHandle',
    'RoundResult',
    'MoveSet',
    'Outcome',
    'OutcomeTable',
    'GameStatistics',
    'build_outcome_table',
    'resolve',
    'RandomSource',
    'SecureRandomSource',
    'Commitment',
    'CommitmentEngine',
    'compute_digest',
    'verify_commitment',
    'RoundState',
    'RoundStateMachine',
    'render_help_table'
]
