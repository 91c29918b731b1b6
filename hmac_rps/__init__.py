"""
HMAC 剪刀石头布
Generalized rock-paper-scissors with a provably fair computer move
"""
from .game import (
    GameSession,
    Arbiter,
    RoundHandle,
    RoundResult,
    MoveSet,
    Outcome,
    OutcomeTable,
    CommitmentEngine,
    RandomSource,
    SecureRandomSource,
    build_outcome_table,
    verify_commitment
)
from .utils.exceptions import (
    GameException,
    InvalidMoveSetException,
    InvalidMoveException,
    AlreadyRevealedException,
    DigestMismatchException,
    ConfigurationException
)

__version__ = "1.0.0"

__all__ = [
    'GameSession',
    'Arbiter',
    'RoundHandle',
    'RoundResult',
    'MoveSet',
    'Outcome',
    'OutcomeTable',
    'CommitmentEngine',
    'RandomSource',
    'SecureRandomSource',
    'build_outcome_table',
    'verify_commitment',
    'GameException',
    'InvalidMoveSetException',
    'InvalidMoveException',
    'AlreadyRevealedException',
    'DigestMismatchException',
    'ConfigurationException'
]
