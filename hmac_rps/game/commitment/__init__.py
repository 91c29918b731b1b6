"""
承诺模块
Commitment Module
"""
from .random_source import RandomSource, SecureRandomSource
from .commitment_engine import (
    Commitment, CommitmentEngine, compute_digest, verify_commitment, check_hash_algorithm
)

__all__ = [
    'RandomSource',
    'SecureRandomSource',
    'Commitment',
    'CommitmentEngine',
    'compute_digest',
    'verify_commitment',
    'check_hash_algorithm'
]
