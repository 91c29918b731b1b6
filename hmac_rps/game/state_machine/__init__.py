"""
回合状态机模块
Round State Machine Module
"""
from .round_state import RoundState
from .round_state_machine import RoundStateMachine

__all__ = ['RoundState', 'RoundStateMachine']
