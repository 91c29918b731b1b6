"""
回合状态机
Round State Machine
"""
from typing import Optional, Dict, List
from .round_state import RoundState
from ...utils.exceptions import AlreadyRevealedException, GameException
from ...utils.logger import get_logger

logger = get_logger("HMACRPS.RoundStateMachine")


class RoundStateMachine:
    """回合状态机类：COMMITTED -> REVEALED，只允许一次转换"""

    # 状态转换规则
    VALID_TRANSITIONS: Dict[RoundState, List[RoundState]] = {
        RoundState.COMMITTED: [RoundState.REVEALED],
        RoundState.REVEALED: []
    }

    def __init__(self):
        """初始化状态机，回合总是从 COMMITTED 开始"""
        self.current_state = RoundState.COMMITTED
        self.previous_state: Optional[RoundState] = None

    def transition_to(self, new_state: RoundState):
        """
        转换到新状态

        Args:
            new_state: 新状态

        Raises:
            AlreadyRevealedException: 回合已处于终止状态
            GameException: 其他无效转换
        """
        if self.current_state == RoundState.REVEALED:
            raise AlreadyRevealedException("Round has already been revealed.",
                                           game_state=str(self.current_state))

        if not self.can_transition_to(new_state):
            raise GameException(f"无效的状态转换: {self.current_state} -> {new_state}",
                                game_state=str(self.current_state))

        self.previous_state = self.current_state
        self.current_state = new_state
        logger.debug(f"状态转换: {self.previous_state} -> {new_state}")

    def get_current_state(self) -> RoundState:
        """获取当前状态"""
        return self.current_state

    def can_transition_to(self, state: RoundState) -> bool:
        """
        检查是否可以转换到指定状态

        Args:
            state: 目标状态

        Returns:
            bool: 是否可以转换
        """
        return state in self.VALID_TRANSITIONS.get(self.current_state, [])

    def is_in_state(self, state: RoundState) -> bool:
        """检查是否在指定状态"""
        return self.current_state == state
