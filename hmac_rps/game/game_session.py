"""
游戏会话
Game Session - 面向命令行层的接口，整合裁判、承诺引擎和统计
"""
from typing import Optional, Sequence
from .arbiter import Arbiter, RoundHandle, RoundResult
from .commitment import CommitmentEngine, verify_commitment
from .game_logic import MoveSet, OutcomeTable, GameStatistics
from .state_machine import RoundState
from ..utils.exceptions import GameException, DigestMismatchException
from ..utils.logger import get_logger

logger = get_logger("HMACRPS.GameSession")


class GameSession:
    """游戏会话类：同一时间最多一个进行中的回合"""

    def __init__(self,
                 move_labels: Optional[Sequence[str]] = None,
                 engine: Optional[CommitmentEngine] = None):
        """
        初始化游戏会话

        Args:
            move_labels: 招式标签（可选，也可以在 begin_round 时提供）
            engine: 承诺引擎（可选）

        Raises:
            InvalidMoveSetException: 招式列表不合法
        """
        self.arbiter = Arbiter(engine)
        self.moves: Optional[MoveSet] = MoveSet.of(move_labels) if move_labels is not None else None
        self.statistics = GameStatistics()
        self._current: Optional[RoundHandle] = None

    @property
    def outcome_table(self) -> OutcomeTable:
        """当前招式集合的胜负表"""
        if self.moves is None:
            raise GameException("No move set configured for this session.")
        return self.arbiter.outcome_table(self.moves)

    @property
    def current_round(self) -> Optional[RoundHandle]:
        """当前回合句柄（可能已揭示）"""
        return self._current

    @property
    def hash_algorithm(self) -> str:
        return self.arbiter.engine.hash_algorithm

    def begin_round(self, move_labels: Optional[Sequence[str]] = None) -> str:
        """
        开始新回合并返回 HMAC（小写十六进制）

        未出招的旧回合被放弃，其承诺不会被揭示。

        Args:
            move_labels: 招式标签，省略时沿用会话的招式集合

        Returns:
            str: HMAC十六进制字符串

        Raises:
            InvalidMoveSetException: 招式列表不合法
            GameException: 会话没有招式集合
        """
        if move_labels is not None:
            self.moves = MoveSet.of(move_labels)
        if self.moves is None:
            raise GameException("No move set configured for this session.")

        if self._current is not None and self._current.state == RoundState.COMMITTED:
            logger.info(f"放弃未出招的回合 {self._current.round_id}")

        digest_hex, self._current = self.arbiter.begin(self.moves)
        return digest_hex

    def play_round(self, human_move_label: str) -> RoundResult:
        """
        在当前回合出招

        Args:
            human_move_label: 玩家招式（区分大小写）

        Returns:
            RoundResult: 回合结果，to_dict() 包含 human_move, machine_move,
                outcome, key_hex, digest_hex

        Raises:
            GameException: 尚未开始回合
            InvalidMoveException: 招式不存在，回合仍可继续
            AlreadyRevealedException: 当前回合已揭示
        """
        if self._current is None:
            raise GameException("No round in progress; call begin_round first.")

        result = self.arbiter.play(self._current, human_move_label)
        self.statistics.record(result.outcome)
        return result

    def verify(self, key_hex: str, machine_move: str, digest_hex: str) -> bool:
        """
        用公开的值校验承诺（与会话状态无关）

        Returns:
            bool: 承诺是否成立
        """
        return verify_commitment(key_hex, machine_move, digest_hex, self.hash_algorithm)

    def confirm_round(self, result: RoundResult):
        """
        校验回合结果，不一致时抛出异常

        Args:
            result: 回合结果

        Raises:
            DigestMismatchException: HMAC 与揭示的密钥和招式不一致
        """
        if not self.arbiter.verify_round(result):
            raise DigestMismatchException(
                "Revealed key and move do not match the published HMAC.",
                digest_hex=result.digest_hex,
                key_hex=result.key_hex,
                machine_move=result.machine_move)
        logger.debug(f"回合承诺校验通过: HMAC={result.digest_hex}")
