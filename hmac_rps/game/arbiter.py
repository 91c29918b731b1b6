"""
裁判
Arbiter - 先公布承诺，再接受玩家招式，最后揭示密钥
"""
import functools
import itertools
import threading
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from .commitment import Commitment, CommitmentEngine
from .game_logic import MoveSet, Outcome, OutcomeTable
from .state_machine import RoundState, RoundStateMachine
from ..utils.exceptions import AlreadyRevealedException
from ..utils.logger import get_logger

logger = get_logger("HMACRPS.Arbiter")

_round_ids = itertools.count(1)

TABLE_CACHE_SIZE = 32


@functools.lru_cache(maxsize=TABLE_CACHE_SIZE)
def _cached_table(moves: MoveSet) -> OutcomeTable:
    return OutcomeTable.build(moves)


@dataclass(frozen=True)
class RoundResult:
    """回合结果：所有字段在揭示后都可以公开"""
    human_move: str
    machine_move: str
    outcome: Outcome
    revealed_key: bytes
    digest: bytes
    algorithm: str

    @property
    def key_hex(self) -> str:
        return self.revealed_key.hex()

    @property
    def digest_hex(self) -> str:
        return self.digest.hex()

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'human_move': self.human_move,
            'machine_move': self.machine_move,
            'outcome': self.outcome.value,
            'key_hex': self.key_hex,
            'digest_hex': self.digest_hex
        }


class RoundHandle:
    """
    一个回合的句柄

    持有承诺（含密钥和电脑招式），对外只暴露 HMAC 和状态。
    """

    def __init__(self, table: OutcomeTable, commitment: Commitment):
        self.round_id = next(_round_ids)
        self.table = table
        self._commitment = commitment
        self._state_machine = RoundStateMachine()
        self._lock = threading.Lock()

    @property
    def moves(self) -> MoveSet:
        return self.table.moves

    @property
    def digest_hex(self) -> str:
        return self._commitment.digest_hex

    @property
    def state(self) -> RoundState:
        return self._state_machine.get_current_state()

    def __repr__(self):
        return f"RoundHandle(round_id={self.round_id}, state={self.state}, digest={self.digest_hex})"


class Arbiter:
    """裁判类：每个回合独立承诺，胜负表按招式集合有界缓存"""

    def __init__(self, engine: Optional[CommitmentEngine] = None):
        """
        初始化裁判

        Args:
            engine: 承诺引擎，默认使用安全随机源
        """
        self.engine = engine or CommitmentEngine()

    def outcome_table(self, moves: Sequence[str]) -> OutcomeTable:
        """
        获取招式集合对应的胜负表（最近使用的 TABLE_CACHE_SIZE 个招式集合会被缓存）

        Raises:
            InvalidMoveSetException: 招式列表不合法
        """
        return _cached_table(MoveSet.of(moves))

    def begin(self, moves: Sequence[str]) -> Tuple[str, RoundHandle]:
        """
        开始一个回合：生成新的承诺，只公布 HMAC

        Args:
            moves: 招式集合或标签序列

        Returns:
            Tuple[str, RoundHandle]: (HMAC十六进制, 回合句柄)

        Raises:
            InvalidMoveSetException: 招式列表不合法
        """
        table = self.outcome_table(moves)
        handle = RoundHandle(table, self.engine.commit(table.moves))
        logger.info(f"回合 {handle.round_id} 开始, HMAC: {handle.digest_hex}")
        return handle.digest_hex, handle

    def play(self, handle: RoundHandle, human_move_label: str) -> RoundResult:
        """
        接受玩家招式，判定结果并揭示密钥和电脑招式

        Args:
            handle: begin() 返回的回合句柄
            human_move_label: 玩家招式（区分大小写）

        Returns:
            RoundResult: 回合结果

        Raises:
            AlreadyRevealedException: 回合已揭示
            InvalidMoveException: 玩家招式不在招式集合中（回合保持 COMMITTED）
        """
        with handle._lock:
            if not handle._state_machine.is_in_state(RoundState.COMMITTED):
                raise AlreadyRevealedException(
                    f"Round {handle.round_id} has already been revealed.",
                    game_state=str(handle.state))

            human_index = handle.moves.index_of(human_move_label)
            commitment = handle._commitment
            machine_index = commitment.committed_move_index
            outcome = handle.table.resolve(human_index, machine_index)

            result = RoundResult(
                human_move=handle.moves[human_index],
                machine_move=handle.moves[machine_index],
                outcome=outcome,
                revealed_key=commitment.secret_key,
                digest=commitment.digest,
                algorithm=commitment.algorithm
            )
            handle._state_machine.transition_to(RoundState.REVEALED)

        logger.info(f"回合 {handle.round_id}: 玩家 {result.human_move} vs 电脑 {result.machine_move} -> {outcome}")
        return result

    @staticmethod
    def verify_round(result: RoundResult) -> bool:
        """
        只用回合结果中公开的值重新计算 HMAC 并比较

        Args:
            result: 回合结果

        Returns:
            bool: 承诺是否成立
        """
        return CommitmentEngine.verify_digest(result.digest, result.revealed_key,
                                              result.machine_move, result.algorithm)
