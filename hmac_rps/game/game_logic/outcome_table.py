"""
胜负表实现
Outcome Table Implementation
"""
from typing import Sequence, Tuple
from enum import Enum
from .move_set import MoveSet
from ...utils.logger import get_logger

logger = get_logger("HMACRPS.OutcomeTable")


class Outcome(Enum):
    """结果枚举（始终从玩家视角）"""
    WIN = "Win"      # 玩家获胜
    LOSE = "Lose"    # 玩家失败
    DRAW = "Draw"    # 平局

    def __str__(self):
        return self.value


class OutcomeTable:
    """
    N×N 胜负表，table[i][j] 为第 i 个招式对第 j 个招式的结果

    规则（循环相邻）：
      i == j               -> Draw
      j == (i + 1) mod N   -> Win
      其他                 -> Lose
    N == 3 时与经典剪刀石头布一致；N >= 5 时不相邻的两个招式互判为 Lose。
    """

    def __init__(self, moves: MoveSet, rows: Tuple[Tuple[Outcome, ...], ...]):
        self._moves = moves
        self._rows = rows

    @classmethod
    def build(cls, moves: MoveSet) -> "OutcomeTable":
        """
        根据招式集合构建胜负表

        Args:
            moves: 已校验的招式集合

        Returns:
            OutcomeTable: 胜负表
        """
        count = len(moves)
        rows = []
        for i in range(count):
            row = []
            for j in range(count):
                if i == j:
                    row.append(Outcome.DRAW)
                elif (i + 1) % count == j:
                    row.append(Outcome.WIN)
                else:
                    row.append(Outcome.LOSE)
            rows.append(tuple(row))

        logger.debug(f"构建胜负表: {count}x{count} ({moves})")
        return cls(moves, tuple(rows))

    @property
    def moves(self) -> MoveSet:
        """招式集合"""
        return self._moves

    @property
    def rows(self) -> Tuple[Tuple[Outcome, ...], ...]:
        """表格行（只读）"""
        return self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> Tuple[Outcome, ...]:
        return self._rows[index]

    def resolve(self, human_index: int, machine_index: int) -> Outcome:
        """
        查表得到玩家视角的结果

        Args:
            human_index: 玩家招式下标（行）
            machine_index: 电脑招式下标（列）

        Returns:
            Outcome: 结果
        """
        return self._rows[human_index][machine_index]


def build_outcome_table(move_labels: Sequence[str]) -> OutcomeTable:
    """
    由招式标签构建胜负表

    Raises:
        InvalidMoveSetException: 招式列表不合法
    """
    return OutcomeTable.build(MoveSet.of(move_labels))


def resolve(table: OutcomeTable, human_index: int, machine_index: int) -> Outcome:
    """table[human_index][machine_index]"""
    return table.resolve(human_index, machine_index)
