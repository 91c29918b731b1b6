"""
会话统计
Session Statistics
"""
from typing import Optional
from dataclasses import dataclass
from datetime import datetime
from .outcome_table import Outcome


@dataclass
class GameStatistics:
    """本次进程内的游戏统计信息（不持久化）"""
    total_rounds: int = 0
    player_wins: int = 0
    player_losses: int = 0
    draws: int = 0
    start_time: Optional[datetime] = None
    last_round_time: Optional[datetime] = None

    def record(self, outcome: Outcome):
        """
        记录一个已揭示回合的结果

        Args:
            outcome: 玩家视角的结果
        """
        now = datetime.now()
        if self.start_time is None:
            self.start_time = now
        self.last_round_time = now

        self.total_rounds += 1
        if outcome == Outcome.WIN:
            self.player_wins += 1
        elif outcome == Outcome.LOSE:
            self.player_losses += 1
        else:
            self.draws += 1

    def get_win_rate(self) -> float:
        """
        获取玩家胜率

        Returns:
            float: 胜率（0.0-1.0）
        """
        if self.total_rounds == 0:
            return 0.0
        return self.player_wins / self.total_rounds

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'total_rounds': self.total_rounds,
            'player_wins': self.player_wins,
            'player_losses': self.player_losses,
            'draws': self.draws,
            'win_rate': self.get_win_rate(),
            'start_time': self.start_time.isoformat() if self.start_time else None,
            'last_round_time': self.last_round_time.isoformat() if self.last_round_time else None
        }
