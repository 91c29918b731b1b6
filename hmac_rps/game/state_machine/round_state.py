"""
回合状态枚举
Round State Enumeration
"""
from enum import Enum, auto


class RoundState(Enum):
    """回合状态枚举"""
    COMMITTED = auto()   # 已公布HMAC，密钥和电脑招式保密
    REVEALED = auto()    # 已出招并揭示密钥和电脑招式（终止状态）

    def __str__(self):
        return self.name
