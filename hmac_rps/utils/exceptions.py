"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional, Sequence


class GameException(Exception):
    """游戏逻辑异常基类"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class InvalidMoveSetException(GameException):
    """招式列表不合法（数量不是 >=3 的奇数、重复或为空）"""
    def __init__(self, message: str, moves: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.moves = list(moves) if moves is not None else None


class InvalidMoveException(GameException):
    """玩家招式不在招式列表中，可重新输入"""
    def __init__(self, message: str, move: Optional[str] = None):
        super().__init__(message)
        self.move = move


class AlreadyRevealedException(GameException):
    """回合已揭示，不能再次出招"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message, game_state=game_state)


class DigestMismatchException(GameException):
    """承诺校验失败：揭示的密钥和招式与公布的 HMAC 不一致"""
    def __init__(self, message: str,
                 digest_hex: Optional[str] = None,
                 key_hex: Optional[str] = None,
                 machine_move: Optional[str] = None):
        super().__init__(message)
        self.digest_hex = digest_hex
        self.key_hex = key_hex
        self.machine_move = machine_move


class ConfigurationException(Exception):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message
