"""
错误处理工具模块
Error Handler Utility Module
"""
import traceback
from typing import Optional, Callable
from .exceptions import (
    GameException, InvalidMoveSetException, InvalidMoveException,
    AlreadyRevealedException, DigestMismatchException, ConfigurationException
)
from .logger import get_logger

logger = get_logger("HMACRPS.ErrorHandler")


class ErrorHandler:
    """错误处理器类：记录异常，交由调用方决定后续处理（退出或重新输入）"""

    def __init__(self):
        """初始化错误处理器"""
        self.error_callbacks: dict = {}
        self.setup_default_handlers()

    def setup_default_handlers(self):
        """设置默认错误处理函数（子类在前，按注册顺序匹配）"""
        self.error_callbacks[InvalidMoveSetException] = self._handle_move_set_error
        self.error_callbacks[InvalidMoveException] = self._handle_move_error
        self.error_callbacks[AlreadyRevealedException] = self._handle_already_revealed
        self.error_callbacks[DigestMismatchException] = self._handle_digest_mismatch
        self.error_callbacks[GameException] = self._handle_game_error
        self.error_callbacks[ConfigurationException] = self._handle_config_error

    def register_handler(self, exception_type: type, handler: Callable):
        """
        注册错误处理函数

        Args:
            exception_type: 异常类型
            handler: 处理函数，参数为 (exception, context)
        """
        self.error_callbacks[exception_type] = handler
        logger.debug(f"注册错误处理函数: {exception_type.__name__}")

    def handle(self, exception: Exception, context: Optional[str] = None) -> bool:
        """
        处理异常

        Args:
            exception: 异常对象
            context: 上下文信息

        Returns:
            bool: 是否有匹配的处理函数并成功执行
        """
        exception_type = type(exception)

        handler = None
        for exc_type, handler_func in self.error_callbacks.items():
            if issubclass(exception_type, exc_type):
                handler = handler_func
                break

        if handler is None:
            self._handle_generic_error(exception, context)
            return False

        try:
            handler(exception, context)
            return True
        except Exception as e:
            logger.error(f"错误处理函数执行异常: {e}", exc_info=True)
            return False

    @staticmethod
    def _with_context(message: str, context: Optional[str]) -> str:
        if context:
            return f"{message} (上下文: {context})"
        return message

    def _handle_move_set_error(self, exception: InvalidMoveSetException, context: Optional[str]):
        """处理招式列表错误"""
        logger.error(self._with_context(
            f"招式列表不合法 {exception.moves}: {exception.message}", context))

    def _handle_move_error(self, exception: InvalidMoveException, context: Optional[str]):
        """处理玩家招式错误（可恢复）"""
        logger.info(self._with_context(
            f"无效招式 [{exception.move}]: {exception.message}", context))

    def _handle_already_revealed(self, exception: AlreadyRevealedException, context: Optional[str]):
        """处理重复出招（逻辑错误）"""
        logger.error(self._with_context(
            f"回合已揭示 [状态: {exception.game_state}]: {exception.message}", context))

    def _handle_digest_mismatch(self, exception: DigestMismatchException, context: Optional[str]):
        """处理承诺校验失败（公平性破坏）"""
        logger.critical(self._with_context(
            f"公平性校验失败 [HMAC: {exception.digest_hex}, "
            f"密钥: {exception.key_hex}, 电脑招式: {exception.machine_move}]: {exception.message}",
            context))

    def _handle_game_error(self, exception: GameException, context: Optional[str]):
        """处理游戏逻辑错误"""
        logger.error(self._with_context(
            f"游戏逻辑错误 [状态: {exception.game_state}]: {exception.message}", context))

    def _handle_config_error(self, exception: ConfigurationException, context: Optional[str]):
        """处理配置错误"""
        logger.error(self._with_context(
            f"配置错误 [键: {exception.config_key}]: {exception.message}", context))

    def _handle_generic_error(self, exception: Exception, context: Optional[str]):
        """处理通用错误"""
        logger.error(self._with_context(
            f"未处理的异常: {type(exception).__name__}: {exception}", context))
        logger.debug(traceback.format_exc())


# 全局错误处理器实例
global_error_handler = ErrorHandler()
