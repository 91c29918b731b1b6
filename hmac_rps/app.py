"""
应用程序主类
Application Main Class
"""
import yaml
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence
from .game import GameSession, CommitmentEngine, RandomSource, RoundResult, render_help_table
from .utils.config_loader import ConfigLoader
from .utils.error_handler import global_error_handler
from .utils.exceptions import (
    InvalidMoveSetException, InvalidMoveException, DigestMismatchException, ConfigurationException
)
from .utils.logger import get_logger, setup_logger, setup_logger_from_config
from .utils.validation import MoveValidator

logger = get_logger("HMACRPS.App")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FAIRNESS_VIOLATION = 2

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"


class Application:
    """应用程序主类：读取配置、收集招式并运行交互式对局"""

    def __init__(self,
                 config_path: Optional[str] = None,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print,
                 random_source: Optional[RandomSource] = None):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径，省略时使用 config/config.yaml（不存在则用默认配置）
            input_func: 读取用户输入的函数
            output_func: 输出文本的函数
            random_source: 随机源（可选，测试时注入）
        """
        setup_logger()

        self.explicit_config = config_path is not None
        self.config_path = str(config_path) if config_path else str(DEFAULT_CONFIG_PATH)
        self.config: Dict[str, Any] = {}
        self.input = input_func
        self.output = output_func
        self.random_source = random_source
        self.session: Optional[GameSession] = None

    def initialize(self, move_labels: Optional[Sequence[str]] = None) -> bool:
        """
        初始化所有组件

        Args:
            move_labels: 命令行给出的招式，为空时交互式输入

        Returns:
            bool: 初始化是否成功
        """
        if not self._load_config():
            return False

        setup_logger_from_config(ConfigLoader.get_logging_config(self.config))

        try:
            engine = CommitmentEngine.from_config(
                ConfigLoader.get_crypto_config(self.config), self.random_source)
        except ConfigurationException as e:
            global_error_handler.handle(e, "创建承诺引擎")
            self.output(f"Configuration error: {e.message}")
            return False

        if not move_labels:
            move_labels = self._prompt_moves()

        try:
            self.session = GameSession(move_labels, engine=engine)
        except InvalidMoveSetException as e:
            global_error_handler.handle(e, "校验招式")
            for line in MoveValidator.describe_error(e):
                self.output(line)
            return False

        logger.info(f"应用程序初始化完成, 招式: {self.session.moves}")
        return True

    def _load_config(self) -> bool:
        """加载配置文件并与默认配置合并"""
        try:
            loaded = ConfigLoader.load_config(self.config_path)
        except FileNotFoundError:
            if self.explicit_config:
                logger.error(f"配置文件不存在: {self.config_path}")
                self.output(f"Config file not found: {self.config_path}")
                return False
            logger.warning(f"未找到配置文件 {self.config_path}，使用默认配置")
            loaded = {}
        except yaml.YAMLError as e:
            global_error_handler.handle(ConfigurationException(str(e)), "加载配置")
            self.output(f"Could not parse config file: {self.config_path}")
            return False

        if not isinstance(loaded, dict):
            global_error_handler.handle(
                ConfigurationException("配置文件顶层必须是映射"), "加载配置")
            self.output(f"Invalid config file: {self.config_path}")
            return False

        try:
            self.config = ConfigLoader.merge_with_defaults(loaded)
        except ConfigurationException as e:
            global_error_handler.handle(e, "加载配置")
            self.output(f"Configuration error: {e.message}")
            return False
        return True

    def _prompt_moves(self) -> List[str]:
        """交互式输入招式数量和每个招式"""
        game_config = ConfigLoader.get_game_config(self.config)
        strip_whitespace = game_config.get('strip_whitespace', True)
        max_length = game_config.get('max_move_length', 10)

        count = 0
        while not MoveValidator.is_valid_count(count):
            raw = self.input("Enter the number of moves (odd number, at least 3): ").strip()
            count = int(raw) if raw.isdecimal() else 0
            if not MoveValidator.is_valid_count(count):
                self.output("Invalid number of moves. Enter an odd number that is at least 3.")

        moves: List[str] = []
        while len(moves) < count:
            move = MoveValidator.normalize_label(
                self.input("Enter a move: "), strip_whitespace, max_length)
            if not move:
                self.output("Move cannot be empty. Please enter a valid move.")
                continue
            if move in moves:
                self.output(f'Move "{move}" has already been entered. Please enter a different move.')
                continue
            moves.append(move)
        return moves

    def start(self, move_labels: Optional[Sequence[str]] = None) -> int:
        """
        启动应用程序

        Returns:
            int: 进程退出码
        """
        try:
            if not self.initialize(move_labels):
                return EXIT_ERROR
            return self.run()
        except (KeyboardInterrupt, EOFError):
            self.output("")
            self.output("Goodbye!")
            return EXIT_OK
        finally:
            if self.session is not None:
                self._show_summary()

    def run(self) -> int:
        """
        主循环：每回合先公布 HMAC，再接受玩家招式

        Returns:
            int: 进程退出码
        """
        moves = self.session.moves
        self.output(f"Welcome to {moves}!")

        while True:
            digest_hex = self.session.begin_round()
            self.output("")
            self.output(f"HMAC: {digest_hex}")

            result = self._read_move_and_play()
            if result is None:
                self.output("Goodbye!")
                return EXIT_OK

            self._show_result(result)

            try:
                self.session.confirm_round(result)
            except DigestMismatchException as e:
                global_error_handler.handle(e, "公平性校验")
                self.output("FAIRNESS VIOLATION: the revealed key and computer move "
                            "do not match the HMAC published before your move.")
                return EXIT_FAIRNESS_VIOLATION

            self.output("Fairness check: HMAC verified.")

    def _read_move_and_play(self) -> Optional[RoundResult]:
        """读取玩家输入直到成功出招；选择退出时返回None"""
        while True:
            self._display_menu()
            choice = self.input("Enter your choice: ").strip()

            if choice == '?':
                self.output(render_help_table(self.session.outcome_table))
                continue
            if choice == '0':
                return None

            try:
                return self.session.play_round(self._choice_to_label(choice))
            except InvalidMoveException as e:
                global_error_handler.handle(e, "出招")
                self.output("Invalid move. Please try again.")

    def _choice_to_label(self, choice: str) -> str:
        """
        输入转换为招式标签

        与招式标签完全一致时优先按标签处理，否则按菜单编号处理，其他输入原样返回。
        标签为 "0" 或 "?" 的招式只能通过菜单编号选择。
        """
        moves = self.session.moves
        if choice in moves:
            return choice
        if choice.isdecimal() and 1 <= int(choice) <= len(moves):
            return moves[int(choice) - 1]
        return choice

    def _display_menu(self):
        self.output("Available moves:")
        for index, move in enumerate(self.session.moves, start=1):
            self.output(f"{index} - {move}")
        self.output("0 - Exit")
        self.output("? - Help")

    def _show_result(self, result: RoundResult):
        self.output(f"Your move: {result.human_move}")
        self.output(f"Computer move: {result.machine_move}")
        self.output(f"Result: {result.outcome}")
        self.output(f"Key: {result.key_hex}")

    def _show_summary(self):
        stats = self.session.statistics
        if stats.total_rounds == 0:
            return
        self.output(f"Rounds played: {stats.total_rounds}, wins: {stats.player_wins}, "
                    f"losses: {stats.player_losses}, draws: {stats.draws}")
