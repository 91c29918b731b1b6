"""
HMAC 剪刀石头布主程序入口
HMAC Rock Paper Scissors Main Entry
"""
import sys
import argparse
from typing import List, Optional

from .app import Application, EXIT_ERROR
from .utils.logger import get_logger

logger = get_logger("HMACRPS.Main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hmac-rps',
        description='Generalized rock-paper-scissors with an HMAC commitment '
                    'to the computer move')
    parser.add_argument(
        'moves',
        nargs='*',
        help='odd number (at least 3) of unique moves, e.g. Rock Paper Scissors; '
             'prompted for when omitted'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（默认: config/config.yaml）'
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """主函数"""
    args = build_parser().parse_args(argv)

    app = Application(config_path=args.config)

    try:
        exit_code = app.start(args.moves)
    except Exception as e:
        logger.error(f"程序异常退出: {e}", exc_info=True)
        exit_code = EXIT_ERROR

    logger.info(f"程序退出, 退出码: {exit_code}")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
