"""
招式列表校验
Move List Validation
"""
from typing import List, Sequence
from .exceptions import InvalidMoveSetException

USAGE_EXAMPLE = "hmac-rps Rock Paper Scissors Lizard Spock"


class MoveValidator:
    """招式列表校验器"""

    @staticmethod
    def validate(moves: Sequence[str]) -> None:
        """
        校验招式列表：数量为 >=3 的奇数，标签非空且互不相同

        Args:
            moves: 招式标签序列

        Raises:
            InvalidMoveSetException: 招式列表不合法
        """
        if isinstance(moves, str):
            raise InvalidMoveSetException("Moves must be a sequence of labels, not a single string.")

        count = len(moves)
        if count < 3 or count % 2 == 0:
            raise InvalidMoveSetException(
                f"Invalid number of moves ({count}). Please provide an odd number "
                f"of unique moves (at least 3).", moves)

        for move in moves:
            if not isinstance(move, str) or not move:
                raise InvalidMoveSetException("Moves must be non-empty strings.", moves)

        if len(set(moves)) != count:
            duplicates = sorted({m for m in moves if list(moves).count(m) > 1})
            raise InvalidMoveSetException(
                f"Moves must be unique (duplicated: {', '.join(duplicates)}).", moves)

    @staticmethod
    def is_valid_count(count: int) -> bool:
        """招式数量是否合法"""
        return count >= 3 and count % 2 == 1

    @staticmethod
    def normalize_label(raw: str, strip_whitespace: bool = True, max_length: int = 10) -> str:
        """
        规范化交互输入的招式标签

        Args:
            raw: 原始输入
            strip_whitespace: 是否去掉所有空格
            max_length: 最大长度，<=0 表示不截断

        Returns:
            str: 规范化后的标签（可能为空字符串）
        """
        label = raw.replace(' ', '') if strip_whitespace else raw.strip()
        if max_length and max_length > 0:
            label = label[:max_length]
        return label

    @staticmethod
    def describe_error(error: InvalidMoveSetException) -> List[str]:
        """生成面向用户的错误说明（含用法示例）"""
        return [
            f"Error: {error.message}",
            "Example usage:",
            f"  {USAGE_EXAMPLE}",
        ]
