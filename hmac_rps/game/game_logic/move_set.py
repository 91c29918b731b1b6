"""
招式集合
Move Set
"""
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple
from ...utils.exceptions import InvalidMoveException
from ...utils.validation import MoveValidator


@dataclass(frozen=True)
class MoveSet:
    """
    有序、不可变的招式集合

    顺序决定循环相邻关系：第 i 个招式胜第 (i+1) mod N 个招式。
    """
    labels: Tuple[str, ...]

    def __post_init__(self):
        MoveValidator.validate(self.labels)
        # 允许传入 list，统一存为 tuple 以保证可哈希
        object.__setattr__(self, 'labels', tuple(self.labels))

    @classmethod
    def of(cls, labels: Sequence[str]) -> "MoveSet":
        """从任意标签序列创建招式集合"""
        if isinstance(labels, MoveSet):
            return labels
        if isinstance(labels, str):
            return cls(labels)
        return cls(tuple(labels))

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __getitem__(self, index: int) -> str:
        return self.labels[index]

    def __contains__(self, label: object) -> bool:
        return label in self.labels

    def __str__(self):
        return '-'.join(self.labels)

    def index_of(self, label: str) -> int:
        """
        查找招式下标（区分大小写的精确匹配）

        Args:
            label: 招式标签

        Returns:
            int: 招式下标

        Raises:
            InvalidMoveException: 招式不在集合中
        """
        try:
            return self.labels.index(label)
        except ValueError:
            raise InvalidMoveException(
                f"Unknown move '{label}'. Available moves: {', '.join(self.labels)}",
                move=label) from None
