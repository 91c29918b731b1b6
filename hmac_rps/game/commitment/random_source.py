"""
随机源抽象基类
Random Source Base Class
"""
import secrets
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """随机源抽象基类，承诺引擎通过它获取密钥和电脑招式"""

    @abstractmethod
    def token_bytes(self, num_bytes: int) -> bytes:
        """
        生成随机字节

        Args:
            num_bytes: 字节数

        Returns:
            bytes: 随机字节
        """
        pass

    @abstractmethod
    def randbelow(self, upper: int) -> int:
        """
        生成 [0, upper) 内均匀分布的整数

        Args:
            upper: 上界（不含）

        Returns:
            int: 随机整数
        """
        pass


class SecureRandomSource(RandomSource):
    """基于操作系统 CSPRNG 的随机源（secrets 模块）"""

    def token_bytes(self, num_bytes: int) -> bytes:
        return secrets.token_bytes(num_bytes)

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)
