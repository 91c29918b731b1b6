"""
测试公共夹具
Shared Test Fixtures
"""
import sys
from pathlib import Path

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hmac_rps.game.commitment import RandomSource  # noqa: E402


class FixedRandomSource(RandomSource):
    """确定性随机源：固定招式下标和密钥，并记录每次调用"""

    def __init__(self, index: int = 0, key: bytes = bytes(range(32))):
        self.index = index
        self.key = key
        self.calls = []

    def token_bytes(self, num_bytes: int) -> bytes:
        self.calls.append(('token_bytes', num_bytes))
        repeated = self.key * (num_bytes // len(self.key) + 1)
        return repeated[:num_bytes]

    def randbelow(self, upper: int) -> int:
        self.calls.append(('randbelow', upper))
        return self.index


@pytest.fixture
def fixed_source():
    """返回创建 FixedRandomSource 的工厂"""
    return FixedRandomSource


@pytest.fixture
def rps_moves():
    return ["Rock", "Paper", "Scissors"]
