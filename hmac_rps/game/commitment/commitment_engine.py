"""
承诺引擎
Commitment Engine - 电脑招式的 HMAC 承诺与校验
"""
import hashlib
import hmac
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from .random_source import RandomSource, SecureRandomSource
from ..game_logic.move_set import MoveSet
from ...utils.exceptions import ConfigurationException, GameException
from ...utils.logger import get_logger

logger = get_logger("HMACRPS.CommitmentEngine")

MIN_KEY_BYTES = 32
MIN_DIGEST_BYTES = 32
DEFAULT_HASH_ALGORITHM = "sha256"


@dataclass(frozen=True)
class Commitment:
    """
    一次承诺

    digest 在揭示前唯一可以公开；secret_key 与 committed_move_index 不参与 repr。
    """
    digest: bytes
    secret_key: bytes = field(repr=False)
    committed_move_index: int = field(repr=False)
    algorithm: str = DEFAULT_HASH_ALGORITHM

    @property
    def digest_hex(self) -> str:
        """小写十六进制 HMAC"""
        return self.digest.hex()


def check_hash_algorithm(algorithm: str) -> str:
    """
    检查哈希算法是否可用且摘要长度至少 256 位

    Args:
        algorithm: hashlib 算法名

    Returns:
        str: 规范化（小写）后的算法名

    Raises:
        ConfigurationException: 算法不可用或摘要过短
    """
    name = str(algorithm).lower()
    try:
        digest_size = hashlib.new(name).digest_size
    except (ValueError, TypeError):
        raise ConfigurationException(f"不支持的哈希算法: {algorithm}",
                                     config_key="crypto.hash_algorithm") from None
    if digest_size < MIN_DIGEST_BYTES:
        raise ConfigurationException(
            f"哈希算法 {name} 摘要长度 {digest_size * 8} 位，至少需要 {MIN_DIGEST_BYTES * 8} 位",
            config_key="crypto.hash_algorithm")
    return name


def compute_digest(key: bytes, move: str, algorithm: str = DEFAULT_HASH_ALGORITHM) -> bytes:
    """
    计算 HMAC(key, move)，消息为招式标签的 UTF-8 字节

    Args:
        key: 密钥
        move: 招式标签
        algorithm: 哈希算法

    Returns:
        bytes: 原始摘要
    """
    return hmac.new(key, move.encode('utf-8'), algorithm).digest()


def verify_commitment(key_hex: str, machine_move: str, digest_hex: str,
                      algorithm: str = DEFAULT_HASH_ALGORITHM) -> bool:
    """
    仅凭公开的值独立校验承诺

    Args:
        key_hex: 揭示的密钥（十六进制）
        machine_move: 揭示的电脑招式
        digest_hex: 出招前公布的 HMAC（十六进制）
        algorithm: 哈希算法

    Returns:
        bool: 完全一致返回True；格式错误的十六进制视为不一致
    """
    try:
        key = bytes.fromhex(key_hex)
        expected = bytes.fromhex(digest_hex)
    except (ValueError, TypeError):
        logger.warning("校验输入不是合法的十六进制，视为不一致")
        return False

    return CommitmentEngine.verify_digest(expected, key, machine_move, algorithm)


class CommitmentEngine:
    """承诺引擎：抽取电脑招式和密钥，生成并校验 HMAC 承诺"""

    def __init__(self,
                 random_source: Optional[RandomSource] = None,
                 key_bytes: int = MIN_KEY_BYTES,
                 hash_algorithm: str = DEFAULT_HASH_ALGORITHM):
        """
        初始化承诺引擎

        Args:
            random_source: 随机源，默认使用 SecureRandomSource
            key_bytes: 密钥字节数（至少32）
            hash_algorithm: HMAC 使用的哈希算法

        Raises:
            ConfigurationException: 密钥长度或哈希算法不满足要求
        """
        if not isinstance(key_bytes, int) or key_bytes < MIN_KEY_BYTES:
            raise ConfigurationException(
                f"密钥长度至少 {MIN_KEY_BYTES} 字节，当前: {key_bytes}",
                config_key="crypto.key_bytes")

        self.random_source = random_source or SecureRandomSource()
        self.key_bytes = key_bytes
        self.hash_algorithm = check_hash_algorithm(hash_algorithm)

        logger.debug(f"承诺引擎初始化: 密钥 {key_bytes} 字节, 算法 {self.hash_algorithm}")

    @classmethod
    def from_config(cls, crypto_config: Dict[str, Any],
                    random_source: Optional[RandomSource] = None) -> "CommitmentEngine":
        """
        从 crypto 配置节创建承诺引擎

        Args:
            crypto_config: 包含 key_bytes 和 hash_algorithm 的字典
            random_source: 随机源（可选）

        Returns:
            CommitmentEngine: 承诺引擎
        """
        return cls(random_source=random_source,
                   key_bytes=crypto_config.get('key_bytes', MIN_KEY_BYTES),
                   hash_algorithm=crypto_config.get('hash_algorithm', DEFAULT_HASH_ALGORITHM))

    def commit(self, moves: MoveSet) -> Commitment:
        """
        随机选择电脑招式并生成承诺

        Args:
            moves: 招式集合

        Returns:
            Commitment: 新的承诺（每次调用独立抽取密钥和招式）
        """
        index = self.random_source.randbelow(len(moves))
        if not 0 <= index < len(moves):
            raise GameException(f"随机源返回越界下标: {index}")

        key = self.random_source.token_bytes(self.key_bytes)
        if len(key) < self.key_bytes:
            raise GameException(f"随机源返回的密钥过短: {len(key)} 字节")

        digest = compute_digest(key, moves[index], self.hash_algorithm)
        commitment = Commitment(digest=digest, secret_key=key,
                                committed_move_index=index, algorithm=self.hash_algorithm)

        logger.debug(f"生成承诺: HMAC={commitment.digest_hex}")
        return commitment

    def verify(self, commitment: Commitment, revealed_key: bytes, revealed_move: str) -> bool:
        """
        用揭示的密钥和招式重新计算 HMAC，与承诺逐位比较

        Args:
            commitment: 承诺
            revealed_key: 揭示的密钥
            revealed_move: 揭示的招式

        Returns:
            bool: 完全一致返回True
        """
        return self.verify_digest(commitment.digest, revealed_key, revealed_move,
                                  commitment.algorithm)

    @staticmethod
    def verify_digest(digest: bytes, revealed_key: bytes, revealed_move: str,
                      algorithm: str = DEFAULT_HASH_ALGORITHM) -> bool:
        """
        不依赖引擎状态的校验：只需公布的摘要和揭示的密钥、招式

        Returns:
            bool: 完全一致返回True
        """
        recomputed = compute_digest(revealed_key, revealed_move, algorithm)
        matched = hmac.compare_digest(recomputed, digest)
        if not matched:
            logger.warning(f"承诺校验失败: HMAC={digest.hex()}")
        return matched
