"""
配置加载工具模块
Configuration Loader Utility
"""
import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from .exceptions import ConfigurationException
from .logger import get_logger

logger = get_logger("HMACRPS.ConfigLoader")

# 内置默认配置，配置文件中缺失的键使用这里的值
DEFAULT_CONFIG: Dict[str, Any] = {
    'game': {
        'max_move_length': 10,
        'strip_whitespace': True,
    },
    'crypto': {
        'key_bytes': 32,
        'hash_algorithm': 'sha256',
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
}


class ConfigLoader:
    """配置加载器类"""

    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """
        从YAML文件加载配置

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML解析错误
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise

        if config is None:
            logger.warning(f"配置文件为空: {config_path}")
            return {}

        logger.info(f"成功加载配置文件: {config_path}")
        return config

    @staticmethod
    def merge_with_defaults(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        将配置与内置默认值合并（按节合并，一层深度）

        Args:
            config: 从文件加载的配置，可以为None

        Returns:
            Dict[str, Any]: 合并后的完整配置

        Raises:
            ConfigurationException: 已知配置节不是映射
        """
        merged = copy.deepcopy(DEFAULT_CONFIG)
        for section, values in (config or {}).items():
            if section not in merged:
                merged[section] = values
                continue
            if not isinstance(values, dict):
                raise ConfigurationException(
                    f"配置节 {section} 必须是映射，当前: {type(values).__name__}",
                    config_key=section)
            merged[section].update(values)
        return merged

    @staticmethod
    def save_config(config: Dict[str, Any], config_path: str) -> bool:
        """
        保存配置到YAML文件

        Args:
            config: 配置字典
            config_path: 配置文件路径

        Returns:
            bool: 保存是否成功
        """
        config_file = Path(config_path)

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w', encoding='utf-8') as f:
                yaml.safe_dump(config, f, default_flow_style=False,
                               allow_unicode=True, sort_keys=False)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"保存配置文件失败: {e}")
            return False

        logger.info(f"成功保存配置文件: {config_path}")
        return True

    @staticmethod
    def get_game_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取游戏配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 游戏配置字典
        """
        return config.get('game', {})

    @staticmethod
    def get_crypto_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取承诺（密钥与哈希）配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 加密配置字典
        """
        return config.get('crypto', {})

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取日志配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 日志配置字典
        """
        return config.get('logging', {})
