"""
工具类模块
Utility Classes
"""
from .logger import setup_logger, setup_logger_from_config, get_log_level, get_logger
from .config_loader import ConfigLoader, DEFAULT_CONFIG
from .error_handler import ErrorHandler, global_error_handler
from .validation import MoveValidator
from .exceptions import (
    GameException,
    InvalidMoveSetException,
    InvalidMoveException,
    AlreadyRevealedException,
    DigestMismatchException,
    ConfigurationException
)

__all__ = [
    'setup_logger',
    'setup_logger_from_config',
    'get_log_level',
    'get_logger',
    'ConfigLoader',
    'DEFAULT_CONFIG',
    'ErrorHandler',
    'global_error_handler',
    'MoveValidator',
    'GameException',
    'InvalidMoveSetException',
    'InvalidMoveException',
    'AlreadyRevealedException',
    'DigestMismatchException',
    'ConfigurationException'
]
