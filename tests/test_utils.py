"""
工具模块测试
Utility Tests
"""
import logging

import pytest
import yaml

from hmac_rps.utils import (
    ConfigLoader, DEFAULT_CONFIG, ErrorHandler, MoveValidator, get_log_level, get_logger, setup_logger
)
from hmac_rps.utils.exceptions import (
    ConfigurationException, DigestMismatchException, GameException,
    InvalidMoveException, InvalidMoveSetException
)


def test_load_config(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("crypto:\n  hash_algorithm: sha512\n", encoding="utf-8")

    config = ConfigLoader.merge_with_defaults(ConfigLoader.load_config(str(config_file)))

    assert ConfigLoader.get_crypto_config(config) == {'key_bytes': 32, 'hash_algorithm': 'sha512'}
    assert ConfigLoader.get_game_config(config) == DEFAULT_CONFIG['game']
    assert ConfigLoader.get_logging_config(config)['level'] == 'WARNING'


def test_load_empty_config(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("", encoding="utf-8")
    assert ConfigLoader.load_config(str(config_file)) == {}


def test_load_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load_config(str(tmp_path / "missing.yaml"))


def test_load_broken_config(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("game: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        ConfigLoader.load_config(str(config_file))


def test_merge_does_not_modify_defaults():
    merged = ConfigLoader.merge_with_defaults({'game': {'max_move_length': 3}})
    assert merged['game']['max_move_length'] == 3
    assert DEFAULT_CONFIG['game']['max_move_length'] == 10


@pytest.mark.parametrize("text,level", [
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    ("Error", logging.ERROR),
    ("bogus", logging.WARNING),
])
def test_get_log_level(text, level):
    assert get_log_level(text) == level


def test_setup_logger_replaces_handlers(tmp_path):
    log_file = tmp_path / "logs" / "rps.log"
    logger = setup_logger("HMACRPS.TestLogger", log_file=str(log_file), level=logging.INFO)
    logger = setup_logger("HMACRPS.TestLogger", log_file=str(log_file), level=logging.INFO)
    assert len(logger.handlers) == 2

    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    setup_logger("HMACRPS.TestLogger")
    assert len(logger.handlers) == 1


def test_get_logger_uses_namespace():
    assert get_logger("Arbiter").name == "HMACRPS.Arbiter"
    assert get_logger("HMACRPS.Arbiter").name == "HMACRPS.Arbiter"


def test_error_handler_dispatches_by_type(caplog):
    handler = ErrorHandler()
    caplog.set_level(logging.DEBUG, logger="HMACRPS")

    assert handler.handle(DigestMismatchException("bad", digest_hex="ab"), "校验")
    assert any(r.levelno == logging.CRITICAL for r in caplog.records)

    caplog.clear()
    assert handler.handle(InvalidMoveException("unknown", move="Lizard"))
    assert [r.levelno for r in caplog.records] == [logging.INFO]

    caplog.clear()
    assert handler.handle(ConfigurationException("bad key", config_key="crypto.key_bytes"))
    assert "crypto.key_bytes" in caplog.text


def test_error_handler_unknown_exception(caplog):
    caplog.set_level(logging.ERROR, logger="HMACRPS")
    assert ErrorHandler().handle(RuntimeError("boom")) is False
    assert "RuntimeError" in caplog.text


def test_error_handler_custom_handler():
    handler = ErrorHandler()
    seen = []
    handler.register_handler(GameException, lambda exc, ctx: seen.append((exc.message, ctx)))

    assert handler.handle(GameException("oops"), "ctx")
    assert seen == [("oops", "ctx")]


@pytest.mark.parametrize("raw,strip,length,expected", [
    ("Rock", True, 10, "Rock"),
    ("  Ro ck ", True, 10, "Rock"),
    ("  Ro ck ", False, 10, "Ro ck"),
    ("Thunderstorm", True, 10, "Thundersto"),
    ("Thunderstorm", True, 0, "Thunderstorm"),
    ("   ", True, 10, ""),
])
def test_normalize_label(raw, strip, length, expected):
    assert MoveValidator.normalize_label(raw, strip, length) == expected


def test_validation_messages():
    with pytest.raises(InvalidMoveSetException) as exc_info:
        MoveValidator.validate(["a", "b", "a"])
    assert "a" in exc_info.value.message
    assert exc_info.value.moves == ["a", "b", "a"]

    lines = MoveValidator.describe_error(exc_info.value)
    assert lines[0].startswith("Error:")
    assert any("Rock Paper Scissors" in line for line in lines)


@pytest.mark.parametrize("count,valid", [(0, False), (1, False), (2, False), (3, True), (4, False), (5, True)])
def test_is_valid_count(count, valid):
    assert MoveValidator.is_valid_count(count) is valid


def test_save_config_writes_loadable_yaml(tmp_path):
    config_file = tmp_path / "nested" / "config.yaml"
    config = ConfigLoader.merge_with_defaults({'crypto': {'hash_algorithm': 'sha3_256'}})

    assert ConfigLoader.save_config(config, str(config_file))
    assert ConfigLoader.load_config(str(config_file)) == config


def test_save_config_reports_failure(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    assert ConfigLoader.save_config({'game': {}}, str(blocker / "config.yaml")) is False


@pytest.mark.parametrize("section,value", [
    ("crypto", None),
    ("game", ["max_move_length", 3]),
    ("logging", "DEBUG"),
])
def test_merge_rejects_non_mapping_sections(section, value):
    with pytest.raises(ConfigurationException) as exc_info:
        ConfigLoader.merge_with_defaults({section: value})
    assert exc_info.value.config_key == section


def test_merge_keeps_unknown_sections():
    merged = ConfigLoader.merge_with_defaults({'extra': 5})
    assert merged['extra'] == 5
