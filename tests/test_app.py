"""
命令行应用测试
Command-Line Application Tests
"""
import pytest

from hmac_rps.app import Application, EXIT_ERROR, EXIT_FAIRNESS_VIOLATION, EXIT_OK
from hmac_rps.game import Arbiter, verify_commitment
from hmac_rps.main import main


class ScriptedConsole:
    """按顺序提供输入并收集输出"""

    def __init__(self, inputs):
        self.inputs = list(inputs)
        self.lines = []

    def input(self, prompt: str) -> str:
        self.lines.append(prompt)
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def output(self, text: str = ""):
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def _app(console, source=None, config_path=None):
    return Application(config_path=config_path, input_func=console.input,
                       output_func=console.output, random_source=source)


def test_full_round(fixed_source, rps_moves):
    console = ScriptedConsole(["?", "9", "1", "0"])
    code = _app(console, fixed_source(index=2)).start(rps_moves)

    assert code == EXIT_OK
    assert "Welcome to Rock-Paper-Scissors!" in console.text
    assert "v User \\ PC >" in console.text
    assert "Invalid move. Please try again." in console.text
    assert "Your move: Rock" in console.text
    assert "Computer move: Scissors" in console.text
    assert "Result: Lose" in console.text
    assert "Fairness check: HMAC verified." in console.text
    assert "Rounds played: 1, wins: 0, losses: 1, draws: 0" in console.text


def test_hmac_is_shown_before_the_menu_and_matches_reveal(fixed_source, rps_moves):
    console = ScriptedConsole(["Paper", "0"])
    _app(console, fixed_source(index=0)).start(rps_moves)

    hmac_index = next(i for i, line in enumerate(console.lines) if line.startswith("HMAC: "))
    menu_index = console.lines.index("Available moves:")
    assert hmac_index < menu_index

    digest_hex = console.lines[hmac_index][len("HMAC: "):]
    key_hex = next(line for line in console.lines if line.startswith("Key: "))[len("Key: "):]
    assert verify_commitment(key_hex, "Rock", digest_hex)


def test_each_round_gets_a_new_commitment(rps_moves):
    console = ScriptedConsole(["1", "2", "3", "0"])
    _app(console).start(rps_moves)

    digests = [line for line in console.lines if line.startswith("HMAC: ")]
    assert len(digests) == 4
    assert len(set(digests)) == 4
    assert "Rounds played: 3" in console.text


def test_invalid_move_set_exits_with_error():
    console = ScriptedConsole([])
    code = _app(console).start(["Rock", "Paper"])

    assert code == EXIT_ERROR
    assert "Example usage:" in console.text


def test_moves_are_prompted_when_not_given():
    console = ScriptedConsole(["4", "x", "3", "Rock", "Rock", "", "Pa per", "Scissors", "0"])
    app = _app(console)
    code = app.start()

    assert code == EXIT_OK
    assert list(app.session.moves) == ["Rock", "Paper", "Scissors"]
    assert "Invalid number of moves" in console.text
    assert 'Move "Rock" has already been entered' in console.text
    assert "Move cannot be empty" in console.text


def test_end_of_input_exits_cleanly(rps_moves):
    console = ScriptedConsole([])
    assert _app(console).start(rps_moves) == EXIT_OK
    assert "Goodbye!" in console.text


def test_missing_explicit_config(tmp_path, rps_moves):
    console = ScriptedConsole([])
    code = _app(console, config_path=str(tmp_path / "nope.yaml")).start(rps_moves)
    assert code == EXIT_ERROR
    assert "Config file not found" in console.text


def test_weak_key_config_is_refused(tmp_path, rps_moves):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("crypto:\n  key_bytes: 16\n", encoding="utf-8")
    console = ScriptedConsole([])

    code = _app(console, config_path=str(config_file)).start(rps_moves)
    assert code == EXIT_ERROR
    assert "Configuration error" in console.text


def test_fairness_violation_is_surfaced(monkeypatch, rps_moves):
    monkeypatch.setattr(Arbiter, "verify_round", staticmethod(lambda result: False))
    console = ScriptedConsole(["1", "0"])

    code = _app(console).start(rps_moves)
    assert code == EXIT_FAIRNESS_VIOLATION
    assert "FAIRNESS VIOLATION" in console.text


def test_main_rejects_even_move_count(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["Rock", "Paper", "Scissors", "Lizard"])
    assert exc_info.value.code == EXIT_ERROR
    assert "Example usage:" in capsys.readouterr().out


@pytest.mark.parametrize("choice", ["²", "³", "⑨"])
def test_non_decimal_digit_at_menu_is_reprompted(fixed_source, rps_moves, choice):
    """isdigit 为真但不能转换为整数的输入按无效招式处理"""
    console = ScriptedConsole([choice, "1", "0"])
    code = _app(console, fixed_source(index=0)).start(rps_moves)

    assert code == EXIT_OK
    assert "Invalid move. Please try again." in console.text
    assert "Your move: Rock" in console.text


def test_non_decimal_digit_at_move_count_is_reprompted():
    console = ScriptedConsole(["³", "3", "Rock", "Paper", "Scissors", "0"])
    app = _app(console)

    assert app.start() == EXIT_OK
    assert "Invalid number of moves" in console.text
    assert list(app.session.moves) == ["Rock", "Paper", "Scissors"]


def test_exact_label_wins_over_menu_number(fixed_source):
    console = ScriptedConsole(["3", "0"])
    _app(console, fixed_source(index=0)).start(["3", "1", "2"])
    assert "Your move: 3" in console.text


def test_menu_number_selects_numeric_label(fixed_source):
    """标签不匹配时仍按菜单编号选择"""
    console = ScriptedConsole(["1", "0"])
    code = _app(console, fixed_source(index=0)).start(["7", "8", "9"])
    assert code == EXIT_OK
    assert "Your move: 7" in console.text


def test_non_mapping_config_section_is_refused(tmp_path, rps_moves):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("crypto: null\n", encoding="utf-8")
    console = ScriptedConsole([])

    code = _app(console, config_path=str(config_file)).start(rps_moves)
    assert code == EXIT_ERROR
    assert "Configuration error" in console.text


def test_missing_default_config_falls_back_with_warning(monkeypatch, tmp_path, caplog, rps_moves):
    import logging
    import hmac_rps.app as app_module

    monkeypatch.setattr(app_module, "DEFAULT_CONFIG_PATH", tmp_path / "absent.yaml")
    console = ScriptedConsole(["0"])
    app = _app(console)
    caplog.set_level(logging.WARNING, logger="HMACRPS")

    assert app.start(rps_moves) == EXIT_OK
    assert any(r.levelno == logging.WARNING and "absent.yaml" in r.getMessage()
               for r in caplog.records)
