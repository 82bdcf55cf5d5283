"""
Тесты для конфигурации и точки входа командной строки

Проверяет:
1. CalculatorConfig: значения по умолчанию, переменные окружения, валидацию
2. main(): коды выхода, флаги --json и --log-level, приоритет флагов над env
"""

import dataclasses
import io
import json

import pytest
from loguru import logger

from src.calculator.cli import build_parser, main
from src.calculator.config import (
    DEFAULT_LOG_LEVEL,
    ENV_JSON_OUTPUT,
    ENV_LOG_LEVEL,
    CalculatorConfig,
)


class TestCalculatorConfig:
    """Тесты для CalculatorConfig"""

    def test_defaults(self) -> None:
        config = CalculatorConfig.from_env({})
        assert config == CalculatorConfig()
        assert config.log_level == DEFAULT_LOG_LEVEL
        assert config.json_output is False
        assert config.operation_prompt == "Operation to perform (+-*/): "

    def test_from_env(self) -> None:
        config = CalculatorConfig.from_env({ENV_LOG_LEVEL: " debug ", ENV_JSON_OUTPUT: "Yes"})
        assert config.log_level == "DEBUG"
        assert config.json_output is True

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_json_falsy_values(self, value: str) -> None:
        assert CalculatorConfig.from_env({ENV_JSON_OUTPUT: value}).json_output is False

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="log_level must be one of"):
            CalculatorConfig.from_env({ENV_LOG_LEVEL: "verbose"})

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            CalculatorConfig().json_output = True  # type: ignore[misc]


class TestMain:
    """Тесты для main()"""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
        monkeypatch.delenv(ENV_JSON_OUTPUT, raising=False)
        yield
        # sink main() привязан к перехваченному stderr
        logger.remove()

    def feed(self, monkeypatch: pytest.MonkeyPatch, text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    def test_text_dialog(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        self.feed(monkeypatch, "3 4\n2 3\n*\n")
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "3/4 == 3/4\n2/3 == 2/3\n" in out
        assert "1/2 == 1/2\n" in out

    def test_division_by_zero_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        self.feed(monkeypatch, "1 2\n0 5\n/\n")
        assert main([]) == 1
        assert capsys.readouterr().out.endswith("Denominator cannot be zero.\n")

    def test_json_flag(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        self.feed(monkeypatch, "1 2 1 3 +")
        assert main(["--json"]) == 0

        record = json.loads(capsys.readouterr().out)
        assert record["result"] == {"numerator": 5, "denominator": 6}

    def test_json_from_env(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setenv(ENV_JSON_OUTPUT, "1")
        self.feed(monkeypatch, "1 2 1 3 +")
        assert main([]) == 0
        assert json.loads(capsys.readouterr().out)["operator"] == "+"

    def test_log_level_flag_overrides_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv(ENV_LOG_LEVEL, "DEBUG")
        self.feed(monkeypatch, "1 2 1 3 +")
        assert main(["--log-level", "error"]) == 0
        assert capsys.readouterr().err == ""

    def test_debug_logging_goes_to_stderr(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        self.feed(monkeypatch, "1 2 1 3 +")
        assert main(["--log-level", "debug"]) == 0

        captured = capsys.readouterr()
        assert "1/2 + 1/3 = 5/6" in captured.err
        assert "5/6" in captured.out

    def test_invalid_log_level_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Неизвестный уровень из env даёт ошибку argparse, а не traceback"""
        monkeypatch.setenv(ENV_LOG_LEVEL, "verbose")
        self.feed(monkeypatch, "1 2 1 3 +")
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
        assert "log_level must be one of" in capsys.readouterr().err

    def test_invalid_log_level_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--log-level", "loud"])
        assert exc_info.value.code == 2
