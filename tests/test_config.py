"""Tests for configuration, logging setup and the command line entry point."""

import logging
import os

import pytest
import yaml

from checkers import __main__ as cli
from checkers.config import Config, get_config_file, parse_log_level, reset_config, setup_logger


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.session.human_color == "red"
        assert config.session.seed is None
        assert config.session.show_board is True
        assert config.logging.level == "WARNING"

    def test_missing_file_gives_defaults(self, tmp_path):
        config = Config.load(tmp_path / "missing.yaml")
        assert config.to_dict() == Config().to_dict()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "settings.yaml"
        config = Config()
        config.session.human_color = "white"
        config.session.seed = 42
        config.logging.level = "DEBUG"
        config.save(path)

        loaded = Config.load(path)
        assert loaded.session.human_color == "white"
        assert loaded.session.seed == 42
        assert loaded.logging.level == "DEBUG"

    def test_partial_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.dump({"session": {"seed": 5}}))
        config = Config.load(path)
        assert config.session.seed == 5
        assert config.session.human_color == "red"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert Config.load(path).to_dict() == Config().to_dict()

    @pytest.mark.parametrize("content", [
        "session: [unclosed",
        "session:\n  human_color: blue\n",
        "session:\n  unknown_key: 1\n",
        "logging:\n  level: loud\n",
    ])
    def test_invalid_file_falls_back_to_defaults(self, tmp_path, caplog, content):
        path = tmp_path / "settings.yaml"
        path.write_text(content)
        with caplog.at_level(logging.WARNING, logger="checkers.config"):
            config = Config.load(path)
        assert config.to_dict() == Config().to_dict()
        assert "Failed to load config" in caplog.text

    @pytest.mark.skipif(os.name == "nt", reason="XDG paths are not used on Windows")
    def test_config_file_honours_xdg(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_file() == tmp_path / "checkers" / "settings.yaml"

    def test_reset_config(self):
        assert reset_config().to_dict() == Config().to_dict()


class TestLogging:

    def test_setup_logger_once(self, tmp_path):
        log_file = tmp_path / "logs" / "checkers.log"
        logger = setup_logger("checkers.test_once", log_file=str(log_file), level="debug")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        again = setup_logger("checkers.test_once")
        assert again is logger
        assert len(again.handlers) == 2
        assert log_file.exists()

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logger("checkers.test_bad", level="loud")

    @pytest.mark.parametrize("level, expected", [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (logging.ERROR, logging.ERROR),
    ])
    def test_parse_log_level(self, level, expected):
        assert parse_log_level(level) == expected

    @pytest.mark.parametrize("level", ["loud", "", "Level 5"])
    def test_parse_log_level_rejects_unknown(self, level):
        with pytest.raises(ValueError):
            parse_log_level(level)


class TestCommandLine:

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        yield
        logger = logging.getLogger("checkers")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_parse_args(self):
        args = cli.parse_args(["--color", "white", "--seed", "9", "--no-board"])
        assert args.color == "white"
        assert args.seed == 9
        assert args.no_board

    def test_main_exits_cleanly(self, tmp_path, monkeypatch, capsys):
        config_path = tmp_path / "settings.yaml"
        Config().save(config_path)
        monkeypatch.setattr("builtins.input", lambda prompt="": "exit")

        assert cli.main(["--config", str(config_path), "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "  a b c d e f g h" in out
        assert "Your move" in out

    def test_log_level_is_case_insensitive(self):
        assert cli.parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_unknown_log_level_flag_rejected(self, capsys):
        with pytest.raises(SystemExit):
            cli.parse_args(["--log-level", "loud"])
        assert "--log-level" in capsys.readouterr().err

    def test_bad_level_in_config_falls_back(self, tmp_path, monkeypatch, caplog):
        config_path = tmp_path / "settings.yaml"
        config_path.write_text("logging:\n  level: loud\n")
        monkeypatch.setattr("builtins.input", lambda prompt="": "exit")

        assert cli.main(["--config", str(config_path), "--no-board"]) == 0
        assert logging.getLogger("checkers").level == logging.WARNING
        assert "Failed to load config" in caplog.text
