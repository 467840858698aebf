from __future__ import annotations

import random
from pathlib import Path

import pytest

from jpgame import main as main_module
from jpgame.core.config import Settings
from jpgame.game.run_loop import run_loop
from jpgame.game.types import AppState, KeyEvent


def _settings(path: Path, *, log_file: str = "") -> Settings:
    return Settings(_env_file=None, JPGAME_DICTIONARY_PATH=str(path), JPGAME_LOG_FILE=log_file)


def _scripted_wrapper(*events: KeyEvent):
    def _wrapper(func, screen):
        return run_loop(screen, list(events), lambda snapshot: None)

    return _wrapper


def test_create_screen_reads_configured_dictionary(tmp_path: Path) -> None:
    path = tmp_path / "dictionary.json"
    path.write_text('{"words": [{"word": "犬", "vars": ["cat", "dog"], "correct": 1}]}', encoding="utf-8")

    screen = main_module.create_screen(_settings(path), rng=random.Random(0))
    assert screen.state is AppState.MAIN_MENU

    screen.handle(KeyEvent.CONFIRM)

    assert screen.state is AppState.PLAYING
    assert screen.prompt == "犬"
    assert screen.correct_index == 1


def test_run_exits_non_zero_when_dictionary_missing(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    settings = _settings(tmp_path / "missing.json")
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "configure_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(main_module.curses, "wrapper", _scripted_wrapper(KeyEvent.CONFIRM))

    assert main_module.run() == main_module.EXIT_DICTIONARY_UNAVAILABLE
    err = capsys.readouterr().err
    assert "cannot read dictionary" in err
    assert "JPGAME_DICTIONARY_PATH" in err


def test_run_plays_until_confirmed_exit_and_prints_score(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = tmp_path / "dictionary.json"
    path.write_text('{"words": [{"word": "猫", "vars": ["cat", "dog", "bird"], "correct": 0}]}', encoding="utf-8")
    settings = _settings(path)
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "configure_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(
        main_module.curses,
        "wrapper",
        _scripted_wrapper(
            KeyEvent.CONFIRM,  # start
            KeyEvent.CONFIRM,  # cat
            KeyEvent.CONFIRM,  # cat
            KeyEvent.CANCEL,
            KeyEvent.CONFIRM,  # yes
        ),
    )

    assert main_module.run() == main_module.EXIT_OK
    assert "Final score: 2" in capsys.readouterr().out


def test_run_exits_non_zero_when_log_file_cannot_be_opened(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    log_file = tmp_path / "missing-dir" / "jpgame.log"
    settings = _settings(tmp_path / "dictionary.json", log_file=str(log_file))
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)

    def _unexpected_wrapper(func, screen):
        raise AssertionError("curses must not start without logging")

    monkeypatch.setattr(main_module.curses, "wrapper", _unexpected_wrapper)

    assert main_module.run() == main_module.EXIT_LOG_UNAVAILABLE
    err = capsys.readouterr().err
    assert "cannot open log file" in err
    assert "JPGAME_LOG_FILE" in err
