from __future__ import annotations

import config


def test_env_int_reads_positive_values(monkeypatch) -> None:
    monkeypatch.setenv("EXPLORER_TEST_FPS", " 30 ")
    assert config._env_int("EXPLORER_TEST_FPS", 60) == 30


def test_env_int_falls_back_on_bad_values(monkeypatch, capsys) -> None:
    monkeypatch.setenv("EXPLORER_TEST_FPS", "fast")
    assert config._env_int("EXPLORER_TEST_FPS", 60) == 60
    assert "EXPLORER_TEST_FPS" in capsys.readouterr().out

    monkeypatch.setenv("EXPLORER_TEST_FPS", "-5")
    assert config._env_int("EXPLORER_TEST_FPS", 60) == 60

    monkeypatch.delenv("EXPLORER_TEST_FPS")
    assert config._env_int("EXPLORER_TEST_FPS", 60) == 60
