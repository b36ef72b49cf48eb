import os

from shipyard.infra.config import (
    DEFAULT_CELL_SIZE,
    load_default_env_files,
    load_env_file,
    load_settings,
    resolve_log_level_name,
)


def test_load_settings_defaults(monkeypatch) -> None:
    for name in ("SHIPYARD_CELL_SIZE", "SHIPYARD_LOG_LEVEL", "LOG_LEVEL", "LOG_FORMAT", "SHIPYARD_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.cell_size == DEFAULT_CELL_SIZE
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"
    assert settings.log_file is None


def test_load_settings_from_env_and_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("SHIPYARD_CELL_SIZE", "32")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("SHIPYARD_LOG_FILE", "logs/run.jsonl")
    settings = load_settings()
    assert settings.cell_size == 32.0
    assert settings.log_level == "WARNING"
    assert settings.log_format == "json"
    assert settings.log_file == "logs/run.jsonl"

    monkeypatch.setenv("SHIPYARD_CELL_SIZE", "wide")
    assert load_settings().cell_size == DEFAULT_CELL_SIZE
    monkeypatch.setenv("SHIPYARD_CELL_SIZE", "-4")
    assert load_settings().cell_size == DEFAULT_CELL_SIZE
    monkeypatch.setenv("SHIPYARD_CELL_SIZE", "inf")
    assert load_settings().cell_size == DEFAULT_CELL_SIZE


def test_app_log_level_overrides_generic(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("SHIPYARD_LOG_LEVEL", " debug ")
    assert resolve_log_level_name() == "DEBUG"


def test_load_env_file_parses_and_respects_override(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env.app"
    env_file.write_text(
        "# comment\n\nSHIPYARD_TEST_A='quoted'\nSHIPYARD_TEST_B=2\nnot-a-pair\n=empty\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("SHIPYARD_TEST_B", "1")
    monkeypatch.delenv("SHIPYARD_TEST_A", raising=False)
    load_env_file(str(env_file), override_existing=False)
    assert os.environ["SHIPYARD_TEST_A"] == "quoted"
    assert os.environ["SHIPYARD_TEST_B"] == "1"
    load_env_file(str(env_file))
    assert os.environ["SHIPYARD_TEST_B"] == "2"
    monkeypatch.delenv("SHIPYARD_TEST_A")
    monkeypatch.delenv("SHIPYARD_TEST_B")


def test_load_default_env_files_later_wins(tmp_path, monkeypatch) -> None:
    first = tmp_path / "a.env"
    second = tmp_path / "b.env"
    first.write_text("SHIPYARD_TEST_C=first\n", encoding="utf-8")
    second.write_text("SHIPYARD_TEST_C=second\n", encoding="utf-8")
    monkeypatch.delenv("SHIPYARD_TEST_C", raising=False)
    load_default_env_files(paths=[str(first), str(tmp_path / "missing.env"), str(second)])
    assert os.environ["SHIPYARD_TEST_C"] == "second"
    monkeypatch.delenv("SHIPYARD_TEST_C")
