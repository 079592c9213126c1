import pytest

from maths_practice.config import Settings, load_settings

ENV_VARS = ("MATHS_PRACTICE_SEED", "MATHS_PRACTICE_DECIMAL_MODE", "MATHS_PRACTICE_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr("maths_practice.config.load_dotenv", lambda: False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_settings() == Settings(seed=None, decimal_mode=False, log_level="WARNING")


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("MATHS_PRACTICE_SEED", "42")
    monkeypatch.setenv("MATHS_PRACTICE_DECIMAL_MODE", "Yes")
    monkeypatch.setenv("MATHS_PRACTICE_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.seed == 42
    assert settings.decimal_mode is True
    assert settings.log_level == "DEBUG"


def test_bad_seed(monkeypatch):
    monkeypatch.setenv("MATHS_PRACTICE_SEED", "abc")
    with pytest.raises(RuntimeError, match="SEED"):
        load_settings()


def test_bad_decimal_flag(monkeypatch):
    monkeypatch.setenv("MATHS_PRACTICE_DECIMAL_MODE", "maybe")
    with pytest.raises(RuntimeError, match="DECIMAL_MODE"):
        load_settings()


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("MATHS_PRACTICE_LOG_LEVEL", "LOUD")
    with pytest.raises(RuntimeError, match="LOG_LEVEL"):
        load_settings()


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_values_fall_back_to_defaults(monkeypatch, value):
    for name in ENV_VARS:
        monkeypatch.setenv(name, value)
    assert load_settings() == Settings(seed=None, decimal_mode=False, log_level="WARNING")
