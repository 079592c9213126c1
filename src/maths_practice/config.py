"""Environment-driven settings for the command-line front end."""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    decimal_mode: bool = False
    log_level: str = "WARNING"


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise RuntimeError(f"{name} must be one of 1/0, true/false, yes/no, on/off")


def load_settings() -> Settings:
    load_dotenv()

    seed = None
    raw_seed = os.getenv("MATHS_PRACTICE_SEED", "").strip()
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            raise RuntimeError("MATHS_PRACTICE_SEED must be an integer") from None

    decimal_mode = _parse_bool(
        "MATHS_PRACTICE_DECIMAL_MODE", os.getenv("MATHS_PRACTICE_DECIMAL_MODE", "")
    )

    log_level = (os.getenv("MATHS_PRACTICE_LOG_LEVEL", "").strip() or "WARNING").upper()
    if log_level not in _LOG_LEVELS:
        raise RuntimeError(f"MATHS_PRACTICE_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")

    return Settings(seed=seed, decimal_mode=decimal_mode, log_level=log_level)
