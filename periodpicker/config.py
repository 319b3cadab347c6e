"""Runtime configuration for the period picker.

Values come from environment variables, falling back to defaults:

    PERIODPICKER_CUSTOM_LABEL     label given to a resolved custom range ("Custom")
    PERIODPICKER_MATCH_THRESHOLD  minimum fuzzy score for label matching (80)
    PERIODPICKER_SHOW_TIME        include time of day in preset descriptions (false)
    PERIODPICKER_24H              24-hour clock when time is shown (false)
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class PickerConfig:
    custom_label: str = "Custom"
    match_threshold: int = 80
    show_time: bool = False
    use_24_hour_format: bool = False


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def load_config() -> PickerConfig:
    """Build a PickerConfig from PERIODPICKER_* environment variables.

    Raises:
        ValueError: If a numeric or boolean variable cannot be parsed
    """
    threshold = _env_int("PERIODPICKER_MATCH_THRESHOLD", PickerConfig.match_threshold)
    if not 0 <= threshold <= 100:
        raise ValueError(f"PERIODPICKER_MATCH_THRESHOLD must be in 0-100, got {threshold}")

    config = PickerConfig(
        custom_label=os.getenv("PERIODPICKER_CUSTOM_LABEL") or PickerConfig.custom_label,
        match_threshold=threshold,
        show_time=_env_flag("PERIODPICKER_SHOW_TIME", PickerConfig.show_time),
        use_24_hour_format=_env_flag("PERIODPICKER_24H", PickerConfig.use_24_hour_format),
    )
    logger.debug(f"Loaded picker config: {config}")
    return config


__all__ = [
    "PickerConfig",
    "load_config",
]
