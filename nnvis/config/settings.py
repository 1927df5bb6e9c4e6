"""Environment-backed defaults for network visualization."""

from __future__ import annotations

import os
from dataclasses import dataclass

from nnvis.core.activations import SquashingFunction, parse_squashing_function
from nnvis.core.errors import UnsupportedSquashingFunctionError


@dataclass(frozen=True)
class Settings:
    """Global settings loaded from environment variables."""

    canvas_width: int = 1000
    canvas_height: int = 600
    layer_sizes: tuple[int, ...] = (3, 4, 2)
    squashing_function: SquashingFunction = SquashingFunction.SIGMOID
    seed: int | None = None


def load_settings_from_env() -> Settings:
    """Load settings from process environment with safe fallbacks."""
    defaults = Settings()
    return Settings(
        canvas_width=_read_positive_int_env("NNVIS_CANVAS_WIDTH", defaults.canvas_width),
        canvas_height=_read_positive_int_env("NNVIS_CANVAS_HEIGHT", defaults.canvas_height),
        layer_sizes=_read_int_list_env("NNVIS_LAYER_SIZES", defaults.layer_sizes),
        squashing_function=_read_squashing_env("NNVIS_SQUASHING", defaults.squashing_function),
        seed=_read_optional_int_env("NNVIS_SEED"),
    )


def _read_int_env(key: str, default_value: int) -> int:
    raw_value = os.getenv(key)
    if raw_value is None:
        return default_value
    try:
        return int(raw_value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer.") from exc


def _read_positive_int_env(key: str, default_value: int) -> int:
    value = _read_int_env(key, default_value)
    if value <= 0:
        raise ValueError(f"Environment variable {key} must be positive.")
    return value


def _read_optional_int_env(key: str) -> int | None:
    if os.getenv(key) is None:
        return None
    return _read_int_env(key, 0)


def _read_int_list_env(key: str, default_value: tuple[int, ...]) -> tuple[int, ...]:
    raw_value = os.getenv(key)
    if raw_value is None:
        return default_value
    try:
        values = tuple(int(item) for item in raw_value.split(",") if item.strip())
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be a comma-separated list of integers.") from exc
    if not values or any(value <= 0 for value in values):
        raise ValueError(f"Environment variable {key} must list positive layer sizes.")
    return values


def _read_squashing_env(key: str, default_value: SquashingFunction) -> SquashingFunction:
    raw_value = os.getenv(key)
    if raw_value is None:
        return default_value
    try:
        return parse_squashing_function(raw_value)
    except UnsupportedSquashingFunctionError as exc:
        choices = ", ".join(member.value for member in SquashingFunction)
        raise ValueError(f"Environment variable {key} must be one of: {choices}.") from exc
