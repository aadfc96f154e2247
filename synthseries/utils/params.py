from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml


_PARAMS_PATH = Path(__file__).resolve().parents[1] / "config" / "params.yaml"


@lru_cache(maxsize=1)
def load_params() -> Dict[str, Any]:
    """@brief Load library defaults from the bundled configuration.

    @returns A dictionary of values parsed from `config/params.yaml`.
    @raises FileNotFoundError if `config/params.yaml` is missing.
    @raises ValueError if the YAML document is invalid.
    """
    if not _PARAMS_PATH.exists():
        raise FileNotFoundError(f"Parameters file not found: {_PARAMS_PATH}")

    with _PARAMS_PATH.open("r", encoding="utf-8") as f:
        try:
            params = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"Parameters file is not a valid YAML document: {_PARAMS_PATH}") from exc

    if not isinstance(params, dict):
        raise ValueError(f"Parameters file must contain a mapping: {_PARAMS_PATH}")

    return params


def _section(name: str) -> Dict[str, Any]:
    try:
        return dict(load_params()[name])
    except KeyError as exc:
        raise ValueError(f"Parameters file has no '{name}' section.") from exc


def get_series_defaults() -> Dict[str, Any]:
    """@brief Return default base configuration values.

    @return Mapping with `sampling_mode`, `window_seconds`, `interval`,
    `num_of_data` and `value_key_name`.
    """
    return _section("series")


def get_periodic_defaults() -> Dict[str, Any]:
    """@brief Return default options for sine/cosine series."""
    return _section("periodic")


def get_gaussian_defaults() -> Dict[str, Any]:
    """@brief Return default options for Gaussian noise series."""
    return _section("gaussian")


def get_max_decimal_digits() -> int:
    """@brief Return the upper bound accepted for `decimalDigits` options."""
    return int(_section("rounding")["max_decimal_digits"])
