"""Configuration loading and startup validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .domain.preview import DEFAULT_THEME, PREVIEW_THEMES
from .providers import PROVIDER_DEFAULTS

DEFAULT_CONFIG_PATH = "config/config.yaml"
DEFAULT_MODEL = "gemini-2.5-flash"

_ENV_OVERRIDES = {
    "provider": "RESUME_TUNER_PROVIDER",
    "model": "RESUME_TUNER_MODEL",
    "api_base": "RESUME_TUNER_API_BASE",
}


@dataclass
class TunerConfig:
    """Settings for the model backend and the preview."""

    provider: str = "gemini"
    api_key: str = ""
    model: str = DEFAULT_MODEL
    api_base: str = ""
    max_tokens: int = 4096
    temperature: float = 0.7
    retry_max_attempts: int = 3
    default_theme: str = DEFAULT_THEME

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TunerConfig":
        config = cls(
            provider=str(data.get("provider", "gemini") or "gemini"),
            api_key=str(data.get("api_key", "") or ""),
            model=str(data.get("model", DEFAULT_MODEL) or DEFAULT_MODEL),
            api_base=str(data.get("api_base", "") or ""),
            max_tokens=int(data.get("max_tokens", 4096)),
            temperature=float(data.get("temperature", 0.7)),
            retry_max_attempts=int(data.get("retry_max_attempts", 3)),
            default_theme=str(data.get("default_theme", DEFAULT_THEME)),
        )
        for field_name, env_var in _ENV_OVERRIDES.items():
            value = os.environ.get(env_var, "").strip()
            if value:
                setattr(config, field_name, value)
        return config


def load_raw_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Read the YAML file at *config_path* into a dict."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return data


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> TunerConfig:
    """Load :class:`TunerConfig` from YAML, applying environment overrides."""
    return TunerConfig.from_dict(load_raw_config(config_path))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""

    field: str
    message: str
    severity: Severity


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- Provider ---
    provider = raw_config.get("provider", "gemini")
    if not isinstance(provider, str) or not provider:
        errors.append(ConfigError("provider", "provider must be a non-empty string", Severity.ERROR))
        provider = "gemini"
    provider = provider.lower()

    if provider not in PROVIDER_DEFAULTS:
        errors.append(
            ConfigError(
                "provider",
                f"Unknown provider '{provider}'. Expected one of: {', '.join(PROVIDER_DEFAULTS.keys())}",
                Severity.WARNING,
            )
        )

    # --- API Key ---
    env_key = PROVIDER_DEFAULTS.get(provider, {}).get("env_key", "")
    if not _resolve_api_key_value(str(raw_config.get("api_key", "") or ""), env_key):
        message = (
            f"{env_key} not set. Set the env var or add api_key to {DEFAULT_CONFIG_PATH}"
            if env_key
            else f"API key not set. Set the env var or add api_key to {DEFAULT_CONFIG_PATH}"
        )
        errors.append(ConfigError("api_key", message, Severity.ERROR))

    # --- Model ---
    model = raw_config.get("model", DEFAULT_MODEL)
    if not model or not isinstance(model, str):
        errors.append(ConfigError("model", "model must be a non-empty string", Severity.ERROR))

    # --- Temperature ---
    temperature = raw_config.get("temperature", 0.7)
    if isinstance(temperature, bool) or not isinstance(temperature, (int, float)) or not 0 <= temperature <= 2:
        errors.append(
            ConfigError(
                "temperature",
                f"temperature must be a number between 0 and 2, got {temperature}",
                Severity.ERROR,
            )
        )

    # --- Max tokens ---
    max_tokens = raw_config.get("max_tokens", 4096)
    if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens <= 0:
        errors.append(
            ConfigError("max_tokens", f"max_tokens must be a positive integer, got {max_tokens}", Severity.ERROR)
        )

    # --- Retries ---
    attempts = raw_config.get("retry_max_attempts", 3)
    if isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1:
        errors.append(
            ConfigError(
                "retry_max_attempts",
                f"retry_max_attempts must be an integer >= 1, got {attempts}",
                Severity.ERROR,
            )
        )

    # --- Theme ---
    theme = raw_config.get("default_theme", DEFAULT_THEME)
    if theme not in PREVIEW_THEMES:
        errors.append(
            ConfigError(
                "default_theme",
                f"Unknown theme {theme!r}. Expected one of: {', '.join(PREVIEW_THEMES)}",
                Severity.WARNING,
            )
        )

    return errors


def _resolve_api_key_value(config_api_key: str, env_key: str = "") -> str:
    """Resolve API key from env or config value without side effects.

    Returns the resolved key string, or empty string if unresolvable.
    """
    if env_key:
        env_value = os.environ.get(env_key, "")
        if env_value:
            return env_value

    if not config_api_key:
        return ""

    if not config_api_key.startswith("${"):
        return config_api_key

    if config_api_key.endswith("}"):
        return os.environ.get(config_api_key[2:-1], "")

    return ""


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
