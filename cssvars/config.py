"""Configuration loading for css-to-vars (.cssvars.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import Scope

CONFIG_FILENAME = ".cssvars.yml"

DEFAULT_MIN_OCCURRENCES = 2
DEFAULT_PREFIX = "cv"


class ConfigError(RuntimeError):
    """Raised when configuration is malformed or holds invalid values."""


@dataclass(frozen=True)
class ExtractionConfig:
    """Options recognised by a single extraction run."""

    min_occurrences: int = DEFAULT_MIN_OCCURRENCES
    scope: Scope = Scope.ALL
    prefix: str = DEFAULT_PREFIX
    preview_only: bool = False
    exclude_paths: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        validate_config(self)

    def with_overrides(
        self,
        *,
        min_occurrences: Optional[int] = None,
        scope: Optional[str] = None,
        prefix: Optional[str] = None,
        preview_only: Optional[bool] = None,
    ) -> "ExtractionConfig":
        """Return a copy with any non-None override applied (CLI flags win)."""
        changes: Dict[str, Any] = {}
        if min_occurrences is not None:
            changes["min_occurrences"] = min_occurrences
        if scope is not None:
            changes["scope"] = _parse_scope(scope)
        if prefix is not None:
            changes["prefix"] = prefix
        if preview_only:
            changes["preview_only"] = True
        return replace(self, **changes) if changes else self


def validate_config(config: ExtractionConfig) -> None:
    if isinstance(config.min_occurrences, bool) or not isinstance(config.min_occurrences, int):
        raise ConfigError("min_occurrences must be an integer")
    if config.min_occurrences < 1:
        raise ConfigError(f"min_occurrences must be at least 1 (got {config.min_occurrences})")
    if not isinstance(config.scope, Scope):
        raise ConfigError(f"Unknown scope: {config.scope!r}")
    if not isinstance(config.prefix, str) or not config.prefix.strip():
        raise ConfigError("prefix must be a non-empty string")


def load_config(config_path: Path) -> ExtractionConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return ExtractionConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown keys in {CONFIG_FILENAME}: {', '.join(unknown)}")

    kwargs: Dict[str, Any] = {}
    if data.get("min_occurrences") is not None:
        kwargs["min_occurrences"] = _as_int(data["min_occurrences"], "min_occurrences")
    if data.get("scope") is not None:
        kwargs["scope"] = _parse_scope(str(data["scope"]))
    if data.get("prefix") is not None:
        kwargs["prefix"] = str(data["prefix"])
    if data.get("dry_run") is not None:
        kwargs["preview_only"] = _as_bool(data["dry_run"], "dry_run")
    kwargs["exclude_paths"] = _as_str_list(data.get("exclude_paths"))

    return ExtractionConfig(**kwargs)


_KNOWN_KEYS = {"min_occurrences", "scope", "prefix", "dry_run", "exclude_paths"}


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_scope(value: str) -> Scope:
    try:
        return Scope(value.strip().lower())
    except ValueError:
        choices = ", ".join(scope.value for scope in Scope)
        raise ConfigError(f"Unknown scope '{value}' (expected one of: {choices})") from None


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ConfigError(f"{key} must be an integer (got {value!r})")


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    raise ConfigError(f"{key} must be a boolean (got {value!r})")


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    raise ConfigError("exclude_paths must be a string or a list of strings")


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ExtractionConfig",
    "load_config",
    "validate_config",
]
