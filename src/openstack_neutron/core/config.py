"""Client configuration management helpers."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _to_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _to_int(name: str, value: Any) -> int:
    # bool is an int subclass; "true" is never a timeout
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got {value!r}")


def _to_optional_str(name: str, value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value or None
    raise ValueError(f"{name} must be a string, got {value!r}")


@dataclass(frozen=True)
class NeutronConfig:
    """Immutable configuration object loaded from env or files."""

    endpoint: str = "http://localhost:9696"
    api_version: str = "v2.0"
    default_tenant_id: Optional[str] = None
    require_name_on_create: bool = False
    timeout_seconds: int = 30

    _ENV_VARS = {
        "endpoint": "NEUTRON_ENDPOINT",
        "api_version": "NEUTRON_API_VERSION",
        "default_tenant_id": "NEUTRON_TENANT_ID",
        "require_name_on_create": "NEUTRON_REQUIRE_NAME_ON_CREATE",
        "timeout_seconds": "NEUTRON_TIMEOUT_SECONDS",
    }

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def from_env(cls) -> "NeutronConfig":
        raw = {
            key: os.environ[env_var]
            for key, env_var in cls._ENV_VARS.items()
            if env_var in os.environ
        }
        return cls.from_mapping(raw)

    @classmethod
    def from_file(cls, path: str) -> "NeutronConfig":
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        raw = file_path.read_text()
        suffix = file_path.suffix.lower()
        if suffix == ".json":
            data = json.loads(raw)
        elif suffix in {".yaml", ".yml"}:
            data = cls._load_yaml(raw)
        else:
            raise ValueError("Unsupported config format. Use JSON or YAML.")
        if not isinstance(data, Mapping):
            raise ValueError(f"Configuration file must hold a mapping: {path}")
        return cls.from_mapping(data)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NeutronConfig":
        """Build a config from loosely typed values; unknown keys are ignored."""

        return cls(**cls._coerce(data))

    @property
    def routers_url(self) -> str:
        return f"{self.endpoint.rstrip('/')}/{self.api_version.strip('/')}/routers"

    def validate(self) -> None:
        if not isinstance(self.endpoint, str):
            raise ValueError("endpoint must be a string")
        if not isinstance(self.api_version, str):
            raise ValueError("api_version must be a string")
        if self.default_tenant_id is not None and not isinstance(
            self.default_tenant_id, str
        ):
            raise ValueError("default_tenant_id must be a string")
        if not isinstance(self.require_name_on_create, bool):
            raise ValueError("require_name_on_create must be a boolean")
        if isinstance(self.timeout_seconds, bool) or not isinstance(
            self.timeout_seconds, int
        ):
            raise ValueError("timeout_seconds must be an integer")

        parsed = urlparse(self.endpoint)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError("endpoint must be an absolute http(s) URL")
        if not self.api_version.strip("/"):
            raise ValueError("api_version must not be empty")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be greater than zero")

    @classmethod
    def _coerce(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        known = {field.name for field in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        if "default_tenant_id" in values:
            values["default_tenant_id"] = _to_optional_str(
                "default_tenant_id", values["default_tenant_id"]
            )
        if "require_name_on_create" in values:
            values["require_name_on_create"] = _to_bool(
                "require_name_on_create", values["require_name_on_create"]
            )
        if "timeout_seconds" in values:
            values["timeout_seconds"] = _to_int(
                "timeout_seconds", values["timeout_seconds"]
            )
        return values

    @staticmethod
    def _load_yaml(raw: str) -> Any:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to parse YAML config files") from exc
        return yaml.safe_load(raw) or {}
