"""Authentication information for read-only Drive listing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_REQUIRED_KEYS: dict[str, str] = {
    "api_key": "api_key",
    "service_account": "service_account_file",
}


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Supported kinds:
        kind = "api_key"          data["api_key"]
        kind = "service_account"  data["service_account_file"]
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind not in _REQUIRED_KEYS:
            raise ValueError(
                f"AuthInfo.kind must be one of {sorted(_REQUIRED_KEYS)}, got {self.kind!r}"
            )

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        key = _REQUIRED_KEYS[self.kind]
        value = self.data.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"AuthInfo.data['{key}'] must be a non-empty string")

    @classmethod
    def from_api_key(cls, api_key: str) -> "AuthInfo":
        return cls(kind="api_key", data={"api_key": api_key})

    @classmethod
    def from_service_account_file(cls, path: str) -> "AuthInfo":
        return cls(kind="service_account", data={"service_account_file": path})

    @property
    def api_key(self) -> str | None:
        return self.data.get("api_key") if self.kind == "api_key" else None

    @property
    def service_account_file(self) -> str | None:
        if self.kind != "service_account":
            return None
        return self.data.get("service_account_file")

    def __repr__(self) -> str:
        # Never print the key itself.
        return f"AuthInfo(kind={self.kind!r})"
