from typing import Any, Mapping, Optional, Tuple, Union
import os

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from platerecognizer.core.errors import ConfigurationError

DEFAULT_URI = "https://api.platerecognizer.com/v1"
DEFAULT_TIMEOUT = 10000  # ms

# Regions used throughout the examples; the service accepts many more.
AVAILABLE_REGIONS = ("za", "us-ca")


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    url: str = DEFAULT_URI
    default_regions: Optional[Tuple[str, ...]] = None
    timeout: int = DEFAULT_TIMEOUT

    @field_validator("api_key")
    @classmethod
    def _api_key_not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("api_key must be a non-empty string")
        return value

    @field_validator("url")
    @classmethod
    def _url_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("url must be a non-empty string")
        return value

    @field_validator("timeout")
    @classmethod
    def _timeout_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"timeout must be positive, got {value}")
        return value

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0


def build_config(options: Union[ClientConfig, Mapping[str, Any]]) -> ClientConfig:
    """
    Merges user options with the defaults into a new frozen ClientConfig.
    The caller's mapping is copied, never updated in place.
    Unset keys, and keys explicitly set to None, fall back to the defaults.
    ClientConfig instances are validated again, since model_copy skips validation.
    """
    if isinstance(options, ClientConfig):
        options = options.model_dump()

    merged = {k: v for k, v in dict(options).items() if v is not None}
    if not merged.get("api_key"):
        raise ConfigurationError("api_key is required")

    try:
        return ClientConfig(**merged)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid client configuration: {exc}") from exc


def _parse_regions(raw: str) -> Optional[Tuple[str, ...]]:
    if not raw:
        return None
    return tuple(code.strip() for code in raw.split(",") if code.strip())


def load_from_env() -> ClientConfig:
    """Load configuration from PLATERECOGNIZER_* environment variables"""
    return build_config({
        "api_key": os.getenv("PLATERECOGNIZER_API_KEY", ""),
        "url": os.getenv("PLATERECOGNIZER_URL", DEFAULT_URI),
        "default_regions": _parse_regions(os.getenv("PLATERECOGNIZER_REGIONS", "")),
        "timeout": os.getenv("PLATERECOGNIZER_TIMEOUT", str(DEFAULT_TIMEOUT)),
    })
