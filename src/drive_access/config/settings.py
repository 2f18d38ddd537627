"""
Client configuration for drive-access.

Settings are loaded from the environment (prefix ``DRIVE_ACCESS_``) or an
``.env`` file, and are passed explicitly to the client and access engines.
"""
from typing import Any, Dict, List
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr, field_validator

from .constants import ApiDefaults


class DriveAccessSettings(BaseSettings):
    """Connection and behaviour settings for the access API client."""

    model_config = SettingsConfigDict(
        env_prefix="DRIVE_ACCESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API Configuration
    api_url: str = Field(default=ApiDefaults.BASE_URL, description="API root URL")
    api_key: SecretStr = Field(default=SecretStr(""), description="Bearer token for the API")
    version: str = Field(default=ApiDefaults.VERSION, description="API version segment")

    # HTTP Configuration
    timeout_seconds: float = Field(default=ApiDefaults.TIMEOUT_SECONDS, gt=0)
    max_connections: int = Field(default=ApiDefaults.MAX_CONNECTIONS, ge=1)
    verify_ssl: bool = Field(default=True)

    # Behaviour
    verbose: bool = Field(default=False, description="Log every request and response at DEBUG")
    check_role_legality: bool = Field(
        default=True,
        description="Reject roles illegal for a known resource kind before sending"
    )

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("version")
    @classmethod
    def strip_version_prefix(cls, value: str) -> str:
        value = value.strip()
        return value[1:] if value.lower().startswith("v") else value

    @property
    def base_url(self) -> str:
        """Versioned API base URL every request path is appended to."""
        return f"{self.api_url}/v{self.version}"

    @property
    def authorization_header(self) -> str:
        return f"{ApiDefaults.TOKEN_PREFIX} {self.api_key.get_secret_value()}"

    def validate_config(self) -> Dict[str, Any]:
        """Validate configuration and return validation results."""
        errors: List[str] = []
        warnings: List[str] = []

        if not self.api_key.get_secret_value():
            warnings.append("DRIVE_ACCESS_API_KEY is empty; requests will be unauthenticated")

        if not self.api_url.startswith(("http://", "https://")):
            errors.append(f"DRIVE_ACCESS_API_URL must be an http(s) URL, got: {self.api_url}")

        if not self.version.isdigit():
            errors.append(f"DRIVE_ACCESS_VERSION must be numeric, got: {self.version}")

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "warnings": warnings,
            "config_summary": {
                "base_url": self.base_url,
                "timeout_seconds": self.timeout_seconds,
                "verbose": self.verbose,
                "check_role_legality": self.check_role_legality,
            }
        }


@lru_cache()
def get_settings() -> DriveAccessSettings:
    """Get cached settings loaded from the environment."""
    return DriveAccessSettings()
