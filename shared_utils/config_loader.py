from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import ValidationError as PydanticValidationError, field_validator
from functools import lru_cache
from typing import Optional

from shared_utils.constants import APIEndpoints, Defaults, LogScope
from shared_utils.error_handler import ConfigurationError
from shared_utils.logging_utils import get_scoped_logger

logger = get_scoped_logger(LogScope.CONFIG)


class Settings(BaseSettings):
    """ImageKit client configuration with environment variable precedence.

    Precedence: 1) Environment Variables > 2) .env file > 3) Class defaults (keys have no defaults)

    Every field is read from ``IMAGEKIT_<FIELD>``.
    """
    private_key: str
    public_key: str
    base_url: str = Defaults.BASE_URL
    upload_url: Optional[str] = None  # Defaults to {base_url}/files/upload
    request_timeout: Optional[float] = None  # None disables client-side timeouts

    model_config = SettingsConfigDict(
        env_prefix="IMAGEKIT_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    @field_validator('private_key', 'public_key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Reject blank API keys."""
        if not v.strip():
            raise ValueError("API key cannot be empty")
        return v.strip()

    @field_validator('base_url', 'upload_url')
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        """Require an http(s) URL and strip the trailing slash."""
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL must start with http:// or https://, got {v}")
        return v.rstrip("/")

    def get_upload_url(self) -> str:
        """Get the multipart upload endpoint.

        Returns:
            ``upload_url`` when configured, otherwise the upload path under ``base_url``
        """
        return self.upload_url or f"{self.base_url}{APIEndpoints.UPLOAD}"


def load_settings(**overrides) -> Settings:
    """Build Settings, converting pydantic errors into ConfigurationError.

    Raises:
        ConfigurationError: Naming the first missing or invalid variable
    """
    try:
        return Settings(**overrides)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else "unknown"
        variable = f"IMAGEKIT_{field.upper()}"
        if first.get("type") == "missing":
            message = f"Environment variable {variable} is not set"
        else:
            message = f"Environment variable {variable} is invalid: {first.get('msg')}"
        logger.error("configuration_invalid", variable=variable, error_type=first.get("type"))
        raise ConfigurationError(message, variable=variable) from exc


@lru_cache()
def get_settings() -> Settings:
    """Load and cache client settings.

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If required settings are missing or invalid
    """
    settings = load_settings()

    # Keys are never logged
    logger.info(
        "configuration_loaded",
        base_url=settings.base_url,
        upload_url=settings.get_upload_url(),
        request_timeout=settings.request_timeout,
    )

    return settings
