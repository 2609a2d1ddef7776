"""
webform configuration using pydantic-settings.

All settings can be set via environment variables with WEBFORM_ prefix,
or via a .env file in the working directory.
"""

from anystore.settings import BaseSettings
from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from webform.exc import ConfigurationError

URLENCODED = "application/x-www-form-urlencoded"
MULTIPART = "multipart/form-data"


class Settings(BaseSettings):
    """
    webform configuration using pydantic-settings.

    Settings are loaded from (in order of priority, highest first):
    1. Environment variables with WEBFORM_ prefix
    2. .env file
    """

    model_config = SettingsConfigDict(
        env_prefix="webform_",
        env_file=".env",
        extra="ignore",
    )

    # Multipart encoding
    boundary_length: int = Field(default=20)
    """Number of ASCII letters in a generated multipart boundary"""

    charset: str = Field(default="utf-8")
    """Charset used to turn names and values into bytes"""

    # Form defaults
    default_enctype: str = Field(default=URLENCODED)
    """Enctype assumed for forms without an enctype attribute"""

    @field_validator("boundary_length")
    @classmethod
    def check_boundary_length(cls, v: int) -> int:
        if v < 1:
            raise ConfigurationError(f"boundary_length must be positive: {v}")
        return v

    @field_validator("charset")
    @classmethod
    def check_charset(cls, v: str) -> str:
        try:
            "".encode(v)
        except LookupError:
            raise ConfigurationError(f"Unknown charset: {v}")
        return v
