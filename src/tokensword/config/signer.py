"""
Signer Configuration.
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from tokensword.base58 import INT64_MAX


class SignerSettings(BaseSettings):
    """Key and token format settings for a Signer."""

    model_config = SettingsConfigDict(
        env_prefix="TS_SIGNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    secret_key: SecretStr = Field(default=SecretStr(""), description="Secret key for the keyed hash")
    timestamp: bool = Field(default=False, description="Embed a timestamp in every token")
    epoch: int = Field(
        default=0,
        ge=0,
        le=INT64_MAX,
        description="Seconds subtracted from the wall clock before encoding the timestamp",
    )
