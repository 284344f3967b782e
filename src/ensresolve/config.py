"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ensresolve.core.types import DefaultBrowserAction, ProviderOrder


class EnsResolveSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ENSRESOLVE_",
    )

    # Fusion-style provider
    fusion_base_url: str = Field(
        default="https://api.fusionens.com",
        description="Base URL of the Fusion resolution API",
    )
    fusion_network: str | None = Field(
        default="mainnet",
        description="Value of the network query parameter sent to Fusion",
    )
    fusion_connect_timeout: float = Field(
        default=3.0,
        gt=0,
        description="Fusion connect timeout in seconds",
    )
    fusion_total_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Fusion total response timeout in seconds",
    )

    # Flat-address provider
    ensdata_base_url: str = Field(
        default="https://api.ensdata.net",
        description="Base URL of the ENSData API",
    )
    ensdata_connect_timeout: float = Field(
        default=3.0,
        gt=0,
        description="ENSData connect timeout in seconds",
    )
    ensdata_total_timeout: float = Field(
        default=5.0,
        gt=0,
        description="ENSData total response timeout in seconds",
    )

    # Routing
    provider_order: ProviderOrder = Field(
        default=ProviderOrder.FUSION_FIRST,
        description="Provider order for lookups that allow fallback",
    )

    # Destination preferences, supplied by the caller's settings layer
    l2_detection_enabled: bool = Field(
        default=True,
        description="Open L2 subdomains in their network's explorer",
    )
    default_browser_action: DefaultBrowserAction = Field(
        default=DefaultBrowserAction.ETHERSCAN,
        description="Preferred destination when a plain .eth name is opened",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    api_host: str = Field(
        default="127.0.0.1",
        description="Interface the HTTP API binds to",
    )
    api_port: int = Field(
        default=8000,
        description="Port the HTTP API listens on",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> EnsResolveSettings:
    """Get cached settings instance."""
    return EnsResolveSettings()
