import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # NuGet endpoints
    nuget_search_url: str = os.getenv("NUGET_SEARCH_URL", "https://azuresearch-usnc.nuget.org/query")
    nuget_flat_container_url: str = os.getenv(
        "NUGET_FLAT_CONTAINER_URL", "https://api.nuget.org/v3-flatcontainer"
    )
    nuget_gallery_url: str = os.getenv("NUGET_GALLERY_URL", "https://www.nuget.org/packages")
    nuget_timeout: float = float(os.getenv("NUGET_TIMEOUT", "5.0"))
    nuget_search_take: int = int(os.getenv("NUGET_SEARCH_TAKE", "20"))

    # Cache
    package_cache_ttl: float = float(os.getenv("PACKAGE_CACHE_TTL", "300"))  # 5 minutes

    # Suggestions
    version_suggestion_limit: int = int(os.getenv("VERSION_SUGGESTION_LIMIT", "10"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_host: str = os.getenv("API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.nuget_timeout <= 0:
            raise ValueError("NUGET_TIMEOUT must be greater than 0")

        if self.package_cache_ttl <= 0:
            raise ValueError("PACKAGE_CACHE_TTL must be greater than 0")

        if not 1 <= self.nuget_search_take <= 1000:
            raise ValueError(
                f"NUGET_SEARCH_TAKE must be between 1 and 1000, got {self.nuget_search_take}"
            )

        if self.version_suggestion_limit < 1:
            raise ValueError("VERSION_SUGGESTION_LIMIT must be at least 1")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
