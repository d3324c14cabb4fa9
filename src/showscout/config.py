"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Sources
    listing_base_url: str = "https://www.londontheatre.co.uk"
    listing_path: str = "/whats-on"
    reference_url: str = "https://en.wikipedia.org/wiki/West_End_theatre"
    reference_base_url: str = "https://en.wikipedia.org"
    default_image_url: str = (
        "https://upload.wikimedia.org/wikipedia/commons/e/eb/London_%2844761485915%29.jpg"
    )

    # Scraping settings
    scrape_timeout: int = 30
    user_agent: str = "Mozilla/5.0"

    # Matching and enrichment
    match_threshold: float = 0.7  # Fuzzy score must be strictly above this
    drop_unmatched: bool = False  # Keep unmatched Wikipedia shows with placeholders
    enrich_concurrency: int = 5

    # Caching
    cache_ttl_seconds: int = 60 * 60
    refresh_interval_minutes: int = 60

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]


# Global settings instance
settings = Settings()
