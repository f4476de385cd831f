"""
Load settings from .env. All values come from environment variables
(populated via .env file); defaults target the public AWS documentation site.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.124 Safari/537.36 ModelContextProtocol/1.0 (AWS Documentation Client)"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Documentation source
    docs_domain: str = Field(default="docs.aws.amazon.com", description="Only pages on this host may be read")
    docs_required_suffix: str = Field(default=".html", description="Readable page URLs must end with this")
    search_api_url: str = Field(
        default="https://proxy.search.docs.aws.amazon.com/search",
        description="Documentation search endpoint (POST)",
    )
    recommendations_api_url: str = Field(
        default="https://contentrecs-api.docs.aws.amazon.com/v1/recommendations",
        description="Recommendations endpoint (GET, ?path=<page url>)",
    )
    search_locale: str = Field(default="en_us", description="Locale sent with search requests")

    # HTTP client
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent for every outbound request")
    http_timeout_sec: float = Field(default=30.0, gt=0, description="Per-request timeout")

    # App
    log_level: str = Field(default="INFO", description="Log level")
    api_host: str = Field(default="0.0.0.0", description="FastAPI bind host")
    api_port: int = Field(default=8000, description="FastAPI port")


@lru_cache
def get_settings() -> Settings:
    return Settings()
