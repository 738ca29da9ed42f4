"""
Configuration management for the Feedback Analyzer.
Settings come from environment variables (or a local .env file).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field

from app.schemas.base import Channel, Sentiment, Theme


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Summarization service
    # No auth header is attached here: point INSIGHTS_API_URL at a proxy
    # that injects credentials when running against the real API.
    insights_api_url: str = Field(
        default="https://api.anthropic.com/v1/messages", alias="INSIGHTS_API_URL"
    )
    insights_model: str = Field(default="claude-sonnet-4-20250514", alias="INSIGHTS_MODEL")
    insights_max_tokens: int = Field(default=1000, alias="INSIGHTS_MAX_TOKENS")
    insights_top_n: int = Field(default=20, alias="INSIGHTS_TOP_N")
    insights_timeout: float = Field(default=60.0, alias="INSIGHTS_TIMEOUT")

    # Persistence slot
    data_dir: str = Field(default="./data", alias="DATA_DIR")
    storage_key: str = Field(default="feedback-data", alias="STORAGE_KEY")

    # Sample data + scoring
    sample_size: int = Field(default=50, alias="SAMPLE_SIZE")
    high_priority_threshold: int = Field(default=7, alias="HIGH_PRIORITY_THRESHOLD")

    # Application Settings
    mock_mode: bool = Field(default=False, alias="MOCK_MODE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def get_llm_config(self) -> dict:
        """Summarization endpoint configuration, for status display."""
        if self.mock_mode:
            return {"provider": "mock", "model": self.insights_model}
        return {
            "provider": "anthropic",
            "model": self.insights_model,
            "base_url": self.insights_api_url,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Fixed vocabularies, in enum order (charts list them in this order)
CHANNELS = [c.value for c in Channel]
SENTIMENTS = [s.value for s in Sentiment]
THEMES = [t.value for t in Theme]

SENTIMENT_SCORES = {"Positive": 1, "Neutral": 0, "Negative": -1}

COLORS = {
    "Positive": "#10b981",
    "Neutral": "#6b7280",
    "Negative": "#ef4444",
    "Feature Request": "#3b82f6",
    "Bug Report": "#ef4444",
    "Performance": "#f59e0b",
    "UX/UI": "#8b5cf6",
    "Documentation": "#06b6d4",
    "Integration": "#ec4899",
    "Pricing": "#10b981",
    "Other": "#6b7280",
}
