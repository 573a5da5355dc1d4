"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from contact_form.models.contact import Category


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Plain (helpdesk) API
    plain_api_key: str = ""
    plain_api_url: str = "https://core-api.uk.plain.com/graphql/v1"
    plain_timeout_seconds: float = 15.0

    # Label type ids applied to created threads, one per category.
    # Unset ids are skipped rather than treated as errors.
    plain_label_type_id_bug: str | None = None
    plain_label_type_id_demo: str | None = None
    plain_label_type_id_feature: str | None = None
    plain_label_type_id_question: str | None = None
    plain_label_type_id_security: str | None = None

    model_config = {"env_file": ".env", "extra": "ignore"}

    def label_type_ids(self) -> dict[Category, str | None]:
        """Map each category to its configured label type id (or None)."""
        return {
            Category.BUG: self.plain_label_type_id_bug or None,
            Category.DEMO: self.plain_label_type_id_demo or None,
            Category.FEATURE: self.plain_label_type_id_feature or None,
            Category.QUESTION: self.plain_label_type_id_question or None,
            Category.SECURITY: self.plain_label_type_id_security or None,
        }

    def require_plain_api_key(self) -> str:
        if not self.plain_api_key:
            raise ConfigurationError("PLAIN_API_KEY environment variable is not set")
        return self.plain_api_key


@lru_cache
def get_settings() -> Settings:
    return Settings()
