"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Expense Buddy"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/expense_buddy.sqlite"

    # Seeding
    seed_default_categories: bool = True

    # Recurring templates
    auto_generate_recurring: bool = True  # Reconcile on every dashboard view

    # Dashboard / listing windows
    trend_months: int = 6
    expense_default_window_months: int = 3

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
