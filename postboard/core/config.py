"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Log every SQL statement.
        database_url: SQLAlchemy URL of the document store.
        cors_origins: Browser origins allowed to call the API.
        rate_limit_auth: Rate limit for sign-up and sign-in.
        token_bytes: Random bytes per issued bearer token.
        password_hash_iterations: PBKDF2 rounds for new password hashes.
        nickname_min_length: Shortest allowed nickname.
        nickname_max_length: Longest allowed nickname.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Postboard"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    sql_echo: bool = False
    database_url: str = "sqlite:///./postboard.db"
    cors_origins: list[str] = ["http://localhost:7165"]
    rate_limit_auth: str = "20/minute"
    token_bytes: int = 16
    password_hash_iterations: int = 130_000
    nickname_min_length: int = 3
    nickname_max_length: int = 12


settings = Settings()
