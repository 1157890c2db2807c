from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]

    # Pro-forma decoding
    pdf_engine: str = "pdfplumber"

    # Document generation
    missing_value_marker: str = "[Not available]"
    date_format: str = "%d/%m/%Y"
