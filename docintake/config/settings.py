from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "docintake"
    db_username: str = "docintake"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    storage_root: str = "/app/files"
    max_upload_bytes: int = 10 * 1024 * 1024
    validate_metadata_against_utilities: bool = False

    pdf_engine: str = "pdfplumber"

    scanned_text_threshold: int = 100
    minimal_text_threshold: int = 50
    ocr_max_pages: int = 10
    ocr_min_text_length: int = 10
    ocr_language: str = "eng"
    ocr_page_timeout_seconds: int = 60
    rasterize_scale: float = 2.0

    summary_provider: str = "gemini"
    summary_temperature: float = 0.3
    summary_max_output_tokens: int = 4000
    summary_max_input_chars: int = 15000

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: int = 60

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_base_url: str = ""
    openai_timeout_seconds: int = 60
