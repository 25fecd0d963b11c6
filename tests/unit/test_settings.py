import pytest
from pydantic import ValidationError

from docintake.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_fallback_thresholds(self) -> None:
        s = Settings()
        assert s.scanned_text_threshold == 100
        assert s.minimal_text_threshold == 50
        assert s.ocr_max_pages == 10
        assert s.ocr_min_text_length == 10

    def test_default_summary_options(self) -> None:
        s = Settings()
        assert s.summary_provider == "gemini"
        assert s.summary_temperature == 0.3
        assert s.summary_max_output_tokens == 4000
        assert s.summary_max_input_chars == 15000

    def test_default_upload_limit(self) -> None:
        s = Settings()
        assert s.max_upload_bytes == 10 * 1024 * 1024

    def test_metadata_catalog_check_is_off_by_default(self) -> None:
        assert Settings().validate_metadata_against_utilities is False


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_db_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.example.com")
        s = Settings()
        assert s.db_host == "db.example.com"

    def test_loads_gemini_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "g-key")
        s = Settings()
        assert s.gemini_api_key == "g-key"

    def test_loads_ocr_max_pages(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_MAX_PAGES", "3")
        s = Settings()
        assert s.ocr_max_pages == 3


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUMMARY_TEMPERATURE", "warm")
        with pytest.raises(ValidationError):
            Settings()
