from docintake.config.settings import Settings
from docintake.summary.base import BaseSummarizer
from docintake.summary.client_base import BaseSummaryClient
from docintake.summary.example_client_adapter import ExampleClientAdapter
from docintake.summary.gemini_client_adapter import GeminiClientAdapter
from docintake.summary.openai_client_adapter import OpenAIClientAdapter
from docintake.summary.summarizer import Summarizer


class SummarizerFactory:
    """Creates the summarizer for settings.summary_provider."""

    PROVIDERS = ("gemini", "openai", "openai_compatible", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseSummarizer:
        return Summarizer(
            client=cls.create_client(settings),
            temperature=settings.summary_temperature,
            max_output_tokens=settings.summary_max_output_tokens,
            max_input_chars=settings.summary_max_input_chars,
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseSummaryClient:
        provider = settings.summary_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            if not settings.gemini_api_key:
                raise ValueError("gemini_api_key is required for summary_provider=gemini")
            return GeminiClientAdapter(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model_name,
                timeout_seconds=settings.gemini_timeout_seconds,
                base_url=settings.gemini_base_url,
            )
        if provider in ("openai", "openai_compatible"):
            base_url = settings.openai_base_url.strip() or None
            if provider == "openai_compatible" and base_url is None:
                raise ValueError(
                    "openai_base_url is required for summary_provider=openai_compatible"
                )
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=base_url if provider == "openai_compatible" else None,
            )
        raise ValueError(
            f"Unknown summary provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
