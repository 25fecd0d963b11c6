from abc import ABC, abstractmethod
from collections.abc import Callable

ProgressCallback = Callable[[str, float], None]


class BaseOcrEngine(ABC):
    """Contract for optical character recognition adapters."""

    @abstractmethod
    def recognize(
        self,
        image_bytes: bytes,
        language: str = "eng",
        progress: ProgressCallback | None = None,
    ) -> str:
        """Recognize text in a single raster image.

        Args:
            image_bytes: Encoded image (PNG, JPEG, ...).
            language: Recognition language code.
            progress: Optional observer called with (stage, fraction in 0..1).
                Must not influence the result.

        Returns:
            Raw recognized text, possibly empty.

        Raises:
            OcrFailedError: if the engine cannot process the image.
        """
