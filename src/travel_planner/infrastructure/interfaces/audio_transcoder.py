"""Abstract interface for audio transcoding."""

from abc import ABC, abstractmethod
from pathlib import Path


class AudioTranscoder(ABC):
    """Abstract base class for converters producing raw PCM for dictation."""

    @abstractmethod
    def transcode(self, input_path: Path, output_path: Path) -> None:
        """
        Converts an uploaded recording to 16-bit little-endian 16 kHz mono PCM.

        Args:
            input_path: Browser-recorded audio container (webm, ogg, mp4...).
            output_path: Destination of the raw PCM stream.

        Raises:
            TranscodeError: If the conversion fails.
        """
        pass
