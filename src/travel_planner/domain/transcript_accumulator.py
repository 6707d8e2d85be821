"""Running transcript for one dictation session."""

from .models import RecognitionFragment


class TranscriptAccumulator:
    """
    Merges recognition fragments into the session transcript.

    A fragment flagged as a replacement overwrites the whole accumulated text;
    any other fragment is appended. Word-level correction ranges sent by the
    vendor are not applied.
    """

    def __init__(self) -> None:
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    def apply(self, fragment: RecognitionFragment) -> None:
        if fragment.replace:
            self._text = fragment.text
        else:
            self._text += fragment.text

    def result(self, placeholder: str) -> str:
        """Returns the transcript, or ``placeholder`` when nothing was recognized."""
        return self._text or placeholder
