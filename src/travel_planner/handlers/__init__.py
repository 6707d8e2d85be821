"""Request handlers."""

from .voice_handler import VoiceTranscriptionHandler

__all__ = ["VoiceTranscriptionHandler"]
