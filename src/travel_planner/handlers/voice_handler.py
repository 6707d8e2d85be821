"""Handler for transcribing uploaded voice recordings."""

import asyncio
import os
import uuid
from pathlib import Path

import websockets

from travel_planner.config import IflytekConfig
from travel_planner.exceptions import MissingCredentialsError, TempStorageError
from travel_planner.infrastructure import StreamingTranscriptionSession, build_auth_url
from travel_planner.infrastructure.iflytek_session import Connector
from travel_planner.infrastructure.interfaces import AudioTranscoder
from travel_planner.logging import setup_logging

logger = setup_logging()

DEFAULT_UPLOAD_SUFFIX = ".webm"


class VoiceTranscriptionHandler:
    """Orchestrates upload → PCM → streaming dictation for one request."""

    def __init__(
        self,
        config: IflytekConfig,
        transcoder: AudioTranscoder,
        temp_dir: Path,
        connect: Connector = websockets.connect,
    ):
        self._config = config
        self._transcoder = transcoder
        self._temp_dir = temp_dir
        self._connect = connect

    async def transcribe(
        self, audio_data: bytes, file_name: str | None = None
    ) -> str:
        """
        Transcribes one recording.

        The upload and its PCM conversion live in ``temp_dir`` under a fresh
        random name and are removed before this method returns, whatever the
        outcome.

        Args:
            audio_data: Raw bytes of the uploaded recording.
            file_name: Client file name, used only for its extension.

        Returns:
            The recognized text, or the configured placeholder.

        Raises:
            MissingCredentialsError: If vendor credentials are not configured.
            TempStorageError: If the upload cannot be written.
            TranscodeError: If conversion to PCM fails.
            TranscriptionError: If the dictation session fails.
        """
        if not self._config.has_credentials:
            logger.error("iFlytek credentials are not configured")
            raise MissingCredentialsError("iflytek")

        request_id = uuid.uuid4().hex
        suffix = os.path.splitext(file_name or "")[1] or DEFAULT_UPLOAD_SUFFIX
        input_path = self._temp_dir / f"{request_id}{suffix}"
        output_path = self._temp_dir / f"{request_id}.pcm"

        logger.info(
            "Transcription requested",
            extra={"request_id": request_id, "upload_bytes": len(audio_data)},
        )

        try:
            try:
                self._temp_dir.mkdir(parents=True, exist_ok=True)
                input_path.write_bytes(audio_data)
            except OSError as e:
                logger.exception(
                    "Failed to write upload", extra={"request_id": request_id}
                )
                raise TempStorageError(str(input_path), e) from e

            await asyncio.to_thread(self._transcoder.transcode, input_path, output_path)
            pcm = output_path.read_bytes()

            transcript = await self._new_session(pcm).run()
            logger.info(
                "Transcription completed",
                extra={"request_id": request_id, "chars": len(transcript)},
            )
            return transcript
        finally:
            self._cleanup(input_path, output_path)

    def _new_session(self, pcm: bytes) -> StreamingTranscriptionSession:
        config = self._config
        url = build_auth_url(
            config.host, config.path, config.api_key, config.api_secret
        )
        return StreamingTranscriptionSession(
            url,
            config.app_id,
            config.business_params(),
            pcm,
            frame_size=config.frame_size,
            frame_interval=config.frame_interval_seconds,
            timeout=config.timeout_seconds,
            placeholder=config.placeholder,
            connect=self._connect,
        )

    def _cleanup(self, *paths: Path) -> None:
        for path in paths:
            try:
                path.unlink(missing_ok=True)
            except OSError:
                logger.exception(
                    "Failed to remove temporary file", extra={"path": str(path)}
                )
