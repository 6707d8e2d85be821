"""Moviepy (ffmpeg) implementation of the AudioTranscoder interface."""

from pathlib import Path

import moviepy

from travel_planner.exceptions import TranscodeError
from travel_planner.logging import setup_logging

from .interfaces import AudioTranscoder

logger = setup_logging()


class MoviepyTranscoder(AudioTranscoder):
    """Decodes browser recordings to raw PCM with moviepy's ffmpeg backend."""

    def __init__(self, sample_rate: int = 16000, channels: int = 1):
        self._sample_rate = sample_rate
        self._channels = channels

    def transcode(self, input_path: Path, output_path: Path) -> None:
        try:
            # MediaRecorder WebM has no duration in its header; decode to find it.
            clip = moviepy.AudioFileClip(
                str(input_path), fps=self._sample_rate, decode_file=True
            )
            try:
                clip.write_audiofile(
                    str(output_path),
                    fps=self._sample_rate,
                    nbytes=2,
                    codec="pcm_s16le",
                    ffmpeg_params=["-ac", str(self._channels), "-f", "s16le"],
                    logger=None,
                )
            finally:
                clip.close()
        except Exception as e:
            logger.exception(
                "Audio transcoding failed", extra={"file_name": input_path.name}
            )
            raise TranscodeError(input_path.name, e) from e

        logger.info(
            "Audio transcoded to PCM",
            extra={
                "file_name": input_path.name,
                "pcm_bytes": output_path.stat().st_size,
            },
        )
