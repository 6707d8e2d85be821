"""Voice transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from travel_planner.dependencies import get_voice_handler
from travel_planner.exceptions import (
    MissingCredentialsError,
    SpeechConnectionError,
    TempStorageError,
    TranscodeError,
    TranscriptionTimeoutError,
    VendorRecognitionError,
)
from travel_planner.handlers import VoiceTranscriptionHandler
from travel_planner.logging import setup_logging
from travel_planner.response_models import ErrorResponse, TranscriptionResponse

from .errors import ERROR_RESPONSES, api_error

logger = setup_logging()

router = APIRouter(prefix="/api/voice", tags=["voice"])

VoiceHandlerDep = Annotated[VoiceTranscriptionHandler, Depends(get_voice_handler)]


@router.post(
    "/transcribe",
    response_model=TranscriptionResponse,
    responses={**ERROR_RESPONSES, 504: {"model": ErrorResponse}},
)
async def transcribe(
    handler: VoiceHandlerDep,
    audio: UploadFile | None = File(None, description="Recorded audio, any container"),
) -> TranscriptionResponse:
    """
    Transcribes a browser recording.

    The audio is converted to 16 kHz mono PCM and streamed to the dictation
    service; the response is sent once the service finishes.
    """
    if audio is None:
        raise api_error(400, "No audio file provided")

    audio_data = await audio.read()

    try:
        text = await handler.transcribe(audio_data, audio.filename)
    except MissingCredentialsError:
        raise api_error(500, "Speech service credentials are not configured")
    except TempStorageError:
        raise api_error(500, "Failed to store uploaded audio")
    except TranscodeError as e:
        raise api_error(500, "Audio transcoding failed", str(e.cause or e))
    except VendorRecognitionError as e:
        raise api_error(
            500,
            "Speech recognition failed",
            f"{e.vendor_message} (code {e.code})",
        )
    except TranscriptionTimeoutError as e:
        raise api_error(504, "Speech recognition timed out", str(e))
    except SpeechConnectionError as e:
        raise api_error(500, "Speech service connection failed", str(e.cause or e))

    return TranscriptionResponse(transcription=text)
