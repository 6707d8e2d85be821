"""Streaming dictation session over the iFlytek WebSocket API."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, AsyncContextManager, Callable

import websockets
from pydantic import ValidationError
from websockets.exceptions import ConnectionClosed, InvalidHandshake

from travel_planner.domain.transcript_accumulator import TranscriptAccumulator
from travel_planner.exceptions import (
    SpeechConnectionError,
    TranscriptionTimeoutError,
    VendorRecognitionError,
)
from travel_planner.logging import setup_logging

from .iflytek_frames import (
    VendorResponse,
    audio_frame,
    first_frame,
    iter_chunks,
    last_frame,
)

logger = setup_logging()

NORMAL_CLOSE_CODE = 1000
# First code of the application range; 1005 is reserved and cannot be sent.
ABNORMAL_CLOSE_CODE = 4000

Connector = Callable[[str], AsyncContextManager[Any]]


class SessionState(str, Enum):
    CONNECTING = "connecting"
    STREAMING = "streaming"
    FINISHED = "finished"


class EventKind(str, Enum):
    TICK = "tick"
    MESSAGE = "message"
    CLOSED = "closed"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class SessionEvent:
    kind: EventKind
    payload: str | bytes | None = None
    error: Exception | None = None


class StreamingTranscriptionSession:
    """
    Drives one dictation request from socket open to a single result.

    The frame ticker and the socket reader run as background tasks that only
    post ``SessionEvent`` objects to a queue. ``run`` is the sole consumer: it
    owns the PCM cursor and the transcript, sends frames, and returns (or
    raises) on the first terminal event, so a session resolves exactly once.
    """

    def __init__(
        self,
        url: str,
        app_id: str,
        business: dict,
        pcm: bytes,
        *,
        frame_size: int = 1280,
        frame_interval: float = 0.04,
        timeout: float = 60.0,
        placeholder: str = "(no speech detected)",
        connect: Connector = websockets.connect,
    ):
        self._url = url
        self._app_id = app_id
        self._business = business
        self._pcm_size = len(pcm)
        self._chunks = iter_chunks(pcm, frame_size)
        self._frame_interval = frame_interval
        self._timeout = timeout
        self._placeholder = placeholder
        self._connect = connect

        self._accumulator = TranscriptAccumulator()
        self._sending_done = False
        self.state = SessionState.CONNECTING
        self.frames_sent = 0

    async def run(self) -> str:
        """
        Streams the PCM buffer and returns the recognized text.

        Returns:
            The transcript, or the placeholder when nothing was recognized.

        Raises:
            SpeechConnectionError: If the socket cannot be opened or is lost
                without a close frame.
            VendorRecognitionError: If the vendor reports a nonzero code.
            TranscriptionTimeoutError: If no result arrives in time.
        """
        try:
            async with self._connect(self._url) as websocket:
                return await self._stream(websocket)
        except (OSError, InvalidHandshake) as e:
            self.state = SessionState.FINISHED
            logger.exception("Dictation socket connection failed")
            raise SpeechConnectionError(
                f"Speech service connection failed: {e}", cause=e
            ) from e

    async def _stream(self, websocket: Any) -> str:
        try:
            await websocket.send(first_frame(self._app_id, self._business))
        except ConnectionClosed as e:
            self.state = SessionState.FINISHED
            raise SpeechConnectionError(
                "Speech service closed the connection on open", cause=e
            ) from e

        self.state = SessionState.STREAMING
        logger.info(
            "Dictation socket open, streaming audio",
            extra={"pcm_bytes": self._pcm_size},
        )

        events: asyncio.Queue[SessionEvent] = asyncio.Queue()
        ticker = asyncio.create_task(self._tick(events))
        reader = asyncio.create_task(self._read(websocket, events))

        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._timeout
        try:
            while True:
                try:
                    event = await asyncio.wait_for(
                        events.get(), timeout=max(deadline - loop.time(), 0)
                    )
                except TimeoutError:
                    logger.error(
                        "Dictation session timed out",
                        extra={"timeout_seconds": self._timeout},
                    )
                    await self._finish(websocket, ABNORMAL_CLOSE_CODE)
                    raise TranscriptionTimeoutError(self._timeout) from None

                if event.kind is EventKind.TICK:
                    await self._send_next_frame(websocket, ticker)
                elif event.kind is EventKind.MESSAGE:
                    transcript = await self._handle_message(websocket, event.payload)
                    if transcript is not None:
                        return transcript
                elif event.kind is EventKind.CLOSED:
                    self.state = SessionState.FINISHED
                    logger.info("Dictation socket closed before the final result")
                    return self._accumulator.result(self._placeholder)
                else:
                    self.state = SessionState.FINISHED
                    logger.error(
                        "Dictation socket lost", extra={"error": str(event.error)}
                    )
                    raise SpeechConnectionError(
                        f"Speech service connection lost: {event.error}",
                        cause=event.error,
                    )
        finally:
            ticker.cancel()
            reader.cancel()
            await asyncio.gather(ticker, reader, return_exceptions=True)

    async def _tick(self, events: asyncio.Queue) -> None:
        while True:
            await asyncio.sleep(self._frame_interval)
            events.put_nowait(SessionEvent(EventKind.TICK))

    async def _read(self, websocket: Any, events: asyncio.Queue) -> None:
        try:
            async for message in websocket:
                events.put_nowait(SessionEvent(EventKind.MESSAGE, payload=message))
        except ConnectionClosed as e:
            # No close frame from the peer means the transport dropped.
            if e.rcvd is None:
                events.put_nowait(SessionEvent(EventKind.TRANSPORT_ERROR, error=e))
                return
        except OSError as e:
            events.put_nowait(SessionEvent(EventKind.TRANSPORT_ERROR, error=e))
            return
        events.put_nowait(SessionEvent(EventKind.CLOSED))

    async def _send_next_frame(self, websocket: Any, ticker: asyncio.Task) -> None:
        if self._sending_done:
            return

        chunk = next(self._chunks, None)
        try:
            if chunk is None:
                await websocket.send(last_frame())
                self._sending_done = True
                ticker.cancel()
                logger.info("Audio fully sent", extra={"frames": self.frames_sent})
            else:
                await websocket.send(audio_frame(chunk))
                self.frames_sent += 1
        except ConnectionClosed:
            logger.warning(
                "Socket closed while sending audio",
                extra={"frames": self.frames_sent},
            )
            self._sending_done = True
            ticker.cancel()

    async def _handle_message(self, websocket: Any, raw: str | bytes) -> str | None:
        try:
            response = VendorResponse.model_validate_json(raw)
        except ValidationError:
            logger.warning("Dropping unparseable dictation message", exc_info=True)
            return None

        if response.is_error:
            logger.error(
                "Dictation service returned an error",
                extra={
                    "code": response.code,
                    "vendor_message": response.message,
                    "sid": response.sid,
                },
            )
            await self._finish(websocket, ABNORMAL_CLOSE_CODE)
            raise VendorRecognitionError(response.code, response.message, response.sid)

        if response.data is not None and response.data.result is not None:
            self._accumulator.apply(response.data.result.to_fragment())

        if response.is_final:
            await self._finish(websocket, NORMAL_CLOSE_CODE)
            logger.info(
                "Dictation finished",
                extra={"sid": response.sid, "chars": len(self._accumulator.text)},
            )
            return self._accumulator.result(self._placeholder)

        return None

    async def _finish(self, websocket: Any, code: int) -> None:
        self.state = SessionState.FINISHED
        await websocket.close(code=code)
