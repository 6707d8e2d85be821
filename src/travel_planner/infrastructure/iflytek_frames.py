"""Wire format of the iFlytek streaming dictation (IAT v2) protocol."""

import base64
import json
from typing import Iterator

from pydantic import BaseModel

from travel_planner.domain.models import FrameStatus, RecognitionFragment

AUDIO_FORMAT = "audio/L16;rate=16000"
AUDIO_ENCODING = "raw"
FINAL_RESULT_STATUS = 2


def first_frame(app_id: str, business: dict) -> str:
    """Opening frame: credentials, business parameters and no audio."""
    return json.dumps(
        {
            "common": {"app_id": app_id},
            "business": business,
            "data": {
                "status": FrameStatus.FIRST.value,
                "format": AUDIO_FORMAT,
                "encoding": AUDIO_ENCODING,
                "audio": "",
            },
        }
    )


def audio_frame(chunk: bytes) -> str:
    return json.dumps(
        {
            "data": {
                "status": FrameStatus.MIDDLE.value,
                "format": AUDIO_FORMAT,
                "encoding": AUDIO_ENCODING,
                "audio": base64.b64encode(chunk).decode("utf-8"),
            }
        }
    )


def last_frame() -> str:
    return json.dumps({"data": {"status": FrameStatus.LAST.value}})


def iter_chunks(pcm: bytes, frame_size: int) -> Iterator[bytes]:
    """Yields consecutive ``frame_size`` slices; the last one may be shorter."""
    for offset in range(0, len(pcm), frame_size):
        yield pcm[offset : offset + frame_size]


class Word(BaseModel):
    w: str = ""


class WordGroup(BaseModel):
    cw: list[Word] = []


class RecognitionResult(BaseModel):
    ws: list[WordGroup] = []
    pgs: str | None = None

    def to_fragment(self) -> RecognitionFragment:
        text = "".join(word.w for group in self.ws for word in group.cw)
        return RecognitionFragment(text=text, replace=self.pgs == "rpl")


class ResponseData(BaseModel):
    status: int | None = None
    result: RecognitionResult | None = None


class VendorResponse(BaseModel):
    """One inbound message from the dictation socket."""

    code: int
    message: str | None = None
    sid: str | None = None
    data: ResponseData | None = None

    @property
    def is_error(self) -> bool:
        return self.code != 0

    @property
    def is_final(self) -> bool:
        return self.data is not None and self.data.status == FINAL_RESULT_STATUS
