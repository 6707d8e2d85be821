import base64
import json

from travel_planner.infrastructure.iflytek_frames import (
    VendorResponse,
    audio_frame,
    first_frame,
    iter_chunks,
    last_frame,
)
from vendor_fakes import recognition, vendor_error


def test_first_frame_has_credentials_and_no_audio():
    frame = json.loads(first_frame("app-1", {"language": "zh_cn", "dwa": "wpgs"}))

    assert frame["common"] == {"app_id": "app-1"}
    assert frame["business"] == {"language": "zh_cn", "dwa": "wpgs"}
    assert frame["data"] == {
        "status": 0,
        "format": "audio/L16;rate=16000",
        "encoding": "raw",
        "audio": "",
    }


def test_audio_frame_encodes_chunk():
    frame = json.loads(audio_frame(b"\x01\x02\x03"))

    assert set(frame) == {"data"}
    assert frame["data"]["status"] == 1
    assert base64.b64decode(frame["data"]["audio"]) == b"\x01\x02\x03"


def test_last_frame_only_has_status():
    assert json.loads(last_frame()) == {"data": {"status": 2}}


def test_iter_chunks_keeps_short_tail():
    chunks = list(iter_chunks(bytes(2000), 1280))

    assert [len(chunk) for chunk in chunks] == [1280, 720]
    assert list(iter_chunks(b"", 1280)) == []


def test_response_concatenates_words():
    response = VendorResponse.model_validate(recognition("去杭州"))

    fragment = response.data.result.to_fragment()
    assert fragment.text == "去杭州"
    assert fragment.replace is False
    assert not response.is_error
    assert not response.is_final


def test_response_replace_and_final_flags():
    response = VendorResponse.model_validate(recognition("五天", pgs="rpl", status=2))

    assert response.data.result.to_fragment().replace is True
    assert response.is_final


def test_error_response_without_data():
    response = VendorResponse.model_validate(vendor_error(10165, "invalid handle"))

    assert response.is_error
    assert not response.is_final
    assert response.message == "invalid handle"
