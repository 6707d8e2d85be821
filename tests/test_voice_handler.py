from unittest.mock import patch

import pytest

from travel_planner.exceptions import (
    MissingCredentialsError,
    TempStorageError,
    TranscodeError,
)
from travel_planner.handlers import VoiceTranscriptionHandler
from vendor_fakes import FakeTranscoder, FakeVendorSocket, connect_to, recognition


@pytest.mark.asyncio
async def test_files_named_per_request_and_removed(iflytek_config, tmp_path):
    seen = []

    class RecordingTranscoder(FakeTranscoder):
        def transcode(self, input_path, output_path):
            seen.append((input_path, output_path))
            super().transcode(input_path, output_path)

    def connect(url):
        return connect_to(FakeVendorSocket([recognition("好", status=2)]))(url)

    handler = VoiceTranscriptionHandler(
        iflytek_config, RecordingTranscoder(pcm=bytes(10)), tmp_path, connect
    )

    assert await handler.transcribe(b"a", "clip.m4a") == "好"
    assert await handler.transcribe(b"b", None) == "好"

    (first_in, first_out), (second_in, second_out) = seen
    assert first_in.suffix == ".m4a"
    assert second_in.suffix == ".webm"
    assert first_out.suffix == ".pcm"
    assert first_in.stem == first_out.stem
    assert first_in.stem != second_in.stem
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_credentials_checked_before_writing(iflytek_config, tmp_path):
    config = iflytek_config.model_copy(update={"app_id": ""})
    handler = VoiceTranscriptionHandler(config, FakeTranscoder(), tmp_path / "scratch")

    with pytest.raises(MissingCredentialsError):
        await handler.transcribe(b"audio", "clip.webm")

    assert not (tmp_path / "scratch").exists()


@pytest.mark.asyncio
async def test_unwritable_temp_dir(iflytek_config, tmp_path):
    handler = VoiceTranscriptionHandler(iflytek_config, FakeTranscoder(), tmp_path)

    with patch("pathlib.Path.write_bytes", side_effect=PermissionError("read-only")):
        with pytest.raises(TempStorageError):
            await handler.transcribe(b"audio", "clip.webm")


@pytest.mark.asyncio
async def test_transcode_error_propagates_and_cleans_up(iflytek_config, tmp_path):
    transcoder = FakeTranscoder(error=TranscodeError("clip.webm", ValueError("bad")))
    handler = VoiceTranscriptionHandler(iflytek_config, transcoder, tmp_path)

    with pytest.raises(TranscodeError):
        await handler.transcribe(b"audio", "clip.webm")

    assert list(tmp_path.iterdir()) == []
