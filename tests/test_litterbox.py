import pytest

from catbox import CatboxHTTPError, CatboxValidationError, LitterboxTime
from catbox.constants import LITTERBOX_API_URL

from conftest import sent_fields, stub_session


def test_upload_defaults_to_one_hour(litterbox):
    url = litterbox.upload(b"data", "clip.png")

    assert url == "https://litter.catbox.moe/xyz789.png"
    kwargs = litterbox.session.post.call_args.kwargs
    assert litterbox.session.post.call_args.args == (LITTERBOX_API_URL,)
    assert kwargs["data"] == [("reqtype", "fileupload"), ("time", "1h")]
    assert kwargs["files"] == {"fileToUpload": ("clip.png", b"data", "image/png")}


@pytest.mark.parametrize(
    "time, code",
    [
        (LitterboxTime.HOUR_1, "1h"),
        (LitterboxTime.HOUR_12, "12h"),
        (LitterboxTime.HOUR_24, "24h"),
        (LitterboxTime.HOUR_72, "72h"),
        ("24h", "24h"),
    ],
)
def test_time_codes(litterbox, time, code):
    litterbox.upload(b"data", "clip.png", time)

    assert sent_fields(litterbox.session)["time"] == code


def test_never_sends_user_hash(litterbox):
    litterbox.upload(b"data", "clip.png")

    assert "userhash" not in sent_fields(litterbox.session)


def test_unknown_time_rejected(litterbox):
    with pytest.raises(CatboxValidationError, match="1h, 12h, 24h, 72h") as exc_info:
        litterbox.upload(b"data", "clip.png", "2h")

    assert exc_info.value.__suppress_context__

    litterbox.session.post.assert_not_called()


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_rejected(litterbox, name):
    with pytest.raises(CatboxValidationError):
        litterbox.upload(b"data", name)

    litterbox.session.post.assert_not_called()


def test_failure_is_opaque(litterbox):
    stub_session(litterbox, 500, "Internal error")

    with pytest.raises(CatboxHTTPError) as exc_info:
        litterbox.upload(b"data", "clip.png")

    assert exc_info.value.status_code == 500
    assert exc_info.value.text == "Internal error"


def test_upload_file(litterbox, tmp_path):
    path = tmp_path / "clip.txt"
    path.write_bytes(b"hello")

    litterbox.upload_file(path, time=LitterboxTime.HOUR_72)

    kwargs = litterbox.session.post.call_args.kwargs
    assert ("time", "72h") in kwargs["data"]
    assert kwargs["files"]["fileToUpload"][:2] == ("clip.txt", b"hello")


def test_upload_file_size_ceiling(litterbox, tmp_path, monkeypatch):
    monkeypatch.setattr("catbox.litterbox.MAX_LITTERBOX_FILE_SIZE", 4)
    path = tmp_path / "clip.txt"
    path.write_bytes(b"hello")

    with pytest.raises(CatboxValidationError):
        litterbox.upload_file(path)

    litterbox.session.post.assert_not_called()
