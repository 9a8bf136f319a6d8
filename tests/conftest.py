from unittest.mock import Mock

import pytest
import requests

from catbox import Catbox, Litterbox


def make_response(status_code: int, text: str = "") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


def stub_session(client, status_code: int = 200, text: str = ""):
    client.session = Mock(spec=requests.Session)
    client.session.post.return_value = make_response(status_code, text)
    return client.session


def sent_fields(session) -> dict:
    return dict(session.post.call_args.kwargs["data"])


@pytest.fixture
def catbox():
    client = Catbox(user_hash="hash123")
    stub_session(client, 200, "https://files.catbox.moe/abc123.png")
    return client


@pytest.fixture
def anonymous():
    client = Catbox()
    stub_session(client, 200, "https://files.catbox.moe/abc123.png")
    return client


@pytest.fixture
def litterbox():
    client = Litterbox()
    stub_session(client, 200, "https://litter.catbox.moe/xyz789.png")
    return client
