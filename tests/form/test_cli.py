"""Tests for the command-line front end."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport

from backend.app.schemas.transcript import TranscriptResult
from client import cli
from client.api_client import TranscriptApiClient
from client.storage import JsonFileResultStore
from tests.helpers import VALID_URL


@pytest.fixture
def asgi_api(test_app):
    """Make the CLI talk to the in-process app instead of the network."""

    def factory(base_url):
        return TranscriptApiClient(base_url, transport=ASGITransport(app=test_app))

    with patch.object(cli, "TranscriptApiClient", side_effect=factory):
        yield


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("TUBESCRIBE_CLIENT_DATA_DIR", str(tmp_path))
    return tmp_path


@pytest.mark.asyncio
async def test_run_prints_transcript(asgi_api, data_dir, capsys):
    code = await cli.run(VALID_URL, "http://test", copy=False, clear=False, save=True)

    assert code == 0
    out = capsys.readouterr().out
    assert "hello world" in out
    assert "Words: 2" in out
    assert JsonFileResultStore(data_dir).load().text == "hello world"


@pytest.mark.asyncio
async def test_run_invalid_url(asgi_api, data_dir, capsys):
    code = await cli.run("https://vimeo.com/1", "http://test", copy=False, clear=False, save=False)

    assert code == 1
    assert "Please enter a valid YouTube URL." in capsys.readouterr().err


@pytest.mark.asyncio
async def test_run_shows_saved_transcript(asgi_api, data_dir, capsys, provider):
    JsonFileResultStore(data_dir).save(
        TranscriptResult(text="saved words here", duration="8:42", language="German", confidence="95%")
    )

    code = await cli.run(None, "http://test", copy=False, clear=False, save=True)

    assert code == 0
    assert "saved words here" in capsys.readouterr().out
    provider.transcribe.assert_not_awaited()


@pytest.mark.asyncio
async def test_run_clear(asgi_api, data_dir):
    store = JsonFileResultStore(data_dir)
    store.save(TranscriptResult(text="x", duration="8:42", language="German", confidence="95%"))

    code = await cli.run(None, "http://test", copy=False, clear=True, save=True)

    assert code == 0
    assert store.load() is None


def test_render_marks_copied():
    controller = cli.TranscriptFormController(AsyncMock(), clipboard=AsyncMock())
    controller.result = TranscriptResult(
        text="a b c", duration="6:23", language="Spanish", confidence="98%"
    )
    controller.is_copied = True

    text = cli.render(controller)

    assert "Duration: 6:23 | Language: Spanish | Confidence: 98% | Words: 3" in text
    assert text.endswith("(copied to clipboard)")
