# tests/conftest.py
import httpx
import pytest

from fake_service import API_KEY, BASE_URL, FakePlateRecognizer
from platerecognizer.adapters.http.recognizer_client import RecognizerClient


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_service():
    return FakePlateRecognizer()


@pytest.fixture
def make_client(fake_service):
    """Builds clients wired to the fake service; extra kwargs become config options."""
    def _make(transport=None, observer=None, **options):
        config = {"api_key": API_KEY, "url": BASE_URL, **options}
        return RecognizerClient(
            config,
            observer=observer,
            transport=transport or httpx.ASGITransport(app=fake_service.app),
        )
    return _make


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "mardu.jpeg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg-bytes")
    return path
