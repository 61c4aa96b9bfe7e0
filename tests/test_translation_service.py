import httpx
import pytest

from chunk_relay.exceptions import ConfigurationError, RemoteServiceError, TransportError
from chunk_relay.translation_service import TranslationClient

URL = "https://translate.test/v1/audio/translations"


def _client(handler, api_key="sk-test"):
    return TranslationClient(api_key=api_key, url=URL, transport=httpx.MockTransport(handler))


class TestTranslate:
    @pytest.mark.asyncio
    async def test_returns_trimmed_body(self):
        client = _client(lambda request: httpx.Response(200, text="  hello world\n"))

        assert await client.translate(b"audio", "chunk.webm") == "hello world"

    @pytest.mark.asyncio
    async def test_sends_multipart_request_with_bearer_token(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="ok")

        await _client(handler).translate(b"\x1a\x45\xdf\xa3", "take1.webm")

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == URL
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        body = request.content
        assert b'name="model"\r\n\r\nwhisper-1\r\n' in body
        assert b'name="response_format"\r\n\r\ntext\r\n' in body
        assert b'filename="take1.webm"' in body
        assert b"\x1a\x45\xdf\xa3" in body

    @pytest.mark.asyncio
    async def test_empty_body_gives_empty_text(self):
        client = _client(lambda request: httpx.Response(200, text="   "))

        assert await client.translate(b"audio", "chunk.webm") == ""


class TestTranslateFailures:
    @pytest.mark.asyncio
    async def test_missing_api_key_never_calls_remote(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, text="unused")

        with pytest.raises(ConfigurationError) as exc:
            await _client(handler, api_key="").translate(b"audio", "chunk.webm")

        assert "OPENAI_API_KEY" in str(exc.value)
        assert calls == []

    @pytest.mark.asyncio
    async def test_non_success_status_carries_code_and_body(self):
        client = _client(lambda request: httpx.Response(401, text='{"error": "invalid key"}'))

        with pytest.raises(RemoteServiceError) as exc:
            await client.translate(b"audio", "chunk.webm")

        assert exc.value.status_code == 401
        assert exc.value.body == '{"error": "invalid key"}'
        assert "401" in str(exc.value)
        assert "invalid key" in str(exc.value)

    @pytest.mark.asyncio
    async def test_network_failure_is_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as exc:
            await _client(handler).translate(b"audio", "chunk.webm")

        assert isinstance(exc.value.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_single_attempt_on_failure(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503, text="busy")

        with pytest.raises(RemoteServiceError):
            await _client(handler).translate(b"audio", "chunk.webm")

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_undecodable_reply_is_transport_error(self):
        def handler(request):
            return httpx.Response(200, content=b"not gzip", headers={"Content-Encoding": "gzip"})

        with pytest.raises(TransportError) as exc:
            await _client(handler).translate(b"audio", "chunk.webm")

        assert isinstance(exc.value.cause, httpx.DecodingError)
