import base64

import pytest

from edgestore_sdk import Credentials, RequestClient, RequestError
from edgestore_sdk.application.dtos.files import FileInfo, Pagination
from edgestore_sdk.infrastructure.external.api_clients import build_body
from edgestore_sdk.shared.codes import ErrorCode


CREDS = Credentials("ak_123", "sk_456")


def test_basic_auth_header_encodes_key_pair():
    expected = base64.b64encode(b"ak_123:sk_456").decode()
    assert CREDS.basic_auth_header() == f"Basic {expected}"


def test_credentials_repr_hides_secret():
    assert "sk_456" not in repr(CREDS)
    assert "ak_123" in repr(CREDS)


def test_build_body_drops_none_and_dumps_models():
    body = build_body({"url": "u", "filter": None, "pagination": Pagination(current_page=2, page_size=10)})
    assert body == {"url": "u", "pagination": {"currentPage": 2, "pageSize": 10}}


@pytest.mark.asyncio
async def test_send_posts_json_with_headers(make_transport):
    transport = make_transport(payload={"ok": True})
    client = RequestClient(base_url="https://api.example.test", transport=transport)

    data = await client.send("/get-file", {"url": "https://files/x.png"}, CREDS)

    assert data == {"ok": True}
    assert len(transport.requests) == 1
    req = transport.requests[0]
    assert req.method == "POST"
    assert str(req.url) == "https://api.example.test/get-file"
    assert req.headers["content-type"] == "application/json"
    assert req.headers["authorization"] == CREDS.basic_auth_header()
    assert transport.last_json == {"url": "https://files/x.png"}


@pytest.mark.asyncio
async def test_base_url_comes_from_environment(monkeypatch, make_transport):
    monkeypatch.setenv("EDGE_STORE_API_ENDPOINT", "http://localhost:3001/")
    transport = make_transport(payload={})
    client = RequestClient(transport=transport)

    await client.send("/delete-file", {"url": "u"}, CREDS)

    assert str(transport.requests[0].url) == "http://localhost:3001/delete-file"


@pytest.mark.asyncio
async def test_default_base_url(make_transport):
    transport = make_transport(payload={})
    client = RequestClient(transport=transport)
    await client.send("/list-files", {"bucketName": "b"}, CREDS)
    assert str(transport.requests[0].url) == "https://api.edgestore.dev/list-files"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401, 404, 500, 503])
async def test_non_success_raises_request_error(make_transport, status_code):
    transport = make_transport(status_code=status_code, text="bucket not found")
    client = RequestClient(base_url="https://api.example.test", transport=transport)

    with pytest.raises(RequestError) as exc_info:
        await client.send("/list-files", {"bucketName": "nope"}, CREDS)

    err = exc_info.value
    assert err.path == "/list-files"
    assert err.body == "bucket not found"
    assert err.status_code == status_code
    assert err.code == ErrorCode.REQUEST_FAILED
    assert "/list-files" in str(err)
    assert "bucket not found" in str(err)
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_response_model_parses_camel_case(make_transport):
    transport = make_transport(payload={
        "url": "https://files/x.png",
        "size": 12,
        "uploadedAt": "2024-03-01T10:00:00.000Z",
        "path": {"type": "post"},
        "metadata": {"role": "admin"},
    })
    client = RequestClient(base_url="https://api.example.test", transport=transport)

    info = await client.send("/get-file", {"url": "https://files/x.png"}, CREDS, response_model=FileInfo)

    assert isinstance(info, FileInfo)
    assert info.size == 12
    assert info.uploaded_at.year == 2024
    assert info.path == {"type": "post"}
