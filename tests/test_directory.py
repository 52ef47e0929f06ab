"""
Tests for the Endpoint Directory

Tests for listing relays from the status resource and picking one at
random, using httpx.MockTransport in place of the network.
"""

import random

import httpx
import pytest

from strangerchat import (
    ClientSettings,
    DirectoryEmptyError,
    DirectoryMalformedResponseError,
    DirectoryNetworkError,
    EndpointDirectory,
)


def make_directory(handler, settings=None, rng=None):
    """Create an EndpointDirectory backed by a mock transport."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return EndpointDirectory(settings=settings, http_client=client, rng=rng)


def status_handler(body):
    """Return a handler that answers every request with ``body`` as JSON."""

    def handler(request):
        return httpx.Response(200, json=body)

    return handler


@pytest.mark.asyncio
async def test_list_endpoints_reads_servers():
    """Test that list_endpoints returns the status servers in order."""
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"count": 2, "servers": ["front1", "front2"]})

    directory = make_directory(handler)
    assert await directory.list_endpoints() == ["front1", "front2"]

    assert requests[0].method == "GET"
    assert str(requests[0].url) == "https://omegle.com/status"


@pytest.mark.asyncio
async def test_list_endpoints_uses_configured_status_url():
    """Test that the status URL comes from settings."""
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json={"servers": []})

    settings = ClientSettings(status_url="https://relay.test/status")
    directory = make_directory(handler, settings=settings)
    await directory.list_endpoints()
    assert seen == ["https://relay.test/status"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [{"count": 0}, {"servers": "front1"}, {"servers": ["front1", None]}, ["front1"]],
)
async def test_list_endpoints_malformed(body):
    """Test that malformed status bodies raise DirectoryMalformedResponseError."""
    directory = make_directory(status_handler(body))
    with pytest.raises(DirectoryMalformedResponseError):
        await directory.list_endpoints()


@pytest.mark.asyncio
async def test_list_endpoints_invalid_json():
    """Test that a non-JSON body is malformed."""
    directory = make_directory(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(DirectoryMalformedResponseError):
        await directory.list_endpoints()


@pytest.mark.asyncio
async def test_list_endpoints_network_error():
    """Test that transport failures raise DirectoryNetworkError."""

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    directory = make_directory(handler)
    with pytest.raises(DirectoryNetworkError) as exc_info:
        await directory.list_endpoints()
    assert isinstance(exc_info.value, ConnectionError)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_list_endpoints_error_status():
    """Test that an error status is reported as a network failure."""
    directory = make_directory(lambda request: httpx.Response(503))
    with pytest.raises(DirectoryNetworkError):
        await directory.list_endpoints()


@pytest.mark.asyncio
async def test_pick_random_returns_listed_server():
    """Test that pick_random always returns one of the listed servers."""
    directory = make_directory(
        status_handler({"servers": ["a", "b", "c"]}), rng=random.Random(3)
    )
    picks = {await directory.pick_random() for _ in range(30)}
    assert picks <= {"a", "b", "c"}
    assert len(picks) > 1


@pytest.mark.asyncio
async def test_pick_random_empty_list():
    """Test that an empty server list raises DirectoryEmptyError."""
    directory = make_directory(status_handler({"servers": []}))
    with pytest.raises(DirectoryEmptyError):
        await directory.pick_random()


@pytest.mark.asyncio
async def test_pick_random_propagates_list_failures():
    """Test that list_endpoints failures propagate unchanged."""
    directory = make_directory(status_handler({"nope": True}))
    with pytest.raises(DirectoryMalformedResponseError):
        await directory.pick_random()


@pytest.mark.asyncio
async def test_owned_client_is_closed():
    """Test that a directory closes the HTTP client it created."""
    directory = EndpointDirectory()
    async with directory:
        pass
    assert directory._http.is_closed
