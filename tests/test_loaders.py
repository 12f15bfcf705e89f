import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from domquery import FetchConfig, FetchError, RetryConfig, fetch, from_page, load_file, parse


def no_wait_config(max_attempts=3):
    return FetchConfig(retry=RetryConfig(max_attempts=max_attempts, base_delay=0, jitter=False))


async def serve(handler, scenario):
    app = web.Application()
    app.router.add_get("/", handler)
    async with TestServer(app) as server:
        return await scenario(str(server.make_url("/")))


def test_load_file(index_path):
    document = asyncio.run(load_file(index_path))
    assert document.first_element_child().tag_name() == "html"
    assert document.get_element_by_id("main-menu-checkbox").tag_name() == "input"


def test_load_file_matches_parse(index_path):
    with open(index_path, "rb") as f:
        parsed = parse(f)
    loaded = asyncio.run(load_file(index_path))
    assert loaded.render() == parsed.render()


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        asyncio.run(load_file(tmp_path / "missing.html"))


def test_fetch():
    user_agents = []

    async def handler(request):
        user_agents.append(request.headers.get("User-Agent"))
        return web.Response(text="<p id='greeting'>hello</p>", content_type="text/html")

    document = asyncio.run(serve(handler, lambda url: fetch(url, fetch_config=no_wait_config())))
    assert document.get_element_by_id("greeting").text() == "hello"
    assert user_agents[0].startswith("domquery/")


def test_fetch_retries_server_errors():
    calls = []

    async def handler(request):
        calls.append(request.path)
        if len(calls) < 3:
            return web.Response(status=503)
        return web.Response(text="<p>ok</p>", content_type="text/html")

    document = asyncio.run(serve(handler, lambda url: fetch(url, fetch_config=no_wait_config())))
    assert len(calls) == 3
    assert document.get_elements_by_tag_name("p")[0].text() == "ok"


def test_fetch_gives_up_after_max_attempts():
    calls = []

    async def handler(request):
        calls.append(request.path)
        return web.Response(status=500)

    with pytest.raises(FetchError) as excinfo:
        asyncio.run(serve(handler, lambda url: fetch(url, fetch_config=no_wait_config(2))))
    assert len(calls) == 2
    assert excinfo.value.status_code == 500


def test_fetch_does_not_retry_client_errors():
    calls = []

    async def handler(request):
        calls.append(request.path)
        return web.Response(status=404)

    with pytest.raises(FetchError) as excinfo:
        asyncio.run(serve(handler, lambda url: fetch(url, fetch_config=no_wait_config())))
    assert len(calls) == 1
    assert excinfo.value.status_code == 404


class FakePage:
    url = "https://example.com/"

    async def content(self):
        return "<html><body><nav class='top'><a href='/'>Home</a></nav></body></html>"


def test_from_page():
    document = asyncio.run(from_page(FakePage()))
    nav = document.get_elements_by_class_name("top")[0]
    assert nav.tag_name() == "nav"
    assert nav.first_element_child().attributes() == {"href": "/"}


def test_fetch_uses_meta_charset_when_header_has_none():
    body = '<html><head><meta charset="iso-8859-1"></head><body><p>caf\xe9</p></body></html>'

    async def handler(request):
        return web.Response(body=body.encode("latin-1"), content_type="text/html")

    document = asyncio.run(serve(handler, lambda url: fetch(url, fetch_config=no_wait_config())))
    assert document.get_elements_by_tag_name("p")[0].text() == "café"


def test_fetch_uses_header_charset():
    async def handler(request):
        return web.Response(body="<p>café</p>".encode("utf-8"), content_type="text/html",
                            charset="utf-8")

    document = asyncio.run(serve(handler, lambda url: fetch(url, fetch_config=no_wait_config())))
    assert document.get_elements_by_tag_name("p")[0].text() == "café"
