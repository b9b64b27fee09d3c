"""
Tests for examcraft.template_store

Test Coverage:
- get_template_filename(): closed id table with demo fallback
- TemplateStore: local reads and missing files
- RemoteTemplateStore: HTTP fetch via an httpx mock transport
"""
import asyncio

import httpx
import pytest

from examcraft.errors import TemplateFetchError
from examcraft.template_store import (
    TEMPLATES,
    RemoteTemplateStore,
    TemplateStore,
    get_template_filename,
    is_known_template,
)


@pytest.mark.parametrize("template_id,filename", [
    ("demo", "Demo (1).html"),
    ("minor-test", "Minor_Test_@_12.html"),
    ("english-test", "Test_15_(English).html"),
    ("unknown", "Demo (1).html"),
])
def test_get_template_filename(template_id, filename):
    assert get_template_filename(template_id) == filename


def test_template_ids():
    assert [t.id for t in TEMPLATES] == ["demo", "minor-test", "english-test"]
    assert is_known_template("minor-test")
    assert not is_known_template("Demo")


@pytest.mark.parametrize("template_id", ["demo", "minor-test", "english-test"])
def test_local_store_reads_bundled_templates(templates_dir, template_id):
    text = TemplateStore(str(templates_dir)).fetch(template_id)

    assert "{{QUESTIONS_HTML}}" in text
    assert "</head>" in text


def test_local_store_missing_file(tmp_path):
    with pytest.raises(TemplateFetchError):
        TemplateStore(str(tmp_path)).fetch("demo")


def test_remote_store_fetches_quoted_url():
    seen = []

    def handler(request):
        seen.append(request.url.path)
        return httpx.Response(200, text="<html><head></head></html>")

    store = RemoteTemplateStore("https://example.org/templates/", transport=httpx.MockTransport(handler))

    text = asyncio.run(store.fetch("minor-test"))

    assert text == "<html><head></head></html>"
    assert seen == ["/templates/Minor_Test_@_12.html"]


def test_remote_store_http_error():
    store = RemoteTemplateStore(
        "https://example.org/templates",
        transport=httpx.MockTransport(lambda request: httpx.Response(404)),
    )

    with pytest.raises(TemplateFetchError):
        asyncio.run(store.fetch("demo"))


def test_remote_store_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    store = RemoteTemplateStore("https://example.org/templates", transport=httpx.MockTransport(handler))

    with pytest.raises(TemplateFetchError):
        asyncio.run(store.fetch("demo"))
