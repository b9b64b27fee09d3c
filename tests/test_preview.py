"""
Tests for examcraft.preview

Playwright is replaced with a small fake so no browser is needed.
"""
import asyncio

from examcraft import preview


class FakePage:
    def __init__(self, calls):
        self.calls = calls

    async def set_content(self, html):
        self.calls.append(("set_content", html))

    async def wait_for_load_state(self, state):
        self.calls.append(("wait", state))

    async def screenshot(self, path, full_page):
        self.calls.append(("screenshot", path, full_page))

    async def pdf(self, path, **kwargs):
        self.calls.append(("pdf", path))


class FakeBrowser:
    def __init__(self, calls):
        self.calls = calls

    async def new_page(self):
        return FakePage(self.calls)

    async def close(self):
        self.calls.append(("close",))


class FakeChromium:
    def __init__(self, calls):
        self.calls = calls

    async def launch(self):
        return FakeBrowser(self.calls)


class FakePlaywright:
    def __init__(self, calls, fail=False):
        self.chromium = FakeChromium(calls)
        self.fail = fail

    async def __aenter__(self):
        if self.fail:
            raise RuntimeError("Executable doesn't exist")
        return self

    async def __aexit__(self, *exc):
        return False


def test_screenshot_preview(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(preview, "async_playwright", lambda: FakePlaywright(calls))
    output = tmp_path / "shots" / "exam.png"

    ok = asyncio.run(preview.render_preview("<html></html>", str(output)))

    assert ok is True
    assert output.parent.is_dir()
    assert ("set_content", "<html></html>") in calls
    assert ("screenshot", str(output), True) in calls
    assert calls[-1] == ("close",)


def test_pdf_preview(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(preview, "async_playwright", lambda: FakePlaywright(calls))
    output = tmp_path / "exam.PDF"

    assert asyncio.run(preview.render_preview("<html></html>", str(output))) is True
    assert ("pdf", str(output)) in calls


def test_preview_failure_returns_false(tmp_path, monkeypatch):
    monkeypatch.setattr(preview, "async_playwright", lambda: FakePlaywright([], fail=True))

    assert asyncio.run(preview.render_preview("<html></html>", str(tmp_path / "x.png"))) is False
