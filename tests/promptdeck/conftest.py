import sys
from pathlib import Path

import pytest

# This repo uses a src/ layout; make it importable without an editable install.
_SRC = str(Path(__file__).resolve().parents[2] / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)


class FakeClient:
    """Backend client stub recording every call."""

    def __init__(self, reply="ok", error=None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def generate(self, prompt, *, model, system_instruction=""):
        self.calls.append(
            {"prompt": prompt, "model": model, "system_instruction": system_instruction}
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_client():
    """Fixture: factory for FakeClient."""

    def _factory(reply="ok", error=None):
        return FakeClient(reply=reply, error=error)

    return _factory


@pytest.fixture
def make_provider():
    """Fixture: factory for providers with a static (or failing) producer."""

    from promptdeck import Provider

    def _factory(key, role="prompt", content="", order=0, title=None, scope=None, error=None):
        async def produce():
            if error is not None:
                raise error
            return content

        return Provider(
            key=key, role=role, producer=produce, order=order, title=title, scope=scope
        )

    return _factory
