# File: tests/conftest.py
import json
from pathlib import Path
from typing import Dict, Optional

import pytest

from akamai_watch.storage import ScriptStore
from akamai_watch.tracker.models import PageData

TARGET_URL = "https://example.com/"
HOST = "example.com"


def page_with_scripts(*srcs: Optional[str]) -> str:
    """Build page markup with one <script> per entry; None means an inline script."""
    tags = []
    for src in srcs:
        if src is None:
            tags.append("<script>var inline = 1;</script>")
        else:
            tags.append(f'<script type="text/javascript" src="{src}"></script>')
    return f"<html><head><title>t</title></head><body><p>hi</p>{''.join(tags)}</body></html>"


class FakeFetcher:
    """In-memory stand-in for Fetcher: url -> body, missing urls give None."""

    def __init__(self, responses: Optional[Dict[str, str]] = None) -> None:
        self.responses: Dict[str, str] = dict(responses or {})
        self.calls: list[str] = []

    async def fetch(self, url: str) -> Optional[PageData]:
        self.calls.append(url)
        body = self.responses.get(url)
        if body is None:
            return None
        return PageData(url, body)


@pytest.fixture()
def store(tmp_path) -> ScriptStore:
    """ScriptStore rooted in a temporary directory."""
    return ScriptStore(tmp_path / "scripts", "js")


@pytest.fixture()
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture()
def config_file(tmp_path) -> Path:
    """
    Write a minimal valid JSON config and return its path.
    """
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "sites": [{"site": "https://example.com", "delay": 30}],
                "timeout": 1.0,
                "storage_dir": str(tmp_path / "out"),
            }
        ),
        encoding="utf-8",
    )
    return path
