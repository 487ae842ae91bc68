"""Pytest configuration."""
import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wksubjects.fetchers import BasePageFetcher
from wksubjects.models import Page


def make_subject(subject_id, object_type="kanji", **data):
    """Raw JSON dict of one subject."""
    return {"id": subject_id, "object": object_type, "data": data}


def make_page(subjects, next_url="", per_page=1000):
    """Raw JSON dict of one collection page."""
    return {"pages": {"per_page": per_page, "next_url": next_url}, "data": subjects}


class FakePageFetcher(BasePageFetcher):
    """Serves canned page payloads by URL and records every request."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []
        self.closed = False

    async def fetch_page(self, url):
        self.calls.append(url)
        result = self.pages[url]
        if isinstance(result, BaseException):
            raise result
        return Page.from_json(json.dumps(result))

    async def close(self):
        self.closed = True


@pytest.fixture
def subject_factory():
    return make_subject


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def fake_fetcher_cls():
    return FakePageFetcher


@pytest.fixture
def kanji_payload():
    """A fully populated kanji subject as the API returns it."""
    return {
        "id": 440,
        "object": "kanji",
        "url": "https://api.wanikani.com/v2/subjects/440",
        "data_updated_at": "2023-10-18T22:35:31.785372Z",
        "data": {
            "spaced_repetition_system_id": 2,
            "level": 1,
            "slug": "一",
            "hidden_at": None,
            "document_url": "https://www.wanikani.com/kanji/%E4%B8%80",
            "characters": "一",
            "meanings": [
                {"meaning": "One", "primary": True, "accepted_answer": True},
                {"meaning": "Uno", "primary": False, "accepted_answer": False},
            ],
            "auxiliary_meanings": [
                {"type": "whitelist", "meaning": "1"},
                {"type": "blacklist", "meaning": "Once"},
            ],
            "readings": [
                {"type": "onyomi", "primary": True, "reading": "いち", "accepted_answer": True},
                {"type": "kunyomi", "primary": False, "reading": "ひと", "accepted_answer": False},
            ],
            "component_subject_ids": [1],
            "amalgamation_subject_ids": [2467, 2468, 2477],
            "meaning_mnemonic": "Lying on the <radical>ground</radical> is something that looks just like the ground.",
            "meaning_hint": "To remember the meaning of <kanji>One</kanji>...",
            "reading_mnemonic": "As you're sitting there next to <kanji>One</kanji>...",
            "reading_hint": "Make sure you feel the ridiculously <reading>itchy</reading> sensation.",
            "lesson_position": 26,
        },
    }
