"""Configuration, logging setup and entry script tests."""
import logging

import pytest

import fetch_subjects
from wksubjects.config import Config
from wksubjects.config.settings import _env_int
from wksubjects.exceptions import FetchError
from wksubjects.models import Subject
from wksubjects.utils import setup_logger


class TestConfig:
    def test_defaults(self):
        assert Config.WANIKANI_API_URL.startswith("https://")
        assert not Config.WANIKANI_API_URL.endswith("/")
        assert Config.TIMEOUT > 0

    def test_env_int_parses(self, monkeypatch):
        monkeypatch.setenv("WKS_TEST_INT", "15")
        assert _env_int("WKS_TEST_INT", 60) == 15

    def test_env_int_falls_back_on_garbage(self, monkeypatch):
        monkeypatch.setenv("WKS_TEST_INT", "soon")
        assert _env_int("WKS_TEST_INT", 60) == 60

    def test_env_int_missing(self, monkeypatch):
        monkeypatch.delenv("WKS_TEST_INT", raising=False)
        assert _env_int("WKS_TEST_INT", 7) == 7


@pytest.fixture
def root_log_level():
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


class TestLogger:
    def test_setup_logger_sets_level(self, root_log_level):
        logger = setup_logger("wksubjects.test", level="debug")
        assert logger.name == "wksubjects.test"
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, root_log_level):
        setup_logger("wksubjects.test", level="verbose")
        assert logging.getLogger().level == logging.INFO

    def test_unknown_config_level_falls_back_to_info(self, root_log_level, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
        setup_logger()
        assert logging.getLogger().level == logging.INFO


class FakeService:
    """Stands in for SubjectService inside the entry script."""

    def __init__(self, subjects=None, error=None):
        self.subjects = subjects or []
        self.error = error
        self.queries = []

    def __call__(self):
        return self

    async def iter_subjects(self, query=None):
        self.queries.append(query)
        for subject in self.subjects:
            yield subject
        if self.error:
            raise self.error

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None


class TestFetchSubjectsScript:
    def test_parse_args(self):
        args = fetch_subjects.parse_args(["--type", "kanji", "--level", "3", "--output", "x.jsonl"])
        assert args.types == ["kanji"]
        assert args.levels == [3]
        assert args.output == "x.jsonl"

    @pytest.mark.asyncio
    async def test_downloads_to_output(self, tmp_path, monkeypatch, subject_factory, root_log_level):
        service = FakeService([Subject.model_validate(subject_factory(1))])
        monkeypatch.setattr(fetch_subjects, "SubjectService", service)
        target = tmp_path / "subjects.jsonl"

        assert await fetch_subjects.main(["--type", "kanji", "--output", str(target)]) is True

        assert len(target.read_text(encoding="utf-8").splitlines()) == 1
        assert [t.value for t in service.queries[0].types] == ["kanji"]

    @pytest.mark.asyncio
    async def test_failure_returns_false(self, tmp_path, monkeypatch, subject_factory, root_log_level):
        service = FakeService([Subject.model_validate(subject_factory(1))], error=FetchError(1, "p2"))
        monkeypatch.setattr(fetch_subjects, "SubjectService", service)
        target = tmp_path / "subjects.jsonl"

        assert await fetch_subjects.main(["--output", str(target)]) is False
        assert not target.exists()

    @pytest.mark.asyncio
    async def test_invalid_level_returns_false(self, tmp_path, root_log_level):
        assert await fetch_subjects.main(["--level", "99", "--output", str(tmp_path / "x")]) is False

    @pytest.mark.asyncio
    async def test_unknown_log_level_does_not_crash(
        self, tmp_path, monkeypatch, subject_factory, root_log_level
    ):
        service = FakeService([Subject.model_validate(subject_factory(1))])
        monkeypatch.setattr(fetch_subjects, "SubjectService", service)
        monkeypatch.setattr(Config, "LOG_LEVEL", "verbose")
        target = tmp_path / "subjects.jsonl"

        assert await fetch_subjects.main(["--output", str(target)]) is True
        assert target.exists()
