"""Shared fixtures for the content studio tests."""

import random

import pytest

from app.core.config import settings
from app.schemas.script import ScriptRequest
from app.schemas.thumbnail import ThumbnailRequest
from app.services.export_service import ExportService
from app.services.script_service import ScriptGenerationService
from app.services.thumbnail_service import ThumbnailGenerationService


@pytest.fixture(autouse=True)
def no_latency(monkeypatch):
    monkeypatch.setattr(settings, "SCRIPT_LATENCY_SECONDS", 0.0)
    monkeypatch.setattr(settings, "THUMBNAIL_LATENCY_SECONDS", 0.0)


@pytest.fixture
def script_service():
    return ScriptGenerationService(rng=random.Random(1234), seo_year=2024)


@pytest.fixture
def thumbnail_service():
    return ThumbnailGenerationService(placeholder_base_url="https://images.example.com/photos")


@pytest.fixture
def export_service():
    return ExportService()


@pytest.fixture
def make_script_request():
    def _make(**overrides):
        fields = {
            "topic": "time management",
            "length": "short",
            "tone": "professional",
            "contentType": "tutorial",
            "targetAudience": "beginner",
        }
        fields.update(overrides)
        return ScriptRequest(**fields)
    return _make


@pytest.fixture
def make_thumbnail_request():
    def _make(**overrides):
        fields = {
            "topic": "cooking",
            "mood": "mysterious",
            "colorScheme": "earth",
        }
        fields.update(overrides)
        return ThumbnailRequest(**fields)
    return _make
