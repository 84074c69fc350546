"""
Notes Frontend - Settings Tests
================================

What:  Tests for the pydantic-settings configuration layer.
"""

import pytest
from pydantic import ValidationError

from notes_frontend.config import Settings


class TestSettings:

    def test_notes_endpoint_joins_prefix(self):
        assert Settings(notes_api_prefix="/api").notes_endpoint == "/api/notes"
        assert Settings(notes_api_prefix="api/").notes_endpoint == "/api/notes"
        assert Settings(notes_api_prefix="").notes_endpoint == "/notes"

    def test_trailing_slash_is_stripped(self):
        assert Settings(notes_api_url="http://api.local:5000/").notes_api_url == "http://api.local:5000"

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_timeout_range_enforced(self):
        with pytest.raises(ValidationError):
            Settings(notes_api_timeout=0)

    def test_production_validation_rejects_relative_url(self):
        with pytest.raises(ValueError, match="NOTES_API_URL"):
            Settings(notes_api_url="notes-api:5000").validate_required_for_production()

    def test_production_validation_accepts_http_url(self):
        Settings(notes_api_url="https://notes.example.com").validate_required_for_production()
