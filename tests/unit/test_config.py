"""Unit tests for Settings helpers."""
import pytest

from venturedesk.core.config import Settings
from venturedesk.core.errors import ConfigError


def _settings(**overrides):
    s = Settings()
    for name, value in overrides.items():
        setattr(s, name, value)
    return s


class TestRequire:
    def test_missing_value_names_variable(self):
        s = _settings(DATABASE_URL=None)
        with pytest.raises(ConfigError, match="DATABASE_URL"):
            s.require("DATABASE_URL")

    def test_present_value_returned(self):
        s = _settings(DATABASE_URL="sqlite://")
        assert s.require("DATABASE_URL") == "sqlite://"


class TestR2Endpoint:
    def test_bucket_suffix_stripped(self):
        s = _settings(
            R2_ENDPOINT="https://acct.r2.cloudflarestorage.com/venturedesk-images/",
            R2_BUCKET_NAME="venturedesk-images",
        )
        assert s.r2_endpoint == "https://acct.r2.cloudflarestorage.com"

    def test_plain_endpoint_unchanged(self):
        s = _settings(R2_ENDPOINT="https://acct.r2.cloudflarestorage.com", R2_BUCKET_NAME="b")
        assert s.r2_endpoint == "https://acct.r2.cloudflarestorage.com"

    def test_missing_endpoint(self):
        with pytest.raises(ConfigError):
            _ = _settings(R2_ENDPOINT=None).r2_endpoint
