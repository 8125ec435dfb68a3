"""Tests for Settings configuration."""

from unittest.mock import patch

from hnclone.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for Settings default values."""

    def test_default_environment(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.environment == "development"

    def test_default_api_base_url(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.hn_api_base_url == "https://hacker-news.firebaseio.com/v0"

    def test_default_fan_out_cap(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.hn_max_concurrent_requests == 10
            assert s.hn_request_timeout_seconds is None

    def test_default_listing_settings(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.top_stories_count == 30
            assert s.stories_refresh_seconds == 300
            assert s.cache_dedupe_seconds == 2.0


class TestSettingsFromEnvironment:
    def test_overrides(self):
        env = {
            "HN_API_BASE_URL": "http://localhost:9000/v0",
            "HN_MAX_CONCURRENT_REQUESTS": "0",
            "HN_REQUEST_TIMEOUT_SECONDS": "2.5",
            "ENABLE_SCHEDULER": "false",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.hn_api_base_url == "http://localhost:9000/v0"
            assert s.hn_max_concurrent_requests == 0
            assert s.hn_request_timeout_seconds == 2.5
            assert s.enable_scheduler is False

    def test_case_insensitive(self):
        with patch.dict("os.environ", {"top_stories_count": "50"}, clear=True):
            s = Settings(_env_file=None)
            assert s.top_stories_count == 50


class TestSettingsProperties:
    """Tests for computed properties."""

    def test_is_production_true(self):
        with patch.dict("os.environ", {"ENVIRONMENT": "production"}, clear=True):
            s = Settings(_env_file=None)
            assert s.is_production is True

    def test_is_production_false_for_arbitrary(self):
        with patch.dict("os.environ", {"ENVIRONMENT": "staging"}, clear=True):
            s = Settings(_env_file=None)
            assert s.is_production is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


class TestServerEntryPoint:
    def test_default_bind_address(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.host == "127.0.0.1"
            assert s.port == 8000

    def test_main_runs_app_with_uvicorn(self):
        from hnclone.__main__ import main

        with patch("hnclone.__main__.uvicorn.run") as run:
            main()

        run.assert_called_once()
        args, kwargs = run.call_args
        assert args == ("hnclone.main:app",)
        assert kwargs["port"] == get_settings().port
