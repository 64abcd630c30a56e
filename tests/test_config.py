"""
Tests for the config module.
"""

from upgrade_helper.core.config import UPGRADE_HELPER_URL, UpgradeHelperConfig


class TestUpgradeHelperConfig:
    """Defaults, environment overrides and validation."""

    def test_defaults(self):
        config = UpgradeHelperConfig()
        assert config.url == UPGRADE_HELPER_URL
        assert config.headless is True
        assert config.form_timeout == 10000
        assert config.settle_delay == 2000
        assert config.diff_timeout == 15000
        assert config.content_limit == 2000
        assert config.wait_until == "networkidle"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("UPGRADE_HELPER_URL", "http://localhost:3000/")
        monkeypatch.setenv("UPGRADE_HELPER_HEADLESS", "false")
        monkeypatch.setenv("UPGRADE_HELPER_NAVIGATION_TIMEOUT", "45000")
        monkeypatch.setenv("UPGRADE_HELPER_VERBOSE", "0")

        config = UpgradeHelperConfig.from_env()
        assert config.url == "http://localhost:3000/"
        assert config.headless is False
        assert config.navigation_timeout == 45000
        assert config.verbose is False

    def test_bad_integer_falls_back(self, monkeypatch, capsys):
        monkeypatch.setenv("UPGRADE_HELPER_NAVIGATION_TIMEOUT", "soon")
        config = UpgradeHelperConfig.from_env()
        assert config.navigation_timeout == 30000
        assert "UPGRADE_HELPER_NAVIGATION_TIMEOUT" in capsys.readouterr().err

    def test_overrides_beat_environment(self, monkeypatch):
        monkeypatch.setenv("UPGRADE_HELPER_HEADLESS", "true")
        monkeypatch.delenv("UPGRADE_HELPER_VERBOSE", raising=False)
        config = UpgradeHelperConfig.from_env(headless=False, verbose=None)
        assert config.headless is False
        assert config.verbose is True

    def test_validate(self):
        assert UpgradeHelperConfig(verbose=False).validate() is True
        bad = UpgradeHelperConfig(diff_timeout=0, settle_delay=-1, url="ftp://x", verbose=False)
        assert bad.problems() == [
            "diff_timeout must be positive",
            "settle_delay must not be negative",
            "url is not http(s): ftp://x",
        ]
        assert bad.validate() is False

    def test_log_goes_to_stderr(self, capsys):
        UpgradeHelperConfig(verbose=True).log("✓ hello")
        UpgradeHelperConfig(verbose=False).log("hidden")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "✓ hello\n"
