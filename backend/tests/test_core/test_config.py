"""
Unit tests for Settings

Author: TM3
Date: 2025-12-02
"""
from app.core.config import Settings


def test_allowed_origins_formats():
    assert Settings(ALLOWED_ORIGINS="http://a.com, http://b.com").get_allowed_origins() == [
        "http://a.com", "http://b.com"
    ]
    assert Settings(ALLOWED_ORIGINS='["http://a.com"]').get_allowed_origins() == ["http://a.com"]
    assert Settings(ALLOWED_ORIGINS="*").get_allowed_origins() == ["*"]
    assert Settings(ALLOWED_ORIGINS="").get_allowed_origins() == ["http://localhost:3000"]


def test_only_settings_the_app_reads():
    fields = set(Settings.model_fields)

    assert {"THEMES_DIR", "SETTINGS_DIR", "THEME_CONFIG_FILENAME", "CMS_CONFIG_PATH", "THEME_NAME"} <= fields
    assert not fields & {"API_HOST", "API_PORT", "API_DEBUG"}
