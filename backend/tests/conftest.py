"""
Pytest fixtures and configuration for Storefront CMS Backend tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2025-12-02
"""
import json
import os

import pytest
import psycopg2
from dotenv import load_dotenv
from psycopg2.extras import RealDictCursor

from app.repositories.theme_config_repository import ThemeConfigRepository
from app.services.modifications_service import ModificationsService

# Load environment variables for tests
load_dotenv()

THEME_NAME = "demoshop"


@pytest.fixture(scope="session")
def database_url():
    """
    Provides the database URL for tests

    Scope: session (created once per test session)
    """
    url = os.getenv("DATABASE_URL")
    if not url:
        pytest.skip("DATABASE_URL not configured")
    return url


@pytest.fixture(scope="function")
def db_connection(database_url):
    """
    Provides a fresh database connection for each test

    Scope: function (new connection per test)
    Automatically closes connection after test
    """
    conn = psycopg2.connect(database_url)
    yield conn
    conn.close()


@pytest.fixture(scope="function")
def db_cursor(db_connection):
    """
    Provides a database cursor with RealDictCursor for each test
    """
    cursor = db_connection.cursor(cursor_factory=RealDictCursor)
    yield cursor
    cursor.close()


@pytest.fixture
def sample_theme_config():
    """
    Theme's original layout: two pages, global header and footer
    """
    return {
        "pages": [
            {
                "route": "index",
                "name": "Home",
                "title": "Home page",
                "modifications": [
                    {"componentId": "header", "type": "container"},
                    {
                        "componentId": "slider",
                        "type": "plugin",
                        "pluginName": "MainSlider",
                        "pluginConfig": {"speed": 300}
                    }
                ]
            },
            {
                "route": "product/[slug]",
                "name": "Product",
                "title": "Product page",
                "isDynamic": True,
                "modifications": [
                    {"componentId": "filter", "type": "plugin", "pluginName": "ProductFilter"}
                ]
            }
        ],
        "globalModifications": [
            {"componentId": "header", "type": "container", "text": "global header"},
            {"componentId": "footer", "type": "container"}
        ],
        "appConfig": {"pageTitle": "Demo shop", "headerHtml": ""},
        "appCustomConfig": {"currency": "USD"}
    }


@pytest.fixture
def sample_user_config():
    """
    User's modifications: tweaks the home page, adds a blog page,
    replaces the global footer
    """
    return {
        "pages": [
            {
                "route": "index",
                "title": "Welcome",
                "modifications": [
                    {
                        "componentId": "slider",
                        "type": "plugin",
                        "pluginName": "MainSlider",
                        "pluginConfig": {"speed": 500}
                    },
                    {"componentId": "banner", "type": "image", "src": "/banner.png"}
                ]
            },
            {
                "route": "blog",
                "name": "Blog",
                "title": "Blog",
                "modifications": [
                    {"componentId": "posts", "type": "plugin", "pluginName": "BlogList"}
                ]
            }
        ],
        "globalModifications": [
            {"componentId": "footer", "type": "text", "text": "(c) shop"}
        ],
        "appConfig": {"pageTitle": "My shop"},
        "appCustomConfig": {"currency": "EUR", "locale": "de"}
    }


@pytest.fixture
def theme_dirs(tmp_path):
    """
    Empty themes/ and settings/ dirs; returns (themes_dir, settings_dir)
    """
    themes_dir = tmp_path / "themes"
    settings_dir = tmp_path / "settings"
    (themes_dir / THEME_NAME).mkdir(parents=True)
    (settings_dir / "themes" / THEME_NAME).mkdir(parents=True)
    return themes_dir, settings_dir


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def theme_repository(theme_dirs, sample_theme_config, sample_user_config):
    """
    Repository over tmp dirs with both layers written
    """
    themes_dir, settings_dir = theme_dirs
    write_json(themes_dir / THEME_NAME / "theme.config.json", sample_theme_config)
    write_json(settings_dir / "themes" / THEME_NAME / "theme.json", sample_user_config)

    return ThemeConfigRepository(
        THEME_NAME,
        themes_dir=themes_dir,
        settings_dir=settings_dir,
        theme_config_filename="theme.config.json"
    )


@pytest.fixture
def modifications_service(theme_repository):
    return ModificationsService(theme_repository)


@pytest.fixture
def sample_order_row():
    """
    Provides an orders table row as returned by RealDictCursor
    """
    from datetime import datetime
    from decimal import Decimal

    return {
        'id': 7,
        'slug': 'order-7',
        'page_title': 'Order #7',
        'status': 'pending',
        'user_id': None,
        'cart': '[{"productId": 1, "amount": 2}]',
        'total_price': Decimal('462.00'),
        'old_total_price': Decimal('1738.00'),
        'total_qnt': 2,
        'customer_name': 'Pam',
        'customer_phone': '+1 555 0100',
        'customer_address': '1725 Slough Avenue, Scranton',
        'shipping_method': 'courier',
        'customer_comment': 'Ring twice',
        'created_at': datetime(2025, 12, 1, 10, 30),
        'updated_at': None
    }
