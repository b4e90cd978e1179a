"""
Theme Config Repository - Data Access Layer for theme layouts

Reads the two layers a page layout is built from:
- theme's original config: THEMES_DIR/<theme>/THEME_CONFIG_FILENAME
- user's modifications:    SETTINGS_DIR/themes/<theme>/theme.json

Files are read on every call, edits from the admin panel show up on the
next request without a restart.

Author: TM3
Date: 2025-12-02
"""
import json
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from pydantic import ValidationError

from app.core.config import settings
from app.domain.theme import CmsConfig, ThemeConfig

logger = logging.getLogger(__name__)

USER_CONFIG_FILENAME = "theme.json"


class ThemeNotConfiguredError(Exception):
    """Raised when no active theme is set in CMS config or settings"""


def load_cms_config(path: Union[str, Path, None] = None) -> CmsConfig:
    """
    Load CMS config and resolve the active theme

    Priority:
    1. THEME_NAME setting (environment / .env)
    2. themeName in CMS config file (CMS_CONFIG_PATH)

    Raises:
        ThemeNotConfiguredError: if neither names a theme
    """
    path = Path(path or settings.CMS_CONFIG_PATH)
    config = CmsConfig()

    if path.is_file():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                config = CmsConfig.model_validate(data)
            else:
                logger.error(f"CMS config at {path} is not a JSON object")
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Failed to read CMS config at {path}: {e}")

    if settings.THEME_NAME:
        config.theme_name = settings.THEME_NAME

    if not config.theme_name:
        logger.error(f"Failed to read cmsconfig: no themeName in {path} and THEME_NAME not set")
        raise ThemeNotConfiguredError("No active theme configured")

    return config


class ThemeConfigRepository:
    """
    Repository for theme configs stored on disk

    Returns ThemeConfig domain models. A missing or broken file never
    raises: the error is logged and the layer is treated as absent (None).
    """

    def __init__(
        self,
        theme_name: str,
        themes_dir: Union[str, Path, None] = None,
        settings_dir: Union[str, Path, None] = None,
        theme_config_filename: Optional[str] = None
    ):
        self.theme_name = theme_name
        themes_dir = Path(themes_dir or settings.THEMES_DIR)
        settings_dir = Path(settings_dir or settings.SETTINGS_DIR)
        filename = theme_config_filename or settings.THEME_CONFIG_FILENAME

        self.theme_config_path = themes_dir / theme_name / filename
        self.user_config_path = settings_dir / "themes" / theme_name / USER_CONFIG_FILENAME

    @staticmethod
    def _read_json_object(path: Path) -> Optional[dict]:
        """Read a JSON file and return it only if it holds an object"""
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Failed to parse {path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.error(f"Expected a JSON object in {path}, got {type(data).__name__}")
            return None
        return data

    def _read_theme_document(self, path: Path) -> Optional[ThemeConfig]:
        data = self._read_json_object(path)
        if data is None:
            return None
        try:
            return ThemeConfig.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid theme config in {path}: {e}")
            return None

    def read_theme_config(self) -> Optional[ThemeConfig]:
        """
        Read theme's original config

        Returns:
            ThemeConfig or None if the file is missing or invalid
        """
        if not self.theme_config_path.is_file():
            logger.error(f"Failed to find theme config at {self.theme_config_path}")
            return None
        return self._read_theme_document(self.theme_config_path)

    def read_user_config(self) -> Optional[ThemeConfig]:
        """
        Read user's theme modifications

        Returns:
            ThemeConfig or None if the user has not modified the theme
        """
        if not self.user_config_path.is_file():
            return None
        return self._read_theme_document(self.user_config_path)

    def read_configs(self) -> Tuple[Optional[ThemeConfig], Optional[ThemeConfig]]:
        """Read both layers: (theme_config, user_config)"""
        return self.read_theme_config(), self.read_user_config()
