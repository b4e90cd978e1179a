"""
Configuración centralizada de la aplicación
"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "Storefront CMS API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "API para temas, páginas y pedidos del storefront"
    LOG_LEVEL: str = "INFO"

    # Database (only needed by orders and demo data endpoints)
    DATABASE_URL: str = ""

    # Themes
    # THEMES_DIR/<theme>/THEME_CONFIG_FILENAME holds the theme's own layout,
    # SETTINGS_DIR/themes/<theme>/theme.json holds the user's modifications.
    THEMES_DIR: str = "themes"
    SETTINGS_DIR: str = "settings"
    THEME_CONFIG_FILENAME: str = "theme.config.json"
    CMS_CONFIG_PATH: str = "cmsconfig.json"
    THEME_NAME: Optional[str] = None

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000,http://localhost:3001"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        if self.ALLOWED_ORIGINS.strip() == "*":
            return ["*"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
