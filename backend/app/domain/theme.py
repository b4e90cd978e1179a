"""
Theme Domain Models

Represents the layout documents a theme ships with and the overrides a
store owner saves on top of them. Both layers share the same JSON shape:

    {
        "pages": [{"route": "index", "modifications": [...]}, ...],
        "globalModifications": [...],
        "appConfig": {...},
        "appCustomConfig": {...}
    }

Keys are camelCase on disk and on the wire. Unknown keys are kept as-is,
theme authors are free to add their own props to pages and blocks.

Author: TM3
Date: 2025-12-02
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


def _objects_only(value: Any) -> Optional[list]:
    """Keep a list of objects; anything that isn't a list becomes None"""
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, (dict, BaseModel))]


def _str_or_none(value: Any) -> Optional[str]:
    """Numbers are accepted as ids and names, other non-strings dropped"""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return value if isinstance(value, str) else None


def _dict_or_none(value: Any) -> Optional[dict]:
    return value if isinstance(value, dict) else None


class ThemeModel(BaseModel):
    """
    Base for theme documents: camelCase aliases, extra keys preserved

    Theme files are hand-edited. Known fields with a wrong type are coerced
    or blanked instead of failing validation, so one bad value never drops
    the rest of the document.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_dict(self) -> dict:
        """
        Convert to the camelCase JSON form

        Only keys present in the source document (or set explicitly) are
        emitted, so a shallow merge of two dicts behaves like a key override.
        """
        return self.model_dump(by_alias=True, exclude_unset=True)


class BlockData(ThemeModel):
    """
    A single block modification on a page

    Fields:
        component_id: Block identifier, the merge key between layers
        type: Block kind ("plugin", "container", "text", "image", ...)
        plugin_name: Plugin rendered by the block (type == "plugin")
        plugin_config: Settings passed to the plugin
    """
    component_id: Optional[str] = Field(None, description="Block identifier")
    type: Optional[str] = Field(None, description="Block type")
    plugin_name: Optional[str] = Field(None, description="Plugin name for plugin blocks")
    plugin_config: Optional[Dict[str, Any]] = Field(None, description="Plugin settings")

    @field_validator("component_id", "type", "plugin_name", mode="before")
    @classmethod
    def coerce_str(cls, value):
        return _str_or_none(value)

    @field_validator("plugin_config", mode="before")
    @classmethod
    def coerce_dict(cls, value):
        return _dict_or_none(value)

    @property
    def is_plugin(self) -> bool:
        return self.type == "plugin" and bool(self.plugin_name)


class PageInfo(ThemeModel):
    """Page metainfo without modifications"""
    route: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None


class PageConfig(ThemeModel):
    """
    Page layout: metainfo plus the block modifications on the page

    route is the original route of the page in the theme dir
    (e.g. "index", "product/[slug]").
    """
    route: Optional[str] = Field(None, description="Page route in theme dir")
    name: Optional[str] = Field(None, description="Page name")
    title: Optional[str] = Field(None, description="Page title")
    modifications: List[BlockData] = Field(default_factory=list, description="Block modifications")

    @field_validator("route", "name", "title", mode="before")
    @classmethod
    def coerce_str(cls, value):
        return _str_or_none(value)

    @field_validator("modifications", mode="before")
    @classmethod
    def coerce_modifications(cls, value):
        return _objects_only(value) or []

    def to_info(self) -> PageInfo:
        return PageInfo(route=self.route, name=self.name, title=self.title)


class ThemeConfig(ThemeModel):
    """Whole theme document (either the theme's original or the user's)"""
    pages: Optional[List[PageConfig]] = None
    global_modifications: Optional[List[BlockData]] = None
    app_config: Optional[Dict[str, Any]] = None
    app_custom_config: Optional[Dict[str, Any]] = None

    @field_validator("pages", "global_modifications", mode="before")
    @classmethod
    def coerce_lists(cls, value):
        return _objects_only(value)

    @field_validator("app_config", "app_custom_config", mode="before")
    @classmethod
    def coerce_dicts(cls, value):
        return _dict_or_none(value)

    def find_page(self, route: str) -> Optional[PageConfig]:
        """Page with given route; the last one wins if the route repeats"""
        found = None
        for page in self.pages or []:
            if page.route == route:
                found = page
        return found


class CmsConfig(ThemeModel):
    """CMS config file (cmsconfig.json). Only the active theme matters here."""
    theme_name: Optional[str] = None
