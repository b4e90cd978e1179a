"""
Modifications Service
Builds the page layouts a storefront renders

Purpose:
- Layer the theme's default page/block layout with the user's overrides
- Apply global modifications (blocks shared by every page) under page ones
- Collect plugin configs declared by plugin blocks

Precedence, lowest to highest:
    global theme mods < global user mods < page theme mods < page user mods

Blocks are matched by componentId. A matching block is replaced as a whole,
an unmatched one is appended after the existing blocks.

Author: TM3
Date: 2025-12-02
"""
import logging
from typing import Any, Dict, List, Optional

from app.domain.theme import BlockData, PageConfig, PageInfo, ThemeConfig
from app.repositories.theme_config_repository import ThemeConfigRepository

logger = logging.getLogger(__name__)


def merge_mods(
    theme_mods: Optional[List[BlockData]] = None,
    user_mods: Optional[List[BlockData]] = None
) -> List[BlockData]:
    """
    Add and overwrite theme's modifications with user's modifications

    Args:
        theme_mods: Base modifications (not mutated)
        user_mods: Overrides, applied in order

    Returns:
        New list: base mods with same-componentId entries replaced,
        followed by the overrides that matched nothing
    """
    mods = list(theme_mods) if isinstance(theme_mods, list) else []
    if not isinstance(user_mods, list):
        return mods

    for user_mod in user_mods:
        matched = False
        if user_mod.component_id is not None:
            for i, mod in enumerate(mods):
                if mod.component_id == user_mod.component_id:
                    mods[i] = user_mod
                    matched = True
        if not matched:
            mods.append(user_mod)

    return mods


def merge_pages(
    theme_page: Optional[PageConfig] = None,
    user_page: Optional[PageConfig] = None,
    global_theme_mods: Optional[List[BlockData]] = None,
    global_user_mods: Optional[List[BlockData]] = None
) -> PageConfig:
    """
    Merge one page from both layers, global modifications included

    Page props are merged shallowly (user's keys win), modifications are
    merged by componentId on top of the merged global modifications.
    """
    global_mods = merge_mods(global_theme_mods, global_user_mods)

    mods = merge_mods(
        theme_page.modifications if theme_page else None,
        user_page.modifications if user_page else None
    )
    mods = merge_mods(global_mods, mods)

    config: Dict[str, Any] = {}
    if theme_page:
        config.update(theme_page.to_dict())
    if user_page:
        config.update(user_page.to_dict())
    config.pop("modifications", None)

    page = PageConfig.model_validate(config)
    page.modifications = mods
    return page


def merge_dicts(*layers: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Shallow merge, later layers override earlier ones, None layers skipped"""
    out: Dict[str, Any] = {}
    for layer in layers:
        if isinstance(layer, dict):
            out.update(layer)
    return out


class ModificationsService:
    """
    Service for merged theme layouts

    Every public method reads both layers from disk through the repository,
    so results always reflect the latest saved modifications.
    """

    def __init__(self, repository: ThemeConfigRepository):
        self.repository = repository

    @staticmethod
    def _merge_page_lists(
        theme_config: Optional[ThemeConfig],
        user_config: Optional[ThemeConfig],
        merge_mods_too: bool = True
    ) -> List[PageConfig]:
        """
        Theme's pages in order, user's pages merged in by route

        User pages with a route unknown to the theme are appended.
        """
        pages: List[PageConfig] = list(theme_config.pages or []) if theme_config else []
        routes = [p.route for p in pages]

        for user_page in (user_config.pages or []) if user_config else []:
            if user_page.route in routes:
                i = routes.index(user_page.route)
                if merge_mods_too:
                    pages[i] = merge_pages(pages[i], user_page)
                else:
                    pages[i] = PageConfig.model_validate(
                        merge_dicts(pages[i].to_dict(), user_page.to_dict())
                    )
            else:
                pages.append(user_page)
                routes.append(user_page.route)

        return pages

    def get_page_config(self, page_route: str) -> PageConfig:
        """
        Merged config for the page with given route

        Contains theme's original modifications overwritten and
        supplemented by user's modifications, on top of global ones.
        An unknown route still gets the global modifications.
        """
        theme_config, user_config = self.repository.read_configs()

        theme_page = theme_config.find_page(page_route) if theme_config else None
        user_page = user_config.find_page(page_route) if user_config else None

        return merge_pages(
            theme_page,
            user_page,
            theme_config.global_modifications if theme_config else None,
            user_config.global_modifications if user_config else None
        )

    def read_all_page_configs(self) -> List[PageConfig]:
        """All pages with merged modifications"""
        theme_config, user_config = self.repository.read_configs()

        pages = self._merge_page_lists(theme_config, user_config)

        global_mods = merge_mods(
            theme_config.global_modifications if theme_config else None,
            user_config.global_modifications if user_config else None
        )
        merged = []
        for page in pages:
            page = page.model_copy()
            page.modifications = merge_mods(global_mods, page.modifications)
            merged.append(page)
        return merged

    def get_plugins(self, page_route: str) -> Dict[str, Dict[str, Any]]:
        """
        Plugins' configs at the page with given route

        Returns:
            {pluginName: pluginConfig}; a later block of the same plugin wins
        """
        page = self.get_page_config(page_route)

        plugins: Dict[str, Dict[str, Any]] = {}
        for mod in page.modifications:
            if mod.is_plugin:
                plugins[mod.plugin_name] = mod.plugin_config if mod.plugin_config else {}
        return plugins

    def get_plugin_names(self) -> List[str]:
        """Names of plugins used at any page, in first-seen order"""
        names: List[str] = []
        for page in self.read_all_page_configs():
            for mod in page.modifications:
                if mod.is_plugin and mod.plugin_name not in names:
                    names.append(mod.plugin_name)
        return names

    def get_pages_info(self) -> List[PageInfo]:
        """All pages' metainfo without modifications"""
        theme_config, user_config = self.repository.read_configs()
        pages = self._merge_page_lists(theme_config, user_config, merge_mods_too=False)
        return [page.to_info() for page in pages]

    def get_app_config(self) -> Dict[str, Any]:
        """Merged app config (user's keys win)"""
        theme_config, user_config = self.repository.read_configs()
        return merge_dicts(
            theme_config.app_config if theme_config else None,
            user_config.app_config if user_config else None
        )

    def get_app_custom_config(self) -> Dict[str, Any]:
        """Merged custom app config (user's keys win)"""
        theme_config, user_config = self.repository.read_configs()
        return merge_dicts(
            theme_config.app_custom_config if theme_config else None,
            user_config.app_custom_config if user_config else None
        )
