"""
Modifications API Endpoints
Serves theme layouts merged with the user's modifications

Endpoints:
- GET /api/v1/modifications/page?pageRoute=...     - Merged config of one page
- GET /api/v1/modifications/plugins?pageRoute=...  - Plugin configs at one page
- GET /api/v1/modifications/pluginNames            - Plugins used at any page
- GET /api/v1/modifications/pages/info             - Pages' metainfo
- GET /api/v1/modifications/pages/configs          - All pages, merged
- GET /api/v1/modifications/app/config             - Merged app config
- GET /api/v1/modifications/app/custom-config      - Merged custom app config

Author: TM3
Date: 2025-12-02
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.repositories.theme_config_repository import (
    ThemeConfigRepository,
    ThemeNotConfiguredError,
    load_cms_config,
)
from app.services.modifications_service import ModificationsService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_modifications_service() -> ModificationsService:
    """
    FastAPI dependency: service bound to the active theme

    Raises 503 when no theme is configured, the storefront can't render
    anything meaningful in that case.
    """
    try:
        cms_config = load_cms_config()
    except ThemeNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=f"Theme not configured: {str(e)}")

    return ModificationsService(ThemeConfigRepository(cms_config.theme_name))


@router.get("/page")
async def get_page_modifications(
    page_route: Optional[str] = Query(None, alias="pageRoute", description="Original route of the page in theme dir"),
    service: ModificationsService = Depends(get_modifications_service)
):
    """
    Returns merged page config for the page with given route

    Output contains theme's original modifications overwritten by
    user's modifications. Returns null without pageRoute.
    """
    if not page_route:
        return None

    try:
        return service.get_page_config(page_route).to_dict()
    except Exception as e:
        logger.error(f"Error merging page config for {page_route}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching page config: {str(e)}")


@router.get("/plugins")
async def get_page_plugins(
    page_route: Optional[str] = Query(None, alias="pageRoute", description="Original route of the page in theme dir"),
    service: ModificationsService = Depends(get_modifications_service)
):
    """
    Returns plugins' configs at the page with given route

    Output is {pluginName: pluginConfig}; empty object without pageRoute.
    """
    if not page_route:
        return {}

    try:
        return service.get_plugins(page_route)
    except Exception as e:
        logger.error(f"Error collecting plugins for {page_route}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching plugins: {str(e)}")


@router.get("/pluginNames")
async def get_plugin_names(service: ModificationsService = Depends(get_modifications_service)):
    """Returns array of plugin names at all pages"""
    try:
        return service.get_plugin_names()
    except Exception as e:
        logger.error(f"Error collecting plugin names: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching plugin names: {str(e)}")


@router.get("/pages/info")
async def get_pages_info(service: ModificationsService = Depends(get_modifications_service)):
    """Returns all pages' metainfo without modifications"""
    try:
        return [info.to_dict() for info in service.get_pages_info()]
    except Exception as e:
        logger.error(f"Error reading pages info: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching pages info: {str(e)}")


@router.get("/pages/configs")
async def get_pages_configs(service: ModificationsService = Depends(get_modifications_service)):
    """Returns all pages with merged modifications"""
    try:
        return [page.to_dict() for page in service.read_all_page_configs()]
    except Exception as e:
        logger.error(f"Error merging page configs: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching page configs: {str(e)}")


@router.get("/app/config")
async def get_app_config(service: ModificationsService = Depends(get_modifications_service)):
    """Returns merged app config"""
    try:
        return service.get_app_config()
    except Exception as e:
        logger.error(f"Error merging app config: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching app config: {str(e)}")


@router.get("/app/custom-config")
async def get_app_custom_config(service: ModificationsService = Depends(get_modifications_service)):
    """Returns merged custom app configs"""
    try:
        return service.get_app_custom_config()
    except Exception as e:
        logger.error(f"Error merging custom app config: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching custom app config: {str(e)}")
