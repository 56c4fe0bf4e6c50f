"""
Site and currency settings endpoints.

Settings are stored as camelCase JSON text under a key (``currency``,
``site``). ``router`` serves the public reads and ``admin_router`` the admin
console; a key that was never saved answers with its default.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status

from homeharbor.core.database.repositories.settings import SettingRepository
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.settings import (
    ADMIN_CURRENCY_DEFAULT,
    PUBLIC_CURRENCY_DEFAULT,
    CurrencySettings,
    SettingsSaved,
    SiteSettings,
    default_site_settings,
)

from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["settings"])
admin_router = APIRouter(tags=["admin-settings"])

CURRENCY_KEY = "currency"
SITE_KEY = "site"


async def read_setting(repo: SettingRepository, key: str, default: Dict[str, Any]) -> Any:
    try:
        value = await repo.get_json(key)
    except json.JSONDecodeError as e:
        logger.error(f"Stored {key} settings are not valid JSON: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to parse {key} settings from database",
        )
    return default if value is None else value


async def save_setting(repo: SettingRepository, key: str, body: CurrencySettings | SiteSettings) -> SettingsSaved:
    value = body.model_dump(by_alias=True, exclude_none=True, mode="json")
    await repo.put_json(key, value)
    logger.info(f"Saved {key} settings")
    return SettingsSaved(settings=value)


@router.get("/currency", summary="Currency Settings")
async def public_currency(repos: RepositoriesDep) -> Any:
    return await read_setting(repos.settings, CURRENCY_KEY, PUBLIC_CURRENCY_DEFAULT)


@router.get("/site", summary="Site Settings")
async def public_site(repos: RepositoriesDep) -> Any:
    return await read_setting(repos.settings, SITE_KEY, default_site_settings())


@admin_router.get("/currency", summary="Currency Settings (admin)")
async def admin_currency(repos: RepositoriesDep) -> Any:
    return await read_setting(repos.settings, CURRENCY_KEY, ADMIN_CURRENCY_DEFAULT)


@admin_router.post("/currency", response_model=SettingsSaved, summary="Save Currency Settings")
async def save_currency(body: CurrencySettings, repos: RepositoriesDep) -> SettingsSaved:
    return await save_setting(repos.settings, CURRENCY_KEY, body)


@admin_router.get("/site", summary="Site Settings (admin)")
async def admin_site(repos: RepositoriesDep) -> Any:
    return await read_setting(repos.settings, SITE_KEY, default_site_settings())


@admin_router.post("/site", response_model=SettingsSaved, summary="Save Site Settings")
async def save_site(body: SiteSettings, repos: RepositoriesDep) -> SettingsSaved:
    return await save_setting(repos.settings, SITE_KEY, body)
