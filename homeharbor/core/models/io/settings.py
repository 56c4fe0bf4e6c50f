"""Site and currency settings I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import EmailStr, Field

from .common import IOModel

PUBLIC_CURRENCY_DEFAULT: Dict[str, Any] = {
    "currency": "EUR",
    "symbol": "€",
    "position": "before",
    "decimalPlaces": 0,
}

ADMIN_CURRENCY_DEFAULT: Dict[str, Any] = {
    "currency": "USD",
    "symbol": "$",
    "position": "before",
}


def default_site_settings() -> Dict[str, Any]:
    """Site block used until an administrator saves one."""
    return {
        "siteName": "HomeHarbor",
        "brandName": "HomeHarbor",
        "footerCopyright": f"© {datetime.now().year} HomeHarbor. All rights reserved.",
        "contactPhone": "+358 123 456 789",
        "contactEmail": "info@homeharbor.com",
        "defaultLanguage": "en",
        "showAdminLink": True,
        "heroImageUrl": None,
    }


class CurrencySettings(IOModel):
    currency: str = Field(min_length=1)
    symbol: str = Field(min_length=1)
    position: Literal["before", "after"]
    decimal_places: Optional[int] = Field(default=None, ge=0, le=4)


class SiteSettings(IOModel):
    site_name: str = Field(min_length=1)
    brand_name: str = Field(min_length=1)
    footer_copyright: str
    contact_phone: str
    contact_email: EmailStr
    default_language: str = "en"
    show_admin_link: bool = True
    hero_image_url: Optional[str] = None


class SettingsSaved(IOModel):
    success: bool = True
    settings: Dict[str, Any]
