"""Avatar and icon wrappers.

Each call returns the rendered image bytes as the value.
"""

from __future__ import annotations

from appwrite.services.avatars import Avatars

from ..config import AppwriteConfig
from .client import Result, call, create_client


def _avatars(config: AppwriteConfig) -> Avatars:
    return Avatars(create_client(config))


def get_credit_card(
    config: AppwriteConfig,
    code: str,
    width: int | None = None,
    height: int | None = None,
    quality: int | None = None,
) -> Result:
    """Icon of a credit card provider, e.g. ``"visa"`` or ``"amex"``."""
    return call(_avatars(config).get_credit_card, code=code, width=width, height=height, quality=quality)


def get_browser(
    config: AppwriteConfig,
    code: str,
    width: int | None = None,
    height: int | None = None,
    quality: int | None = None,
) -> Result:
    """Browser icon for the code reported in a session's ``clientCode``."""
    return call(_avatars(config).get_browser, code=code, width=width, height=height, quality=quality)


def get_flag(
    config: AppwriteConfig,
    code: str,
    width: int | None = None,
    height: int | None = None,
    quality: int | None = None,
) -> Result:
    """Country flag for an ISO alpha-2 country code."""
    return call(_avatars(config).get_flag, code=code, width=width, height=height, quality=quality)


def get_image(config: AppwriteConfig, url: str, width: int | None = None, height: int | None = None) -> Result:
    return call(_avatars(config).get_image, url=url, width=width, height=height)


def get_favicon(config: AppwriteConfig, url: str) -> Result:
    return call(_avatars(config).get_favicon, url=url)


def get_qr(
    config: AppwriteConfig,
    text: str,
    size: int | None = None,
    margin: int | None = None,
    download: bool | None = None,
) -> Result:
    """QR code image encoding *text*."""
    return call(_avatars(config).get_qr, text=text, size=size, margin=margin, download=download)


def get_initials(
    config: AppwriteConfig,
    name: str | None = None,
    width: int | None = None,
    height: int | None = None,
    background: str | None = None,
) -> Result:
    """Initials avatar for *name*, or for the signed-in user when omitted."""
    return call(
        _avatars(config).get_initials,
        name=name,
        width=width,
        height=height,
        background=background,
    )
