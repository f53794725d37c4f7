"""Locale wrappers.

Country, continent, currency and language lists, localised through the
client's locale header, plus the caller's IP-based location.
"""

from __future__ import annotations

from appwrite.services.locale import Locale

from ..config import AppwriteConfig
from .client import Result, call, create_client


def _locale(config: AppwriteConfig) -> Locale:
    return Locale(create_client(config))


def get_locale(config: AppwriteConfig) -> Result:
    """Location of the caller derived from their IP address."""
    return call(_locale(config).get)


def list_countries(config: AppwriteConfig) -> Result:
    return call(_locale(config).list_countries)


def list_countries_eu(config: AppwriteConfig) -> Result:
    return call(_locale(config).list_countries_eu)


def list_countries_phones(config: AppwriteConfig) -> Result:
    return call(_locale(config).list_countries_phones)


def list_continents(config: AppwriteConfig) -> Result:
    return call(_locale(config).list_continents)


def list_currencies(config: AppwriteConfig) -> Result:
    return call(_locale(config).list_currencies)


def list_languages(config: AppwriteConfig) -> Result:
    return call(_locale(config).list_languages)
