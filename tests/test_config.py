"""Unit tests for configuration (appwrite_starter.config).

Tests cover:
- AppwriteConfig defaults, endpoint normalisation, is_configured
- AppwriteConfig.from_env
- Template pack layout constants
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from appwrite_starter.config import (
    FRAMEWORKS,
    SERVICES,
    SERVICES_DIR,
    SETUPS,
    TEMPLATES_DIR,
    AppwriteConfig,
)


# ---------------------------------------------------------------------------
# AppwriteConfig
# ---------------------------------------------------------------------------


class TestAppwriteConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = AppwriteConfig()
        assert config.endpoint == ""
        assert config.project == ""
        assert config.key is None
        assert config.jwt is None
        assert config.self_signed is False
        assert config.is_configured is False

    @pytest.mark.unit
    def test_trailing_slash_stripped(self):
        config = AppwriteConfig(endpoint="https://host/v1/", project="p")
        assert config.endpoint == "https://host/v1"

    @pytest.mark.unit
    def test_is_configured(self):
        assert AppwriteConfig(endpoint="https://host/v1", project="p").is_configured is True
        assert AppwriteConfig(endpoint="https://host/v1").is_configured is False

    @pytest.mark.unit
    def test_independent_instances(self):
        first = AppwriteConfig(endpoint="https://a/v1", project="a")
        second = AppwriteConfig(endpoint="https://b/v1", project="b")
        assert first.project != second.project


class TestFromEnv:
    @pytest.mark.unit
    def test_reads_all_variables(self):
        env = {
            "APPWRITE_ENDPOINT": "https://host/v1",
            "APPWRITE_PROJECT": "proj",
            "APPWRITE_KEY": "key",
            "APPWRITE_JWT": "jwt",
            "APPWRITE_SELF_SIGNED": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            config = AppwriteConfig.from_env()
        assert config.endpoint == "https://host/v1"
        assert config.project == "proj"
        assert config.key == "key"
        assert config.jwt == "jwt"
        assert config.self_signed is True

    @pytest.mark.unit
    def test_empty_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            config = AppwriteConfig.from_env()
        assert config.model_dump() == AppwriteConfig().model_dump()

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_self_signed_falsy(self, value):
        with patch.dict(os.environ, {"APPWRITE_SELF_SIGNED": value}, clear=True):
            assert AppwriteConfig.from_env().self_signed is False


# ---------------------------------------------------------------------------
# Template pack layout
# ---------------------------------------------------------------------------


class TestTemplatePack:
    @pytest.mark.unit
    def test_every_framework_setup_pair_exists(self):
        for framework in FRAMEWORKS:
            for setup in SETUPS:
                assert (TEMPLATES_DIR / framework / setup).is_dir(), f"{framework}/{setup}"

    @pytest.mark.unit
    def test_every_service_has_a_module(self):
        assert (SERVICES_DIR / "appwrite.ts").is_file()
        for service in SERVICES:
            assert (SERVICES_DIR / f"{service}.ts").is_file(), service
