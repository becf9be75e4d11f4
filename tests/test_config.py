"""
Tests for settings, pipeline config and word normalization.
"""

import pytest

from wiktionary_check.config import Settings
from wiktionary_check.entities import PipelineConfig
from wiktionary_check.errors import InvalidWordError
from wiktionary_check.utils import normalize_word


def test_pipeline_config_from_settings_converts_milliseconds():
    settings = Settings(
        request_delay_ms=1000,
        max_retries=3,
        retry_delay_ms=2500,
        cache_lifetime_ms=24 * 60 * 60 * 1000,
    )
    config = PipelineConfig.from_settings(settings)

    assert config.request_delay == 1.0
    assert config.retry_delay == 2.5
    assert config.max_retries == 3
    assert config.max_attempts == 4
    assert config.cache_lifetime == 86400.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"request_delay_ms": -1},
        {"max_retries": -1},
        {"retry_delay_ms": -5},
        {"cache_lifetime_ms": 0},
        {"http_timeout": 0},
    ],
)
def test_settings_reject_invalid_values(overrides):
    with pytest.raises(ValueError):
        Settings(**overrides)


def test_pipeline_config_is_immutable():
    config = PipelineConfig()
    with pytest.raises(AttributeError):
        config.max_retries = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("chat", "chat"),
        ("  Chat  ", "chat"),
        ("ÉTÉ", "été"),
        ("%41", "%41"),
        ("Pomme de Terre", "pomme de terre"),
    ],
)
def test_normalize_word(raw, expected):
    assert normalize_word(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
def test_normalize_word_rejects_blank_input(raw):
    with pytest.raises(InvalidWordError):
        normalize_word(raw)
