"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest

from geoclip import config
from geoclip.clip import AntimeridianClip
from geoclip.constants import EPSILON


def test_epsilon_defaults_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset GEOCLIP_EPSILON yields the built-in tolerance."""
    monkeypatch.delenv('GEOCLIP_EPSILON', raising=False)
    assert config.get_epsilon() == EPSILON
    assert AntimeridianClip().epsilon == EPSILON


def test_epsilon_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """A positive GEOCLIP_EPSILON is used by new strategies."""
    monkeypatch.setenv('GEOCLIP_EPSILON', '1e-3')
    assert config.get_epsilon() == pytest.approx(1e-3)
    assert AntimeridianClip().epsilon == pytest.approx(1e-3)
    assert AntimeridianClip(epsilon=1e-9).epsilon == 1e-9


@pytest.mark.parametrize('raw', ['abc', '0', '-1e-3', 'nan'])
def test_epsilon_invalid_env_falls_back_with_warning(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, raw: str
) -> None:
    """Invalid overrides are ignored and reported."""
    monkeypatch.setenv('GEOCLIP_EPSILON', raw)
    with caplog.at_level(logging.WARNING, logger='geoclip.config'):
        assert config.get_epsilon() == EPSILON
    assert 'GEOCLIP_EPSILON' in caplog.text


def test_log_level_resolution(monkeypatch: pytest.MonkeyPatch) -> None:
    """GEOCLIP_LOG wins over --verbose; unknown names are ignored."""
    monkeypatch.delenv('GEOCLIP_LOG', raising=False)
    assert config.get_log_level() == logging.WARNING
    assert config.get_log_level(verbose=True) == logging.DEBUG
    monkeypatch.setenv('GEOCLIP_LOG', 'info')
    assert config.get_log_level(verbose=True) == logging.INFO
    monkeypatch.setenv('GEOCLIP_LOG', 'chatty')
    assert config.get_log_level() == logging.WARNING
