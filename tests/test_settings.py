"""Tests for AppSettings editor preferences."""

from collections.abc import Iterator

import pytest

from chapteredit.config.settings import AppSettings


@pytest.fixture()
def settings() -> Iterator[AppSettings]:
    s = AppSettings()
    yield s
    s.set_single_expansion_enabled(True)


def test_single_expansion_round_trip(settings: AppSettings) -> None:
    settings.set_single_expansion_enabled(False)
    assert settings.single_expansion_enabled() is False
    settings.set_single_expansion_enabled(True)
    assert settings.single_expansion_enabled() is True


@pytest.mark.parametrize(("stored", "expected"), [("false", False), ("0", False), ("true", True)])
def test_single_expansion_from_string(
    settings: AppSettings, stored: str, expected: bool
) -> None:
    settings._qs.setValue("editor/singleExpansion", stored)
    assert settings.single_expansion_enabled() is expected
