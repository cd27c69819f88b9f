"""Tests for configuration settings."""

import io
import logging

import pytest
from pydantic import ValidationError

from lootbrain import LootingSettings, LootType, configure_logging


def test_defaults():
    settings = LootingSettings(_env_file=None)

    assert settings.reserved_slot_count == 2
    assert settings.collider_buffer_size == 250
    assert settings.nav_snap_distance == 1.0
    assert settings.destination_drop == 0.4


def test_detection_radius_is_largest_distance():
    settings = LootingSettings(
        detect_container_distance=40.0,
        detect_item_distance=25.0,
        detect_corpse_distance=60.0,
        _env_file=None,
    )

    assert settings.detection_radius() == 60.0
    assert settings.detection_distance(LootType.CONTAINER) == 40.0
    assert settings.detection_distance(LootType.ITEM) == 25.0
    assert settings.detection_distance(LootType.CORPSE) == 60.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LOOTING_DETECT_ITEM_DISTANCE", "12.5")
    monkeypatch.setenv("LOOTING_CORPSE_LOOTING_ROLES", '["pmc", "raider"]')

    settings = LootingSettings(_env_file=None)

    assert settings.detect_item_distance == 12.5
    assert settings.is_role_enabled(LootType.CORPSE, "pmc")
    assert not settings.is_role_enabled(LootType.CORPSE, "scav")
    assert settings.is_role_enabled(LootType.ITEM, "scav")


def test_rejects_non_positive_distance():
    with pytest.raises(ValidationError):
        LootingSettings(detect_container_distance=0, _env_file=None)


@pytest.fixture
def package_logger():
    logger = logging.getLogger("lootbrain")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_configure_logging_attaches_one_package_handler(package_logger):
    stream = io.StringIO()
    root_handlers = list(logging.getLogger().handlers)

    configure_logging(logging.INFO, stream=stream)
    configured = configure_logging(logging.DEBUG, stream=stream)

    assert configured is package_logger
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG
    assert logging.getLogger().handlers == root_handlers

    logging.getLogger("lootbrain.scanning.scanner").debug("scan done")

    assert "[DEBUG] lootbrain.scanning.scanner: scan done" in stream.getvalue()
