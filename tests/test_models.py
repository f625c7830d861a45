"""Tests for core.models.StoreConfig."""

import dataclasses

import pytest

from core.models import StoreConfig


class TestStoreConfig:
    def test_defaults(self):
        cfg = StoreConfig()
        assert cfg.dir is None
        assert cfg.file_name == "settings.json"
        assert cfg.atomic_save is True
        assert cfg.prettify is False
        assert cfg.num_spaces == 2
        assert cfg.encryption_algorithm == "aes-256-cbc"
        assert cfg.encryption_key is None

    def test_frozen(self):
        cfg = StoreConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.prettify = True  # type: ignore[misc]

    def test_from_options_camel_case(self):
        cfg = StoreConfig.from_options(
            fileName="test.json", atomicSave=False, numSpaces=4, encryptionKey="secret"
        )
        assert cfg.file_name == "test.json"
        assert cfg.atomic_save is False
        assert cfg.num_spaces == 4
        assert cfg.encryption_key == "secret"

    def test_from_options_snake_case(self):
        assert StoreConfig.from_options(prettify=True).prettify is True

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            StoreConfig.from_options(colour="blue")

    def test_rejects_negative_indent(self):
        with pytest.raises(ValueError):
            StoreConfig(num_spaces=-1)

    def test_rejects_empty_file_name(self):
        with pytest.raises(ValueError):
            StoreConfig(file_name="")
