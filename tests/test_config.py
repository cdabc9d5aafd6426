import dataclasses
import os

import pytest

from parcel_bin import config
from parcel_bin.config import BootstrapConfig


def test_load_config_defaults_when_unset() -> None:
    got = config.load_config({})
    assert got == BootstrapConfig(build_env="", self_build=False)


def test_load_config_reads_all_options() -> None:
    got = config.load_config({"BUILD_ENV": "production", "SELF_BUILD": "1"})
    assert got.build_env == "production"
    assert got.self_build is True


def test_load_config_uses_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("BUILD_ENV", "production")
    monkeypatch.delenv("SELF_BUILD", raising=False)

    got = config.load_config()
    assert got.build_env == "production"
    assert got.self_build is False
    assert os.environ["BUILD_ENV"] == "production"


def test_load_config_does_not_mutate_mapping() -> None:
    env = {"BUILD_ENV": "development"}
    config.load_config(env)
    assert env == {"BUILD_ENV": "development"}


def test_is_truthy_treats_any_non_empty_string_as_set() -> None:
    assert config.is_truthy("1") is True
    assert config.is_truthy("0") is True
    assert config.is_truthy("false") is True
    assert config.is_truthy("") is False
    assert config.is_truthy(None) is False


def test_config_is_immutable() -> None:
    cfg = BootstrapConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.build_env = "production"  # type: ignore[misc]
