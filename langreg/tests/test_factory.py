import logging

import pytest
from omegaconf import OmegaConf

from langreg.core.factory import make_factory, register_from_config
from langreg.core.registry import Registry
from langreg.examples.languages import Language


def test_make_factory_builds_fresh_instances():
    factory = make_factory({"_target_": "langreg.examples.languages.python"})

    first = factory()
    second = factory()
    assert isinstance(first, Language)
    assert first.name == "python"
    assert first == second
    assert first is not second


def test_make_factory_passes_arguments():
    node = OmegaConf.create(
        {"_target_": "langreg.examples.languages.Language", "name": "lua", "line_comment": "--"}
    )
    language = make_factory(node)()

    assert language.name == "lua"
    assert language.line_comment == "--"


def test_make_factory_requires_target():
    with pytest.raises(KeyError):
        make_factory({"name": "lua"})


def test_register_from_config():
    cfg = OmegaConf.create(
        {
            "python": {"_target_": "langreg.examples.languages.python"},
            "javascript": {"_target_": "langreg.examples.languages.javascript"},
        }
    )
    registry = Registry()

    keys = register_from_config(registry, cfg)

    assert keys == ["python", "javascript"]
    assert registry.lookup("javascript").extensions == (".js", ".mjs")


def test_register_from_empty_config():
    registry = Registry()
    assert register_from_config(registry, None) == []
    assert register_from_config(registry, {}) == []
    assert len(registry) == 0


def test_register_from_config_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="langreg.core.factory"):
        register_from_config(Registry(), {"python": {"_target_": "langreg.examples.languages.python"}})

    records = [r for r in caplog.records if r.name == "langreg.core.factory"]
    assert records
    assert all(r.levelno == logging.DEBUG for r in records)
