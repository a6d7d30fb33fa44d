"""Factory helpers for registering constructors declared in config blocks."""

import logging
from collections.abc import Callable
from typing import Any

from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

from langreg.core.registry import Registry

logger = logging.getLogger(__name__)


def _to_plain_dict(cfg: DictConfig | dict[str, Any]) -> dict[str, Any]:
    """
    Convert a DictConfig or mapping into a resolved plain dictionary.
    Args:
        cfg: Configuration block to convert.

    Returns:
        Dictionary of configuration blocks.
    """
    if isinstance(cfg, DictConfig):
        return OmegaConf.to_container(cfg, resolve=True)  # type: ignore[return-value]
    return dict(cfg)


def make_factory(node: DictConfig | dict[str, Any]) -> Callable[[], Any]:
    """
    Wrap a ``_target_`` config node in a zero-argument factory.
    Args:
        node: Config block naming the dotted path to build plus its arguments.

    Returns:
        Callable that instantiates a fresh object from ``node`` on every call.
    """
    params = _to_plain_dict(node)
    if "_target_" not in params:
        raise KeyError("Factory config must include '_target_'.")

    def factory():
        return instantiate(params)

    factory.__qualname__ = f"factory[{params['_target_']}]"
    return factory


def register_from_config(
    registry: Registry, factories_cfg: DictConfig | dict[str, Any] | None
) -> list[str]:
    """
    Register one factory per entry of a ``key -> _target_ node`` mapping.
    Args:
        registry: Registry receiving the factories.
        factories_cfg: Mapping of keys to config nodes, may be empty or None.

    Returns:
        Registered keys in config order.
    """
    if not factories_cfg:
        return []

    registered = []
    for key, node in _to_plain_dict(factories_cfg).items():
        registry.register(str(key), make_factory(node))
        registered.append(str(key))
    logger.debug("Registered %d factories from config: %s", len(registered), registered)
    return registered
