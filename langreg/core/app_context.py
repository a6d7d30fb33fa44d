from typing import Any

from omegaconf import DictConfig

from langreg.core.factory import register_from_config
from langreg.core.registry import DEFAULT_KEY, NOT_SET, Registry


class LangRegContext:
    """Owned runtime state shared by langreg components.

    Attributes:
        cfg: Structured configuration resolved from Hydra/OmegaConf.
        registry: Factory registry built from ``cfg``.
    """

    def __init__(self, cfg: DictConfig, registry: Registry):
        self.cfg = cfg
        self.registry = registry

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "LangRegContext":
        """Resolve the default key once and register the configured factories."""
        default_key = cfg.get("default_key")
        if default_key is None:
            default_key = DEFAULT_KEY
        registry = Registry(default_key=str(default_key))
        register_from_config(registry, cfg.get("factories"))
        return cls(cfg=cfg, registry=registry)

    @property
    def default_key(self) -> str:
        return self.registry.default_key

    def register(self, key: str, factory=NOT_SET):
        return self.registry.register(key, factory)

    def lookup(self, key: str) -> Any:
        return self.registry.lookup(key)

    def lookup_default(self) -> Any:
        return self.registry.lookup_default()
