"""
Hydra-based launcher that builds a value from the factory registry.

Builds the registry from config, then prints the value constructed for
``key`` (or the default key when ``key`` is null).
"""

import logging

import hydra
from omegaconf import DictConfig, OmegaConf

from langreg.core.app_context import LangRegContext
from langreg.core.registry import KeyNotFoundError
from langreg.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def run(cfg: DictConfig):
    """
    Build the context and construct the requested value.
    Args:
        cfg: Resolved tool configuration.

    Returns:
        The constructed value.
    """
    ctx = LangRegContext.from_config(cfg)
    key = cfg.get("key")
    try:
        if key is None:
            return ctx.lookup_default()
        return ctx.lookup(str(key))
    except KeyNotFoundError as e:
        logger.warning("Lookup failed: %s", e)
        raise


@hydra.main(config_path="../configs", config_name="defaults.yaml", version_base="1.3")
def main(cfg: DictConfig) -> None:
    configure_logging(cfg.get("log_level", "INFO"))
    # hydra.main installs root handlers first, so configure_logging leaves the level alone.
    logging.getLogger("langreg").setLevel(str(cfg.get("log_level", "INFO")).upper())
    print("Config:\n", OmegaConf.to_yaml(cfg))

    value = run(cfg)
    print("Built:", value)


if __name__ == "__main__":
    main()
