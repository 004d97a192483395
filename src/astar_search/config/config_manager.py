"""Hydra-backed configuration for searchers and the command line."""

import copy
import logging
from typing import Any, Dict, List, Optional, Union
from pathlib import Path
from omegaconf import DictConfig, OmegaConf, open_dict
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra

from .validators import validate_config

logger = logging.getLogger(__name__)

# Configuration consulted by create_astar_searcher() and the CLI
_global_config: Optional[DictConfig] = None

_ABSENT = object()


class ConfigManager:
    """Composes a configuration directory with Hydra."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Directory holding ``config.yaml``. Defaults to the
                ``conf`` directory at the project root.
        """
        if config_dir is None:
            project_root = Path(__file__).parent.parent.parent.parent
            config_dir = project_root / "conf"

        self.config_dir = Path(config_dir).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        logger.debug(f"Using configuration directory {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose the configuration and make it the global one.

        Args:
            config_name: Name of the main config file (without .yaml)
            overrides: Hydra overrides such as ``search.astar.tie_break=fifo``
            validate: Reject settings the searcher cannot use

        Returns:
            The composed configuration
        """
        GlobalHydra.instance().clear()

        try:
            with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
                cfg = compose(config_name=config_name, overrides=overrides or [])
        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

        if validate:
            validate_config(cfg)

        self.config = cfg

        global _global_config
        _global_config = cfg

        logger.info(f"Configuration loaded from {self.config_dir / config_name}.yaml"
                    + (f" with overrides {overrides}" if overrides else ""))
        return cfg


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load a configuration directory and make it the global configuration."""
    manager = ConfigManager(config_dir)
    return manager.load_config(config_name, overrides, validate)


def get_config() -> Optional[DictConfig]:
    """Get the global configuration, or None if none was loaded."""
    return _global_config


def reset_config() -> None:
    """Forget the global configuration."""
    global _global_config
    _global_config = None


def get_parameter(key: str, default: Any = None) -> Any:
    """Look up a dotted key in the global configuration.

    Returns ``default`` when nothing is loaded or the key is missing.
    """
    config = get_config()
    if config is None:
        return default
    return OmegaConf.select(config, key, default=default)


class ConfigContext:
    """Temporarily change the global configuration.

    Searchers created inside the block pick up the changes::

        with ConfigContext({'search.astar.tie_break': 'fifo'}):
            searcher = create_astar_searcher()

    The changed configuration is validated on entry. On exit every key is
    restored, and keys that did not exist before are removed again.
    """

    def __init__(self, changes: Dict[str, Any], validate: bool = True):
        self.changes = changes
        self.validate = validate
        self.config: Optional[DictConfig] = None
        self._saved: Dict[str, Any] = {}
        self._added: List[str] = []

    def __enter__(self) -> DictConfig:
        self.config = get_config()
        if self.config is None:
            raise RuntimeError("No global configuration loaded")

        for key in self.changes:
            added = _first_absent_prefix(self.config, key)
            if added is None:
                self._saved[key] = copy.deepcopy(OmegaConf.select(self.config, key))
            elif added not in self._added:
                self._added.append(added)

        with open_dict(self.config):
            for key, value in self.changes.items():
                OmegaConf.update(self.config, key, value, merge=False)

        if self.validate:
            try:
                validate_config(self.config)
            except Exception:
                self._restore()
                raise

        logger.debug(f"Temporary configuration changes: {self.changes}")
        return self.config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._restore()
        return False

    def _restore(self) -> None:
        with open_dict(self.config):
            for key, value in self._saved.items():
                OmegaConf.update(self.config, key, value, merge=False)
            for key in reversed(self._added):
                parent_key, _, leaf = key.rpartition('.')
                parent = OmegaConf.select(self.config, parent_key) if parent_key else self.config
                if isinstance(parent, DictConfig) and leaf in parent:
                    del parent[leaf]
        self._saved = {}
        self._added = []


def _first_absent_prefix(config: DictConfig, key: str) -> Optional[str]:
    """Shortest prefix of a dotted key missing from ``config``, or None."""
    parts = key.split('.')
    for i in range(1, len(parts) + 1):
        prefix = '.'.join(parts[:i])
        if OmegaConf.select(config, prefix, default=_ABSENT) is _ABSENT:
            return prefix
    return None
