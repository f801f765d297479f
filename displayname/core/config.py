"""Transform options from YAML.

A config file holds the option keys at the top level, or under a
``displayname:`` section so the file can be shared with other tools:

    displayname:
      only_root: true
      factory_function_names:
        - React.memo
        - observer
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .transform.options import TransformOptions

logger = logging.getLogger(__name__)

# Looked up in the working directory when no config path is given
DEFAULT_CONFIG_FILENAME = "displayname.yaml"

CONFIG_SECTION = "displayname"


def load_options(
    config_path: str | Path,
    base: Optional[TransformOptions] = None,
) -> TransformOptions:
    """Load transform options from a YAML file.

    Args:
        config_path: Path to the YAML file
        base: Options to merge onto (defaults when None)

    Returns:
        ``base`` with the fields present in the file replaced

    Raises:
        ValueError: If the file does not hold a mapping of known options
        yaml.YAMLError: If the file is not valid YAML
    """
    base = base or TransformOptions()
    path = Path(config_path)

    if not path.exists():
        logger.warning(f"{path} not found, using default transform options")
        return base

    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    section = _options_section(config, path)
    options = base.merge(section)
    logger.debug(f"Loaded transform options from {path}: {options}")
    return options


def find_default_config(directory: str | Path = ".") -> Optional[Path]:
    """Return ``displayname.yaml`` in ``directory`` if it exists."""
    candidate = Path(directory) / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _options_section(config: Any, path: Path) -> Dict[str, Any]:
    if not isinstance(config, dict):
        raise ValueError(f"{path} must contain a mapping of options, got {type(config).__name__}")
    section = config.get(CONFIG_SECTION, config)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{CONFIG_SECTION}' in {path} must be a mapping of options")
    return section
