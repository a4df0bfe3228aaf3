from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from mn_browser.config.model import GlobalConfig
from mn_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _expect(raw: Dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise ConfigError(f"global.json: '{key}' must be of type {kind.__name__}, got {type(value).__name__}")
    return value


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    global.json may set:

    - ui_title: title for UI, defaults to 'Metabolic Network Browser'
    - subtitle: subtitle for UI
    - default_assembly: path to an assembly JSON file. Absolute paths are used
                        as-is, relative ones resolve against the config root.
    - auto_load_default: load default_assembly when the app starts

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a JSON object or a value has the wrong type.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"global.json is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError("global.json must contain a JSON object")

    defaults = GlobalConfig()

    assembly_raw = _expect(raw, "default_assembly", str, None)
    if assembly_raw is None:
        default_assembly = None
    else:
        assembly_path = Path(assembly_raw)
        if assembly_path.is_absolute():
            default_assembly = assembly_path
        else:
            default_assembly = (root / assembly_path).resolve()

    return GlobalConfig(
        ui_title=_expect(raw, "ui_title", str, defaults.ui_title),
        subtitle=_expect(raw, "subtitle", str, defaults.subtitle),
        default_assembly=default_assembly,
        auto_load_default=bool(_expect(raw, "auto_load_default", bool, defaults.auto_load_default)),
    )
