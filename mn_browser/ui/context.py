from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mn_browser.config.model import GlobalConfig
from mn_browser.core.model import Model
from mn_browser.core.view_registry import ViewRegistry


@dataclass
class AppContext:
    """
    Holds shared state for the Dash app: config root, global config, the
    view registry and the session's Model. This is passed into layout +
    callback registration functions instead of using module-level globals.

    The Model is the single owner of application data for the session; every
    callback goes through Model.merge to change it.
    """
    config_root: Path
    global_config: GlobalConfig
    registry: ViewRegistry
    model: Model
