from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class GlobalConfig:
    """
    Application-wide settings read from global.json.

    - ui_title: title shown in the navbar and browser tab
    - subtitle: smaller text under the title
    - default_assembly: assembly file to load at startup, if any
    - auto_load_default: load default_assembly when the app is created
    """
    ui_title: str = "Metabolic Network Browser"
    subtitle: str = "Interactive Metabolic Network Explorer"
    default_assembly: Optional[Path] = None
    auto_load_default: bool = False
