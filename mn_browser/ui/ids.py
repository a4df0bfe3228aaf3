from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Control:
        ASSEMBLY_UPLOAD = "assembly-upload"
        RESTORE_BTN = "restore-btn"
        COMPARTMENTALIZATION_BTN = "compartmentalization-btn"

    class Output:
        VIEWS_CONTAINER = "views-container"
        STATUS = "status-banner"
