from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from dash import html

from mn_browser.core.base_view import BaseView
from ._panel import view_card


class SourceView(BaseView):
    """
    Intake surface: shown while the metabolic entities and sets are missing.

    Displays the current file selection. The upload control itself lives in
    the static layout so its callback exists before any view does.
    """

    id = "source"
    label = "Source"

    def compute_data(self) -> Dict[str, Any]:
        file = self.model.get("file")
        if file is None:
            return {"file_name": None}
        if isinstance(file, Mapping):
            return {"file_name": file.get("name")}
        return {"file_name": str(file)}

    def render(self):
        file_name = self.compute_data()["file_name"]
        return view_card(
            self.id,
            self.label,
            [
                html.Span(file_name or "Please select a file.", className="fw-bold"),
                html.P(
                    "Upload an assembly of metabolic entities and sets to begin.",
                    className="text-muted mb-0",
                ),
            ],
        )
