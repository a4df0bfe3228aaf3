from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from mn_browser.ui.ids import IDs

if TYPE_CHECKING:
    from mn_browser.ui.context import AppContext


def build_navbar(ctx: AppContext) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(ctx.global_config.ui_title, className="mb-0"),
                        html.Small(ctx.global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        color="light",
        className="mb-3",
    )


def build_toolbar() -> html.Div:
    """
    Controls that produce change batches. They are static so their callbacks
    are always wired, whatever views the State currently shows.
    """
    return html.Div(
        [
            dcc.Upload(
                id=IDs.Control.ASSEMBLY_UPLOAD,
                children=dbc.Button("Load assembly", color="primary"),
                multiple=False,
                accept=".json,application/json",
                className="me-2",
            ),
            dbc.Button(
                "Toggle compartmentalization",
                id=IDs.Control.COMPARTMENTALIZATION_BTN,
                color="secondary",
                className="me-2",
            ),
            dbc.Button("Restore", id=IDs.Control.RESTORE_BTN, color="danger", outline=True),
        ],
        className="d-flex align-items-center mb-3",
    )


def build_layout(ctx: AppContext) -> html.Div:
    return html.Div(
        [
            build_navbar(ctx),
            dbc.Container(
                fluid=True,
                children=[
                    build_toolbar(),
                    html.Div(id=IDs.Output.STATUS, className="text-muted mb-2"),
                    html.Div(id=IDs.Output.VIEWS_CONTAINER),
                ],
            ),
        ]
    )
