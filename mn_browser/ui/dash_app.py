from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from mn_browser.config.loader import load_global_config
from mn_browser.core.model import Model
from mn_browser.core.view_registry import ViewRegistry
from mn_browser.services import model_actions
from mn_browser.ui.callbacks.callbacks_model import register_model_callbacks
from mn_browser.ui.context import AppContext
from mn_browser.ui.layout import build_layout

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from mn_browser.views import (
        SourceView,
        StateView,
        SummaryView,
        FilterView,
        SetView,
        ContextView,
        AssemblyView,
        TopologyView,
    )

    registry = ViewRegistry()
    registry.register(SourceView)
    registry.register(StateView)
    registry.register(SummaryView)
    registry.register(FilterView)
    registry.register(SetView)
    registry.register(ContextView)
    registry.register(AssemblyView)
    registry.register(TopologyView)
    return registry


def build_app_context(config_root: Path | str = Path("config")) -> AppContext:
    """
    Load config, build the registry and the session Model, and run the first
    evaluation (from the default assembly when configured).
    """
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Session Model, owned by the app context
    registry = build_view_registry()
    model = Model(registry=registry)

    ctx = AppContext(
        config_root=config_root,
        global_config=global_config,
        registry=registry,
        model=model,
    )

    # 3) First evaluation, optionally from the default assembly
    if global_config.auto_load_default and global_config.default_assembly is not None:
        model_actions.load_assembly_file(global_config.default_assembly, model)
    else:
        model_actions.initiate_application(model)

    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_app_context(config_root)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = ctx.global_config.ui_title
    app.layout = build_layout(ctx)

    register_model_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(ctx.config_root), "views": [cls.id for cls in ctx.registry.all_classes()]},
    )
    return app
