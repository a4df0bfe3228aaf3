from __future__ import annotations

import base64
import binascii
import logging
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

import dash
from dash import Input, Output, State as DashState

from mn_browser.core.exceptions import AssemblyError
from mn_browser.core.model import Model
from mn_browser.core.state import State
from mn_browser.services import model_actions
from mn_browser.ui.ids import IDs
from mn_browser.validation.errors import ValidationError

if TYPE_CHECKING:
    from mn_browser.ui.context import AppContext

logger = logging.getLogger(__name__)


def decode_upload(contents: str) -> bytes:
    """
    Decode the data URL produced by dcc.Upload.

    :raises AssemblyError: if the contents are not a base64 data URL
    """
    try:
        _header, b64data = contents.split(",", 1)
        return base64.b64decode(b64data, validate=True)
    except (ValueError, binascii.Error) as e:
        raise AssemblyError("Could not read the uploaded file.") from e


def render_state(state: Optional[State]) -> List[Any]:
    if state is None:
        return []
    return [component.render() for component in state.components]


def handle_trigger(
        ctx: AppContext,
        triggered_id: Optional[str],
        contents: Optional[str] = None,
        filename: Optional[str] = None,
) -> Tuple[List[Any], str]:
    """
    Run the action for the control that fired and render the resulting State.

    Rejected uploads leave the Model untouched; the current views stay and the
    status line explains why.

    The action and the render run under the Model's lock so a merge from
    another request cannot land between the cycle and the views reading it.
    """
    model = ctx.model
    with model.lock:
        state, status = _run_action(model, triggered_id, contents, filename)
        # A queued merge returns None; fall back to the latest completed State.
        return render_state(state or model.state), status


def _run_action(
        model: Model,
        triggered_id: Optional[str],
        contents: Optional[str],
        filename: Optional[str],
) -> Tuple[Optional[State], str]:
    state = None
    status = ""

    if triggered_id == IDs.Control.ASSEMBLY_UPLOAD and contents:
        try:
            state = model_actions.load_assembly_bytes(decode_upload(contents), model, file_name=filename)
            status = f"Loaded {filename}." if filename else "Loaded assembly."
        except (AssemblyError, ValidationError) as e:
            logger.warning("Rejected assembly upload %s: %s", filename, e)
            status = f"Import failed: {e}"
    elif triggered_id == IDs.Control.RESTORE_BTN:
        state = model_actions.restore_initial_state(model)
        status = "Restored initial state."
    elif triggered_id == IDs.Control.COMPARTMENTALIZATION_BTN:
        state = model_actions.change_compartmentalization(model)
    elif model.state is None:
        state = model_actions.initiate_application(model)

    return state, status


def register_model_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Controls -> change batch -> Model.merge -> State -> views
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Output.VIEWS_CONTAINER, "children"),
        Output(IDs.Output.STATUS, "children"),
        Input(IDs.Control.ASSEMBLY_UPLOAD, "contents"),
        Input(IDs.Control.RESTORE_BTN, "n_clicks"),
        Input(IDs.Control.COMPARTMENTALIZATION_BTN, "n_clicks"),
        DashState(IDs.Control.ASSEMBLY_UPLOAD, "filename"),
    )
    def update_views(contents, _restore_clicks, _compartment_clicks, filename):
        return handle_trigger(ctx, dash.ctx.triggered_id, contents, filename)
