from __future__ import annotations

import base64
import json

import pytest
from dash import Dash

from mn_browser.core.exceptions import AssemblyError
from mn_browser.core.model import Model
from mn_browser.config.model import GlobalConfig
from mn_browser.ui.callbacks.callbacks_model import decode_upload, handle_trigger
from mn_browser.ui.context import AppContext
from mn_browser.services import model_actions
from mn_browser.ui.dash_app import build_app_context, build_view_registry, create_dash_app
from mn_browser.ui.ids import IDs


def _assembly_bytes():
    return json.dumps({
        "entities": {"metabolites": {"m": {}}, "reactions": {"r": {}}},
        "sets": {"compartments": {"c": {}}, "genes": {"g": {}}, "processes": {"p": {}}},
    }).encode("utf-8")


def _upload(raw: bytes) -> str:
    return "data:application/json;base64," + base64.b64encode(raw).decode("ascii")


def _ctx(tmp_path):
    registry = build_view_registry()
    return AppContext(
        config_root=tmp_path,
        global_config=GlobalConfig(),
        registry=registry,
        model=Model(registry=registry),
    )


def test_registry_covers_every_view_in_the_table():
    ids = [cls.id for cls in build_view_registry().all_classes()]
    assert ids == ["source", "state", "summary", "filter", "set", "context", "assembly", "topology"]


def test_create_dash_app(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({"ui_title": "Test Browser"}))
    app = create_dash_app(tmp_path)
    assert isinstance(app, Dash)
    assert app.title == "Test Browser"


def test_create_dash_app_loads_default_assembly(tmp_path):
    (tmp_path / "a.json").write_bytes(_assembly_bytes())
    (tmp_path / "global.json").write_text(
        json.dumps({"default_assembly": "a.json", "auto_load_default": True})
    )
    assert isinstance(create_dash_app(tmp_path), Dash)

    ctx = build_app_context(tmp_path)
    assert ctx.model["file"] == "a.json"
    assert ctx.model["metabolites"] == {"m": {}}
    assert ctx.model.state.view_ids == ["state"]
    assert [c.id for c in ctx.model.state.components] == ["state"]


def test_app_context_without_default_assembly_starts_at_source(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({}))
    ctx = build_app_context(tmp_path)
    assert len(ctx.model) == 0
    assert ctx.model.state.view_ids == ["source"]


def test_initial_render_shows_source(tmp_path):
    ctx = _ctx(tmp_path)
    children, status = handle_trigger(ctx, None)
    assert [c.id for c in children] == ["view-source"]
    assert status == ""


def test_upload_then_restore(tmp_path):
    ctx = _ctx(tmp_path)

    children, status = handle_trigger(
        ctx, IDs.Control.ASSEMBLY_UPLOAD, _upload(_assembly_bytes()), "a.json"
    )
    assert [c.id for c in children] == ["view-state"]
    assert status == "Loaded a.json."
    assert ctx.model["file"] == "a.json"

    children, status = handle_trigger(ctx, IDs.Control.RESTORE_BTN)
    assert [c.id for c in children] == ["view-source"]
    assert ctx.model.get("metabolites") is None


def test_rejected_upload_keeps_model(tmp_path):
    ctx = _ctx(tmp_path)
    handle_trigger(ctx, None)

    children, status = handle_trigger(
        ctx, IDs.Control.ASSEMBLY_UPLOAD, _upload(b'{"entities": {}}'), "bad.json"
    )
    assert status.startswith("Import failed")
    assert len(ctx.model) == 0
    assert [c.id for c in children] == ["view-source"]


def test_decode_upload_rejects_garbage():
    with pytest.raises(AssemblyError):
        decode_upload("no-comma-here")
    with pytest.raises(AssemblyError):
        decode_upload("data:application/json;base64,@@@")


def test_render_uses_the_state_returned_by_the_action(tmp_path, monkeypatch):
    ctx = _ctx(tmp_path)
    handle_trigger(ctx, IDs.Control.ASSEMBLY_UPLOAD, _upload(_assembly_bytes()), "a.json")
    restore = model_actions.restore_initial_state

    def restore_then_newer_merge(model):
        state = restore(model)
        # a later cycle replaces model.state before the callback renders
        model.merge(model_actions.extract_assembly_entities_sets(json.loads(_assembly_bytes())))
        return state

    monkeypatch.setattr(model_actions, "restore_initial_state", restore_then_newer_merge)

    children, _ = handle_trigger(ctx, IDs.Control.RESTORE_BTN)

    assert [c.id for c in children] == ["view-source"]
    assert ctx.model.state.view_ids == ["state"]


def test_render_falls_back_to_latest_state_when_action_was_queued(tmp_path, monkeypatch):
    ctx = _ctx(tmp_path)
    handle_trigger(ctx, None)
    monkeypatch.setattr(model_actions, "change_compartmentalization", lambda model: None)

    children, _ = handle_trigger(ctx, IDs.Control.COMPARTMENTALIZATION_BTN)

    assert [c.id for c in children] == ["view-source"]
