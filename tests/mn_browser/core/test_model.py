from __future__ import annotations

import pytest

from mn_browser.core.attributes import ATTRIBUTE_NAMES
from mn_browser.core.base_view import BaseView
from mn_browser.core.changes import ProposedChange
from mn_browser.core.model import Model
from mn_browser.core.state import State
from mn_browser.core.view_registry import ViewRegistry


def test_merge_drops_unknown_attribute():
    model = Model()
    model.merge([
        {"attribute": "reactions", "value": 42},
        {"attribute": "doesNotExist", "value": "x"},
    ])

    assert model["reactions"] == 42
    assert "doesNotExist" not in model
    assert model.as_dict() == {"reactions": 42}


def test_merge_last_write_wins_within_batch():
    model = Model()
    model.merge([
        {"attribute": "genes", "value": 1},
        {"attribute": "genes", "value": 2},
    ])
    assert model["genes"] == 2


def test_merge_only_invalid_records_leaves_store_unchanged():
    model = Model()
    model.merge([{"attribute": "metabolites", "value": {"m1": {}}}])
    before = model.as_dict()

    model.merge([
        {"attribute": "metabolites"},            # no value
        {"value": 3},                            # no attribute
        {"attribute": "unknown", "value": 1},    # outside universe
        {"attribute": ["metabolites"], "value": 1},
        "metabolites",
        None,
        ("metabolites", 1),
    ])

    assert model.as_dict() == before


def test_store_never_holds_names_outside_universe():
    model = Model()
    model.merge(
        [{"attribute": name, "value": i} for i, name in enumerate(ATTRIBUTE_NAMES)]
        + [{"attribute": "extra", "value": 0}, {"attribute": 7, "value": 0}]
    )
    assert set(model) <= set(ATTRIBUTE_NAMES)
    assert len(model) == len(ATTRIBUTE_NAMES)


def test_absent_and_none_are_distinct():
    model = Model()
    assert "genes" not in model
    assert model.get("genes") is None

    model.merge([ProposedChange(attribute="genes", value=None)])

    assert "genes" in model
    assert model["genes"] is None
    assert model.has_value("genes") is False


def test_getitem_raises_for_absent_attribute():
    model = Model()
    with pytest.raises(KeyError):
        model["genes"]


def test_as_dict_is_a_copy():
    model = Model()
    model.merge([{"attribute": "genes", "value": 1}])
    snapshot = model.as_dict()
    snapshot["genes"] = 99
    snapshot["bogus"] = 1
    assert model["genes"] == 1
    assert "bogus" not in model


def test_custom_universe_and_duplicate_names():
    model = Model(attribute_names=["a", "b"])
    model.merge([{"attribute": "a", "value": 1}, {"attribute": "metabolites", "value": 2}])
    assert model.as_dict() == {"a": 1}
    assert model.attribute_names == ("a", "b")

    with pytest.raises(ValueError):
        Model(attribute_names=["a", "b", "a"])


def test_merge_returns_state_and_records_it():
    model = Model()
    state = model.merge([])
    assert isinstance(state, State)
    assert model.state is state
    assert state.model is model

    again = model.restore([{"attribute": "genes", "value": 1}])
    assert again is not state
    assert model.state is again


def test_merge_during_construction_is_queued_until_cycle_completes():
    seen = []

    class EagerSource(BaseView):
        id = "source"
        label = "Eager"

        def __init__(self, model):
            super().__init__(model)
            seen.append(dict(model.as_dict()))
            if "file" not in model:
                # A nested merge must not interleave with the running cycle.
                assert model.merge([{"attribute": "file", "value": "a.json"}]) is None
                seen.append(dict(model.as_dict()))

        def compute_data(self):
            return None

        def render(self):
            return None

    registry = ViewRegistry()
    registry.register(EagerSource)
    model = Model(registry=registry)

    state = model.merge([])

    # first construction saw the empty store and nothing changed under it
    assert seen[0] == {}
    assert seen[1] == {}
    # the queued batch then ran as its own cycle
    assert seen[2] == {"file": "a.json"}
    assert model["file"] == "a.json"
    assert state is model.state


def test_failed_cycle_keeps_queued_batch_and_clears_state(caplog):
    calls = []

    class FailingSource(BaseView):
        id = "source"
        label = "Failing"

        def __init__(self, model):
            super().__init__(model)
            calls.append(dict(model.as_dict()))
            if len(calls) == 1:
                assert model.merge([{"attribute": "file", "value": "queued.json"}]) is None
                raise RuntimeError("view failed")

        def compute_data(self):
            return None

        def render(self):
            return None

    registry = ViewRegistry()
    registry.register(FailingSource)
    model = Model(registry=registry)

    with pytest.raises(RuntimeError):
        model.merge([{"attribute": "genes", "value": 1}])

    assert model.as_dict() == {"genes": 1}
    assert model.state is None
    assert "keeping 1 queued batch" in caplog.text

    state = model.merge([{"attribute": "genes", "value": 2}])

    # the kept batch runs first, then the new one
    assert calls[1] == {"genes": 1, "file": "queued.json"}
    assert model.as_dict() == {"genes": 2, "file": "queued.json"}
    assert state is model.state
