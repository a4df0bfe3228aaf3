"""
Actions that modify the state of the application.

Every action builds a batch of proposed changes and hands it to
Model.merge; none of them write to the Model any other way.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from mn_browser.core.changes import ProposedChange, changes_from_mapping
from mn_browser.core.exceptions import AssemblyError
from mn_browser.core.model import Model
from mn_browser.core.state import State
from mn_browser.validation.assembly_validation import validate_assembly_dict

logger = logging.getLogger(__name__)


def initiate_application(model: Model) -> Optional[State]:
    """
    Run the first evaluation of the application with an empty batch.
    With nothing loaded yet this yields the source view.
    """
    return model.merge([])


def restore_initial_state(model: Model) -> Optional[State]:
    """
    Return the application to its initial state by clearing every attribute.
    """
    logger.info("Restoring initial state")
    return model.merge(changes_from_mapping(dict.fromkeys(model.attribute_names)))


def submit_file(file_name: str, model: Model) -> Optional[State]:
    """Record the file the user selected as the current source."""
    return model.merge([ProposedChange(attribute="file", value=file_name)])


def change_compartmentalization(model: Model) -> Optional[State]:
    """Toggle whether metabolites are represented per compartment."""
    current = bool(model.get("compartmentalization", False))
    return model.merge([ProposedChange(attribute="compartmentalization", value=not current)])


def extract_assembly_entities_sets(assembly: Any) -> List[ProposedChange]:
    """
    Organise the entities and sets of an assembly as a change batch.

    :param assembly: {"entities": {"metabolites", "reactions"},
                      "sets": {"compartments", "genes", "processes"}}
    :return: changes for metabolites, reactions, compartments, genes, processes
    :raises ValidationError: if the assembly lacks any of these
    """
    validate_assembly_dict(assembly)
    entities = assembly["entities"]
    sets = assembly["sets"]
    return changes_from_mapping({
        "metabolites": entities["metabolites"],
        "reactions": entities["reactions"],
        "compartments": sets["compartments"],
        "genes": sets["genes"],
        "processes": sets["processes"],
    })


def load_assembly_bytes(
        raw: bytes,
        model: Model,
        *,
        file_name: Optional[str] = None,
) -> Optional[State]:
    """
    Parse an assembly from raw JSON bytes and merge its entities and sets.

    The file name, when given, is merged in the same batch so the source view
    and the entity views agree on where the data came from.

    :raises AssemblyError: if the bytes are not UTF-8 JSON
    :raises ValidationError: if the JSON is not a complete assembly
    """
    try:
        assembly = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise AssemblyError(f"Assembly is not valid JSON: {e}") from e

    changes = extract_assembly_entities_sets(assembly)
    if file_name is not None:
        changes.insert(0, ProposedChange(attribute="file", value=file_name))

    logger.info(
        "Loading assembly",
        extra={"file_name": file_name, "n_changes": len(changes)},
    )
    return model.merge(changes)


def load_assembly_file(path: Path, model: Model) -> Optional[State]:
    """
    Load an assembly from a JSON file and merge its entities and sets.

    :raises FileNotFoundError: if the file does not exist
    """
    path = Path(path)
    logger.info("Loading assembly from %s", path)
    return load_assembly_bytes(path.read_bytes(), model, file_name=path.name)
