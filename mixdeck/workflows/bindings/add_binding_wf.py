"""Add binding workflow.

Binds a process/window name to a slider in the configuration document:

1. Load the whole document (coercing every slot once)
2. Remove the name from every slot (a name lives under one slider at a time)
3. Append it to the target slot, creating the slot if needed
4. Write the whole document back

The read-modify-write runs under the document's process-wide lock. The file
on disk is untouched until the final write; if that write fails the change
is lost and reported as ConfigIOError.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mixdeck.components.bindings.binding_document_comp import (
    append_name,
    document_lock,
    load_binding_document,
    remove_name,
    save_binding_document,
)
from mixdeck.helpers.dto.binding_dto import AddBindingResult

logger = logging.getLogger(__name__)


def add_binding_workflow(owner_name: str, slider_index: int, document_path: str | Path) -> AddBindingResult:
    """Bind ``owner_name`` to ``slider_index``, moving it off any other slider.

    Calling this twice with the same arguments leaves exactly one copy of the
    name under the target slider.

    Args:
        owner_name: Process or window name to bind
        slider_index: Target slider (non-negative)
        document_path: Path to the YAML configuration document

    Returns:
        AddBindingResult with the sliders the name moved from and the
        resulting names of the target slot

    Raises:
        ValueError: Blank name or negative index
        ConfigIOError: Document unreadable or unwritable
        ConfigFormatError: Document or target slot has an unexpected shape

    """
    name = (owner_name or "").strip()
    if not name:
        raise ValueError("Refusing to bind an empty name")
    if isinstance(slider_index, bool) or not isinstance(slider_index, int) or slider_index < 0:
        raise ValueError(f"Slider index must be a non-negative integer, got {slider_index!r}")

    with document_lock(document_path):
        document = load_binding_document(document_path)

        removed_from = remove_name(document.mapping, name)
        slot = append_name(document.mapping, slider_index, name)

        save_binding_document(document, document_path)

    moved_from = [index for index in removed_from if index != slider_index]
    if moved_from:
        logger.info(f"Moved {name} from slider(s) {moved_from} to slider {slider_index}")
    else:
        logger.info(f"Bound {name} to slider {slider_index}")

    return AddBindingResult(
        owner_name=name,
        slider_index=slider_index,
        moved_from=moved_from,
        slot_names=list(slot.names),
    )
