"""
Binding document component.

Loads, coerces, mutates and saves the YAML configuration document that holds
the ``slider_mapping`` section (slider index -> bound process/window names).

Architecture:
- Leaf component (no upward imports)
- The document is an ordered key/value tree; only slider_mapping is typed,
  every other top-level key is opaque and written back in place
- Slots are coerced once on load into EmptySlot | NameListSlot
- Saves are whole-document replaces: temp file in the same directory, then
  an atomic rename, so a failed write never leaves a truncated document
- Mutation helpers operate on the in-memory SliderMapping only
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

import yaml

from mixdeck.helpers.dto.binding_dto import (
    BindingDocument,
    EmptySlot,
    MalformedEntry,
    NameListSlot,
    SliderMapping,
    SliderSlot,
)
from mixdeck.helpers.exceptions import ConfigFormatError, ConfigIOError

logger = logging.getLogger(__name__)

SLIDER_MAPPING_KEY = "slider_mapping"

# One writer lock per resolved document path, shared by the whole process
_document_locks: dict[str, threading.Lock] = {}
_document_locks_guard = threading.Lock()


def document_lock(path: str | Path) -> threading.Lock:
    """Return the process-wide lock guarding read-modify-write of ``path``."""
    key = os.path.realpath(path)
    with _document_locks_guard:
        lock = _document_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _document_locks[key] = lock
        return lock


# ----------------------------------------------------------------------
# Coercion
# ----------------------------------------------------------------------


def coerce_slider_index(key: Any) -> int:
    """Accept int keys and digit-only string keys; reject everything else."""
    if isinstance(key, bool):
        raise ConfigFormatError(f"slider index must be an integer, got {key!r}")
    if isinstance(key, int):
        if key < 0:
            raise ConfigFormatError(f"slider index must be non-negative, got {key}")
        return key
    if isinstance(key, str) and key.strip().isdigit():
        return int(key.strip())
    raise ConfigFormatError(f"slider index must be an integer, got {key!r}")


def _coerce_name(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        name = str(value)
        return name if name.strip() else None
    raise ConfigFormatError(f"unsupported slot element {value!r} ({type(value).__name__})")


def coerce_slot(value: Any) -> SliderSlot:
    """
    Coerce a raw slot value into EmptySlot or NameListSlot.

    - null / empty list -> EmptySlot
    - bare scalar -> single-element list
    - list of mixed scalars -> list of their text forms
    Duplicates within a slot collapse to their first occurrence.

    Raises:
        ConfigFormatError: mappings, nested lists, or other shapes
    """
    if value is None:
        return EmptySlot()
    items = value if isinstance(value, list) else [value]

    names: list[str] = []
    for item in items:
        name = _coerce_name(item)
        if name is not None and name not in names:
            names.append(name)
    return NameListSlot(tuple(names)) if names else EmptySlot()


def coerce_slider_mapping(raw: Any) -> SliderMapping:
    """
    Coerce the raw slider_mapping value.

    Malformed entries are logged and kept aside so they are written back
    unchanged; a non-mapping section as a whole is a ConfigFormatError.
    """
    mapping = SliderMapping()
    if raw is None:
        return mapping
    if not isinstance(raw, dict):
        raise ConfigFormatError(f"{SLIDER_MAPPING_KEY} must be a mapping, got {type(raw).__name__}")

    for key, value in raw.items():
        try:
            index = coerce_slider_index(key)
            slot = coerce_slot(value)
        except ConfigFormatError as e:
            logger.warning(f"[binding_document] Skipping malformed {SLIDER_MAPPING_KEY} entry {key!r}: {e}")
            mapping.malformed.append(MalformedEntry(key=key, value=value, reason=str(e)))
            continue

        existing = mapping.slots.get(index)
        if existing is not None:
            # "1" and 1 both present: merge in document order
            logger.warning(f"[binding_document] Duplicate slider index {index}, merging entries")
            merged = list(existing.names) + [n for n in slot.names if n not in existing.names]
            slot = NameListSlot(tuple(merged)) if merged else EmptySlot()
        mapping.slots[index] = slot

    return mapping


def dump_slider_mapping(mapping: SliderMapping) -> dict[Any, Any]:
    """Reassemble the section as plain YAML data (coerced slots, then malformed entries)."""
    data: dict[Any, Any] = {index: slot.to_yaml() for index, slot in mapping.slots.items()}
    for entry in mapping.malformed:
        data[entry.key] = entry.value
    return data


def list_slot_names(mapping: SliderMapping) -> dict[int, list[str]]:
    return {index: list(slot.names) for index, slot in mapping.slots.items()}


# ----------------------------------------------------------------------
# Mutation
# ----------------------------------------------------------------------


def remove_name(mapping: SliderMapping, name: str) -> list[int]:
    """
    Remove ``name`` from every slot.

    Returns:
        Slider indices the name was removed from
    """
    removed_from: list[int] = []
    for index, slot in mapping.slots.items():
        if name in slot.names:
            remaining = tuple(n for n in slot.names if n != name)
            mapping.slots[index] = NameListSlot(remaining) if remaining else EmptySlot()
            removed_from.append(index)
    return removed_from


def append_name(mapping: SliderMapping, index: int, name: str) -> SliderSlot:
    """
    Append ``name`` to slot ``index``, creating the slot if needed.

    Raises:
        ConfigFormatError: The target slot exists in the document but is malformed
    """
    for entry in mapping.malformed:
        try:
            malformed_index = coerce_slider_index(entry.key)
        except ConfigFormatError:
            continue
        if malformed_index == index:
            raise ConfigFormatError(f"slider {index} has a malformed value ({entry.reason}); fix it by hand first")

    slot = mapping.slots.get(index, EmptySlot())
    if name in slot.names:
        return slot
    new_slot = NameListSlot((*slot.names, name))
    mapping.slots[index] = new_slot
    return new_slot


# ----------------------------------------------------------------------
# I/O
# ----------------------------------------------------------------------


def load_binding_document(path: str | Path) -> BindingDocument:
    """
    Read and parse the document.

    Raises:
        ConfigIOError: Missing or unreadable file
        ConfigFormatError: Invalid YAML, non-mapping top level or slider_mapping
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigIOError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigFormatError(f"Cannot parse {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigFormatError(f"{path} must contain a mapping at the top level, got {type(data).__name__}")

    mapping = coerce_slider_mapping(data.get(SLIDER_MAPPING_KEY))
    return BindingDocument(data=data, mapping=mapping)


def render_binding_document(document: BindingDocument) -> str:
    """Serialize the whole document, with slider_mapping rebuilt from the coerced slots."""
    data = dict(document.data)
    data[SLIDER_MAPPING_KEY] = dump_slider_mapping(document.mapping)
    try:
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)
    except yaml.YAMLError as e:
        raise ConfigFormatError(f"Cannot serialize document: {e}") from e


def save_binding_document(document: BindingDocument, path: str | Path) -> None:
    """
    Replace the file at ``path`` with the serialized document.

    A symlinked ``path`` is resolved first so the link keeps pointing at the
    updated target.

    Raises:
        ConfigFormatError: Document cannot be serialized
        ConfigIOError: Temp file cannot be written or renamed into place
    """
    path = Path(os.path.realpath(path))
    text = render_binding_document(document)

    temp_name: str | None = None
    try:
        fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            os.chmod(temp_name, path.stat().st_mode & 0o777)
        else:
            os.chmod(temp_name, 0o644)
        os.replace(temp_name, path)
        temp_name = None
    except OSError as e:
        raise ConfigIOError(f"Cannot write {path}: {e}") from e
    finally:
        if temp_name is not None and os.path.exists(temp_name):
            try:
                os.unlink(temp_name)
            except OSError:
                pass

    logger.debug(f"[binding_document] Wrote {path}")
