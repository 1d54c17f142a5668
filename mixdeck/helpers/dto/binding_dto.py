"""
Binding domain DTOs.

Slider slots are a tagged union: ``EmptySlot`` or ``NameListSlot``. Raw YAML
values (bare string, list of mixed scalars, list of strings, null) are
coerced into one of these exactly once, when the document is loaded.

Rules:
- Import only stdlib and typing (no mixdeck.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class EmptySlot:
    """A slider with no bound names."""

    @property
    def names(self) -> tuple[str, ...]:
        return ()

    def to_yaml(self) -> list[str]:
        return []


@dataclass(frozen=True)
class NameListSlot:
    """A slider bound to an ordered list of unique process/window names."""

    names: tuple[str, ...]

    def to_yaml(self) -> list[str]:
        return list(self.names)


SliderSlot = Union[EmptySlot, NameListSlot]


@dataclass
class MalformedEntry:
    """A slider_mapping entry that could not be coerced; written back verbatim."""

    key: Any
    value: Any
    reason: str


@dataclass
class SliderMapping:
    """Coerced slider_mapping section.

    ``slots`` is keyed by slider index in document order. ``malformed`` keeps
    entries the coercion step rejected so they round-trip unchanged.
    """

    slots: dict[int, SliderSlot] = field(default_factory=dict)
    malformed: list[MalformedEntry] = field(default_factory=list)


@dataclass
class BindingDocument:
    """The full configuration document as an ordered key/value tree.

    ``data`` holds every top-level key in file order; the slider_mapping value
    inside it is only authoritative after ``mapping`` is reassembled on save.
    """

    data: dict[str, Any]
    mapping: SliderMapping


@dataclass
class AddBindingResult:
    """Result from add_binding_workflow."""

    owner_name: str
    slider_index: int
    moved_from: list[int]
    slot_names: list[str]


@dataclass
class BindingOutcome:
    """Reported outcome of a BindingService operation (never raises)."""

    success: bool
    result: AddBindingResult | None = None
    error: str | None = None
