"""
Binding components: slider_mapping document load/coerce/mutate/save.
"""

from .binding_document_comp import (
    SLIDER_MAPPING_KEY,
    append_name,
    coerce_slider_mapping,
    coerce_slot,
    document_lock,
    list_slot_names,
    load_binding_document,
    remove_name,
    render_binding_document,
    save_binding_document,
)

__all__ = [
    "SLIDER_MAPPING_KEY",
    "append_name",
    "coerce_slider_mapping",
    "coerce_slot",
    "document_lock",
    "list_slot_names",
    "load_binding_document",
    "remove_name",
    "render_binding_document",
    "save_binding_document",
]
