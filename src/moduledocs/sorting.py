"""In-place ordering of module collections."""

from __future__ import annotations

from .models import Module
from .options import SortBy


def sort_items(module: Module, sort_by: SortBy | None) -> None:
    """Reorder inputs, outputs and providers of module in place.

    Inputs:
        required: required inputs first, then optional; each partition keeps
            source order, or name order when name is also set.
        name only: ascending, case-sensitive by name.
        neither: source order.

    Outputs and providers only honour name. Required/optional views are
    derived from inputs, so they follow automatically.
    """
    if sort_by is None:
        return

    if sort_by.required:
        required = [i for i in module.inputs if i.required]
        optional = [i for i in module.inputs if not i.required]
        if sort_by.name:
            required.sort(key=lambda i: i.name)
            optional.sort(key=lambda i: i.name)
        module.inputs[:] = required + optional
    elif sort_by.name:
        module.inputs.sort(key=lambda i: i.name)

    if sort_by.name:
        module.outputs.sort(key=lambda o: o.name)
        module.providers.sort(key=lambda p: (p.name, p.alias or ""))
