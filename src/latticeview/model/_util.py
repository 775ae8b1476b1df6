"""Shared helpers for model dataclasses."""

from __future__ import annotations

import dataclasses

import numpy as np

_field_defaults_cache: dict[tuple[type, frozenset[str]], dict] = {}


def _field_defaults(cls: type, *, exclude: frozenset[str] = frozenset()) -> dict:
    """Return a dict of ``{field_name: default}`` for a dataclass.

    Only fields with simple defaults (not ``MISSING`` and not
    ``default_factory``) are included.  Fields listed in *exclude*
    are skipped.  ``to_dict()`` methods compare current values against
    these so only non-default fields are serialised.  Results are
    cached per ``(cls, exclude)`` pair.
    """
    key = (cls, exclude)
    if key not in _field_defaults_cache:
        _field_defaults_cache[key] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
            and f.name not in exclude
        }
    return _field_defaults_cache[key]


def _frozen_vector(value: object, name: str) -> np.ndarray:
    """Return *value* as a read-only float array of shape ``(3,)``.

    Raises:
        ValueError: If *value* does not have three components.
    """
    arr = np.array(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {arr.shape}")
    arr.flags.writeable = False
    return arr
