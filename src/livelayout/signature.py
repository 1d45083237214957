"""Cheap content-addressed fingerprints of elements.

A signature covers everything that can change an element's overhead or
shape (its kind and its decorations) and nothing that only changes the
plotted data, so it can run every frame without rendering anything.
"""

from __future__ import annotations

import hashlib
from typing import Sequence

from livelayout.types import Element

_SEP = b"\x1f"
_LABEL_KEYS = ("title", "xlabel", "ylabel")


def _kind(element: object) -> str:
    cls = type(element)
    return f"{cls.__module__}.{cls.__qualname__}"


def signature(element: Element) -> int:
    """Order-sensitive 64-bit hash of *element*'s kind and decorations."""
    decorations = element.decorations()
    digest = hashlib.blake2b(digest_size=8)
    digest.update(_kind(element).encode())
    for key, value in decorations.items():
        digest.update(_SEP + f"{key}={value!r}".encode())
    for key in _LABEL_KEYS:
        value = decorations.get(key)
        if value:
            digest.update(_SEP + str(value).encode())
    return int.from_bytes(digest.digest(), "big")


def row_signature(elements: Sequence[Element]) -> tuple[int, ...]:
    return tuple(signature(element) for element in elements)
