"""Shape sniffing for untagged wire unions.

A *shape* is the pair of wire keys a variant requires and the keys it
admits. Matching walks the candidates in priority order and commits to the
first one that admits the object outright. When nothing admits it, the
closest candidate whose required keys are present is returned so that the
variant's own validation can name the offending key.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from itertools import combinations
from typing import Any

from pydantic import BaseModel


@dataclass(frozen=True)
class Shape:
    """Wire keys of one variant; Python field names are not wire keys."""

    tag: str
    required: frozenset[str]
    allowed: frozenset[str]

    @classmethod
    def of(cls, tag: str, model: type[BaseModel]) -> Shape:
        """Derive a shape from *model*'s fields, keyed by wire alias."""
        required: set[str] = set()
        allowed: set[str] = set()
        for name, info in model.model_fields.items():
            alias = info.alias or name
            allowed.add(alias)
            if info.is_required():
                required.add(alias)
        return cls(tag, frozenset(required), frozenset(allowed))

    def admits(self, keys: Iterable[str]) -> bool:
        return self.required <= set(keys) <= self.allowed

    def gates(self, keys: Iterable[str]) -> bool:
        return self.required <= set(keys)

    def unknown(self, keys: Iterable[str]) -> set[str]:
        return set(keys) - self.allowed


class ShapeMatcher:
    """Ordered candidate matching with required-field gating."""

    def __init__(self, shapes: Sequence[Shape]) -> None:
        self._shapes = tuple(shapes)

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(shape.tag for shape in self._shapes)

    def match(self, value: Any) -> str | None:
        """Return the tag of the shape *value* belongs to, or None."""
        if not isinstance(value, Mapping):
            return None
        keys = list(value)
        for shape in self._shapes:
            if shape.admits(keys):
                return shape.tag
        gated = [shape for shape in self._shapes if shape.gates(keys)]
        if not gated:
            return None
        # min() keeps the first of equals, so priority order breaks ties
        return min(gated, key=lambda shape: len(shape.unknown(keys))).tag

    def ambiguities(self) -> list[tuple[str, str]]:
        """Pairs of tags some single object could satisfy both of."""
        pairs = []
        for a, b in combinations(self._shapes, 2):
            if (a.required | b.required) <= (a.allowed & b.allowed):
                pairs.append((a.tag, b.tag))
        return pairs
