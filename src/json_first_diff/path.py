"""JsonPath: immutable location tracker for reported differences.

Paths render in a JSONPath-like notation: the root is ``$``, object members
append ``.name`` and array elements append ``[index]``::

    JsonPath.root().with_property("vals").with_index(1).with_property("name")
    # -> $.vals[1].name
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["JsonPath"]

ROOT_SEGMENT = "$"


@dataclass(frozen=True, slots=True)
class JsonPath:
    """Append-only sequence of rendered path segments.

    Every ``with_*`` call returns a new instance, so a path can be handed to
    several recursive branches without one branch affecting another.
    """

    segments: tuple[str, ...] = (ROOT_SEGMENT,)

    @classmethod
    def root(cls) -> JsonPath:
        return cls()

    def with_property(self, name: str) -> JsonPath:
        return JsonPath((*self.segments, f".{name}"))

    def with_index(self, index: int) -> JsonPath:
        return JsonPath((*self.segments, f"[{index}]"))

    def render(self) -> str:
        return "".join(self.segments)

    def __str__(self) -> str:
        return self.render()
