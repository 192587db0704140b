"""Hit circle."""

from __future__ import annotations

from beatmapkit.models.hitobjects.base import HitObject, HitObjectKind


class Circle(HitObject):
    kind = HitObjectKind.CIRCLE

    def __repr__(self) -> str:
        return f"Circle(start_time={self.start_time}, position=[{self.position}])"
