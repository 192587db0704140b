"""Spinner: a timed object fixed at the playfield centre."""

from __future__ import annotations

from beatmapkit.geometry.vector import Vector2
from beatmapkit.models.hitobjects.base import HitObject, HitObjectKind
from beatmapkit.models.samples import BankHitSampleInfo, HitSampleInfo

PLAYFIELD_CENTER = Vector2(256, 192)


class Spinner(HitObject):
    kind = HitObjectKind.SPINNER

    def __init__(
        self,
        *,
        start_time: float,
        end_time: float,
        new_combo: bool = False,
        combo_offset: int = 0,
        samples: list[HitSampleInfo] | None = None,
    ) -> None:
        super().__init__(
            start_time=start_time,
            position=PLAYFIELD_CENTER,
            end_time=end_time,
            new_combo=new_combo,
            combo_offset=combo_offset,
            samples=samples,
        )

        bank_sample = next((s for s in self.samples if isinstance(s, BankHitSampleInfo)), None)
        if bank_sample is not None:
            self.auxiliary_samples.append(
                BankHitSampleInfo(
                    volume=bank_sample.volume,
                    name="spinnerspin",
                    bank=bank_sample.bank,
                    custom_sample_bank=bank_sample.custom_sample_bank,
                    is_layered=bank_sample.is_layered,
                )
            )
        self.auxiliary_samples.append(self.create_hit_sample_info("spinnerbonus"))

    # Spinners are never visually stacked.
    @property
    def stacked_position(self) -> Vector2:
        return self.position

    @property
    def stacked_end_position(self) -> Vector2:
        return self.position

    def __repr__(self) -> str:
        return f"Spinner(start_time={self.start_time}, duration={self.duration})"
