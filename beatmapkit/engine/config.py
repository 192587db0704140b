"""Pipeline configuration: controls which optional work the pipeline does."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Tunables for a conversion run. Algorithm constants are not configurable."""

    # Resolve hit samples against sample control points after defaults.
    apply_samples: bool = True

    # Run the stacking post-process (step 8).
    apply_stacking: bool = True

    # Skip modifier steps entirely when no modifiers are active.
    skip_empty_mod_steps: bool = True
