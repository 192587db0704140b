"""beatmapkit: beatmap geometry and derivation pipeline."""

__version__ = "0.1.0"
