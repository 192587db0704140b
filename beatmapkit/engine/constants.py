"""Constants shared by the stacking passes and the conversion steps."""

# Objects closer than this many osu!pixels are considered coincident for stacking.
STACK_DISTANCE = 3

# Droid stacking only looks this far ahead (scaled by stack leniency), in ms.
DROID_STACK_TIME_WINDOW = 2000

# Beatmaps older than this use the single-pass, end-time based stacking.
MODERN_STACKING_FORMAT_VERSION = 6

# Before this format version speed multipliers also changed tick spacing.
TICK_DISTANCE_FORMAT_VERSION = 8
