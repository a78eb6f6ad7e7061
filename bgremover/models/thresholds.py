from __future__ import annotations
from dataclasses import dataclass

from ..config import env_float


@dataclass(frozen=True)
class SegmentationThresholds:
    """
    Tunable numbers used by the background classifier.

    Loose pair applies to ordinary pixels, strict pair to pixels that sit on
    a detected edge (those are presumed to belong to the subject).
    """
    edge_threshold: float = 30.0              # Sobel magnitude, strictly greater → edge
    brightness_threshold: float = 200.0       # light/flat background, loose
    variance_threshold: float = 20.0
    strict_brightness_threshold: float = 240.0  # light/flat background, on edges
    strict_variance_threshold: float = 15.0

    screen_channel_min: float = 100.0         # G and B must both exceed this
    gray_tolerance: float = 10.0              # every pairwise channel gap below this
    gray_brightness_min: float = 150.0

    @classmethod
    def from_env(cls, **overrides) -> "SegmentationThresholds":
        """Defaults, then BG_* env vars, then explicit keyword overrides."""
        values = dict(
            edge_threshold=env_float("BG_EDGE_THRESHOLD", cls.edge_threshold),
            brightness_threshold=env_float("BG_BRIGHTNESS_THRESHOLD", cls.brightness_threshold),
            variance_threshold=env_float("BG_VARIANCE_THRESHOLD", cls.variance_threshold),
            strict_brightness_threshold=env_float(
                "BG_STRICT_BRIGHTNESS_THRESHOLD", cls.strict_brightness_threshold),
            strict_variance_threshold=env_float(
                "BG_STRICT_VARIANCE_THRESHOLD", cls.strict_variance_threshold),
        )
        values.update(overrides)
        return cls(**values)
