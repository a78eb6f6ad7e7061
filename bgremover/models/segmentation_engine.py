# models/segmentation_engine.py
"""
Heuristic background segmentation on RGBA pixel arrays.

• Luminance → 3×3 Sobel → boolean edge map (interior pixels only).
• Colour rules → boolean "looks like background" masks.
• Holds only thresholds; nothing is cached between calls.
"""
from __future__ import annotations
import cv2
import numpy as np

from .thresholds import SegmentationThresholds

# Perceptual luminance weights (R, G, B).
LUMA_WEIGHTS = (0.3, 0.59, 0.11)


class SegmentationEngine:

    def __init__(self, thresholds: SegmentationThresholds | None = None) -> None:
        self.thresholds = thresholds or SegmentationThresholds()

    # --------------------------------------------------
    @staticmethod
    def luminance(rgba: np.ndarray) -> np.ndarray:
        """(H, W, 4) uint8 → (H, W) float64 luminance."""
        rgb = rgba[:, :, :3].astype(np.float64)
        r, g, b = LUMA_WEIGHTS
        return r * rgb[:, :, 0] + g * rgb[:, :, 1] + b * rgb[:, :, 2]

    @staticmethod
    def gradient_magnitude(lum: np.ndarray) -> np.ndarray:
        """
        Sobel magnitude sqrt(Gx² + Gy²) for every pixel.
        Border values are computed with reflected padding and must be
        ignored by callers.
        """
        gx = cv2.Sobel(lum, cv2.CV_64F, 1, 0, ksize=3)
        gy = cv2.Sobel(lum, cv2.CV_64F, 0, 1, ksize=3)
        return cv2.magnitude(gx, gy)

    def detect_edges(self, rgba: np.ndarray) -> np.ndarray:
        """
        Args
        ----
        rgba : np.ndarray  (H, W, 4)  uint8

        Returns
        -------
        edges : np.ndarray  (H, W)  bool, False on the 1-pixel border
        """
        h, w = rgba.shape[:2]
        edges = np.zeros((h, w), dtype=bool)
        if h < 3 or w < 3:  # no interior pixel has a full 3×3 neighbourhood
            return edges

        magnitude = self.gradient_magnitude(self.luminance(rgba))
        edges[1:-1, 1:-1] = magnitude[1:-1, 1:-1] > self.thresholds.edge_threshold
        return edges

    # --------------------------------------------------
    @staticmethod
    def _channels(rgba: np.ndarray):
        rgb = rgba[:, :, :3].astype(np.int16)
        return rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]

    @classmethod
    def brightness_and_variance(cls, rgba: np.ndarray):
        r, g, b = cls._channels(rgba)
        brightness = (r + g + b) / 3.0
        variance = np.maximum(np.maximum(np.abs(r - g), np.abs(r - b)), np.abs(g - b))
        return brightness, variance

    def loose_background(self, rgba: np.ndarray) -> np.ndarray:
        """Light/flat OR blue-green screen OR neutral gray."""
        t = self.thresholds
        r, g, b = self._channels(rgba)
        brightness, variance = self.brightness_and_variance(rgba)

        light = (brightness > t.brightness_threshold) & (variance < t.variance_threshold)
        screen = (
            (g > t.screen_channel_min) & (b > t.screen_channel_min) & (r < g) & (r < b)
        )
        gray = (
            (np.abs(r - g) < t.gray_tolerance)
            & (np.abs(r - b) < t.gray_tolerance)
            & (np.abs(g - b) < t.gray_tolerance)
            & (brightness > t.gray_brightness_min)
        )
        return light | screen | gray

    def strict_background(self, rgba: np.ndarray) -> np.ndarray:
        """Only overwhelmingly light and flat pixels."""
        t = self.thresholds
        brightness, variance = self.brightness_and_variance(rgba)
        return (brightness > t.strict_brightness_threshold) & (
            variance < t.strict_variance_threshold
        )
