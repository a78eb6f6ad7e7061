import logging
import numpy as np

from ..models.segmentation_engine import SegmentationEngine
from ..models.thresholds import SegmentationThresholds

logger = logging.getLogger(__name__)


class SegmentationRepository:
    """
    One-image classification.

    • Builds the edge map for this call only.
    • Edge pixels use the strict rule, every other pixel the loose one.
    """

    def __init__(self, thresholds: SegmentationThresholds = None) -> None:
        self.engine = SegmentationEngine(thresholds)

    @property
    def thresholds(self) -> SegmentationThresholds:
        return self.engine.thresholds

    # ---------- public API ----------
    def retrieve_edges(self, rgba: np.ndarray) -> np.ndarray:
        return self.engine.detect_edges(rgba)

    def retrieve_mask(self, rgba: np.ndarray) -> np.ndarray:
        """
        Returns bool mask (H, W): True where the pixel is background.
        """
        edges = self.engine.detect_edges(rgba)
        loose = self.engine.loose_background(rgba)
        strict = self.engine.strict_background(rgba)

        background = np.where(edges, strict, loose)
        logger.debug(
            f"edges={int(edges.sum())} loose={int(loose.sum())} "
            f"strict={int(strict.sum())} background={int(background.sum())}"
        )
        return background
