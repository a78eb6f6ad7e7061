from pathlib import Path
from typing import Union
import logging
import numpy as np

from ..models.pixel_buffer import PixelBuffer
from ..models.thresholds import SegmentationThresholds
from ..repositories.segmentation_repository import SegmentationRepository
from .image_service import ImageService

logger = logging.getLogger(__name__)


class BackgroundService:
    """
    Business-level helper for background removal.

    • Uses SegmentationRepository to get the background mask.
    • Writes alpha = 0 on background pixels, never touches RGB.
    • Default returns a **new** PixelBuffer; in_place=True edits the
      caller's buffer and returns that same object.
    """

    def __init__(self, thresholds: SegmentationThresholds = None,
                 image_service: ImageService = None):
        self.thresholds = thresholds or SegmentationThresholds.from_env()
        self.seg_repo = SegmentationRepository(self.thresholds)
        self.image_service = image_service or ImageService()

    @staticmethod
    def _apply_mask(rgba: np.ndarray, background: np.ndarray) -> None:
        rgba[:, :, 3][background] = 0

    # --------------------------------------------------------------
    def background_mask(self, buffer: PixelBuffer) -> np.ndarray:
        buffer.validate()
        return self.seg_repo.retrieve_mask(buffer.to_array())

    def remove_background(self, buffer: PixelBuffer, in_place: bool = False) -> PixelBuffer:
        """
        Make every background pixel fully transparent.

        Raises InvalidInput if the buffer geometry is inconsistent.
        """
        mask = self.background_mask(buffer)
        out = buffer if in_place else buffer.copy()
        self._apply_mask(out.to_array(), mask)

        logger.debug(
            f"Removed background from {buffer.width}x{buffer.height} buffer: "
            f"{int(mask.sum())} pixels cleared"
        )
        return out

    @staticmethod
    def background_ratio(buffer: PixelBuffer) -> float:
        """Fraction of fully transparent pixels."""
        return float(np.count_nonzero(buffer.alpha == 0)) / (buffer.width * buffer.height)

    def remove_background_file(self, src: Union[str, Path],
                               dst: Union[str, Path] = None) -> Path:
        """Decode *src*, strip its background, write PNG to *dst* (or next to src)."""
        buffer = self.image_service.load(src)
        result = self.remove_background(buffer, in_place=True)
        dst = dst or self.image_service.output_path(src, Path(src).parent)
        saved = self.image_service.save(result, dst, source=src)
        logger.info(f"{Path(src).name} → {saved.name} "
                    f"({self.background_ratio(result):.1%} transparent)")
        return saved
