# pipeline/background_remover.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List
import logging

from ..config import processed_dir
from ..exceptions import BackgroundRemovalError
from ..models.pixel_buffer import PixelBuffer
from ..models.thresholds import SegmentationThresholds
from ..services.background_service import BackgroundService
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)


@dataclass
class RemovalResult:
    source: Path
    output: Path | None = None
    background_ratio: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ------------------------------------------------------------------
def remove_backgrounds(
    paths: Iterable[str | Path],
    *,
    background_service: BackgroundService | None = None,
    image_service: ImageService | None = None,
    processed_dir_path: str | Path | None = None,
) -> List[RemovalResult]:
    """
    For every file in *paths*:
        • decode to an RGBA buffer
        • clear the background alpha
        • write <stem>_nobg.png into *processed_dir_path*
    Files that fail to load or write are logged and reported, not raised.
    """
    image_service = image_service or ImageService()
    background_service = background_service or BackgroundService(image_service=image_service)
    out_dir = Path(processed_dir_path or processed_dir())

    results: List[RemovalResult] = []
    for src in paths:
        src = Path(src)
        try:
            buffer = image_service.load(src)
            cleared = background_service.remove_background(buffer, in_place=True)
            output = image_service.save(cleared, image_service.output_path(src, out_dir), source=src)
        except (BackgroundRemovalError, OSError) as err:
            logger.warning(f"Skipping {src.name}: {err}")
            results.append(RemovalResult(source=src, error=str(err)))
            continue

        ratio = background_service.background_ratio(cleared)
        logger.info(f"Processed {src.name}: {ratio:.1%} background")
        results.append(RemovalResult(source=src, output=output, background_ratio=ratio))

    return results


def remove_backgrounds_in_folder(folder: str | Path, *, recursive: bool = False,
                                 **kwargs) -> List[RemovalResult]:
    image_service = kwargs.get("image_service") or ImageService()
    kwargs["image_service"] = image_service
    return remove_backgrounds(image_service.stream_gallery(folder, recursive=recursive), **kwargs)


def remove_background(buffer: PixelBuffer,
                      thresholds: SegmentationThresholds | None = None,
                      *, in_place: bool = False) -> PixelBuffer:
    """Single in-memory buffer; defaults come from the BG_* env vars."""
    return BackgroundService(thresholds).remove_background(buffer, in_place=in_place)
