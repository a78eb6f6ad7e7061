from pathlib import Path
from typing import Union, Iterable, Iterator
import logging
import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

from ..config import max_upload_bytes, valid_extensions
from ..exceptions import ImageTooLargeError, UnsupportedImageError
from ..models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Decoder/encoder around PixelBuffer: files in, RGBA buffers out, PNG back.
    """
    def __init__(self, max_bytes: int = None, exts: Iterable[str] = None):
        self.max_bytes = max_bytes if max_bytes is not None else max_upload_bytes()
        self.VALID_EXTS = {e.lower() for e in (exts or valid_extensions())}

    def check_file(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if path.suffix.lower() not in self.VALID_EXTS:
            raise UnsupportedImageError(f"Not an accepted image type: {path.name}")
        if not path.is_file():
            raise FileNotFoundError(f"Image not found: {path}")
        size = path.stat().st_size
        if size > self.max_bytes:
            raise ImageTooLargeError(
                f"{path.name} is {size} bytes, limit is {self.max_bytes} bytes"
            )
        return path

    def load(self, path: Union[str, Path]) -> PixelBuffer:
        path = self.check_file(path)
        try:
            with PILImage.open(path) as pil_img:
                rgba = np.asarray(pil_img.convert("RGBA"), dtype=np.uint8)
        except UnidentifiedImageError as err:
            raise UnsupportedImageError(f"Unreadable image: {path}") from err
        except PILImage.DecompressionBombError as err:
            raise UnsupportedImageError(f"Image dimensions too large: {path}") from err
        logger.debug(f"Decoded {path.name}: {rgba.shape[1]}x{rgba.shape[0]}")
        return PixelBuffer.from_array(rgba)

    @staticmethod
    def save(buffer: PixelBuffer, path: Union[str, Path]) -> Path:
        """Always PNG so the transparent pixels survive."""
        path = Path(path).with_suffix(".png")
        path.parent.mkdir(parents=True, exist_ok=True)
        PILImage.fromarray(buffer.to_array()).save(path, format="PNG")
        return path

    def iter_dir(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
    ) -> Iterator[Path]:
        """
        Yield accepted image paths one at a time.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        pattern = "**/*" if recursive else "*"
        for p in sorted(folder.glob(pattern)):
            if p.suffix.lower() not in self.VALID_EXTS:
                logger.debug(f"Skipping due to extension: {p}")
                continue
            if not p.is_file():
                continue
            yield p
