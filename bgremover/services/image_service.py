from pathlib import Path
from typing import Iterator, Union

from ..config import output_suffix
from ..exceptions import OutputConflictError
from ..models.pixel_buffer import PixelBuffer
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers.  No segmentation logic."""
    def __init__(self, image_repository: ImageRepository = None):
        self.image_repository = image_repository or ImageRepository()
        self.suffix = output_suffix()

    def load(self, path: Union[str, Path]) -> PixelBuffer:
        """Load a single image from disk into an RGBA PixelBuffer."""
        return self.image_repository.load(path)

    def save(self, buffer: PixelBuffer, path: Union[str, Path],
             source: Union[str, Path] = None) -> Path:
        """Write PNG to *path*; refuses to overwrite *source* when given."""
        target = Path(path).with_suffix(".png")
        if source is not None and target.resolve() == Path(source).resolve():
            raise OutputConflictError(f"Refusing to overwrite source image: {source}")
        return self.image_repository.save(buffer, target)

    def stream_gallery(self, folder: Union[str, Path], *,
                       recursive: bool = False) -> Iterator[Path]:
        return self.image_repository.iter_dir(folder, recursive=recursive)

    def output_path(self, src: Union[str, Path], out_dir: Union[str, Path]) -> Path:
        """<out_dir>/<stem><suffix>.png"""
        src = Path(src)
        return Path(out_dir) / f"{src.stem}{self.suffix}.png"
