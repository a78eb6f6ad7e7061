from __future__ import annotations
from dataclasses import dataclass
import numpy as np

from ..exceptions import InvalidInput

CHANNELS = 4


@dataclass
class PixelBuffer:
    """
    Decoded RGBA image: flat uint8 data, row-major, stride = width * 4.
    No file I/O in here; decoding/encoding lives in ImageRepository.
    """
    width: int
    height: int
    data: np.ndarray  # Shape (width * height * 4,), dtype uint8.

    def __post_init__(self):
        if not isinstance(self.data, np.ndarray):
            try:
                self.data = np.frombuffer(bytes(self.data), dtype=np.uint8).copy()
            except (TypeError, ValueError) as err:
                raise InvalidInput(f"Pixel data is not a byte sequence: {err}") from err
        self.validate()

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidInput(
                f"Buffer dimensions must be positive, got {self.width}x{self.height}"
            )
        expected = self.width * self.height * CHANNELS
        if self.data.dtype != np.uint8 or self.data.ndim != 1:
            raise InvalidInput(
                f"Expected flat uint8 data, got {self.data.dtype} with shape {self.data.shape}"
            )
        if self.data.size != expected:
            raise InvalidInput(
                f"Buffer length {self.data.size} does not match {self.width}x{self.height}x4 = {expected}"
            )

    # ── Constructors ─────────────────────────────────────────────────
    @classmethod
    def from_bytes(cls, width: int, height: int, raw: bytes | bytearray) -> "PixelBuffer":
        return cls(width, height, raw)

    @classmethod
    def from_array(cls, rgba: np.ndarray) -> "PixelBuffer":
        """
        Args
        ----
        rgba : np.ndarray  (H, W, 4)  uint8
        """
        if rgba.ndim != 3 or rgba.shape[2] != CHANNELS:
            raise InvalidInput(f"Expected RGBA array (H, W, 4), got shape {rgba.shape}")
        h, w = rgba.shape[:2]
        return cls(w, h, np.ascontiguousarray(rgba, dtype=np.uint8).reshape(-1).copy())

    # ── Views ────────────────────────────────────────────────────────
    def to_array(self) -> np.ndarray:
        """(H, W, 4) view sharing memory with ``data``."""
        return self.data.reshape(self.height, self.width, CHANNELS)

    def to_bytes(self) -> bytes:
        return self.data.tobytes()

    @property
    def alpha(self) -> np.ndarray:
        return self.to_array()[:, :, 3]

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.data.copy())
