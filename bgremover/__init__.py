from .exceptions import (
    BackgroundRemovalError,
    ImageTooLargeError,
    InvalidInput,
    OutputConflictError,
    UnsupportedImageError,
)
from .models.pixel_buffer import PixelBuffer
from .models.thresholds import SegmentationThresholds
from .pipeline.background_remover import (
    RemovalResult,
    remove_background,
    remove_backgrounds,
    remove_backgrounds_in_folder,
)
