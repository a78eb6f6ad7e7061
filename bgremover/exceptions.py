class BackgroundRemovalError(Exception):
    """Base class for every error raised by bgremover."""


class InvalidInput(BackgroundRemovalError, ValueError):
    """Pixel buffer geometry is unusable (non-positive size or wrong length)."""


class UnsupportedImageError(BackgroundRemovalError, ValueError):
    """Source file is not one of the accepted image types."""


class ImageTooLargeError(BackgroundRemovalError, ValueError):
    """Source file is bigger than the configured upload limit."""


class OutputConflictError(BackgroundRemovalError, ValueError):
    """Result would be written over its own source image."""
