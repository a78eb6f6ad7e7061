import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_EXTENSIONS = ".png,.jpg,.jpeg,.gif,.bmp,.webp"


def env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def max_upload_bytes() -> int:
    return int(float(os.getenv("MAX_UPLOAD_SIZE_MB", "5")) * 1024 * 1024)


def valid_extensions() -> set:
    raw = os.getenv("VALID_IMAGE_EXTENSIONS", DEFAULT_EXTENSIONS)
    return {ext.strip().lower() for ext in raw.split(",") if ext.strip()}


def processed_dir() -> str:
    return os.getenv("PROCESSED_DIR_PATH", "data/processed_gallery")


def output_suffix() -> str:
    return os.getenv("OUTPUT_SUFFIX", "_nobg")
