import random
from pathlib import Path

from flopapi.constants import IMAGE_EXTENSIONS


class LocalImageError(RuntimeError):
    pass


class ImageDirectoryError(LocalImageError):
    pass


class NoImagesFound(LocalImageError):
    pass


def extension(filename: str) -> str:
    # everything from the last dot, so ".png" counts as a png
    dot = filename.rfind(".")
    return filename[dot:] if dot != -1 else ""


def is_image_file(filename: str) -> bool:
    return extension(filename) in IMAGE_EXTENSIONS


def list_images(directory: Path) -> list[str]:
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise ImageDirectoryError(f"failed to read {directory.name} directory: {exc}") from exc
    return sorted(entry.name for entry in entries if not entry.is_dir() and is_image_file(entry.name))


def pick_random_image(directory: Path, *, rng: random.Random | None = None) -> Path:
    images = list_images(directory)
    if not images:
        raise NoImagesFound(f"no image files found in {directory.name} directory")
    chooser = rng or random
    return directory / images[chooser.randrange(len(images))]
