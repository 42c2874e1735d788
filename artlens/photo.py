"""Photos held in memory, their metadata, and photos derived by filtering."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import numpy as np
from PIL import Image, UnidentifiedImageError

__all__ = [
    "PhotoError",
    "Photo",
    "FilteredPhoto",
    "load_image",
    "save_image",
    "display_image",
    "side_by_side",
]


class PhotoError(Exception):
    """Raised when an image cannot be loaded, saved or shown."""


def _is_empty(image) -> bool:
    return image is None or np.asarray(image).size == 0


def _as_rgb(image) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim == 2:
        return np.repeat(arr[..., np.newaxis], 3, axis=2)
    return arr


def load_image(path) -> np.ndarray:
    """Read an image file as an RGB ``uint8`` array of shape ``(h, w, 3)``."""
    try:
        with Image.open(path) as img:
            return np.array(img.convert("RGB"), dtype=np.uint8)
    except (OSError, UnidentifiedImageError, ValueError) as exc:
        raise PhotoError(f"Failed to load image from: {os.fspath(path)}") from exc


def save_image(image, path) -> None:
    """Write an image array to ``path``; the format follows the file extension."""
    if _is_empty(image):
        raise PhotoError("No image data to save.")
    arr = np.asarray(image)
    if arr.dtype != np.uint8:
        arr = np.clip(arr, 0, 255).astype(np.uint8)
    try:
        Image.fromarray(arr).save(path)
    except (OSError, ValueError, KeyError) as exc:
        raise PhotoError(f"Failed to save image to: {os.fspath(path)}") from exc


def display_image(image, title: str) -> None:
    """Show an image in a window titled ``title`` and wait until it is closed."""
    if _is_empty(image):
        raise PhotoError("No image to display.")
    import matplotlib.pyplot as plt

    arr = np.asarray(image)
    fig = plt.figure(title)
    if arr.ndim == 2:
        plt.imshow(arr, cmap="gray", vmin=0, vmax=255)
    else:
        plt.imshow(arr)
    plt.axis("off")
    plt.title(title)
    plt.show()
    plt.close(fig)


def side_by_side(left, right, separator: int = 3) -> np.ndarray:
    """Join two images horizontally with a white bar ``separator`` pixels wide.

    The right image is scaled to the height of the left one, keeping its aspect.
    """
    if _is_empty(left) or _is_empty(right):
        raise PhotoError("One of the images is empty.")
    if separator < 0:
        raise ValueError("separator width must not be negative")
    left_rgb = _as_rgb(left)
    right_rgb = _as_rgb(right)
    height = left_rgb.shape[0]
    if right_rgb.shape[0] != height:
        scale = height / right_rgb.shape[0]
        new_width = max(1, int(right_rgb.shape[1] * scale))
        resized = Image.fromarray(right_rgb).resize((new_width, height), Image.BILINEAR)
        right_rgb = np.asarray(resized, dtype=np.uint8)
    bar = np.full((height, separator, 3), 255, dtype=np.uint8)
    return np.concatenate([left_rgb, bar, right_rgb], axis=1)


@dataclass(eq=False)
class Photo:
    """A named photo with its pixels, file path, tags and lineage label."""

    name: str = ""
    image: np.ndarray | None = None
    path: str = ""
    tags: list[str] = field(default_factory=list)
    lineage: str = ""

    def load(self, path) -> None:
        """Read the image at ``path`` into this photo."""
        self.image = load_image(path)
        self.path = os.fspath(path)

    def save(self, path) -> None:
        """Write this photo's image to ``path``."""
        save_image(self.image, path)

    def show(self) -> None:
        """Display the photo in a window."""
        if _is_empty(self.image):
            raise PhotoError("No image to display.")
        display_image(self.image, "Photo Viewer")

    def add_tag(self, tag: str) -> None:
        """Add ``tag`` unless the photo already carries it."""
        if not self.has_tag(tag):
            self.tags.append(tag)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def type_name(self) -> str:
        return "Photo"

    def origin(self) -> Photo | None:
        """The original photo this one derives from; ``None`` for an original."""
        return None

    def metadata(self) -> str:
        """A printable summary of type, lineage, tags and resolution."""
        lines = [
            "---------- Metadata ----------",
            f"Type: {self.type_name()}",
            f"Original/Derivative: {self.lineage}",
            f"Tags: {', '.join(self.tags)}",
        ]
        if _is_empty(self.image):
            lines.append("No image.")
        else:
            height, width = self.image.shape[:2]
            lines.append(f"Resolution: {width} x {height}")
        return "\n".join(lines)


class FilteredPhoto(Photo):
    """A photo made by applying an artistic filter to another photo."""

    def __init__(self, original: Photo, filter_name: str):
        image = None if original.image is None else np.array(original.image, copy=True)
        super().__init__(image=image, tags=list(original.tags), lineage="Derivative")
        self.applied_filter = filter_name
        self.source: Photo | None = None
        self.add_tag(filter_name)

    def set_source(self, original: Photo) -> None:
        """Track the original photo; a derived photo passes on its own original."""
        if isinstance(original, FilteredPhoto):
            self.source = original.origin()
        else:
            self.source = original

    def origin(self) -> Photo | None:
        return self.source

    def type_name(self) -> str:
        return "FilteredPhoto"

    def describe_filter(self) -> str:
        return f"Filter applied: {self.applied_filter}"

    def metadata(self) -> str:
        return f"{super().metadata()}\n{self.describe_filter()}"

    def show(self) -> None:
        """Display the original on the left and this photo on the right."""
        if self.source is None:
            raise PhotoError("No source image available.")
        if _is_empty(self.source.image) or _is_empty(self.image):
            raise PhotoError("One of the images is empty.")
        display_image(side_by_side(self.source.image, self.image, 3), "Filtered Photo Viewer")