"""Side-by-side collages of an original image and a processed one."""

from __future__ import annotations

import os

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from artlens.photo import PhotoError, load_image

__all__ = ["ImageCollager", "make_collage"]

_LABEL_COLOR = (255, 0, 0)
_LABEL_BASELINE = 30
_LABEL_MARGIN = 10


def _prepare(image) -> np.ndarray:
    if image is None:
        raise PhotoError("One or both images are not loaded.")
    arr = np.asarray(image)
    if arr.size == 0:
        raise PhotoError("One or both images are not loaded.")
    if arr.dtype != np.uint8:
        arr = np.clip(arr, 0, 255).astype(np.uint8)
    if arr.ndim == 2:
        arr = np.repeat(arr[..., np.newaxis], 3, axis=2)
    return arr


def _draw_label(canvas: Image.Image, text: str, x: int) -> None:
    draw = ImageDraw.Draw(canvas)
    font = ImageFont.load_default()
    bottom = draw.textbbox((0, 0), text, font=font)[3]
    draw.text((x, _LABEL_BASELINE - bottom), text, font=font, fill=_LABEL_COLOR)


def make_collage(first, second) -> np.ndarray:
    """Place ``second`` to the right of ``first``, labelled "Original" and "Filtered".

    ``second`` is resized to the size of ``first`` when they differ.
    """
    left = _prepare(first)
    right = _prepare(second)
    height, width = left.shape[:2]
    if right.shape[:2] != (height, width):
        right = np.asarray(
            Image.fromarray(right).resize((width, height), Image.BILINEAR), dtype=np.uint8
        )
    canvas = Image.fromarray(np.concatenate([left, right], axis=1))
    _draw_label(canvas, "Original", _LABEL_MARGIN)
    _draw_label(canvas, "Filtered", width + _LABEL_MARGIN)
    return np.array(canvas, dtype=np.uint8)


class ImageCollager:
    """Holds two images and builds a collage from them."""

    def __init__(self) -> None:
        self.image: np.ndarray | None = None
        self.second_image: np.ndarray | None = None
        self.second_image_path: str = ""

    def load_image(self, image) -> None:
        """Set the first (original) image."""
        self.image = _prepare(image)

    def load_second_image(self, image) -> None:
        """Set the second image from an array or from an image file path."""
        if isinstance(image, (str, os.PathLike)):
            self.second_image = load_image(image)
            self.second_image_path = os.fspath(image)
        else:
            self.second_image = _prepare(image)

    def create_collage(self) -> np.ndarray:
        """Build the collage of the two loaded images."""
        if self.image is None or self.second_image is None:
            raise PhotoError("One or both images are not loaded.")
        return make_collage(self.image, self.second_image)