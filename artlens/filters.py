"""Artistic filters for RGB images held as ``uint8`` numpy arrays.

Images are arrays of shape ``(height, width, 3)`` in RGB channel order.
Every filter returns a new array and leaves its input untouched.
"""

from __future__ import annotations

import enum
from datetime import datetime

import numpy as np
from matplotlib.colors import hsv_to_rgb, rgb_to_hsv
from PIL import Image, ImageDraw, ImageFont
from scipy import ndimage

__all__ = [
    "FilterKind",
    "to_gray",
    "median_blur",
    "bilateral_filter",
    "pencil_sketch",
    "cartoon_sketch",
    "oil_painting",
    "pop_filming",
    "date_text",
    "add_date",
    "apply_filter",
]

# Colours of the date stamp (RGB).
_BORDER_COLOR = (255, 128, 0)
_TEXT_COLOR = (255, 183, 0)


class FilterKind(enum.Enum):
    """The artistic filters, valued by the label they are known under."""

    PENCIL_SKETCH = "Pencil Sketch"
    CARTOON_SKETCH = "Cartoon Sketch"
    OIL_PAINTING = "Oil Painting"
    POP_FILMING = "Pop Filming"
    ADD_DATE = "Date Adding"


def _as_color(image) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError(f"expected an image of shape (h, w, 3), got {arr.shape}")
    if arr.dtype != np.uint8:
        raise ValueError(f"expected a uint8 image, got {arr.dtype}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError("image is empty")
    return arr


def _as_image(image) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim == 2:
        if arr.dtype != np.uint8:
            raise ValueError(f"expected a uint8 image, got {arr.dtype}")
        if arr.size == 0:
            raise ValueError("image is empty")
        return arr
    return _as_color(arr)


def _to_uint8(values: np.ndarray) -> np.ndarray:
    return np.clip(np.rint(values), 0, 255).astype(np.uint8)


def to_gray(image) -> np.ndarray:
    """Return the luma of an RGB image as a 2-D ``uint8`` array."""
    arr = _as_image(image)
    if arr.ndim == 2:
        return arr.copy()
    rgb = arr.astype(np.float64)
    gray = 0.299 * rgb[..., 0] + 0.587 * rgb[..., 1] + 0.114 * rgb[..., 2]
    return _to_uint8(gray)


def median_blur(image, size: int) -> np.ndarray:
    """Median filter with a square window of odd ``size`` (> 1)."""
    arr = _as_image(image)
    if size <= 1 or size % 2 == 0:
        raise ValueError("median window size must be odd and greater than 1")
    footprint = (size, size) if arr.ndim == 2 else (size, size, 1)
    return ndimage.median_filter(arr, size=footprint, mode="nearest")


def bilateral_filter(image, diameter: int, sigma_color: float, sigma_space: float) -> np.ndarray:
    """Edge-preserving smoothing over a circular neighbourhood of ``diameter``."""
    arr = _as_image(image)
    squeeze = arr.ndim == 2
    data = arr.astype(np.float64)
    if squeeze:
        data = data[..., np.newaxis]
    sigma_color = sigma_color if sigma_color > 0 else 1.0
    sigma_space = sigma_space if sigma_space > 0 else 1.0
    radius = diameter // 2 if diameter > 0 else int(round(sigma_space * 1.5))
    radius = max(radius, 1)

    height, width = data.shape[:2]
    padded = np.pad(data, ((radius, radius), (radius, radius), (0, 0)), mode="reflect")
    color_coeff = -0.5 / (sigma_color * sigma_color)
    space_coeff = -0.5 / (sigma_space * sigma_space)

    total = np.zeros_like(data)
    weights = np.zeros((height, width))
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            dist2 = dy * dy + dx * dx
            if dist2 > radius * radius:
                continue
            shifted = padded[radius + dy:radius + dy + height, radius + dx:radius + dx + width]
            diff = np.abs(shifted - data).sum(axis=2)
            weight = np.exp(diff * diff * color_coeff + dist2 * space_coeff)
            total += weight[..., np.newaxis] * shifted
            weights += weight
    result = _to_uint8(total / weights[..., np.newaxis])
    return result[..., 0] if squeeze else result


def _resize(image: np.ndarray, width: int, height: int) -> np.ndarray:
    """Bilinear resize with pixel-centre alignment."""
    src_h, src_w = image.shape[:2]

    def axis(dst: int, src: int):
        pos = (np.arange(dst) + 0.5) * (src / dst) - 0.5
        pos = np.clip(pos, 0, src - 1)
        low = np.floor(pos).astype(int)
        high = np.minimum(low + 1, src - 1)
        return low, high, pos - low

    y0, y1, fy = axis(height, src_h)
    x0, x1, fx = axis(width, src_w)
    data = image.astype(np.float64)
    if data.ndim == 3:
        fy = fy[:, np.newaxis, np.newaxis]
        fx = fx[np.newaxis, :, np.newaxis]
    else:
        fy = fy[:, np.newaxis]
        fx = fx[np.newaxis, :]
    top = data[y0][:, x0] * (1 - fx) + data[y0][:, x1] * fx
    bottom = data[y1][:, x0] * (1 - fx) + data[y1][:, x1] * fx
    return _to_uint8(top * (1 - fy) + bottom * fy)


def _laplacian5(gray: np.ndarray) -> np.ndarray:
    """Laplacian built from 5-tap second-derivative Sobel kernels, saturated to uint8."""
    data = gray.astype(np.float64)
    second = np.array([1.0, 0.0, -2.0, 0.0, 1.0])
    smooth = np.array([1.0, 4.0, 6.0, 4.0, 1.0])
    d2x = ndimage.correlate1d(ndimage.correlate1d(data, second, axis=1, mode="mirror"),
                              smooth, axis=0, mode="mirror")
    d2y = ndimage.correlate1d(ndimage.correlate1d(data, smooth, axis=1, mode="mirror"),
                              second, axis=0, mode="mirror")
    return _to_uint8(d2x + d2y)


def pencil_sketch(image) -> np.ndarray:
    """Grayscale pencil drawing made by dodging the gray image with its blurred negative."""
    gray = to_gray(image)
    inverted = 255 - gray
    sigma = 0.3 * ((21 - 1) * 0.5 - 1) + 0.8
    blurred = _to_uint8(ndimage.gaussian_filter(inverted.astype(np.float64), sigma,
                                                mode="mirror", truncate=10 / sigma))
    divisor = (255 - blurred).astype(np.float64)
    numerator = gray.astype(np.float64) * 256.0
    with np.errstate(divide="ignore", invalid="ignore"):
        quotient = np.where(divisor > 0, numerator / np.where(divisor > 0, divisor, 1), 0.0)
    return _to_uint8(quotient)


def cartoon_sketch(image) -> np.ndarray:
    """Flat, smoothed colours with black outlines where edges are strong."""
    arr = _as_color(image)
    height, width = arr.shape[:2]
    if height < 2 or width < 2:
        raise ValueError("image must be at least 2x2 pixels")

    gray = median_blur(to_gray(arr), 7)
    edges = _laplacian5(gray)
    mask = edges <= 80

    small = _resize(arr, width // 2, height // 2)
    for _ in range(7):
        small = bilateral_filter(small, 9, 9, 7)
        small = bilateral_filter(small, 9, 9, 7)
    big = _resize(small, width, height)

    cartoon = np.zeros_like(arr)
    cartoon[mask] = big[mask]
    return cartoon


def _box_sum(values: np.ndarray, size: int) -> np.ndarray:
    footprint = (size, size) if values.ndim == 2 else (size, size, 1)
    mean = ndimage.uniform_filter(values, size=footprint, mode="constant", cval=0.0)
    return mean * (size * size)


def oil_painting(image, size: int = 7, levels: int = 1) -> np.ndarray:
    """Oil-paint effect: each pixel takes the mean colour of the most common
    intensity bin within a ``(2*size+1)`` window; ``levels`` divides intensities."""
    arr = _as_color(image)
    if size <= 0:
        raise ValueError("neighbourhood size must be positive")
    if levels <= 0:
        raise ValueError("dynamic ratio must be positive")
    window = 2 * size + 1
    bins = to_gray(arr).astype(np.int64) // levels
    colors = arr.astype(np.float64)

    best_count = np.zeros(bins.shape)
    best_sum = np.zeros(colors.shape)
    for level in np.unique(bins):
        indicator = (bins == level).astype(np.float64)
        count = np.rint(_box_sum(indicator, window))
        better = count > best_count
        if not better.any():
            continue
        sums = _box_sum(colors * indicator[..., np.newaxis], window)
        best_count = np.where(better, count, best_count)
        best_sum = np.where(better[..., np.newaxis], sums, best_sum)
    return _to_uint8(best_sum / best_count[..., np.newaxis])


def pop_filming(image) -> np.ndarray:
    """Punchy film look: boosted saturation, brightness and contrast."""
    arr = _as_color(image)
    rgb = arr.astype(np.float64) / 255.0
    hsv = rgb_to_hsv(rgb)
    hsv[..., 1] = np.minimum(hsv[..., 1] * 1.25, 1.0)
    rgb = hsv_to_rgb(hsv)
    rgb = (rgb - 0.4) * 1.4 + 0.4
    rgb = np.clip(rgb, 0.0, 1.0)
    return _to_uint8(rgb * 255.0)


def date_text(when: datetime | None = None) -> str:
    """The film-camera style date stamp, e.g. ``'' 04 06 25``."""
    moment = when if when is not None else datetime.now()
    return moment.strftime("'' %m %d %y")


def _render_text(text: str) -> Image.Image:
    font = ImageFont.load_default()
    probe = ImageDraw.Draw(Image.new("RGBA", (1, 1)))
    left, top, right, bottom = probe.textbbox((0, 0), text, font=font)
    canvas = Image.new("RGBA", (right - left + 2, bottom - top + 2), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    origin_x, origin_y = 1 - left, 1 - top
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx or dy:
                draw.text((origin_x + dx, origin_y + dy), text, font=font,
                          fill=_BORDER_COLOR + (255,))
    draw.text((origin_x, origin_y), text, font=font, fill=_TEXT_COLOR + (255,))
    return canvas


def add_date(image, when: datetime | None = None, font_scale: float | None = None,
             padding: int = 20) -> np.ndarray:
    """Stamp the date in the bottom-right corner, ``padding`` pixels from the edges.

    Without ``font_scale`` the text is sized to the image: the longer side / 600.
    """
    arr = _as_color(image).copy()
    height, width = arr.shape[:2]
    scale = max(width, height) / 600.0 if font_scale is None else float(font_scale)
    if scale <= 0:
        raise ValueError("font scale must be positive")

    patch = _render_text(date_text(when))
    text_w = max(1, round(patch.width * scale))
    text_h = max(1, round(patch.height * scale))
    rgba = np.asarray(patch.resize((text_w, text_h), Image.NEAREST), dtype=np.float64)

    left = width - text_w - padding
    top = height - padding - text_h
    x0, y0 = max(left, 0), max(top, 0)
    x1, y1 = min(left + text_w, width), min(top + text_h, height)
    if x1 <= x0 or y1 <= y0:
        return arr

    sub = rgba[y0 - top:y1 - top, x0 - left:x1 - left]
    alpha = sub[..., 3:] / 255.0
    region = arr[y0:y1, x0:x1].astype(np.float64)
    arr[y0:y1, x0:x1] = _to_uint8(region * (1 - alpha) + sub[..., :3] * alpha)
    return arr


def apply_filter(image, kind: FilterKind) -> np.ndarray:
    """Apply the filter named by ``kind`` with its default settings."""
    kind = FilterKind(kind)
    if kind is FilterKind.PENCIL_SKETCH:
        return pencil_sketch(image)
    if kind is FilterKind.CARTOON_SKETCH:
        return cartoon_sketch(image)
    if kind is FilterKind.OIL_PAINTING:
        return oil_painting(image)
    if kind is FilterKind.POP_FILMING:
        return pop_filming(image)
    return add_date(image)