"""
Pillow helpers that turn a master image into square icon frames.

  fit_contain -> scale to fit, pad with transparent pixels (favicons, .ico)
  fit_cover   -> centre-crop to square, then scale (iOS app icons)
"""
import io
from typing import List, Sequence

from PIL import Image

from .ico import IconFrame, encode_ico

ICO_SIZES = (16, 32, 48)
TRANSPARENT = (0, 0, 0, 0)


def fit_contain(img: Image.Image, size: int) -> Image.Image:
    iw, ih = img.size
    scale = min(size / iw, size / ih)
    nw, nh = max(1, int(round(iw * scale))), max(1, int(round(ih * scale)))
    img_r = img.convert("RGBA").resize((nw, nh), Image.LANCZOS)
    canvas = Image.new("RGBA", (size, size), TRANSPARENT)
    canvas.paste(img_r, ((size - nw) // 2, (size - nh) // 2))
    return canvas


def crop_square(img: Image.Image) -> Image.Image:
    w, h = img.size
    if w > h:
        x0 = (w - h) // 2
        return img.crop((x0, 0, x0 + h, h))
    if h > w:
        y0 = (h - w) // 2
        return img.crop((0, y0, w, y0 + w))
    return img


def fit_cover(img: Image.Image, size: int) -> Image.Image:
    return crop_square(img.convert("RGBA")).resize((size, size), Image.LANCZOS)


def to_png(img: Image.Image, optimize: bool = True) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG", optimize=optimize)
    return buf.getvalue()


def ico_frames(img: Image.Image, sizes: Sequence[int] = ICO_SIZES) -> List[IconFrame]:
    return [IconFrame(s, to_png(fit_contain(img, s))) for s in sizes]


def make_favicon(img: Image.Image, sizes: Sequence[int] = ICO_SIZES) -> bytes:
    """Build a favicon.ico with one PNG frame per size."""
    return encode_ico(ico_frames(img, sizes))
