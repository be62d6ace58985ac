import struct
from typing import Iterable, Tuple

from .ico import InvalidIconInput, as_frames

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def png_size(data: bytes) -> Tuple[int, int]:
    # IHDR is always the first chunk: length(4) tag(4) width(4) height(4)
    data = bytes(data)
    if not data.startswith(PNG_SIGNATURE):
        raise ValueError("not a PNG (signature mismatch)")
    if len(data) < 24 or data[12:16] != b"IHDR":
        raise ValueError("IHDR chunk not found")
    w, h = struct.unpack(">II", data[16:24])
    return w, h


def check_frames(frames: Iterable[Tuple[int, bytes]]) -> None:
    """Verify each frame is a PNG whose pixel size matches its declared size."""
    for i, (size, data) in enumerate(as_frames(frames)):
        try:
            w, h = png_size(data)
        except ValueError as e:
            raise InvalidIconInput(f"frame {i}: {e}") from e
        if (w, h) != (size, size):
            raise InvalidIconInput(f"frame {i}: declared {size}x{size} but PNG is {w}x{h}")
