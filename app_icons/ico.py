"""
Multi-resolution .ico container encoding.

Layout (all little-endian):
  - header:     reserved=0, type=1 (icon), count        -> '<HHH'   (6 bytes)
  - directory:  one entry per frame, in input order     -> '<BBBBHHII' (16 bytes)
  - payloads:   frame bytes concatenated, no padding

Width/height are a single byte each, so 256 is stored as 0.
"""
import struct
from typing import Iterable, List, NamedTuple, Sequence, Tuple

HEADER = struct.Struct("<HHH")
ENTRY = struct.Struct("<BBBBHHII")

ICON_TYPE = 1
MAX_FRAMES = 0xFFFF
MAX_SIZE = 256
PLANES = 1
BIT_COUNT = 32  # RGBA


class InvalidIconInput(ValueError):
    pass


class IconFrame(NamedTuple):
    size: int
    pixel_data: bytes


class IconDirEntry(NamedTuple):
    width: int
    height: int
    colors: int
    planes: int
    bit_count: int
    length: int
    offset: int


def _dim_byte(size: int) -> int:
    # 0 means 256
    return 0 if size == MAX_SIZE else size


def as_frames(frames: Iterable) -> List[IconFrame]:
    out = []
    for i, f in enumerate(frames):
        try:
            out.append(IconFrame(*f))
        except TypeError as e:
            raise InvalidIconInput(f"frame {i}: expected (size, data), got {f!r}") from e
    return out


def _check(frames: Sequence[IconFrame]) -> None:
    if not frames:
        raise InvalidIconInput("no frames to encode")
    if len(frames) > MAX_FRAMES:
        raise InvalidIconInput(f"too many frames: {len(frames)} (max {MAX_FRAMES})")
    for i, (size, data) in enumerate(frames):
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidIconInput(f"frame {i}: size must be an int, got {size!r}")
        if size <= 0 or size > MAX_SIZE:
            raise InvalidIconInput(f"frame {i}: size {size} outside 1..{MAX_SIZE}")
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidIconInput(f"frame {i}: pixel data must be bytes, got {type(data).__name__}")


def encode_ico(frames: Sequence[Tuple[int, bytes]]) -> bytes:
    """Serialize ``(size, png_bytes)`` frames into one .ico byte string.

    Frames keep their order. Raises InvalidIconInput before anything is
    built, so a failed call never yields a partial buffer.
    """
    frames = as_frames(frames)
    _check(frames)

    count = len(frames)
    offset = HEADER.size + ENTRY.size * count
    entries = []
    blobs = []
    for size, data in frames:
        data = bytes(data)
        dim = _dim_byte(size)
        entries.append(ENTRY.pack(dim, dim, 0, 0, PLANES, BIT_COUNT, len(data), offset))
        blobs.append(data)
        offset += len(data)

    return HEADER.pack(0, ICON_TYPE, count) + b"".join(entries) + b"".join(blobs)


def read_ico(data: bytes) -> List[IconDirEntry]:
    """Parse the header and directory of an .ico buffer.

    Width/height of 0 are reported as 256.
    """
    if len(data) < HEADER.size:
        raise InvalidIconInput("truncated header")
    reserved, kind, count = HEADER.unpack_from(data, 0)
    if reserved != 0 or kind != ICON_TYPE:
        raise InvalidIconInput(f"not an icon file (reserved={reserved}, type={kind})")
    if count == 0:
        raise InvalidIconInput("icon file has no images")
    if len(data) < HEADER.size + ENTRY.size * count:
        raise InvalidIconInput(f"truncated directory ({count} entries declared)")

    entries = []
    for i in range(count):
        w, h, colors, _, planes, bits, length, offset = ENTRY.unpack_from(
            data, HEADER.size + ENTRY.size * i
        )
        if offset + length > len(data):
            raise InvalidIconInput(f"entry {i}: payload runs past end of file")
        entries.append(IconDirEntry(w or MAX_SIZE, h or MAX_SIZE, colors, planes, bits, length, offset))
    return entries


def ico_payloads(data: bytes) -> List[IconFrame]:
    return [IconFrame(e.width, bytes(data[e.offset:e.offset + e.length])) for e in read_ico(data)]
