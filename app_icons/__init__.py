"""App icon bundle tooling: Pillow resizing plus a multi-resolution .ico encoder."""
from .ico import IconDirEntry, IconFrame, InvalidIconInput, encode_ico, ico_payloads, read_ico
from .png import check_frames, png_size

__all__ = [
    "IconDirEntry",
    "IconFrame",
    "InvalidIconInput",
    "check_frames",
    "encode_ico",
    "ico_payloads",
    "png_size",
    "read_ico",
]
