"""
Write a full app icon bundle from one master image.

Outputs (under out_dir):
  AppIcon-1024.png                 base image, always
  AppIcon-<px>.png                 iOS sizes            (fmt ios/all)
  favicon-*.png, apple-touch-icon.png, android-chrome-*.png
  favicon.ico, site.webmanifest    web sizes            (fmt web/all)
  metadata.json                    always
"""
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Union

from PIL import Image

from .resize import fit_contain, fit_cover, make_favicon, to_png

BASE_SIZE = 1024
IOS_SIZES = [1024, 180, 167, 152, 120, 76, 60, 40, 29, 20]
WEB_SIZES: Dict[str, int] = {
    "favicon-16x16.png": 16,
    "favicon-32x32.png": 32,
    "apple-touch-icon.png": 180,
    "android-chrome-192x192.png": 192,
    "android-chrome-512x512.png": 512,
}
FORMATS = ("ios", "web", "all")


def webmanifest(name: str) -> dict:
    return {
        "name": name,
        "short_name": name,
        "icons": [
            {"src": "/android-chrome-192x192.png", "sizes": "192x192", "type": "image/png"},
            {"src": "/android-chrome-512x512.png", "sizes": "512x512", "type": "image/png"},
        ],
        "theme_color": "#ffffff",
        "background_color": "#ffffff",
        "display": "standalone",
    }


def _write(path: Path, data: bytes, written: List[Path]) -> None:
    path.write_bytes(data)
    written.append(path)
    print(f"Wrote {path}")


def write_icon_bundle(
    master: Union[str, Path, Image.Image],
    out_dir: Union[str, Path],
    name: str = "App",
    fmt: str = "all",
) -> List[Path]:
    """Resize ``master`` into iOS and/or web icon files. Returns written paths."""
    if fmt not in FORMATS:
        raise ValueError(f"unknown format {fmt!r}, expected one of {', '.join(FORMATS)}")
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if isinstance(master, Image.Image):
        source = "<image>"
        base = fit_cover(master, BASE_SIZE)
    else:
        source = str(master)
        with Image.open(master) as im:
            base = fit_cover(im, BASE_SIZE)

    written: List[Path] = []
    _write(out_dir / f"AppIcon-{BASE_SIZE}.png", to_png(base), written)

    if fmt in ("ios", "all"):
        for px in IOS_SIZES:
            if px == BASE_SIZE:
                continue
            _write(out_dir / f"AppIcon-{px}.png", to_png(fit_cover(base, px)), written)

    if fmt in ("web", "all"):
        for filename, px in WEB_SIZES.items():
            _write(out_dir / filename, to_png(fit_contain(base, px)), written)
        _write(out_dir / "favicon.ico", make_favicon(base), written)
        _write(out_dir / "site.webmanifest", json.dumps(webmanifest(name), indent=2).encode("utf-8"), written)

    meta = {
        "name": name,
        "format": fmt,
        "source": source,
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }
    _write(out_dir / "metadata.json", json.dumps(meta, indent=2).encode("utf-8"), written)
    return written
