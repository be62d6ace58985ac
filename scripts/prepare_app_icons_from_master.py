#!/usr/bin/env python3
"""
Resize a finalized 1024x1024 master PNG into the iOS + web icon bundle
(AppIcon-*.png, favicons, favicon.ico, site.webmanifest, metadata.json).

Configured through the environment:
  APP_ICON_MASTER   master image   (default: branding/app_icon_1024.png)
  APP_ICON_OUT      output folder  (default: branding/icons)
  APP_ICON_NAME     webmanifest app name (default: App)
  APP_ICON_FORMAT   ios, web or all (default: all)

Usage: python3 scripts/prepare_app_icons_from_master.py
"""
import os
from pathlib import Path

from PIL import UnidentifiedImageError

from app_icons.bundle import FORMATS, write_icon_bundle


def main():
    master_path = Path(os.environ.get("APP_ICON_MASTER", "branding/app_icon_1024.png"))
    out_dir = Path(os.environ.get("APP_ICON_OUT", "branding/icons"))
    name = os.environ.get("APP_ICON_NAME", "App")
    fmt = os.environ.get("APP_ICON_FORMAT", "all")

    if not master_path.exists():
        raise SystemExit(
            f"App icon master not found at {master_path}. Provide a finalized 1024x1024 PNG file at this path or set APP_ICON_MASTER to your file."
        )
    if fmt not in FORMATS:
        raise SystemExit(f"Invalid APP_ICON_FORMAT '{fmt}' (expected one of: {', '.join(FORMATS)})")

    print("Preparing app icons...")
    print(f" Master: {master_path}")
    print(f" Output: {out_dir}")
    print(f" Format: {fmt}")
    try:
        written = write_icon_bundle(master_path, out_dir, name=name, fmt=fmt)
    except (UnidentifiedImageError, OSError) as e:
        raise SystemExit(f"Could not read app icon master {master_path}: {e}")
    print(f"Done. Wrote {len(written)} file(s).")


if __name__ == "__main__":
    main()
