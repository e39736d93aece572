"""Image collaborator.

Pages never touch image bytes; they only ask for a URL and the `<img>` hints
(intrinsic size, priority, responsive `sizes`). Files come from Flask's static
route unless IMAGE_BASE_URL points at a CDN.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from flask import current_app, url_for

FILL_CLASSES = "absolute inset-0 h-full w-full object-cover"


def asset_url(path: str) -> str:
    base = current_app.config.get("IMAGE_BASE_URL") or ""
    if path.startswith(("http://", "https://")):
        return path
    if base:
        return f"{base}/{path.lstrip('/')}"
    return url_for("static", filename=path.lstrip("/"))


def image_attrs(
    src: str,
    alt: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
    priority: bool = False,
    sizes: Optional[str] = None,
    fill: bool = False,
    class_: Optional[str] = None,
) -> Dict[str, Any]:
    """Attributes for an `<img>` tag, in render order.

    `fill` images stretch over a positioned parent, so they carry no
    intrinsic size. None values are dropped by Jinja's xmlattr filter.
    """
    classes = " ".join(c for c in (FILL_CLASSES if fill else None, class_) if c) or None
    return {
        "src": asset_url(src),
        "alt": alt,
        "width": None if fill else width,
        "height": None if fill else height,
        "sizes": sizes,
        "loading": "eager" if priority else "lazy",
        "fetchpriority": "high" if priority else None,
        "decoding": "async",
        "class": classes,
    }
