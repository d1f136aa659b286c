from __future__ import annotations

import mimetypes

DEFAULT_CONTENT_TYPE: str = "application/octet-stream"

# Types that the platform tables commonly miss or get wrong for web bundles.
_EXTRA_TYPES: dict[str, str] = {
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".map": "application/json",
    ".webmanifest": "application/manifest+json",
    ".wasm": "application/wasm",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".avif": "image/avif",
    ".webp": "image/webp",
}


def guess_content_type(path: str) -> str:
    """Return the content type for a file name, falling back to octet-stream."""
    lowered = path.lower()
    for ext, content_type in _EXTRA_TYPES.items():
        if lowered.endswith(ext):
            return content_type

    content_type, _ = mimetypes.guess_type(path, strict=False)
    return content_type or DEFAULT_CONTENT_TYPE
