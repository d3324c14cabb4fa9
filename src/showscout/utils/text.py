"""Text normalization utilities for show title matching."""

import re
from urllib.parse import urlparse

# Wikipedia footnote markers: "Hamilton[12]", "Hamilton [a]"
_FOOTNOTE_RE = re.compile(r"\s?\[(?:\d+|[a-z])\]")

_SCHEME_RE = re.compile(r"^([a-z][a-z0-9+.-]*):", re.IGNORECASE)


def normalise_title(title: str) -> str:
    """
    Normalize a show title into a matching key.

    - Lowercase: "The Lion King!" → "the lion king!"
    - Drop anything outside [a-z0-9] and whitespace: "Les Misérables" → "les misrables"
    - Collapse whitespace and trim

    The result is only ever used for comparing titles across sources.

    Args:
        title: Raw show title

    Returns:
        Normalized key suitable for matching
    """
    title = title.lower()
    title = re.sub(r"[^a-z0-9\s]", "", title)
    title = re.sub(r"\s+", " ", title)
    return title.strip()


def clean_title(title: str) -> str:
    """Strip footnote markers and stray whitespace from a display title."""
    title = _FOOTNOTE_RE.sub("", title)
    title = re.sub(r"\s+", " ", title)
    return title.strip()


def first_srcset_url(srcset: str | None) -> str | None:
    """
    Return the first URL from an HTML srcset attribute.

    Examples:
        "/a.jpg 1x, /b.jpg 2x"  →  "/a.jpg"
        "/poster.webp"          →  "/poster.webp"
    """
    if not srcset:
        return None
    first = srcset.split(",")[0].strip()
    if not first:
        return None
    return first.split()[0]


def normalise_url(url: str | None, base: str) -> str | None:
    """
    Resolve a scraped URL into an absolute https URL.

    Handles:
    - Protocol-relative: "//upload.wikimedia.org/x.jpg" → "https://upload.wikimedia.org/x.jpg"
    - Site-relative: "/hamilton" → "{base}/hamilton"
    - Bare paths: "../img/x.jpg" → "{base}/img/x.jpg"
    - Plain http is upgraded to https, scheme case is ignored
    - Any other scheme (javascript:, data:, ftp:, mailto:) gives None

    Args:
        url: Raw href/src value
        base: Origin to resolve relative URLs against, e.g. "https://www.londontheatre.co.uk"

    Returns:
        Absolute https URL, or None if the input is empty or unusable
    """
    if not url:
        return None

    url = url.strip().replace("&amp;", "&")
    if not url:
        return None

    scheme = _SCHEME_RE.match(url)
    if scheme:
        rest = url[scheme.end():]
        if scheme.group(1).lower() not in ("http", "https") or not rest.startswith("//"):
            return None
        url = "https:" + rest

    base = base.rstrip("/")

    if url.startswith("//"):
        url = "https:" + url
    elif url.startswith("/"):
        url = base + url

    if not url.startswith("https://"):
        # Bare relative path; drop any leading "../" segments
        url = f"{base}/" + re.sub(r"^(\.\.?/)+", "", url)

    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    if parsed.scheme != "https" or not parsed.netloc or " " in parsed.netloc:
        return None

    return url
