#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitediff/utils/text.py
"""Text processing utilities for report rendering.

Functions
---------
slugify : Convert text to a URL-safe slug
path_anchor : Build a stable, collision-resistant anchor id for a site path

Examples
--------
Basic slugification:

    >>> from sitediff.utils.text import path_anchor, slugify
    >>> slugify("/blog/index.html")
    'blog-index-html'

Anchor for a changed file:

    >>> path_anchor("/blog/index.html")  # doctest: +ELLIPSIS
    'diff-blog-index-html-...'

"""

from __future__ import annotations

import hashlib
import re
import unicodedata

from sitediff.constants import ANCHOR_HASH_LENGTH, ANCHOR_PREFIX


def slugify(text: str, *, max_length: int = 80, separator: str = "-") -> str:
    """Create a URL-safe slug from text.

    The slug is built by:
    - Normalizing Unicode characters (NFD decomposition) and dropping accents
    - Converting to lowercase
    - Replacing whitespace, underscores, slashes and dots with the separator
    - Removing remaining non-alphanumeric characters
    - Collapsing and stripping separators
    - Limiting length to max_length characters

    Parameters
    ----------
    text : str
        Text to slugify (e.g., a site path)
    max_length : int, default = 80
        Maximum length of the slug
    separator : str, default = "-"
        The separator between words in the slug

    Returns
    -------
    str
        URL-safe slug; ``"root"`` when nothing survives normalization

    Examples
    --------
        >>> slugify("Café/Résumé.html")
        'cafe-resume-html'
        >>> slugify("/")
        'root'

    """
    normalized = unicodedata.normalize("NFD", text)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = normalized.lower()
    slug = re.sub(r"[\s_/.]+", separator, slug)

    replace_pattern = "^a-z0-9\\-" + "\\" + separator
    slug = re.sub(rf"[{replace_pattern}]", "", slug)
    slug = re.sub(rf"{re.escape(separator)}+", separator, slug)
    slug = slug.strip(separator)

    if not slug:
        slug = "root"

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip(separator)

    return slug


def path_anchor(path: str) -> str:
    """Return the anchor id used to link to a file's diff block.

    The readable slug alone can collide (``/a.html`` and ``/a-html`` both
    slugify to ``a-html``), so a short digest of the exact path is appended.
    The result depends only on ``path``, so the same file gets the same
    anchor on every run.

    Parameters
    ----------
    path : str
        Normalized site path, e.g. ``"/index.html"``

    Returns
    -------
    str
        Anchor id safe for use in an HTML ``id`` attribute and URL fragment

    """
    digest = hashlib.sha1(path.encode("utf-8")).hexdigest()[:ANCHOR_HASH_LENGTH]
    return f"{ANCHOR_PREFIX}-{slugify(path)}-{digest}"
