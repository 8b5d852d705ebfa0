"""Reference resolution helpers.

Thin wrappers over :func:`urllib.parse.urljoin`, which implements RFC 3986
reference resolution. Every location that passes through the pipeline is
made absolute with these helpers before it is stored or compared.

Example:
    >>> from reelfeed.url import folder_of, parent_of, resolve
    >>> folder_of("https://example.com/r/index.html")
    'https://example.com/r/'
    >>> resolve("p.png", "https://example.com/r/")
    'https://example.com/r/p.png'
    >>> parent_of("https://example.com/r/")
    'https://example.com/'
    >>> parent_of("https://example.com/")
    'https://example.com/'
    >>> try_resolve("http://[oops", "https://example.com/") is None
    True
"""

from __future__ import annotations

from urllib.parse import urljoin


def resolve(reference: str, base: str) -> str:
    """Resolve ``reference`` against ``base``.

    Absolute references are returned unchanged, so resolving twice is a no-op.

    Raises:
        ValueError: If ``reference`` is not a valid URL (e.g. a broken IPv6 host).
    """
    return urljoin(base, reference.strip())


def try_resolve(reference: str, base: str) -> str | None:
    """Like :func:`resolve`, but None when ``reference`` is not a valid URL."""
    try:
        return resolve(reference, base)
    except ValueError:
        return None


def folder_of(location: str) -> str:
    """Return the directory that contains ``location``, with a trailing slash."""
    return urljoin(location, ".")


def parent_of(folder: str) -> str:
    """Return the parent directory of ``folder``.

    At the root of a location hierarchy the result equals the input.
    """
    return urljoin(folder, "..")


__all__ = ["folder_of", "parent_of", "resolve", "try_resolve"]
