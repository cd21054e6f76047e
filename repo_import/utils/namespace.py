"""Namespace extraction from repository URLs."""

from urllib.parse import urlsplit

from ..core.errors import FormatError

GIT_SUFFIX = ".git"


def extract_namespace(url: str) -> str:
    """
    Extract ``owner/repo`` from a repository URL.

    ``https://www.github.com/tokio-rs/tokio`` gives ``tokio-rs/tokio``;
    a trailing ``.git`` is dropped.

    Raises:
        FormatError: If the URL is invalid or has fewer than two path segments
    """
    try:
        parts = urlsplit(url)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise FormatError(url, f"Failed to parse URL {url}: {e}") from e

    if not parts.scheme:
        raise FormatError(url, f"Failed to parse URL {url}: missing scheme")

    # mailto:x and similar have no hierarchical path to take segments from
    if not parts.path.startswith("/"):
        raise FormatError(url, f"Cannot extract path segments from URL {url}")

    segments = [segment for segment in parts.path.split("/") if segment]
    if len(segments) < 2:
        raise FormatError(url, f"URL {url} does not include a namespace and a repository name")

    owner, repo = segments[-2], segments[-1]
    if repo.endswith(GIT_SUFFIX):
        repo = repo[: -len(GIT_SUFFIX)]
    return f"{owner}/{repo}"
