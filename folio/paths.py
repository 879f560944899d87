"""Centralized path management for folio.

The disk cache lives under FOLIO_CACHE_DIR, resolved against the working
directory of the process (default ./.folio-docs-cache).
"""

from pathlib import Path

from folio.settings import folio_settings


def get_cache_dir(cache_dir: str | None = None) -> Path:
    """Get the absolute disk cache directory.

    Priority:
    1. Explicit cache_dir argument
    2. FOLIO_CACHE_DIR setting (default .folio-docs-cache)

    Relative paths resolve against the current working directory. The
    directory is not created here; the disk cache creates it on first save.
    """
    raw = cache_dir if cache_dir is not None else folio_settings.cache_dir
    return Path(raw).expanduser().resolve()
