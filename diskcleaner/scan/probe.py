from __future__ import annotations

import logging
import os
import stat as statmod

from diskcleaner.services.formatting import saturating_add

logger = logging.getLogger(__name__)


def compute_size(path: str, max_depth: int) -> int:
    """Return the number of bytes held by regular files under *path*.

    *max_depth* is how many nested directory levels may be entered below
    *path*'s own listing: 0 counts only the files directly inside *path*.
    This is one more level than a walk depth that numbers *path* itself as
    level 0: ``compute_size(p, d)`` sees what such a walk bounded at ``d + 1``
    would see.
    Symlinks are never followed and count as zero bytes.

    A missing *path* is not an error and sizes to 0. For a regular file, any
    other failure to read its metadata propagates as ``OSError``. Errors on
    entries inside a directory are logged and skipped.
    """
    try:
        st = os.lstat(path)
    except FileNotFoundError:
        return 0

    if statmod.S_ISREG(st.st_mode):
        return st.st_size
    if not statmod.S_ISDIR(st.st_mode):
        return 0
    return _walk_size(path, max(0, max_depth))


def _walk_size(root: str, max_depth: int) -> int:
    total = 0
    # (directory, levels entered below root)
    stack: list[tuple[str, int]] = [(root, 0)]
    while stack:
        current, depth = stack.pop()
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    try:
                        st = entry.stat(follow_symlinks=False)
                    except OSError as exc:
                        logger.warning("Cannot access %s: %s", entry.path, exc)
                        continue

                    if statmod.S_ISREG(st.st_mode):
                        total = saturating_add(total, st.st_size)
                    elif statmod.S_ISDIR(st.st_mode) and depth < max_depth:
                        stack.append((entry.path, depth + 1))
        except OSError as exc:
            logger.warning("Cannot access %s: %s", current, exc)
    return total
