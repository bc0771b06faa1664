from __future__ import annotations

import errno
import logging
import os
import shutil
from collections.abc import Callable, Iterable, Sequence

from result import Err, Ok

from diskcleaner.models.deletion import (
    DeleteError,
    DeleteProgressCallback,
    DeleteResult,
    DeletionOutcome,
    FailedDeletion,
    SelectionCheck,
)
from diskcleaner.models.entry import Entry
from diskcleaner.models.enums import ErrorCode
from diskcleaner.services.formatting import saturating_add
from diskcleaner.services.permissions import PLATFORM_PERMISSIONS, PathPermissions

logger = logging.getLogger(__name__)


def friendly_error_message(exc: OSError) -> str:
    if isinstance(exc, PermissionError):
        return "Permission denied. You may need administrator privileges."
    if isinstance(exc, FileNotFoundError):
        return "File or directory not found."
    if exc.errno == errno.ENOTEMPTY:
        return "Directory is not empty and cannot be deleted."
    return f"Operation failed: {exc}"


def _not_found(path: str) -> DeleteError:
    return DeleteError(code=ErrorCode.NOT_FOUND, path=path, message="Path does not exist")


def _rmtree_retry(target: str, permissions: PathPermissions) -> Callable[[Callable[..., object], str, BaseException], None]:
    """``shutil.rmtree`` onexc hook: clear read-only flags and try once more.

    Only entries inside *target* are touched. The parent of *target* belongs
    to the user's unselected tree and is never modified.
    """

    def onexc(func: Callable[..., object], path: str, exc: BaseException) -> None:
        inside = path != target
        if isinstance(exc, FileNotFoundError) and inside:
            return
        if not isinstance(exc, PermissionError):
            raise exc
        cleared = permissions.clear_readonly(path)
        if inside:
            cleared = permissions.clear_readonly(os.path.dirname(path)) or cleared
        if not cleared:
            raise exc
        func(path)

    return onexc


def safe_delete(
    path: str | os.PathLike[str],
    is_directory: bool,
    permissions: PathPermissions = PLATFORM_PERMISSIONS,
) -> DeleteResult:
    """Delete a single file or directory tree.

    Existence and permission are re-checked here, not trusted from selection
    time.  A path that vanishes mid-removal is reported as ``NOT_FOUND``.
    """
    target = os.fspath(path)
    if not os.path.lexists(target):
        return Err(_not_found(target))

    if not permissions.can_delete(target):
        return Err(
            DeleteError(
                code=ErrorCode.PERMISSION_DENIED,
                path=target,
                message="Insufficient permissions to delete",
            )
        )

    if permissions.clear_readonly(target):
        logger.debug("Cleared read-only attribute on %s", target)

    try:
        if is_directory:
            shutil.rmtree(target, onexc=_rmtree_retry(target, permissions))
        else:
            os.remove(target)
    except FileNotFoundError:
        return Err(_not_found(target))
    except PermissionError as exc:
        return Err(
            DeleteError(
                code=ErrorCode.PERMISSION_DENIED,
                path=target,
                message=friendly_error_message(exc),
            )
        )
    except OSError as exc:
        return Err(
            DeleteError(
                code=ErrorCode.IO_FAILURE,
                path=target,
                message=friendly_error_message(exc),
            )
        )
    return Ok(None)


def delete_entries(
    entries: Sequence[Entry],
    permissions: PathPermissions = PLATFORM_PERMISSIONS,
    progress_callback: DeleteProgressCallback | None = None,
) -> DeletionOutcome:
    """Delete *entries* one at a time; a failure never stops the rest."""
    outcome = DeletionOutcome()
    total = len(entries)
    for index, entry in enumerate(entries, start=1):
        result = safe_delete(entry.path, entry.is_directory, permissions)
        if isinstance(result, Ok):
            logger.info("Deleted %s", entry.path)
            outcome.succeeded.append(entry.path)
            error = None
        else:
            error = result.unwrap_err()
            logger.warning("Failed to delete %s: %s", entry.path, error.message)
            outcome.failed.append(FailedDeletion(path=entry.path, reason=error.message))
        if progress_callback is not None:
            progress_callback(index, total, entry, error)
    return outcome


def partition_selection(
    entries: Iterable[Entry],
    permissions: PathPermissions = PLATFORM_PERMISSIONS,
) -> SelectionCheck:
    check = SelectionCheck()
    for entry in entries:
        if not os.path.lexists(entry.path):
            check.missing.append(entry)
        elif permissions.can_delete(entry.path):
            check.deletable.append(entry)
        else:
            check.unwritable.append(entry)
    return check


def freed_bytes(entries: Iterable[Entry], outcome: DeletionOutcome) -> int:
    deleted = set(outcome.succeeded)
    total = 0
    for entry in entries:
        if entry.path in deleted:
            total = saturating_add(total, entry.size_bytes)
    return total
