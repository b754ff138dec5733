"""Path resolution and directory creation helpers"""

from pathlib import Path
from typing import Optional, Union

from fanout_logger.core.exceptions import InvalidArgumentError

PathLike = Union[str, Path]


def resolve_path(path: PathLike, base: Optional[PathLike] = None) -> Path:
    """
    Resolve a caller-supplied path to an absolute path.

    Args:
        path: Absolute or relative path (``~`` expanded)
        base: Directory relative paths are resolved against
              (default: current working directory)

    Returns:
        Absolute path

    Raises:
        InvalidArgumentError: If path is empty
    """
    if path is None or str(path).strip() == "":
        raise InvalidArgumentError("path must not be empty")
    resolved = Path(path).expanduser()
    if not resolved.is_absolute() and base is not None:
        resolved = Path(base).expanduser() / resolved
    return resolved.resolve()


def ensure_directory(path: PathLike) -> Path:
    """
    Create a directory and its parents if missing.

    Args:
        path: Directory path

    Returns:
        Resolved directory path

    Raises:
        InvalidArgumentError: If path exists and is not a directory
    """
    directory = resolve_path(path)
    if directory.exists() and not directory.is_dir():
        raise InvalidArgumentError(f"Not a directory: {directory}")
    directory.mkdir(parents=True, exist_ok=True)
    return directory
