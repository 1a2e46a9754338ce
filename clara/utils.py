from pathlib import Path
import shutil
from .errors import InvalidPathError

UNDO_FILENAME = ".clara-last-rename.json"
RESTORE_SUFFIX = " (restore)"
DEFAULT_START_NUMBER = 1
PAD_WIDTH = 4


def ensure_directory(path_str: str) -> Path:
    """Return a resolved Path object and ensure it is an existing directory."""
    if not str(path_str).strip():
        raise InvalidPathError("No folder selected.")
    p = Path(path_str).expanduser().resolve()
    if not p.exists():
        raise InvalidPathError(f"Path does not exist: {p}")
    if not p.is_dir():
        raise InvalidPathError(f"Not a folder: {p}")
    return p


def normalize_extension(extension: str | None) -> str:
    """'JPG', '.jpg' and ' jpg ' all become '.jpg'; blank means no filter."""
    if not extension:
        return ""
    ext = extension.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def matches_extension(name: str, extension: str | None) -> bool:
    ext = normalize_extension(extension)
    if not ext:
        return True
    return name.lower().endswith(ext)


def format_counter(n: int) -> str:
    """
    Zero-pad to four digits below 1000, plain decimal from 1000 on.
    7 -> '0007', 1500 -> '1500'.
    """
    if n < 1000:
        return str(n).zfill(PAD_WIDTH)
    return str(n)


def coerce_start_number(value) -> int:
    """Return value as a non-negative int, or DEFAULT_START_NUMBER."""
    if value is None or isinstance(value, bool):
        return DEFAULT_START_NUMBER
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return DEFAULT_START_NUMBER
        try:
            value = float(value)
        except ValueError:
            return DEFAULT_START_NUMBER
    if isinstance(value, float):
        if not value.is_integer():
            return DEFAULT_START_NUMBER
        value = int(value)
    if not isinstance(value, int) or value < 0:
        return DEFAULT_START_NUMBER
    return value


def restore_path(original: Path) -> Path:
    """foo.jpg -> foo (restore).jpg, next to the original."""
    return original.with_name(f"{original.stem}{RESTORE_SUFFIX}{original.suffix}")


def safe_move(src: Path, dst: Path) -> None:
    """Move src to dst, refusing to overwrite an existing dst."""
    if not src.exists():
        raise FileNotFoundError(2, "No such file or directory", str(src))
    if dst.exists():
        raise FileExistsError(17, "File exists", str(dst))
    shutil.move(str(src), str(dst))
