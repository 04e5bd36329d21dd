"""File metadata shown as a tooltip next to each file name in the report"""

import os
import time
from pathlib import Path


HEADERS = ("owner", "filesize", "number of lines", "last modified")


def comma_format(number: int) -> str:
    return f"{number:,}"


def file_owner(path: Path) -> str:
    """Full name (GECOS) or login of the file's owner; USERNAME where there is no pwd database."""
    try:
        import pwd
    except ImportError:
        return os.environ.get("USERNAME", "")
    try:
        entry = pwd.getpwuid(path.stat().st_uid)
    except KeyError:
        return str(path.stat().st_uid)
    gecos = entry.pw_gecos.split(",")[0]
    return gecos or entry.pw_name


def count_lines(path: Path) -> int:
    with path.open("rb") as f:
        data = f.read()
    if not data:
        return 0
    return data.count(b"\n") + (0 if data.endswith(b"\n") else 1)


def _pad(header: str, width: int) -> str:
    return header + "&nbsp;" * (width - len(header))


def build_file_info(path: Path) -> str:
    """Owner, size, line count and mtime, one per <BR>-separated line."""
    st = path.stat()
    width = max(len(h) for h in HEADERS) + 1
    values = (
        file_owner(path),
        f"{comma_format(st.st_size)} ({st.st_size / 1024:.2f} KB)",
        str(count_lines(path)),
        time.ctime(st.st_mtime),
    )
    return "<BR>".join(f"{_pad(h, width)}: {v}" for h, v in zip(HEADERS, values))
