"""Write converted rule files to disk."""

from enum import Enum
from pathlib import Path

from pf_ruler.errors import OutputExistsError


class WriteStatus(str, Enum):
    CREATED = "created"
    OVERWRITTEN = "overwritten"


def write_output(path: Path, data: bytes, force: bool = False) -> WriteStatus:
    """Write ``data`` to ``path`` in a single write, creating parent dirs.

    An existing file is only replaced when ``force`` is set.
    """
    existed = path.exists()
    if existed and not force:
        raise OutputExistsError(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return WriteStatus.OVERWRITTEN if existed else WriteStatus.CREATED
