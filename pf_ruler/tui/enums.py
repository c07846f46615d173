from enum import Enum

from pf_ruler.output import WriteStatus
from pf_ruler.scaffold import GitignoreStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"


WRITE_STATUS_STYLE = {
    WriteStatus.CREATED: UIStyle.GREEN.value,
    WriteStatus.OVERWRITTEN: UIStyle.YELLOW.value,
}

GITIGNORE_STATUS_STYLE = {
    GitignoreStatus.ADDED: UIStyle.GREEN.value,
    GitignoreStatus.PRESENT: UIStyle.DIM.value,
    GitignoreStatus.MISSING: UIStyle.YELLOW.value,
}
