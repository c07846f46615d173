from pf_ruler.tui.renderers import RulerConsoleUI

__all__ = ["RulerConsoleUI"]
