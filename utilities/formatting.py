"""
Rendering helpers for a single tree line.

A line is `<indent><glyph> <name>`: the indent is one indent unit per nesting
level, the glyph depends on where the entry sits among its siblings, and
directories get a trailing '/'. With color on, the glyph is bold and takes
its color from the palette band of its level, and directory names are dimmed
while the walk is depth-bounded.
"""

from control import ansi_colors, indent_unit, palette, prefix_first, prefix_last, prefix_middle

_RESET = "\x1b[0m"
_BOLD = "1"
_DIM = "2"


def _sgr(text: str, *codes) -> str:
    return f"\x1b[{';'.join(str(c) for c in codes)}m{text}{_RESET}"


def prefix_symbol(indent: int, index: int, total: int) -> str:
    """Pick the connector glyph for entry *index* of *total* siblings at *indent*.

    The last sibling always gets prefix_last, even when it is also the
    first entry at the top level.
    """
    if index == total - 1:
        return prefix_last
    if index == 0 and indent == 0:
        return prefix_first
    return prefix_middle


def level_color(indent: int) -> str:
    return palette[indent % len(palette)]


def colored_prefix(prefix: str, indent: int) -> str:
    return _sgr(prefix, _BOLD, ansi_colors[level_color(indent)])


def format_name(name: str, is_dir: bool, dim: bool = False, color: bool = False) -> str:
    if not is_dir:
        return name
    if dim and color:
        return f"{_sgr(name, _DIM)}/"
    return f"{name}/"


def format_line(name: str, indent: int, index: int, total: int, is_dir: bool, leaf: bool, color: bool = False) -> str:
    """Assemble the full output line for one entry.

    Args:
        name (str): Base name of the entry.
        indent (int): Nesting level below the traversal root.
        index (int): Position among the (filtered) siblings, 0-based.
        total (int): Number of (filtered) siblings.
        is_dir (bool): Whether the entry is a directory.
        leaf (bool): Whether the walk runs to every leaf; bounded walks dim directory names.
        color (bool): Emit ANSI escape codes.

    Returns:
        str: The rendered line, without a trailing newline.
    """
    symbol = prefix_symbol(indent, index, total)
    if color:
        symbol = colored_prefix(symbol, indent)
    return f"{indent_unit * indent}{symbol} {format_name(name, is_dir, dim=not leaf, color=color)}"
