project_name = "wdt"

# wdt.py parameters
"""
default_depth is how many levels below the starting location get listed
when --depth is not given on the command line and WDT_DEPTH is not set.
1 means only the immediate children of the location are shown.
--leaf ignores this value entirely and walks down to every leaf.
"""
default_depth = 1

"""
color_mode can be 'auto', 'always' or 'never'.
'auto' colors the connectors only when stdout is a terminal and NO_COLOR is not set.
'always' is useful when piping into `less -R`.
'never' prints plain text with no escape codes at all.
"""
color_mode = "auto"
color_modes = ("auto", "always", "never")

"""
hide_dotfiles decides whether entries starting with '.' are listed by default.
-a/--all on the command line shows them.
"""
hide_dotfiles = True

# utilities/formatting.py parameters
"""
prefix_first is only ever used for the first entry at the top level.
prefix_last closes every sibling group and wins over prefix_first
when the top level holds a single entry.
"""
prefix_first = "╭"
prefix_middle = "├"
prefix_last = "╰"

# each nesting level is indented by one indent_unit
indent_unit = "  "

"""
palette is indexed by nesting level % len(palette) so every level
gets its own connector color and the bands repeat after six levels.
"""
palette = ["blue", "green", "red", "yellow", "magenta", "cyan"]

ansi_colors = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}
