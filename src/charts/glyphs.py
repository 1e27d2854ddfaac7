"""Box-drawing and block glyphs shared by the chart renderers."""

# Axes
HORIZONTAL = "─"
VERTICAL = "│"
TOP_LEFT = "┌"
BOTTOM_LEFT = "└"
TEE_RIGHT = "├"

# Line connectors
CURVE_UP_RIGHT = "╰"
CURVE_UP_LEFT = "╯"

# Bars
FULL_BLOCK = "█"
LIGHT_SHADE = "░"
MEDIUM_SHADE = "▒"
DARK_SHADE = "▓"

# Points and background
POINT = "●"
GRID_DOT = "·"

SPARK_BLOCKS = ("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")

TREND_DOWN = "↓"
TREND_FLAT = "→"
TREND_UP = "↑"
OVERALL_UP = "📈"
OVERALL_DOWN = "📉"
OVERALL_FLAT = "➡️"


def axis_connector(row: int, last_row: int) -> str:
    """Return the y-axis connector glyph for a plot row."""
    if row == last_row:
        return BOTTOM_LEFT
    if row == 0:
        return TOP_LEFT
    return TEE_RIGHT
