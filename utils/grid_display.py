EMPTY_SYMBOL = "_"


def format_grid(grid):
    """Render a grid one row per line, '_' for empty cells"""
    rows = grid.to_list() if hasattr(grid, "to_list") else grid

    lines = []
    for row in rows:
        lines.append(" ".join(str(cell) if cell != 0 else EMPTY_SYMBOL for cell in row))

    return "\n".join(lines)


def print_grid(grid, title=None):
    """Print grid to console"""
    if title:
        print(f"\n{title}")
    print(format_grid(grid))
