from typing import List, Optional, Sequence

from color_sort.color_tube import ColorTube

KEY_ROWS = (
    "1234567",
    "QWERTYU",
    "ASDFGHJ",
    "ZXCVBNM",
)
KEYS = "".join(KEY_ROWS)


def key_for_position(row: int, col: int) -> Optional[str]:
    if 0 <= row < len(KEY_ROWS) and 0 <= col < len(KEY_ROWS[row]):
        return KEY_ROWS[row][col]
    return None


def grid_fits_keys(rows: int, columns: int) -> bool:
    return rows <= len(KEY_ROWS) and all(columns <= len(row) for row in KEY_ROWS)


def assign_shortcuts(tubes: Sequence[ColorTube], columns: int) -> List[Optional[str]]:
    """
    Bind each tube to a shortcut key, returning the bound keys.

    Keys follow the tube's grid position when the grid fits the key table,
    otherwise the table is read row by row in tube order. Only tubes past the
    last key are left unbound.
    """
    rows = -(-len(tubes) // columns) if tubes else 0
    by_position = grid_fits_keys(rows, columns)
    keys = []
    for idx, tube in enumerate(tubes):
        if by_position:
            tube.keycode = key_for_position(idx // columns, idx % columns)
        else:
            tube.keycode = KEYS[idx] if idx < len(KEYS) else None
        keys.append(tube.keycode)
    return keys


def tube_for_key(tubes: Sequence[ColorTube], key: str) -> Optional[int]:
    key = key.upper()
    for idx, tube in enumerate(tubes):
        if tube.keycode is not None and tube.keycode == key:
            return idx
    return None
