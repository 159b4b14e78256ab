"""Named hex palettes for core plots."""

import math
import logging
import numbers

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

PALETTE_SIZE = 7

PALETTES = {
    'ice': ('#5D88A8', '#ACE5EE', '#9F8170', '#003366',
            '#0059B3', '#FFE4C4', '#A2A2D0'),
    'sediment': ('#F36F5E', '#FFE4C4', '#848482', '#C23B22',
                 '#79443B', '#D2691E', '#F64A8A'),
    'rock': ('#79443B', '#C1916B', '#98817B', '#E4D00A',
             '#2F4F4F', '#E1A95F', '#330000'),
    # Not listed by list_palettes(): cyan, orange, purple, green, pink,
    # yellow, red.
    'dracula': ('#8BE9FD', '#FFB86C', '#BD93F9', '#50FA7B',
                '#FF79C6', '#F1FA8C', '#FF5555'),
}

_DOCUMENTED = ('ice', 'sediment', 'rock')


def list_palettes() -> list[str]:
    return list(_DOCUMENTED)


def core_colors(palette: str, n=None) -> list[str]:
    """Return the first *n* hex colors of *palette* (all 7 if n is None).

    >>> core_colors('ice', 4)
    ['#5D88A8', '#ACE5EE', '#9F8170', '#003366']
    """
    if not isinstance(palette, str):
        raise InvalidArgument(
            f"Palette name must be a string, got {type(palette).__name__}. "
            f"Try 'ice', 'sediment', or 'rock'.")
    colors = PALETTES.get(palette.lower())
    if colors is None:
        raise InvalidArgument(f"Palette {palette!r} not recognized. "
                              f"Try 'ice', 'sediment', or 'rock'.")
    if n is None:
        return list(colors)
    return list(colors[:_check_count(n)])


def _check_count(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise InvalidArgument(f"The number of colors must be an integer, "
                              f"got {n!r}")
    if not 1 <= n <= PALETTE_SIZE:
        raise InvalidArgument(f"The number of colors must be an integer "
                              f"1 ≤ n ≤ {PALETTE_SIZE}, got {n}")
    count = math.floor(n)
    if count != n:
        logger.warning(f"Palette size {n} rounded down to {count}")
    return count
