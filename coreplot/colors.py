"""Layer color resolution.

Colors come in as hex codes (``'#fea12c'``) or RGB triplets, either
normalized (0-1) or 8-bit (0-255). They are parsed once into a tagged
:data:`~coreplot.models.ColorSpec`, then spread over the layers from the
top of the core down:

* default colors: two grays alternating, first gray on the top layer
* M colors for N layers, M <= N: the M colors repeat in order
* M > N: :class:`~coreplot.errors.TooManyColors`

For the legend, only the top-most layer of each distinct color is shown.
"""

import re
import logging

import numpy as np

from .errors import InvalidArgument, InvalidColor, TooManyColors
from .models import RGB, ColorSpec, DefaultColors, HexColors, RgbColors

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'#[0-9a-fA-F]{6}')


# ── Conversions ──────────────────────────────────────────────────────────

def hex_to_rgb(code: str) -> RGB:
    """``'#RRGGBB'`` → normalized ``(r, g, b)``."""
    if not isinstance(code, str) or not _HEX_RE.fullmatch(code):
        raise InvalidColor(f"Invalid hex color {code!r}; expected '#RRGGBB'")
    return tuple(int(code[i:i + 2], 16) / 255 for i in (1, 3, 5))


def rgb_to_hex(rgb) -> str:
    """Normalized ``(r, g, b)`` → lowercase ``'#rrggbb'``."""
    values = np.asarray(rgb, dtype=np.float64)
    if values.shape != (3,) or not np.all(np.isfinite(values)):
        raise InvalidColor(f"Expected an RGB triplet, got {rgb!r}")
    if np.any(values < 0) or np.any(values > 1):
        raise InvalidColor(f"RGB triplet {rgb!r} is not normalized to [0, 1]")
    r, g, b = (int(round(c * 255)) for c in values)
    return f'#{r:02x}{g:02x}{b:02x}'


def to_uint8(rgb) -> list[int]:
    """Normalized ``(r, g, b)`` → 8-bit ``[r, g, b]``."""
    return [int(round(c * 255)) for c in rgb]


def normalize_rgb(values) -> np.ndarray:
    """Validate an (M, 3) RGB matrix and scale it to [0, 1].

    If any component exceeds 1 the whole matrix is taken as 8-bit and
    divided by 255.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2 or arr.shape[1] != 3 or len(arr) == 0:
        raise InvalidColor(f"RGB colors must be an (M, 3) matrix, "
                           f"got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidColor("Color array cannot contain NaN or infinite values!")
    if np.any(arr < 0):
        raise InvalidColor("Color array cannot contain negative values!")
    if np.any(arr > 255):
        raise InvalidColor("Color array cannot contain values exceeding 255!")
    if np.any(arr > 1):
        arr = arr / 255
    return arr


# ── Specification parsing ────────────────────────────────────────────────

def parse_color_spec(colors=None) -> ColorSpec:
    """Turn user input into a :data:`ColorSpec`.

    Accepts ``None`` / ``'default'``, a hex string, a sequence of hex
    strings, an RGB triplet, or an (M, 3) sequence of triplets. Hex and
    RGB entries cannot be mixed.
    """
    if colors is None:
        return DefaultColors()
    if isinstance(colors, (DefaultColors, HexColors, RgbColors)):
        return colors
    if isinstance(colors, str):
        if colors.lower() == 'default':
            return DefaultColors()
        return HexColors((_check_hex(colors),))

    try:
        entries = list(colors)
    except TypeError:
        raise InvalidColor(f"Unsupported color specification {colors!r}") from None
    if not entries:
        raise InvalidColor("Color list is empty")

    n_str = sum(isinstance(c, str) for c in entries)
    if n_str == len(entries):
        return HexColors(tuple(_check_hex(c) for c in entries))
    if n_str:
        raise InvalidColor("Cannot mix hex codes and RGB triplets in one "
                           "color list")

    try:
        matrix = np.asarray(entries, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidColor(f"Unsupported color specification: {e}") from None
    matrix = normalize_rgb(matrix)
    return RgbColors(tuple(tuple(float(c) for c in row) for row in matrix))


def _check_hex(code) -> str:
    hex_to_rgb(code)
    return code


def spec_colors(spec: ColorSpec) -> list[RGB]:
    """The normalized colors a spec lists, in order."""
    if isinstance(spec, (DefaultColors, HexColors)):
        return [hex_to_rgb(c) for c in spec.codes]
    return list(spec.triples)


# ── Resolution ───────────────────────────────────────────────────────────

def resolve_colors(n_layers: int, colors=None) -> list[RGB]:
    """One color per layer, index 0 being the top layer."""
    if isinstance(n_layers, bool) or int(n_layers) != n_layers or n_layers < 1:
        raise InvalidArgument(f"Number of layers must be a positive integer, "
                              f"got {n_layers!r}")
    n_layers = int(n_layers)
    spec = parse_color_spec(colors)
    palette = spec_colors(spec)

    if isinstance(spec, DefaultColors):
        first, second = palette
        logger.debug(f"Alternating default colors over {n_layers} layers")
        return [first if k % 2 == 0 else second for k in range(n_layers)]

    m = len(palette)
    if m > n_layers:
        raise TooManyColors(m, n_layers)
    if m < n_layers:
        logger.debug(f"Repeating {m} colors over {n_layers} layers")
    return [palette[k % m] for k in range(n_layers)]


def _color_key(rgb) -> tuple:
    return tuple(round(float(c), 9) for c in rgb)


def unique_colors(colors) -> list[RGB]:
    """Distinct colors in order of first appearance."""
    seen = set()
    result = []
    for rgb in colors:
        key = _color_key(rgb)
        if key not in seen:
            seen.add(key)
            result.append(rgb)
    return result


def legend_visibility(colors) -> list[bool]:
    """True for the first (top-most) layer carrying each distinct color."""
    seen = set()
    flags = []
    for rgb in colors:
        key = _color_key(rgb)
        flags.append(key not in seen)
        seen.add(key)
    return flags
