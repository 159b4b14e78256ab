"""Configuration constants, default styling, and environment overrides."""

import os
import pathlib
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

BASE_DIR = pathlib.Path(__file__).parent.parent.absolute()
OUTPUT_DIR = pathlib.Path(
    os.environ.get("COREPLOT_OUTPUT_DIR", str(BASE_DIR / "output")))


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


# ── Mesh subdivision ─────────────────────────────────────────────────────
RING_COUNT = _env_int("COREPLOT_RING_COUNT", 1)
ANGULAR_COUNT = _env_int("COREPLOT_ANGULAR_COUNT", 64)

# ── Default styling ──────────────────────────────────────────────────────
# Alternating dark / light gray when no colors are given.
DEFAULT_COLORS = ('#6e7f80', '#c0c0c0')
DEFAULT_RADIUS = 0.5
DEFAULT_EDGE_LINES = False
DEFAULT_LIGHT = True
DEFAULT_FACE_ALPHA = 1.0
DEFAULT_EDGE_ALPHA = 1.0
DEFAULT_EDGE_WIDTH = 0.5
DEFAULT_VIEW_ANGLE = 'oblique'
DEFAULT_Z_DATA_TYPE = 'thickness'

# ── Camera ───────────────────────────────────────────────────────────────
# (azimuth, elevation) in degrees, measured from the +x axis / horizon.
VIEW_ANGLES = {
    'oblique': (45.0, 30.0),
    'right': (45.0, 0.0),
}

# Camera distance as a multiple of the core's largest extent.
CAMERA_DISTANCE_FACTOR = 2.5

# Light direction used by renderers that honour the ``light`` flag.
LIGHT_DIRECTION = (1.0, -1.0, -1.0)
