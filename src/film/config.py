# -*- coding: utf-8 -*-

"""
film/config.py

Central defaults for frame layout, parallel pixel synthesis and raster output.
Keeping them in one place means the renderer, the visualization adapters and
the tests all agree on the same conventions.

Contents:
---------
1. FRAME:
   - `layout` selects how a linear buffer index maps to (x, y).
       • "column": x = i // height, y = i % height  (default)
       • "row":    x = i % width,   y = i // width
   - Synthesis and enumeration always use the same mapping for a given frame.

2. SYNTHESIS:
   - dask scheduler used by `Frame.set_pixels` ("threads" or "synchronous").
   - Number of worker threads (None lets dask pick).
   - Number of pixels per task.

3. COLORS:
   - Colour emitted for depth pixels that never hit anything.

4. RASTER:
   - Pillow image mode and default serialization format.

Usage:
------
    from film.config import SYNTHESIS
    frame.set_pixels(shade, num_workers=SYNTHESIS['num_workers'])

Call-site arguments always override the values below.

"""
import logging
import sys

# ───────────────────────────────────────────────────────────────────────────────
# 1) FRAME LAYOUT
# ───────────────────────────────────────────────────────────────────────────────
FRAME = {
    'layout': 'column',         # 'column' or 'row'
}

LAYOUTS = ('column', 'row')

# ───────────────────────────────────────────────────────────────────────────────
# 2) PARALLEL SYNTHESIS (dask)
# ───────────────────────────────────────────────────────────────────────────────
SYNTHESIS = {
    'scheduler': 'threads',     # tasks write into views of one buffer, so no processes
    'num_workers': None,        # None -> dask default (cpu count)
    'chunk_size': 4096,         # pixels per task
}

SCHEDULERS = ('threads', 'synchronous')

# ───────────────────────────────────────────────────────────────────────────────
# 3) COLOURS (r, g, b), 8 bits per channel
# ───────────────────────────────────────────────────────────────────────────────
COLORS = {
    'miss': (0, 0, 255),        # depth sentinel (ray hit nothing)
}

# ───────────────────────────────────────────────────────────────────────────────
# 4) RASTER OUTPUT (Pillow)
# ───────────────────────────────────────────────────────────────────────────────
RASTER = {
    'mode': 'RGB',
    'format': 'BMP',
}


def configure_logging(level=logging.INFO):
    """Attach a console handler to the ``film`` logger.

    Library modules only create loggers; applications opt in here.
    Calling this more than once does not add duplicate handlers.
    """
    log = logging.getLogger('film')
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
        log.addHandler(h)
    log.setLevel(level)
    return log
