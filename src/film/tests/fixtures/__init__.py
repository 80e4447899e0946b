from film.frame import Frame


def frame_from_values(width, height, values, dtype=None, layout=None):
    """Build a frame whose flat buffer, in index order, equals `values`.

    Uses the public synthesis path so tests never touch the buffer directly.
    """
    values = list(values)
    assert len(values) == width * height
    frame = Frame(width, height, values[0] if values else 0, dtype=dtype, layout=layout)
    lookup = {frame.coords(i): v for i, v in enumerate(values)}
    frame.set_pixels(lambda x, y: lookup[(x, y)], scheduler='synchronous')
    return frame


class RecordingRaster:
    """Minimal export target that remembers every call it receives."""

    created = []

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.calls = []
        RecordingRaster.created.append(self)

    def set_pixel(self, x, y, color):
        self.calls.append((x, y, color))
