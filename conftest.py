import copy

import pytest

from film import config


@pytest.fixture(autouse=True)
def restore_config():
    """Snapshot the module-level config dicts and put them back after each test.

    Tests are free to tweak `film.config.FRAME`, `SYNTHESIS`, `COLORS` or
    `RASTER` to exercise non-default behaviour without leaking it into
    later tests.
    """
    saved = {name: copy.deepcopy(getattr(config, name)) for name in ('FRAME', 'SYNTHESIS', 'COLORS', 'RASTER')}
    yield
    for name, value in saved.items():
        target = getattr(config, name)
        target.clear()
        target.update(value)
