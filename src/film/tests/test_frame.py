import itertools

import numpy as np
import pytest

from film.errors import PreconditionError
from film.frame import Frame


@pytest.mark.parametrize('layout', ['column', 'row'])
@pytest.mark.parametrize('width,height', [(0, 0), (0, 3), (4, 0), (1, 1), (3, 2), (2, 5)])
def test_new_frame_is_uniform_and_visits_every_pixel_once(layout, width, height):
    frame = Frame(width, height, 7, layout=layout)
    assert len(frame) == width * height
    assert all(v == 7 for v in frame.pixel_values())

    seen = []
    frame.for_each_pixel(lambda x, y, v: seen.append((x, y)))
    assert sorted(seen) == sorted(itertools.product(range(width), range(height)))
    assert len(seen) == len(set(seen))


def test_column_layout_mapping():
    frame = Frame(2, 3, 0.0)
    assert frame.layout == 'column'
    assert [frame.coords(i) for i in range(6)] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert frame.index_of(1, 2) == 5


def test_row_layout_mapping():
    frame = Frame(2, 3, 0.0, layout='row')
    assert [frame.coords(i) for i in range(6)] == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]
    assert frame.index_of(1, 2) == 5
    assert frame.index_of(0, 1) == 2


def test_dtype_inference_and_override():
    assert Frame(2, 2, 1.5).dtype == np.float64
    assert Frame(2, 2, 1.5, dtype=np.float32).dtype == np.float32
    assert Frame(2, 2, 3, dtype=np.uint32).dtype == np.uint32


def test_non_scalar_values_are_stored_as_objects():
    frame = Frame(2, 1, (1, 2))
    assert frame.dtype == np.dtype(object)
    assert list(frame.pixel_values()) == [(1, 2), (1, 2)]


@pytest.mark.parametrize('layout', ['column', 'row'])
@pytest.mark.parametrize('num_workers', [1, 2, 4])
@pytest.mark.parametrize('chunk_size', [1, 3, 7, 4096])
def test_set_pixels_matches_generator_for_any_partitioning(layout, num_workers, chunk_size):
    frame = Frame(5, 4, -1, dtype=np.int64, layout=layout)
    frame.set_pixels(lambda x, y: x * 100 + y, num_workers=num_workers, chunk_size=chunk_size)

    observed = {}
    frame.for_each_pixel(lambda x, y, v: observed.__setitem__((x, y), int(v)))
    assert observed == {(x, y): x * 100 + y for x in range(5) for y in range(4)}


def test_set_pixels_synchronous_scheduler():
    frame = Frame(3, 3, 0.0, dtype=np.float32)
    frame.set_pixels(lambda x, y: float(x + y), scheduler='synchronous')
    assert frame.get_pixel(2, 1) == 3.0
    assert frame.as_array().shape == (3, 3)


def test_set_pixels_on_empty_frame_never_calls_generator():
    calls = []
    Frame(0, 5, 0).set_pixels(lambda x, y: calls.append((x, y)))
    assert calls == []


def test_set_pixels_propagates_generator_errors():
    frame = Frame(2, 2, 0.0)
    with pytest.raises(ZeroDivisionError):
        frame.set_pixels(lambda x, y: 1.0 / (x - 1), chunk_size=1)


def test_set_pixels_rejects_process_scheduler():
    with pytest.raises(PreconditionError):
        Frame(2, 2, 0).set_pixels(lambda x, y: 0, scheduler='processes')


def test_set_pixels_rejects_empty_chunks():
    with pytest.raises(PreconditionError):
        Frame(2, 2, 0).set_pixels(lambda x, y: 0, chunk_size=0)


def test_pixel_values_restart_on_each_call():
    frame = Frame(3, 1, 0, dtype=np.uint32)
    frame.set_pixels(lambda x, y: x)
    assert list(frame.pixel_values()) == [0, 1, 2]
    assert list(frame.pixel_values()) == [0, 1, 2]


def test_pixels_iterator_is_single_pass():
    frame = Frame(2, 2, 1)
    it = frame.pixels()
    assert len(list(it)) == 4
    assert list(it) == []


@pytest.mark.parametrize('layout', ['column', 'row'])
def test_as_array_is_indexed_by_x_then_y(layout):
    frame = Frame(3, 2, 0, dtype=np.int32, layout=layout)
    frame.set_pixels(lambda x, y: 10 * x + y)
    arr = frame.as_array()
    assert arr.shape == (3, 2)
    assert arr[2, 1] == 21
    with pytest.raises(ValueError):
        arr[0, 0] = 5


def test_out_of_range_coordinates_fail():
    frame = Frame(2, 2, 0)
    with pytest.raises(PreconditionError):
        frame.get_pixel(2, 0)
    with pytest.raises(PreconditionError):
        frame.index_of(0, -1)


def test_bad_construction_arguments_fail():
    with pytest.raises(PreconditionError):
        Frame(-1, 2, 0)
    with pytest.raises(PreconditionError):
        Frame(2, 2, 0, layout='diagonal')


def test_default_layout_and_chunking_come_from_config():
    from film import config

    config.FRAME['layout'] = 'row'
    config.SYNTHESIS['chunk_size'] = 2
    frame = Frame(3, 2, 0, dtype=np.int32)
    assert frame.layout == 'row'
    frame.set_pixels(lambda x, y: 10 * x + y)
    assert frame.get_pixel(2, 1) == 21
    assert list(frame.pixel_values()) == [0, 10, 20, 1, 11, 21]
