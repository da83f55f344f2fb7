from ttytemp.models import Sample
from ttytemp.projection import project_height, project_sample, project_window

from tests.helpers import make_samples


def test_max_value_projects_to_top_row():
    assert project_height(75, rows=10, max_scale=75) == 0


def test_zero_projects_to_bottom_row():
    assert project_height(0, rows=10, max_scale=75) == 10


def test_zero_scale_projects_everything_to_top():
    for value in (0, 5, 100):
        assert project_height(value, rows=10, max_scale=0) == 0


def test_projection_floors():
    # 4 * (8 - 2) / 8 = 3.0, 4 * (8 - 3) / 8 = 2.5
    assert project_height(2, rows=4, max_scale=8) == 3
    assert project_height(3, rows=4, max_scale=8) == 2


def test_negative_readings_clamp_to_bottom():
    assert project_height(-20, rows=10, max_scale=50) == 10


def test_project_sample_includes_aggregates():
    sample = Sample(values=(2, 8, 6))
    projected = project_sample(sample, rows=4, max_scale=8)
    assert projected.heights == (3, 0, 1)
    assert projected.min_height == 3
    assert projected.max_height == 0
    assert projected.avg_height == 1  # avg 5.33 -> 5, 4 * 3 / 8


def test_project_window_uses_window_maximum():
    samples = make_samples((2,), (8,), (4,))
    projected = project_window(samples, rows=4)
    assert [p.heights for p in projected] == [(3,), (0,), (2,)]


def test_project_window_rescales_when_peak_leaves():
    samples = make_samples((2,), (8,), (4,))
    assert project_window(samples[2:], rows=4)[0].heights == (0,)


def test_project_empty_window():
    assert project_window([], rows=4) == []
