import pytest

from bullet_dodge.core.difficulty import DifficultyCurve


@pytest.fixture()
def curve():
    return DifficultyCurve(base_interval=1.0, min_interval=0.2, decay_rate=0.01,
                           base_speed=5.0, accel_rate=0.1)


def test_interval_examples(curve):
    assert curve.interval_at(0) == pytest.approx(1.0)
    assert curve.interval_at(80) == pytest.approx(0.2)
    assert curve.interval_at(1000) == pytest.approx(0.2)


def test_interval_is_non_increasing_and_floored(curve):
    previous = curve.interval_at(0)
    for step in range(1, 2000):
        current = curve.interval_at(step * 0.5)
        assert current <= previous
        assert current >= curve.min_interval
        previous = current


def test_speed_ramps_without_cap(curve):
    assert curve.speed_at(0) == pytest.approx(5.0)
    assert curve.speed_at(10) == pytest.approx(6.0)
    # 沒有上限
    assert curve.speed_at(10_000) == pytest.approx(1005.0)
    assert curve.speed_at(20) > curve.speed_at(19)


def test_defaults_match_classic_tuning():
    curve = DifficultyCurve()
    assert curve.interval_at(0) == pytest.approx(1.0)
    assert curve.speed_at(0) == pytest.approx(5.0)
