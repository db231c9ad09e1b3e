import pytest

from reluapprox import ReluNetwork, cubic, sample_function, training_samples, validation_samples
from reluapprox.data import comparison_table
from reluapprox.plotting import plot_approximation


def test_cubic():
    assert cubic(0.0) == 0.0
    assert cubic(1.0) == 3.0
    assert cubic(2.0) == 14.0


def test_training_grid_steps_by_seven_hundredths():
    samples = training_samples()
    xs = [x for x, _ in samples]
    assert len(xs) == 15
    assert xs[0] == 0.01
    assert xs[1] == 0.08
    assert xs[-1] == 0.99
    assert all(y == cubic(x) for x, y in samples)


def test_validation_grid_is_inclusive():
    xs = [x for x, _ in validation_samples()]
    assert xs[0] == 0.2
    assert xs[-1] == 0.6
    assert len(xs) == 41


def test_sample_function_rejects_bad_step():
    with pytest.raises(ValueError):
        sample_function(cubic, 0, 10, step=0)


def test_comparison_table_rows():
    network = ReluNetwork.from_parameters(weights=[1.0, 1.0], biases=[0.0, 0.0])
    rows = comparison_table(network, cubic, points=4)
    assert [row[0] for row in rows] == [0.0, 0.25, 0.5, 0.75]
    assert rows[2] == (0.5, cubic(0.5), 0.5)


def test_plot_approximation_writes_file(tmp_path):
    path = tmp_path / "fit.png"
    plot_approximation([(0.0, 0.0, 0.1), (0.5, 0.875, 0.7)], path)
    assert path.exists()
