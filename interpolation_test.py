'''
difference tables and polynomial evaluation
'''
import numpy as np
import pytest
import torch

import newton_gregory
from newton_gregory.interpolation import (
    FORWARD, BACKWARD, build_difference_table, difference_column, is_meaningful,
    evaluate_forward, evaluate_backward, midpoint_positions, sample_midpoints,
)
from newton_gregory.registry import interpolator

X = [0., 1., 2., 3.]
Y = [1., 2., 9., 28.] # x ** 3 + 1


def oracle(x, y, value):
    return np.polyval(np.polyfit(x, y, len(x) - 1), value)


def repeated_differences(y, order):
    values = list(y)
    for _ in range(order):
        values = [b - a for a, b in zip(values[:-1], values[1:])]
    return values


@pytest.mark.parametrize("orientation", [FORWARD, BACKWARD])
def test_column_zero_is_samples(orientation):
    y = [3., -1., 4., 1., 5.]
    table = build_difference_table(y, orientation)
    assert table.shape == (5, 5)
    assert table[:, 0].tolist() == y


def test_forward_table_cubic():
    table = build_difference_table(Y, FORWARD)
    assert difference_column(table, 0, FORWARD).tolist() == [1., 2., 9., 28.]
    assert difference_column(table, 1, FORWARD).tolist() == [1., 7., 19.]
    assert difference_column(table, 2, FORWARD).tolist() == [6., 12.]
    assert difference_column(table, 3, FORWARD).tolist() == [6.]
    assert table[0].tolist() == [1., 1., 6., 6.]


def test_backward_table_cubic():
    table = build_difference_table(Y, BACKWARD)
    assert difference_column(table, 1, BACKWARD).tolist() == [1., 7., 19.]
    assert difference_column(table, 2, BACKWARD).tolist() == [6., 12.]
    assert difference_column(table, 3, BACKWARD).tolist() == [6.]
    assert table[3].tolist() == [28., 19., 12., 6.]
    # unused cells above the triangle
    assert table[0, 1].item() == 0.


def test_anchor_rows_match_repeated_subtraction():
    y = [2., 3.5, -1., 0.25, 7., 4.]
    n = len(y)
    forward = build_difference_table(y, FORWARD)
    backward = build_difference_table(y, BACKWARD)
    for j in range(n):
        differences = repeated_differences(y, j)
        assert forward[0, j].item() == pytest.approx(differences[0])
        assert backward[n - 1, j].item() == pytest.approx(differences[-1])


def test_empty_and_unknown_orientation():
    with pytest.raises(ValueError):
        build_difference_table([], FORWARD)
    with pytest.raises(ValueError):
        build_difference_table([1., 2.], "sideways")


def test_table_is_a_fresh_tensor():
    y = torch.tensor([1., 2., 4.], dtype=torch.float64)
    table = build_difference_table(y, FORWARD)
    table[0, 0] = 100.
    assert y[0].item() == 1.


@pytest.mark.parametrize("evaluate,orientation", [(evaluate_forward, FORWARD), (evaluate_backward, BACKWARD)])
def test_reproduces_samples(evaluate, orientation):
    x = [0., 1., 2., 3., 4., 5.]
    y = [0.5, -2., 3., 3.25, 10., -4.]
    table = build_difference_table(y, orientation)
    for xi, yi in zip(x, y):
        assert evaluate(x, table, xi).item() == pytest.approx(yi, abs=1e-9)


def test_forward_matches_polynomial_fit():
    table = build_difference_table(Y, FORWARD)
    assert evaluate_forward(X, table, 1.5).item() == pytest.approx(oracle(X, Y, 1.5), abs=1e-9)
    assert evaluate_forward(X, table, 1.5).item() == pytest.approx(1.5 ** 3 + 1, abs=1e-9)


def test_forward_and_backward_agree():
    x = [1., 2., 3., 4., 5.]
    y = [2., 0., 5., -1., 3.]
    forward = build_difference_table(y, FORWARD)
    backward = build_difference_table(y, BACKWARD)
    for value in [1.25, 2.5, 3.7, 4.9, 6.]:
        assert evaluate_forward(x, forward, value).item() == pytest.approx(
            evaluate_backward(x, backward, value).item(), abs=1e-9)
        assert evaluate_forward(x, forward, value).item() == pytest.approx(oracle(x, y, value), abs=1e-8)


def test_equal_non_unit_spacing():
    x = [0., 0.5, 1., 1.5]
    y = [v ** 2 - 3 * v for v in x]
    forward = build_difference_table(y, FORWARD)
    backward = build_difference_table(y, BACKWARD)
    assert evaluate_forward(x, forward, 0.75).item() == pytest.approx(0.75 ** 2 - 2.25, abs=1e-9)
    assert evaluate_backward(x, backward, 0.75).item() == pytest.approx(0.75 ** 2 - 2.25, abs=1e-9)


def test_single_sample():
    table = build_difference_table([10.], FORWARD)
    assert table.tolist() == [[10.]]
    for value in [-3., 5., 1e6]:
        assert evaluate_forward([5.], table, value).item() == 10.
        assert evaluate_backward([5.], table, value).item() == 10.


def test_tensor_query_keeps_shape():
    table = build_difference_table(Y, FORWARD)
    values = torch.tensor([[0., 1.], [2., 3.]], dtype=torch.float64)
    result = evaluate_forward(X, table, values)
    assert result.shape == (2, 2)
    assert result.flatten().tolist() == pytest.approx(Y)


def test_midpoints():
    assert midpoint_positions(X).tolist() == [0.5, 1.5, 2.5]
    assert midpoint_positions([5.]).numel() == 0
    table = build_difference_table(Y, FORWARD)
    midpoints = sample_midpoints(X, lambda v: evaluate_forward(X, table, v))
    assert midpoints.tolist() == pytest.approx([v ** 3 + 1 for v in [0.5, 1.5, 2.5]])


def test_registry_builds_interpolants():
    assert interpolator.names() == [BACKWARD, FORWARD]
    model = interpolator.build(BACKWARD, X, Y)
    assert model.orientation == BACKWARD
    assert model.coefficients().tolist() == [28., 19., 12., 6.]
    assert model(2.5).item() == pytest.approx(2.5 ** 3 + 1)
    assert len(model.midpoints()) == 3
    assert "orientation=backward" in repr(model)
    with pytest.raises(ValueError):
        interpolator.build("lagrange", X, Y)
    with pytest.raises(ValueError):
        interpolator.build(FORWARD, [1., 2., 3.], [1., 2.])


def test_is_meaningful_cells():
    assert is_meaningful(4, 0, 3, FORWARD)
    assert not is_meaningful(4, 1, 3, FORWARD)
    assert is_meaningful(4, 3, 3, BACKWARD)
    assert not is_meaningful(4, 2, 3, BACKWARD)
    with pytest.raises(ValueError):
        is_meaningful(4, 0, 0, "sideways")


def test_spacing_of_two_scales_the_terms():
    # the unscaled product / k! form would give 2 here
    x, y = [0., 2., 4.], [0., 2., 4.]
    assert evaluate_forward(x, build_difference_table(y, FORWARD), 1.).item() == pytest.approx(1.)
    assert evaluate_backward(x, build_difference_table(y, BACKWARD), 1.).item() == pytest.approx(1.)


def test_registry_rejects_duplicate_orientation():
    with pytest.raises(ValueError, match="already registered"):
        interpolator.register(FORWARD)(object)
    assert interpolator.get(FORWARD).orientation == FORWARD
