import torch
from newton_gregory.interpolation.difference import FORWARD, BACKWARD, build_difference_table
from newton_gregory.interpolation.utils import factorial, midpoint_positions, sample_midpoints
from newton_gregory.registry import interpolator


def _step(x, start, stop):
    # spacing at the anchor end, 1 when there is nothing to measure
    if x.shape[0] < 2:
        return torch.tensor(1., dtype=x.dtype, device=x.device)
    return x[stop] - x[start]


def evaluate_forward(x, diff, value):
    """Newton forward-difference polynomial expanded about x[0]

    P(v) = y0 + sum_k diff[0, k] * (v - x0)(v - x1)...(v - x[k-1]) / (k! h^k)

    h = x[1] - x[0]. With unit spacing this is the plain `product / k!` form;
    for any other spacing the result differs from that form, which only
    reproduces the samples when h == 1.

    value: scalar or tensor of any shape, result has the same shape
    """
    x = torch.as_tensor(x, dtype=diff.dtype, device=diff.device).flatten()
    value = torch.as_tensor(value, dtype=diff.dtype, device=diff.device)
    n = diff.shape[0]
    h = _step(x, 0, 1)

    result = diff[0, 0] + torch.zeros_like(value)
    product = torch.ones_like(value)
    for k in range(1, n):
        product = product * (value - x[k - 1])
        result = result + diff[0, k] * product / (factorial(k) * h ** k)
    return result


def evaluate_backward(x, diff, value):
    """Newton backward-difference polynomial expanded about x[n-1]

    P(v) = y[n-1] + sum_k diff[n-1, k] * (v - x[n-1])...(v - x[n-k]) / (k! h^k)

    h = x[n-1] - x[n-2], same unit-spacing caveat as evaluate_forward
    """
    x = torch.as_tensor(x, dtype=diff.dtype, device=diff.device).flatten()
    value = torch.as_tensor(value, dtype=diff.dtype, device=diff.device)
    n = diff.shape[0]
    h = _step(x, n - 2, n - 1)

    result = diff[n - 1, 0] + torch.zeros_like(value)
    product = torch.ones_like(value)
    for k in range(1, n):
        product = product * (value - x[n - k])
        result = result + diff[n - 1, k] * product / (factorial(k) * h ** k)
    return result


class NewtonGregoryInterpolation(torch.nn.Module):
    """Base class for the Newton-Gregory interpolants
    Inherited classes should implement:
    - property: orientation
    - method: evaluate, (x, diff, value) -> interpolated value
    The difference table is built once on construction and never mutated.
    """
    orientation: str
    sample_points: torch.Tensor # n x-samples
    sample_values: torch.Tensor # n y-samples
    table: torch.Tensor # n x n difference table, [row, order]

    def __init__(self, x, y, device="cpu", dtype=torch.float64):
        super(NewtonGregoryInterpolation, self).__init__()
        x = torch.as_tensor(x, dtype=dtype).flatten()
        y = torch.as_tensor(y, dtype=dtype).flatten()
        if x.shape[0] != y.shape[0]:
            raise ValueError("x and y should have the same length, got {} and {}".format(x.shape[0], y.shape[0]))

        self.device = device
        self.dtype = dtype
        # own copies, callers keep their samples
        self.register_buffer("sample_points", x.clone().to(device))
        self.register_buffer("sample_values", y.clone().to(device))
        self.register_buffer("table", build_difference_table(y, self.orientation, dtype=dtype).to(device))

    @property
    def n(self):
        return self.sample_points.shape[0]

    @property
    def step(self):
        if self.orientation == FORWARD:
            return _step(self.sample_points, 0, 1).item()
        return _step(self.sample_points, self.n - 2, self.n - 1).item()

    def evaluate(self, x, diff, value):
        raise NotImplementedError("evaluate is orientation specific")

    def forward(self, input):
        return self.evaluate(self.sample_points, self.table, input)

    def midpoints(self):
        return sample_midpoints(self.sample_points, self, dtype=self.dtype)

    def midpoint_positions(self):
        return midpoint_positions(self.sample_points, dtype=self.dtype)

    def coefficients(self):
        # row holding the differences used by evaluation
        row = 0 if self.orientation == FORWARD else self.n - 1
        return self.table[row].clone()

    def extra_repr(self) -> str:
        return """n={}, orientation={}, step={}, dtype={}""".format(
            self.n, self.orientation, self.step, self.dtype
        )


@interpolator.register(FORWARD)
class ForwardNewtonGregory(NewtonGregoryInterpolation):
    orientation = FORWARD

    def evaluate(self, x, diff, value):
        return evaluate_forward(x, diff, value)


@interpolator.register(BACKWARD)
class BackwardNewtonGregory(NewtonGregoryInterpolation):
    orientation = BACKWARD

    def evaluate(self, x, diff, value):
        return evaluate_backward(x, diff, value)
