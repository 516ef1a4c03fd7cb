import torch
from newton_gregory.interpolation.difference import FORWARD, BACKWARD
from newton_gregory.registry import interpolator


class ValidationError(ValueError):
    """Sample sequences that cannot be interpolated, raised before any table is built"""


class InterpolationSession(object):
    """Validate samples, build the interpolant, evaluate the query and the midpoints

    Only the sample counts are checked. Distinct or sorted x is assumed, not enforced.
    Every run builds its own table, nothing is kept between runs.
    """
    def __init__(self, device="cpu", dtype=torch.float64):
        self.device = device
        self.dtype = dtype

    def validate(self, x, y):
        if len(x) != len(y):
            raise ValidationError("length mismatch: got {} x values and {} y values".format(len(x), len(y)))
        if len(x) == 0:
            raise ValidationError("no samples given")

    def run(self, x, y, value, orientation=FORWARD):
        self.validate(x, y)
        model = interpolator.build(orientation, x, y, device=self.device, dtype=self.dtype)
        with torch.no_grad():
            result = model(value)
            midpoints = model.midpoints()
        return {
            "orientation": orientation,
            "x": model.sample_points.tolist(),
            "y": model.sample_values.tolist(),
            "value": float(value),
            "result": result.item(),
            "table": model.table.clone(),
            "midpoint_positions": model.midpoint_positions().tolist(),
            "midpoints": midpoints.tolist(),
            "model": model,
        }

    def run_forward(self, x, y, value):
        return self.run(x, y, value, orientation=FORWARD)

    def run_backward(self, x, y, value):
        return self.run(x, y, value, orientation=BACKWARD)
