from newton_gregory.interpolation.difference import (
    FORWARD, BACKWARD, ORIENTATIONS, build_difference_table, forward_differences,
    backward_differences, difference_column, is_meaningful,
)
from newton_gregory.interpolation.newton_gregory import (
    NewtonGregoryInterpolation, ForwardNewtonGregory, BackwardNewtonGregory,
    evaluate_forward, evaluate_backward,
)
from newton_gregory.interpolation.utils import factorial, midpoint_positions, sample_midpoints
