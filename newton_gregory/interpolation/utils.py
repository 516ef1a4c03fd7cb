'''
helpers shared by the forward and backward interpolants
'''
import math
import torch


def factorial(k):
    # exact integer factorial, as float for tensor arithmetic
    return float(math.factorial(k))


def midpoint_positions(x, dtype=torch.float64):
    x = torch.as_tensor(x, dtype=dtype).flatten()
    return (x[:-1] + x[1:]) / 2 # empty for a single sample


def sample_midpoints(x, evaluate, dtype=torch.float64):
    """evaluate the interpolant halfway between every adjacent pair of samples

    x: n sample points
    evaluate: callable mapping a tensor of query values to interpolated values
    return: n - 1 values
    """
    return evaluate(midpoint_positions(x, dtype=dtype))
