'''
finite difference tables for Newton-Gregory interpolation
'''
import torch

FORWARD = "forward"
BACKWARD = "backward"
ORIENTATIONS = (FORWARD, BACKWARD)


def _init_table(y, dtype):
    y = torch.as_tensor(y, dtype=dtype).flatten()
    n = y.shape[0]
    if n < 1:
        raise ValueError("y should contain at least one sample")
    diff = torch.zeros((n, n), dtype=dtype) # n x n, cells outside the triangle stay zero
    diff[:, 0] = y
    return diff


def forward_differences(y, dtype=torch.float64):
    """differences anchored at row 0

    diff[i, j] = diff[i + 1, j - 1] - diff[i, j - 1], i in [0, n - j)
    """
    diff = _init_table(y, dtype)
    n = diff.shape[0]
    for j in range(1, n):
        for i in range(n - j):
            diff[i, j] = diff[i + 1, j - 1] - diff[i, j - 1]
    return diff


def backward_differences(y, dtype=torch.float64):
    """differences anchored at row n - 1

    diff[i, j] = diff[i, j - 1] - diff[i - 1, j - 1], i in [j, n)
    """
    diff = _init_table(y, dtype)
    n = diff.shape[0]
    for j in range(1, n):
        # order j only reads order j - 1, so the row direction does not matter
        for i in range(n - 1, j - 1, -1):
            diff[i, j] = diff[i, j - 1] - diff[i - 1, j - 1]
    return diff


def build_difference_table(y, orientation=FORWARD, dtype=torch.float64):
    if orientation == FORWARD:
        return forward_differences(y, dtype=dtype)
    if orientation == BACKWARD:
        return backward_differences(y, dtype=dtype)
    raise ValueError("orientation should be one of {}, got {}".format(ORIENTATIONS, orientation))


def difference_column(diff, order, orientation=FORWARD):
    '''
    meaningful cells of one order of the table
    forward: rows [0, n - order), backward: rows [order, n)
    '''
    n = diff.shape[0]
    if order < 0 or order >= n:
        raise ValueError("order should be in [0, {}), got {}".format(n, order))
    if orientation == FORWARD:
        return diff[:n - order, order]
    if orientation == BACKWARD:
        return diff[order:, order]
    raise ValueError("orientation should be one of {}, got {}".format(ORIENTATIONS, orientation))


def is_meaningful(n, row, order, orientation=FORWARD):
    if orientation == FORWARD:
        return 0 <= order < n and 0 <= row < n - order
    if orientation == BACKWARD:
        return 0 <= order < n and order <= row < n
    raise ValueError("orientation should be one of {}, got {}".format(ORIENTATIONS, orientation))
