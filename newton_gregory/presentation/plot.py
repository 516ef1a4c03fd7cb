import torch
import matplotlib.pyplot as plt
from newton_gregory.interpolation.utils import midpoint_positions
from newton_gregory.presentation.format import format_number


def interpolant_curve(model, num=200):
    """dense samples of the interpolant between the first and last sample point"""
    x = model.sample_points
    with torch.no_grad():
        xs = torch.linspace(x.min().item(), x.max().item(), num, dtype=model.dtype, device=x.device)
        ys = model(xs)
    return xs.cpu().numpy(), ys.cpu().numpy()


def plot_chart(x, y, midpoints, title, path=None, curve=None):
    '''
    samples as red circles, midpoints as blue triangles annotated with their value
    curve: optional (xs, ys) of the interpolant
    '''
    fig, ax = plt.subplots()
    mid_x = midpoint_positions(x).tolist()

    if curve is not None:
        ax.plot(curve[0], curve[1], label="interpolant", color="gray", linewidth=1)
    ax.plot(list(x), list(y), "o", label="samples", color="red", markersize=4)
    if len(midpoints) > 0:
        ax.plot(mid_x, list(midpoints), "^", label="midpoints", color="blue")
    for i, (mx, my) in enumerate(zip(mid_x, midpoints)):
        ax.annotate("Mid Point {}: {}".format(i + 1, format_number(my)), (mx, my),
                    textcoords="offset points", xytext=(0, 10), ha="center", fontsize=8)

    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.legend()
    if path is not None:
        fig.savefig(path)
    return fig
