import argparse, os, sys
import matplotlib.pyplot as plt
from newton_gregory import InterpolationSession, ValidationError
from newton_gregory.interpolation import ORIENTATIONS
from newton_gregory.presentation import format_number, parse_values, render_table, plot_chart, interpolant_curve

TITLES = {
    "forward": ("Forward Difference Table", "Forward Interpolation Graph"),
    "backward": ("Backward Difference Table", "Backward Interpolation Graph"),
}

def parse_args(argv=None):
    parser = argparse.ArgumentParser()
    # samples
    parser.add_argument("--x", type=str, required=True, help="comma separated x values, e.g. 0,1,2,3")
    parser.add_argument("--y", type=str, required=True, help="comma separated y values")
    parser.add_argument("--value", type=float, required=True, help="query value to interpolate at")
    parser.add_argument("--orientation", choices=list(ORIENTATIONS) + ["both"], default="both")
    # presentation
    parser.add_argument("--orders", type=int, default=4, help="difference orders shown per table row")
    parser.add_argument("--no-plot", action="store_true", default=False)
    # logging
    parser.add_argument("--exp_name", type=str, default="exp")
    parser.add_argument("--logging_root", type=str, default="./logs")

    args = parser.parse_args(argv)
    if args.orders < 1:
        parser.error("--orders should be no less than 1")
    args.x = parse_values(args.x)
    args.y = parse_values(args.y)
    return args

def present(output, logging_dir, orders=4, plot=True):
    orientation = output["orientation"]
    table_title, chart_title = TITLES[orientation]
    print("{} interpolation result for x = {}: {}".format(
        orientation.capitalize(), format_number(output["value"]), format_number(output["result"])))
    print(render_table(output["table"], output["x"], orientation=orientation, orders=orders, title=table_title))
    for i, (mx, my) in enumerate(zip(output["midpoint_positions"], output["midpoints"])):
        print("Mid Point {} (x = {}): {}".format(i + 1, format_number(mx), format_number(my)))

    os.makedirs(logging_dir, exist_ok=True)
    msg = {key: output[key] for key in ("orientation", "x", "y", "value", "result", "midpoints")}
    with open(os.path.join(logging_dir, "log.txt"), "a") as file:
        file.write(str(msg) + "\n")

    if plot:
        path = os.path.join(logging_dir, "{}.png".format(orientation))
        fig = plot_chart(output["x"], output["y"], output["midpoints"], chart_title,
                         path=path, curve=interpolant_curve(output["model"]))
        plt.close(fig)
        print("chart saved: ", path)

def main(argv=None):
    args = parse_args(argv)
    logging_dir = os.path.join(args.logging_root, args.exp_name)
    orientations = ORIENTATIONS if args.orientation == "both" else (args.orientation,)
    session = InterpolationSession()
    try:
        outputs = [session.run(args.x, args.y, args.value, orientation=o) for o in orientations]
    except ValidationError as e:
        print(e)
        return 1
    for output in outputs:
        print(output["model"])
        present(output, logging_dir, orders=args.orders, plot=not args.no_plot)
    return 0

if __name__ == "__main__":
    sys.exit(main())
