from newton_gregory.interpolation.difference import FORWARD, is_meaningful
from newton_gregory.presentation.format import format_number

SUPERSCRIPTS = {2: "²", 3: "³", 4: "⁴", 5: "⁵", 6: "⁶", 7: "⁷", 8: "⁸", 9: "⁹"}


def column_headers(orders):
    headers = ["X", "f(X)"]
    for j in range(1, orders):
        headers.append("Δf" if j == 1 else "Δ{} f".format(SUPERSCRIPTS.get(j, "^{}".format(j))))
    return headers


def table_rows(table, x, orientation=FORWARD, orders=4):
    """one list of strings per sample, cells outside the triangle left blank"""
    if orders < 1:
        raise ValueError("orders should be no less than 1, got {}".format(orders))
    n = table.shape[0]
    rows = []
    for i in range(n):
        row = [format_number(x[i])]
        for j in range(orders):
            row.append(format_number(table[i, j].item()) if is_meaningful(n, i, j, orientation) else "")
        rows.append(row)
    return rows


def render_table(table, x, orientation=FORWARD, orders=4, title=None):
    headers = column_headers(orders)
    rows = table_rows(table, x, orientation=orientation, orders=orders)
    widths = [max([len(headers[c])] + [len(row[c]) for row in rows]) for c in range(len(headers))]

    lines = []
    if title is not None:
        lines.append(title)
    lines.append(" | ".join(h.ljust(w) for h, w in zip(headers, widths)).rstrip())
    lines.append("-+-".join("-" * w for w in widths))
    for row in rows:
        lines.append(" | ".join(c.ljust(w) for c, w in zip(row, widths)).rstrip())
    return "\n".join(lines)
