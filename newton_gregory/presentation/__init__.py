from newton_gregory.presentation.format import format_number, parse_values
from newton_gregory.presentation.table import render_table, table_rows, column_headers
from newton_gregory.presentation.plot import plot_chart, interpolant_curve
