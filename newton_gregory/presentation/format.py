import math
import re


def format_number(num):
    """integral values as integers, others to 5 decimals with trailing zeros trimmed"""
    num = float(num)
    if math.isfinite(num) and num.is_integer():
        return str(int(num))
    return re.sub(r"\.?0+$", "", "{:.5f}".format(num))


def parse_values(text):
    '''
    "1, 2,3.5" -> [1.0, 2.0, 3.5]
    items that are not numbers become nan and are left to the caller
    '''
    values = []
    for item in text.split(","):
        item = item.strip()
        if item == "":
            # an empty item counts as 0, like an empty numeric field
            values.append(0.)
            continue
        try:
            values.append(float(item))
        except ValueError:
            values.append(float("nan"))
    return values
