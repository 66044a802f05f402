import numbers

import numpy as np
import pandas as pd


def is_null(value):
    isna = pd.isna(value)
    if isinstance(isna, bool):
        return isna
    return False


def format_value(value, float_precision=7):
    """Display string of a single cell value.

    >>> from tablerepr._utils import format_value
    >>> format_value(1 / 3)
    '0.3333333'
    >>> format_value(10_045)
    '10045'
    >>> format_value(None)
    ''
    """
    if isinstance(value, str):
        return value
    if is_null(value):
        return ""
    if isinstance(value, (bool, np.bool_)):
        return str(bool(value))
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return f"{value:.{float_precision}g}"
    return str(value)
