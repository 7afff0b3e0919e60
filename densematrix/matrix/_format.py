"""
Text rendering for Matrix.

One line per row, brackets drawn with slashes on the first and last rows:

     /+1.00e+00, +2.00e+00\\
    | +3.00e+00, +4.00e+00 |
     \\+5.00e+00, +6.00e+00/
"""

import numpy as np
from numpy.typing import NDArray


def _format_value(value: float) -> str:
    return f"{value:+.2e}"


def render(data: NDArray[np.float64]) -> str:
    """Render a 2D array; any zero dimension renders as ''."""
    rows, cols = data.shape
    if rows == 0 or cols == 0:
        return ""

    lines = []
    for i, row in enumerate(data):
        body = ", ".join(_format_value(v) for v in row)
        if i == 0:
            lines.append(f" /{body}\\\n")
        elif i == rows - 1:
            lines.append(f" \\{body}/\n")
        else:
            lines.append(f"| {body} |\n")
    return "".join(lines)
