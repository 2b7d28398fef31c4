"""
Plain-text rendering of matrices for solution summaries.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def format_matrix(label: str, x: NDArray[np.floating[Any]], fmt: str = "10g") -> list[str]:
    """Render a matrix as a label line followed by one aligned line per row."""
    lines = [f"{label} ="]
    for row in x:
        lines.append("".join(f"  {value:{fmt}}" for value in row))
    return lines
