"""Grid helpers: tic-tac-toe board, grade tables, tiny grayscale images, cubes."""

from __future__ import annotations

from collections.abc import Sequence

Grid = list[list[int]]


def new_board() -> list[list[str]]:
    """Return an empty 3x3 tic-tac-toe board with every cell a space."""
    return [[" "] * 3 for _ in range(3)]


def render_board(board: Sequence[Sequence[str]]) -> str:
    """Draw the board with '|' between cells and '---+---+---' between rows."""
    separator = "+".join("---" for _ in range(len(board[0]))) if board else ""
    lines: list[str] = []
    for i, row in enumerate(board):
        if i:
            lines.append(separator)
        lines.append("|".join(f" {cell} " for cell in row))
    return "\n".join(lines) + "\n"


def student_averages(grades: Sequence[Sequence[float]]) -> list[float]:
    """Return the mean of each row (one row per student)."""
    if any(not row for row in grades):
        raise ValueError("every student needs at least one grade")
    return [sum(row) / len(row) for row in grades]


def course_averages(grades: Sequence[Sequence[float]]) -> list[float]:
    """Return the mean of each column (one column per course)."""
    if not grades:
        raise ValueError("no grades given")
    width = len(grades[0])
    if any(len(row) != width for row in grades):
        raise ValueError("all rows must have the same number of courses")
    return [sum(column) / len(grades) for column in zip(*grades)]


def gradient_image(size: int = 3, step: int = 50) -> Grid:
    """Return a size x size image whose pixel (i, j) is (i + j) * step."""
    if size < 0:
        raise ValueError("image size must not be negative")
    return [[(i + j) * step for j in range(size)] for i in range(size)]


def brighten(image: Sequence[Sequence[int]], amount: int = 50, limit: int = 255) -> Grid:
    """Return a copy with every pixel raised by ``amount``, capped at ``limit``."""
    return [[min(pixel + amount, limit) for pixel in row] for row in image]


def render_image(image: Sequence[Sequence[int]]) -> str:
    """Render each pixel right-aligned in three columns, one row per line."""
    return "".join("".join(f"{pixel:3d} " for pixel in row) + "\n" for row in image)


def average_score(scores: Sequence[Sequence[int]]) -> float:
    """Return the mean of every score in the table."""
    values = [score for row in scores for score in row]
    if not values:
        raise ValueError("no scores given")
    return sum(values) / len(values)


def get_average(values: Sequence[int], size: int) -> float:
    """Return the mean of the first ``size`` values."""
    if size <= 0 or size > len(values):
        raise ValueError(f"size must be between 1 and {len(values)}, got {size}")
    return sum(values[:size]) / size


def doubled(values: Sequence[int]) -> list[int]:
    """Return a new list with every value doubled; the input is left alone."""
    return [value * 2 for value in values]


def render_cube(cube: Sequence[Sequence[Sequence[int]]]) -> str:
    """Render each plane of a 3-D array as a titled block of rows."""
    lines: list[str] = []
    for index, plane in enumerate(cube):
        lines.append(f"平面 {index}:")
        lines.extend("".join(f"{value:3d} " for value in row) for row in plane)
        lines.append("")
    return "\n".join(lines) + "\n" if lines else ""