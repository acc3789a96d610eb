"""Expected points two discarded cards add to the crib.

Both tables are indexed by ``[rank_a - 1][rank_b - 1]`` (Ace first, King
last) and are symmetric. MY_CRIB is used when the discarding player owns the
crib, YOUR_CRIB when the opponent does. The values are empirical averages
over the possible crib completions and starters, kept as data.
"""

from __future__ import annotations

from typing import Tuple

from .cards import Card

#            A     2     3     4     5     6     7     8     9     T     J     Q     K
MY_CRIB: Tuple[Tuple[float, ...], ...] = (
    (5.26, 4.18, 4.47, 5.45, 5.48, 3.80, 3.73, 3.70, 3.33, 3.37, 3.65, 3.39, 3.42),  # A
    (4.18, 5.44, 6.97, 4.51, 5.44, 3.87, 3.81, 3.58, 3.63, 3.51, 3.79, 3.52, 3.55),  # 2
    (4.47, 6.97, 5.90, 4.88, 6.01, 3.72, 3.67, 3.84, 3.66, 3.61, 3.88, 3.62, 3.66),  # 3
    (5.45, 4.51, 4.88, 5.65, 6.54, 3.85, 3.67, 3.82, 3.67, 3.69, 3.97, 3.70, 3.72),  # 4
    (5.48, 5.44, 6.01, 6.54, 8.95, 6.65, 6.04, 5.49, 5.47, 6.68, 7.04, 6.71, 6.70),  # 5
    (3.80, 3.87, 3.72, 3.85, 6.65, 5.74, 4.94, 4.70, 5.11, 3.15, 3.40, 3.08, 3.13),  # 6
    (3.73, 3.81, 3.67, 3.67, 6.04, 4.94, 5.98, 6.58, 4.06, 3.16, 3.41, 3.06, 3.10),  # 7
    (3.70, 3.58, 3.84, 3.82, 5.49, 4.70, 6.58, 5.42, 4.74, 3.62, 3.30, 2.94, 2.98),  # 8
    (3.33, 3.63, 3.66, 3.67, 5.47, 5.11, 4.06, 4.74, 5.09, 4.27, 3.61, 2.99, 2.98),  # 9
    (3.37, 3.51, 3.61, 3.69, 6.68, 3.15, 3.16, 3.62, 4.27, 4.73, 4.36, 3.50, 2.93),  # T
    (3.65, 3.79, 3.88, 3.97, 7.04, 3.40, 3.41, 3.30, 3.61, 4.36, 5.63, 4.59, 3.93),  # J
    (3.39, 3.52, 3.62, 3.70, 6.71, 3.08, 3.06, 2.94, 2.99, 3.50, 4.59, 4.96, 3.82),  # Q
    (3.42, 3.55, 3.66, 3.72, 6.70, 3.13, 3.10, 2.98, 2.98, 2.93, 3.93, 3.82, 4.54),  # K
)

#              A     2     3     4     5     6     7     8     9     T     J     Q     K
YOUR_CRIB: Tuple[Tuple[float, ...], ...] = (
    (6.02, 5.07, 5.07, 5.72, 6.01, 4.91, 4.89, 4.85, 4.55, 4.48, 4.68, 4.33, 4.30),  # A
    (5.07, 6.38, 7.33, 5.33, 6.11, 4.97, 4.97, 4.94, 4.70, 4.59, 4.81, 4.56, 4.45),  # 2
    (5.07, 7.33, 6.68, 5.96, 6.78, 4.87, 5.01, 5.05, 4.87, 4.63, 4.86, 4.59, 4.48),  # 3
    (5.72, 5.33, 5.96, 6.53, 7.26, 5.34, 4.88, 4.94, 4.68, 4.53, 4.85, 4.46, 4.36),  # 4
    (6.01, 6.11, 6.78, 7.26, 9.37, 7.47, 7.00, 6.30, 6.15, 7.41, 7.76, 7.34, 7.25),  # 5
    (4.91, 4.97, 4.87, 5.34, 7.47, 7.08, 6.42, 5.86, 6.26, 4.31, 4.57, 4.22, 4.14),  # 6
    (4.89, 4.97, 5.01, 4.88, 7.00, 6.42, 7.14, 7.63, 5.26, 4.29, 4.53, 4.18, 4.10),  # 7
    (4.85, 4.94, 5.05, 4.94, 6.30, 5.86, 7.63, 6.82, 5.83, 4.89, 4.45, 4.09, 4.04),  # 8
    (4.55, 4.70, 4.87, 4.68, 6.15, 6.26, 5.26, 5.83, 6.39, 5.43, 4.82, 4.20, 4.06),  # 9
    (4.48, 4.59, 4.63, 4.53, 7.41, 4.31, 4.29, 4.89, 5.43, 6.08, 5.63, 4.70, 4.02),  # T
    (4.68, 4.81, 4.86, 4.85, 7.76, 4.57, 4.53, 4.45, 4.82, 5.63, 6.74, 5.77, 5.07),  # J
    (4.33, 4.56, 4.59, 4.46, 7.34, 4.22, 4.18, 4.09, 4.20, 4.70, 5.77, 6.18, 4.98),  # Q
    (4.30, 4.45, 4.48, 4.36, 7.25, 4.14, 4.10, 4.04, 4.06, 4.02, 5.07, 4.98, 5.65),  # K
)


def my_crib_value(first: Card, second: Card) -> float:
    return MY_CRIB[first.rank - 1][second.rank - 1]


def your_crib_value(first: Card, second: Card) -> float:
    return YOUR_CRIB[first.rank - 1][second.rank - 1]
