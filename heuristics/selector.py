from __future__ import annotations
from typing import Callable

from heuristics.classic import h_zero, h_manhattan, h_linear_conflict

HEURISTICS = ("zero", "manhattan", "linear")


def get_heuristic(name: str) -> Callable:
    name = name.lower()
    if name == "zero":
        return h_zero
    if name == "manhattan":
        return h_manhattan
    if name == "linear":
        return h_linear_conflict
    raise ValueError(f"unknown heuristic: {name}")
