from __future__ import annotations

from dataclasses import dataclass
from typing import Union

CURRENCY = "Rs"


@dataclass(frozen=True)
class Fine:
    """An immutable fine amount; adding two fines gives a new one."""

    amount: float = 0.0

    def __add__(self, other: object) -> "Fine":
        if isinstance(other, Fine):
            return Fine(self.amount + other.amount)
        if isinstance(other, (int, float)):
            return Fine(self.amount + other)
        return NotImplemented

    __radd__ = __add__

    def __str__(self) -> str:
        return f"{CURRENCY} {self.amount:.2f}"

    def display(self) -> str:
        return f"Total Fine Amount: {self}"

    def to_dict(self) -> dict:
        return {"amount": round(self.amount, 2), "currency": CURRENCY}


def combine(a: Union[Fine, float], b: Union[Fine, float]) -> Fine:
    """Sum two fines (or plain amounts) into a new Fine."""
    first = a if isinstance(a, Fine) else Fine(float(a))
    return first + b
