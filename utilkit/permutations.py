"""Step through every fixed-length string over an alphabet, in order."""

from __future__ import annotations

__all__ = ["Permutations"]


class Permutations:
    """An odometer over ``alphabet`` of ``input_len`` positions.

    Adding wraps from the last permutation back to the first; subtracting
    stops at the first permutation.
    """

    def __init__(self, input_len: int, alphabet: str) -> None:
        if input_len < 0:
            raise ValueError("input_len must not be negative")
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        self._input_len = input_len
        self._alphabet = alphabet
        self._digits = [0] * input_len

    @property
    def _total(self) -> int:
        return len(self._alphabet) ** self._input_len

    def _value(self) -> int:
        value = 0
        base = len(self._alphabet)
        for digit in self._digits:
            value = value * base + digit
        return value

    def _set_value(self, value: int) -> None:
        base = len(self._alphabet)
        digits = []
        for _ in range(self._input_len):
            value, digit = divmod(value, base)
            digits.append(digit)
        self._digits = digits[::-1]

    def inc(self) -> None:
        """Advance to the next permutation."""
        self.add(1)

    def add(self, num: int) -> None:
        """Advance by ``num`` permutations, wrapping past the last one."""
        if num < 0:
            raise ValueError("num must not be negative")
        self._set_value((self._value() + num) % self._total)

    def dec(self) -> None:
        """Step back to the previous permutation."""
        self.sub(1)

    def sub(self, num: int) -> None:
        """Step back by ``num`` permutations, stopping at the first one."""
        if num < 0:
            raise ValueError("num must not be negative")
        self._set_value(max(self._value() - num, 0))

    def current(self) -> tuple[int, ...]:
        """Return the current state as alphabet indexes."""
        return tuple(self._digits)

    def alphabet(self) -> str:
        """Return the alphabet."""
        return self._alphabet

    def input_size(self) -> int:
        """Return the length of each permutation."""
        return self._input_len

    def __str__(self) -> str:
        return "".join(self._alphabet[d] for d in self._digits)

    def __repr__(self) -> str:
        return f"Permutations({self._input_len!r}, {self._alphabet!r}) at {str(self)!r}"