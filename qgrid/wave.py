"""Discretised wave functions sampled on a one-dimensional grid."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from numbers import Number
from typing import Union, overload

WaveValue = complex
Scalar = Union[int, float, complex]


def _format_value(z: complex) -> str:
    return f"({z.real:g},{z.imag:g})"


class WaveVector(MutableSequence):
    """A mutable sequence of complex amplitudes with vector arithmetic.

    Adding or subtracting vectors of different lengths extends the shorter
    one with the remaining entries of the longer one.  Multiplying two
    vectors gives their Hermitian inner product.
    """

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[Scalar] = ()) -> None:
        self._data: list[complex] = [complex(v) for v in values]

    # sequence protocol

    def __len__(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, index: int) -> complex: ...

    @overload
    def __getitem__(self, index: slice) -> "WaveVector": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return WaveVector(self._data[index])
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._data[index] = [complex(v) for v in value]
        else:
            self._data[index] = complex(value)

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            removed = set(range(*index.indices(len(self._data))))
            self._data = [
                v for pos, v in enumerate(self._data) if pos not in removed
            ]
            return
        size = len(self._data)
        if not -size <= index < size:
            raise IndexError("wave vector index out of range")
        self._data.pop(index)

    def insert(self, index: int, value: Scalar) -> None:
        self._data.insert(index, complex(value))

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WaveVector):
            return self._data == other._data
        if isinstance(other, (list, tuple)):
            return self._data == [complex(v) for v in other]
        return NotImplemented

    def __repr__(self) -> str:
        return f"WaveVector({self._data!r})"

    def __str__(self) -> str:
        return "(" + ", ".join(_format_value(z) for z in self._data) + ")"

    # element access

    def at(self, i: int) -> complex:
        """Return the amplitude at ``i``, or zero when ``i`` is off the grid."""
        if 0 <= i < len(self._data):
            return self._data[i]
        return 0j

    def square_norm(self) -> float:
        """Sum of the squared moduli of all amplitudes."""
        return sum(z.real * z.real + z.imag * z.imag for z in self._data)

    def push(self, values: Iterable[Scalar]) -> None:
        """Append every value of ``values`` to the end of the vector."""
        self._data.extend(complex(v) for v in values)

    def conj(self) -> "WaveVector":
        """Return the element-wise complex conjugate."""
        return WaveVector(z.conjugate() for z in self._data)

    def dot(self, other: "WaveVector") -> complex:
        """Hermitian inner product over the common length of both vectors."""
        return sum((a.conjugate() * b for a, b in zip(self._data, other)), 0j)

    # arithmetic

    def __iadd__(self, other: "WaveVector") -> "WaveVector":
        if not isinstance(other, WaveVector):
            return NotImplemented
        common = min(len(self._data), len(other._data))
        self._data[:common] = [a + b for a, b in zip(self._data, other._data)]
        self._data.extend(other._data[common:])
        return self

    def __isub__(self, other: "WaveVector") -> "WaveVector":
        if not isinstance(other, WaveVector):
            return NotImplemented
        common = min(len(self._data), len(other._data))
        self._data[:common] = [a - b for a, b in zip(self._data, other._data)]
        self._data.extend(-b for b in other._data[common:])
        return self

    def __add__(self, other: "WaveVector") -> "WaveVector":
        if not isinstance(other, WaveVector):
            return NotImplemented
        result = WaveVector(self._data)
        result += other
        return result

    def __sub__(self, other: "WaveVector") -> "WaveVector":
        if not isinstance(other, WaveVector):
            return NotImplemented
        result = WaveVector(self._data)
        result -= other
        return result

    def __imul__(self, other: Scalar) -> "WaveVector":
        if not isinstance(other, Number):
            return NotImplemented
        z = complex(other)
        self._data = [v * z for v in self._data]
        return self

    def __itruediv__(self, other: Scalar) -> "WaveVector":
        if not isinstance(other, Number):
            return NotImplemented
        z = complex(other)
        self._data = [v / z for v in self._data]
        return self

    def __mul__(self, other):
        if isinstance(other, WaveVector):
            return self.dot(other)
        if not isinstance(other, Number):
            return NotImplemented
        result = WaveVector(self._data)
        result *= other
        return result

    def __rmul__(self, other: Scalar) -> "WaveVector":
        if not isinstance(other, Number):
            return NotImplemented
        result = WaveVector(self._data)
        result *= other
        return result

    def __truediv__(self, other: Scalar) -> "WaveVector":
        if not isinstance(other, Number):
            return NotImplemented
        result = WaveVector(self._data)
        result /= other
        return result

    def __rtruediv__(self, other: Scalar) -> "WaveVector":
        """``z / w`` divides every amplitude of ``w`` by ``z``."""
        if not isinstance(other, Number):
            return NotImplemented
        result = WaveVector(self._data)
        result /= other
        return result