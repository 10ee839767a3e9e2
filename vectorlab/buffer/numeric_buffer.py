"""Fixed-length numeric vector with statistics and plain-text import/export.

The buffer owns a contiguous float64 numpy array whose length is fixed at
construction. Values enter only through a bulk fill (constant, seeded
uniform random, or a text file) or through bounds-checked writes. Every
read-type operation requires the buffer to have been filled first.

Text format
-----------
```
7
1.0 2.0 3.0 4.0 5.0 6.0 7.0
```
The first line holds the element count; the values follow separated by
whitespace.
"""

from __future__ import annotations

import logging
import math
import operator
from pathlib import Path
from typing import Optional, Union

import numpy as np

from vectorlab.utils.config_io import ensure_parent_dir
from vectorlab.utils.errors import (
    BufferFormatError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    SizeMismatchError,
    UninitializedBufferError,
)

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]


class NumericBuffer:
    """Owned, fixed-length sequence of float64 values."""

    def __init__(self, length: int):
        """Allocate an uninitialized buffer.

        Args:
            length: Number of elements (>= 1)

        Raises:
            InvalidArgumentError: If length is not a positive integer
        """
        if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
            raise InvalidArgumentError(f"length must be an integer, got {type(length).__name__}")
        if length < 1:
            raise InvalidArgumentError(f"length must be >= 1, got {length}")
        self._n = int(length)
        self._data = np.zeros(self._n, dtype=np.float64)
        self._initialized = False

    @classmethod
    def from_values(cls, values) -> "NumericBuffer":
        """Create an initialized buffer holding a copy of ``values``."""
        array = np.asarray(values, dtype=np.float64).ravel()
        buffer = cls(len(array))
        buffer._data[:] = array
        buffer._initialized = True
        return buffer

    @classmethod
    def from_text(cls, path: PathLike) -> "NumericBuffer":
        """Create a buffer sized by the count in a text vector file and load it."""
        count, values = _read_text_vector(path)
        buffer = cls(count)
        buffer._data[:] = values
        buffer._initialized = True
        LOGGER.debug("Loaded %d values from %s", count, path)
        return buffer

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        state = "initialized" if self._initialized else "uninitialized"
        return f"NumericBuffer(length={self._n}, {state})"

    @property
    def initialized(self) -> bool:
        """True once the buffer has been filled."""
        return self._initialized

    # Initialization

    def fill_constant(self, value: float) -> None:
        """Set every element to ``value`` and mark the buffer initialized."""
        self._data.fill(float(value))
        self._initialized = True

    def fill_random(self, low: float, high: float, seed: Optional[int] = None) -> None:
        """Fill with uniform draws from ``[low, high)``.

        Args:
            low: Lower bound (inclusive)
            high: Upper bound (exclusive)
            seed: Seed for the generator; pass one for reproducible contents

        Raises:
            InvalidArgumentError: If the bounds are not finite or low >= high,
                or the seed is not a non-negative integer
        """
        low, high = float(low), float(high)
        if not (math.isfinite(low) and math.isfinite(high)):
            raise InvalidArgumentError("random fill bounds must be finite")
        if low >= high:
            raise InvalidArgumentError(f"random fill requires low < high, got low={low}, high={high}")
        try:
            rng = np.random.default_rng(seed)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"invalid random seed {seed!r}: {e}") from None
        self._data[:] = rng.uniform(low, high, self._n)
        self._initialized = True

    # Element access

    def _check_index(self, index) -> int:
        try:
            i = operator.index(index)
        except TypeError:
            raise IndexOutOfRangeError(f"index must be an integer, got {type(index).__name__}") from None
        if not 0 <= i < self._n:
            raise IndexOutOfRangeError(f"index {i} out of range for buffer of length {self._n}")
        return i

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise UninitializedBufferError("Vector is not initialized")

    def get(self, index: int) -> float:
        """Return the element at ``index`` (0 <= index < n)."""
        i = self._check_index(index)
        self._require_initialized()
        return float(self._data[i])

    def set(self, index: int, value: float) -> None:
        """Overwrite the element at ``index``.

        Writing a single element does not mark the buffer initialized.
        """
        i = self._check_index(index)
        self._data[i] = float(value)

    __getitem__ = get
    __setitem__ = set

    def to_list(self) -> list[float]:
        """Return a copy of the values as a list."""
        self._require_initialized()
        return self._data.tolist()

    def readonly_view(self) -> np.ndarray:
        """Return a non-writeable view of the values for concurrent readers."""
        self._require_initialized()
        view = self._data.view()
        view.flags.writeable = False
        return view

    # Statistics

    def min(self) -> float:
        self._require_initialized()
        return float(self._data.min())

    def max(self) -> float:
        self._require_initialized()
        return float(self._data.max())

    def argmin(self) -> int:
        """Index of the first smallest element."""
        self._require_initialized()
        return int(np.argmin(self._data))

    def argmax(self) -> int:
        """Index of the first largest element."""
        self._require_initialized()
        return int(np.argmax(self._data))

    def sum(self) -> float:
        """Sequential sum of all elements."""
        self._require_initialized()
        return float(self._data.sum())

    def mean(self) -> float:
        return self.sum() / self._n

    def euclidean_norm(self) -> float:
        self._require_initialized()
        return float(np.sqrt(np.dot(self._data, self._data)))

    def manhattan_norm(self) -> float:
        self._require_initialized()
        return float(np.abs(self._data).sum())

    def dot(self, other: "NumericBuffer") -> float:
        """Dot product with another buffer of the same length.

        Raises:
            UninitializedBufferError: If either buffer is uninitialized
            SizeMismatchError: If the lengths differ
        """
        if not isinstance(other, NumericBuffer):
            raise InvalidArgumentError(f"dot expects a NumericBuffer, got {type(other).__name__}")
        if not (self._initialized and other._initialized):
            raise UninitializedBufferError("Vectors are not initialized")
        if self._n != other._n:
            raise SizeMismatchError(f"Size mismatch for dot product: {self._n} != {other._n}")
        return float(np.dot(self._data, other._data))

    def summary(self) -> dict[str, float]:
        """Return all statistics as a dictionary."""
        return {
            "length": self._n,
            "min": self.min(),
            "max": self.max(),
            "argmin": self.argmin(),
            "argmax": self.argmax(),
            "sum": self.sum(),
            "mean": self.mean(),
            "euclidean_norm": self.euclidean_norm(),
            "manhattan_norm": self.manhattan_norm(),
        }

    # Text import/export

    def export_text(self, path: PathLike) -> None:
        """Write the element count and values to a text file."""
        self._require_initialized()
        ensure_parent_dir(path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{self._n}\n")
            f.write(" ".join(repr(float(v)) for v in self._data))
            f.write(" ")
        LOGGER.debug("Exported %d values to %s", self._n, path)

    def import_text(self, path: PathLike) -> None:
        """Load values from a text file whose count matches this buffer.

        The buffer is left untouched if the file cannot be parsed.

        Raises:
            SizeMismatchError: If the declared count differs from the length
            BufferFormatError: If the file is malformed
        """
        count, values = _read_text_vector(path, expected=self._n)
        self._data[:] = values
        self._initialized = True
        LOGGER.debug("Imported %d values from %s", count, path)


def _read_text_vector(path: PathLike, expected: Optional[int] = None) -> tuple[int, np.ndarray]:
    with open(path, encoding="utf-8") as f:
        tokens = f.read().split()
    if not tokens:
        raise BufferFormatError(f"{path}: empty vector file")
    try:
        count = int(tokens[0])
    except ValueError:
        raise BufferFormatError(f"{path}: invalid element count {tokens[0]!r}") from None
    if count < 1:
        raise BufferFormatError(f"{path}: element count must be >= 1, got {count}")
    if expected is not None and count != expected:
        raise SizeMismatchError(f"Size mismatch during import: file has {count}, buffer has {expected}")
    body = tokens[1:]
    if len(body) != count:
        raise BufferFormatError(f"{path}: expected {count} values, found {len(body)}")
    try:
        values = np.array([float(t) for t in body], dtype=np.float64)
    except ValueError as e:
        raise BufferFormatError(f"{path}: {e}") from None
    return count, values
