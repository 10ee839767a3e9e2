"""Pytest configuration and fixtures for vectorlab."""

import pytest

from vectorlab.buffer import NumericBuffer


@pytest.fixture
def seven_buffer():
    """Buffer holding 1..7."""
    return NumericBuffer.from_values([1, 2, 3, 4, 5, 6, 7])


@pytest.fixture
def random_buffer():
    """Seeded random buffer with mixed-sign values."""
    buffer = NumericBuffer(10_007)
    buffer.fill_random(-10.0, 10.0, seed=1234)
    return buffer


@pytest.fixture
def vector_file(tmp_path):
    """Text vector file with five values."""
    path = tmp_path / "vector.txt"
    path.write_text("5\n1.5 -2.0 3.25 0.0 4.0 ", encoding="utf-8")
    return path
