"""Numeric buffer module for vectorlab."""

from vectorlab.buffer.numeric_buffer import NumericBuffer

__all__ = ["NumericBuffer"]
