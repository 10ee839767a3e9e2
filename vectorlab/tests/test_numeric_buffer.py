"""Tests for numeric_buffer module."""

import math

import pytest

from vectorlab.buffer import NumericBuffer
from vectorlab.utils.errors import (
    BufferFormatError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    SizeMismatchError,
    UninitializedBufferError,
)


class TestConstruction:
    """Tests for buffer allocation and fills."""

    def test_new_buffer_is_uninitialized(self):
        buffer = NumericBuffer(5)
        assert len(buffer) == 5
        assert buffer.initialized is False

    @pytest.mark.parametrize("length", [0, -1])
    def test_rejects_non_positive_length(self, length):
        with pytest.raises(InvalidArgumentError):
            NumericBuffer(length)

    def test_rejects_non_integer_length(self):
        with pytest.raises(InvalidArgumentError):
            NumericBuffer(3.5)

    def test_fill_constant(self):
        buffer = NumericBuffer(4)
        buffer.fill_constant(2.5)
        assert buffer.initialized is True
        assert buffer.to_list() == [2.5, 2.5, 2.5, 2.5]

    def test_fill_random_within_bounds(self):
        buffer = NumericBuffer(1000)
        buffer.fill_random(-10.0, 10.0, seed=7)
        assert buffer.initialized is True
        assert buffer.min() >= -10.0
        assert buffer.max() < 10.0

    def test_fill_random_is_reproducible_with_seed(self):
        a = NumericBuffer(100)
        b = NumericBuffer(100)
        a.fill_random(0.0, 1.0, seed=99)
        b.fill_random(0.0, 1.0, seed=99)
        assert a.to_list() == b.to_list()

    def test_fill_random_rejects_bad_bounds(self):
        buffer = NumericBuffer(3)
        with pytest.raises(InvalidArgumentError):
            buffer.fill_random(1.0, 1.0)
        with pytest.raises(InvalidArgumentError):
            buffer.fill_random(2.0, 1.0)
        with pytest.raises(InvalidArgumentError):
            buffer.fill_random(0.0, math.inf)
        assert buffer.initialized is False

    @pytest.mark.parametrize("seed", [-1, "abc", 1.5])
    def test_fill_random_rejects_bad_seed(self, seed):
        buffer = NumericBuffer(3)
        with pytest.raises(InvalidArgumentError, match="invalid random seed"):
            buffer.fill_random(0.0, 1.0, seed=seed)
        assert buffer.initialized is False

    def test_from_values_copies(self):
        source = [1.0, 2.0, 3.0]
        buffer = NumericBuffer.from_values(source)
        source[0] = 100.0
        assert buffer[0] == 1.0


class TestElementAccess:
    """Tests for bounds-checked reads and writes."""

    def test_get_and_set(self, seven_buffer):
        seven_buffer[2] = 30.0
        assert seven_buffer.get(2) == 30.0
        seven_buffer.set(0, -1.0)
        assert seven_buffer[0] == -1.0

    @pytest.mark.parametrize("index", [7, 100, -1])
    def test_out_of_range(self, seven_buffer, index):
        with pytest.raises(IndexOutOfRangeError):
            seven_buffer[index]
        with pytest.raises(IndexOutOfRangeError):
            seven_buffer[index] = 0.0

    def test_out_of_range_is_index_error(self, seven_buffer):
        with pytest.raises(IndexError):
            seven_buffer.get(7)

    def test_non_integer_index(self, seven_buffer):
        with pytest.raises(IndexOutOfRangeError):
            seven_buffer.get(1.0)

    def test_write_does_not_initialize(self):
        """Per-index writes never flip the initialized flag."""
        buffer = NumericBuffer(2)
        buffer[0] = 1.0
        buffer[1] = 2.0
        assert buffer.initialized is False
        with pytest.raises(UninitializedBufferError):
            buffer.sum()

    def test_read_uninitialized(self):
        with pytest.raises(UninitializedBufferError):
            NumericBuffer(3).get(0)

    def test_readonly_view(self, seven_buffer):
        view = seven_buffer.readonly_view()
        with pytest.raises(ValueError):
            view[0] = 5.0
        assert seven_buffer[0] == 1.0

    def test_to_list_is_a_copy(self, seven_buffer):
        values = seven_buffer.to_list()
        values[0] = 99.0
        assert seven_buffer[0] == 1.0


class TestStatistics:
    """Tests for read-type statistics."""

    def test_min_max(self, seven_buffer):
        assert seven_buffer.min() == 1.0
        assert seven_buffer.max() == 7.0

    def test_argmin_argmax_first_occurrence(self):
        buffer = NumericBuffer.from_values([3.0, -1.0, 5.0, -1.0, 5.0])
        assert buffer.argmin() == 1
        assert buffer.argmax() == 2

    def test_sum_and_mean(self, seven_buffer):
        assert seven_buffer.sum() == pytest.approx(28.0)
        assert seven_buffer.mean() == pytest.approx(4.0)

    def test_norms(self):
        buffer = NumericBuffer.from_values([3.0, -4.0])
        assert buffer.euclidean_norm() == pytest.approx(5.0)
        assert buffer.manhattan_norm() == pytest.approx(7.0)

    def test_dot(self):
        a = NumericBuffer.from_values([1.0, 2.0, 3.0])
        b = NumericBuffer.from_values([4.0, -5.0, 6.0])
        assert a.dot(b) == pytest.approx(12.0)

    def test_dot_size_mismatch(self, seven_buffer):
        other = NumericBuffer.from_values([1.0, 2.0])
        with pytest.raises(SizeMismatchError):
            seven_buffer.dot(other)

    def test_dot_uninitialized(self, seven_buffer):
        with pytest.raises(UninitializedBufferError):
            seven_buffer.dot(NumericBuffer(7))

    @pytest.mark.parametrize(
        "operation",
        ["min", "max", "argmin", "argmax", "sum", "mean", "euclidean_norm", "manhattan_norm", "to_list", "summary"],
    )
    def test_reads_require_initialization(self, operation):
        buffer = NumericBuffer(3)
        with pytest.raises(UninitializedBufferError):
            getattr(buffer, operation)()

    def test_summary(self, seven_buffer):
        summary = seven_buffer.summary()
        assert summary["length"] == 7
        assert summary["argmax"] == 6
        assert summary["mean"] == pytest.approx(4.0)


class TestTextIO:
    """Tests for text vector import/export."""

    def test_export_format(self, tmp_path):
        buffer = NumericBuffer.from_values([1.0, 2.5])
        path = tmp_path / "out" / "vec.txt"
        buffer.export_text(path)
        assert path.read_text(encoding="utf-8") == "2\n1.0 2.5 "

    def test_export_then_import_preserves_values(self, random_buffer, tmp_path):
        path = tmp_path / "vec.txt"
        random_buffer.export_text(path)
        loaded = NumericBuffer.from_text(path)
        assert loaded.to_list() == random_buffer.to_list()

    def test_export_uninitialized(self, tmp_path):
        with pytest.raises(UninitializedBufferError):
            NumericBuffer(2).export_text(tmp_path / "vec.txt")

    def test_import_into_buffer(self, vector_file):
        buffer = NumericBuffer(5)
        buffer.import_text(vector_file)
        assert buffer.initialized is True
        assert buffer.to_list() == [1.5, -2.0, 3.25, 0.0, 4.0]

    def test_import_size_mismatch(self, vector_file):
        buffer = NumericBuffer(4)
        with pytest.raises(SizeMismatchError):
            buffer.import_text(vector_file)
        assert buffer.initialized is False

    @pytest.mark.parametrize(
        "content",
        ["", "abc\n1 2", "3\n1.0 2.0", "2\n1.0 x", "2\n1.0 2.0 3.0", "0\n"],
    )
    def test_import_malformed(self, tmp_path, content):
        path = tmp_path / "bad.txt"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(BufferFormatError):
            NumericBuffer.from_text(path)

    def test_failed_import_leaves_buffer_untouched(self, seven_buffer, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("7\n1 2 3 4 5 6 oops", encoding="utf-8")
        with pytest.raises(BufferFormatError):
            seven_buffer.import_text(path)
        assert seven_buffer.to_list() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            NumericBuffer.from_text(tmp_path / "missing.txt")
