"""Shared helpers: errors and config/report file I/O."""

from vectorlab.utils.config_io import (
    config_format,
    ensure_parent_dir,
    read_config_mapping,
    write_config_mapping,
    write_json_report,
)
from vectorlab.utils.errors import (
    BufferFormatError,
    ConfigError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidWorkerCountError,
    SizeMismatchError,
    UninitializedBufferError,
    VectorLabError,
)

__all__ = [
    "VectorLabError",
    "UninitializedBufferError",
    "InvalidArgumentError",
    "InvalidWorkerCountError",
    "IndexOutOfRangeError",
    "SizeMismatchError",
    "BufferFormatError",
    "ConfigError",
    "config_format",
    "ensure_parent_dir",
    "read_config_mapping",
    "write_config_mapping",
    "write_json_report",
]
