"""
Custom exceptions for the chartgeom.io module.

Purpose
- Provide IO-layer error types for reading datasets, loading settings and writing
  layouts.
- Keep chartgeom.core as the source of truth for shape/selection errors (see
  chartgeom.core.errors).

Source of truth and boundaries
- chartgeom.core.errors.DimensionMismatch / IndexOutOfRange are raised by the layout
  boundary.
- chartgeom.io raises Io* errors for file and frame concerns:
  - IoConfigError: invalid or unsupported settings.
  - IoReadError: a dataset file or frame cannot be turned into a Dataset.
  - IoWriteError: atomic write path failed (tmp write/rename).
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in chartgeom.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from chartgeom.core errors.
    """


class IoConfigError(IoError):
    """
    Raised when settings are invalid or unsupported.

    Examples:
        - Unknown log level
        - Settings that produce an invalid ChartGeometryConfig
    """


class IoReadError(IoError):
    """
    Raised when a dataset source cannot be read.

    Notes:
        Covers unsupported suffixes, missing columns and malformed JSON.
    """


class IoWriteError(IoError):
    """
    Raised when a layout export fails to complete atomically.

    Notes:
        The write path is tmp file → os.replace(tmp, final). Failures at any step
        surface as IoWriteError (with best-effort cleanup of the tmp file).
    """
