"""Bootstrap (composition root) for MXUNIT.

Reads configuration and wires concrete reporter adapters for the entrypoints.

Import rules:
- Entry points import *this* package (not adapters directly).
- This package may import `mxunit.adapters`, `mxunit.interfaces` and
  `mxunit.config`.
- Inner layers must not import `mxunit.bootstrap`.
"""

from .bootstrap import build_reporter

__all__ = ["build_reporter"]
