"""CLI helpers for MXUNIT.

Utilities used by the command-line interface: logger-level option parsing and
message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .messages import success, warn

__all__ = ["success", "warn"]
