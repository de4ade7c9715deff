"""Command-line interface for MXUNIT."""
