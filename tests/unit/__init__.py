"""Unit tests.

Each module mirrors one module of ``src/mxunit``. Keep them fast and
deterministic; temporary files only through ``tmp_path``.
"""
