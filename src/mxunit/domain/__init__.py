"""Domain layer for MXUNIT.

Contains the assertion engine: structural comparisons, matchers,
expectations, and the open/closed test model. Pure Python, no I/O.

Dependency rule: do not import from `mxunit.adapters`, `mxunit.service_layer`
or `mxunit.entrypoints`.
"""
