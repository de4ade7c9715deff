"""Adapters (infrastructure) for MXUNIT.

Provide concrete implementations of the interfaces, e.g. the Rich console
reporter and the in-memory reporter.

Dependency rule: may import `mxunit.domain` and `mxunit.interfaces`; neither
of those may import this package.
"""
