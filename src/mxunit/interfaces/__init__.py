"""Interfaces (application boundary) for MXUNIT.

Defines framework-free contracts shared by the service layer and adapters,
chiefly the `Reporter` collaborator that renders finished suites.

Dependency rule: may import `mxunit.domain` value types only. It may be
imported by `mxunit.service_layer`, `mxunit.adapters`, and `mxunit.bootstrap`.
"""
