"""Service layer for MXUNIT.

Orchestrates suite execution: runs a suite body, routes `test()` calls into
new tests and `expect()` calls into the open test, and hands the finished
result model to a reporter.

Dependency rule: may import `mxunit.domain` and `mxunit.interfaces`, but not
`mxunit.adapters` or `mxunit.entrypoints`.
"""
