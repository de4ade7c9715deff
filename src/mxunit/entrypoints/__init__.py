"""Entrypoints (inbound adapters) for MXUNIT.

Expose the library to user code (`describe`/`test`/`expect`) and to the shell
(the demo CLI).

Dependency rule: may import `mxunit.service_layer` and `mxunit.bootstrap`;
avoid importing `mxunit.adapters` directly.
"""
