"""MXUNIT test suite.

Folder taxonomy
- unit/          : Isolated, fast checks of a single module/class/function.
- e2e/frontend/  : The ``mxunit`` command driven through Click's CliRunner.

Suites under test render into a `MemoryReporter` (see the `memory_reporter`
fixture) so nothing reaches the console unless a test asks for it.
"""
