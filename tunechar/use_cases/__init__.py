"""Use-cases: orchestration entry points behind :mod:`tunechar.api`."""
