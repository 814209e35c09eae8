"""
Atomic components.

Each component exposes run_* entry points over frozen input/output models,
with I/O-free logic in _impl and dependencies expressed as Protocol ports.
"""
