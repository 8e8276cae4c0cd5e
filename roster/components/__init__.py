"""
Roster components.

Each component keeps pure logic in `_impl.py` and exposes `run_*`
entry points from `component.py`.
"""
