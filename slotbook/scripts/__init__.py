"""
Command-line entry points, run with ``python -m slotbook.scripts.<name>``.
"""
