"""Ledger state layer.

This package owns the per-run toll ledger: open crossings waiting for their
exit, the accumulated totals, and the read-only queries over them.
"""
