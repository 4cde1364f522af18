"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services read settings and log; core/ does neither
"""
