"""Services Layer: async orchestration around the pure listing core.

Invariants:
    - Services own the fetch lifecycle; core never awaits
"""
