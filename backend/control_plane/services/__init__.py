"""Services Layer: async orchestration around the pure core.

Invariants:
    - Services receive their store through constructor injection
    - Services return core result variants; HTTP mapping happens in api/
"""
