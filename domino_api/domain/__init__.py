"""Domain layer (pure logic).

- Keep domino rules, legality and move selection here.
- Avoid I/O: no HTTP/FastAPI, no logging, no environment lookups.
- Prefer deterministic functions: the same hand and table always give the same move.
"""
