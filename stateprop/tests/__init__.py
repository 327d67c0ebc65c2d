"""
Test suite for the stateful property engine.

Focus areas:
- Random source determinism and cloning
- Shrink tree finiteness and ordering
- Replay isolation
- Shrink search reduction and idempotence
- Engine trial loop, hooks and failure reports
"""
