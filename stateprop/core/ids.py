"""
Stable identifier and seed derivation.

Turns opaque seed strings into integer seeds without platform-dependent
hashing (str hash() is salted per process).
"""

import hashlib


def stable_id(*parts: str) -> str:
    """
    Generate stable ID derived from inputs (no randomness).

    Args:
        *parts: String parts to combine into ID

    Returns:
        SHA-256 hash as hex string

    Example:
        stable_id("seed", "1") -> "5b1e..."
    """
    raw = "|".join(parts).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()


def seed_to_int(seed: str) -> int:
    """Map a seed string to a 64-bit integer seed."""
    return int(stable_id("stateprop", seed)[:16], 16)
