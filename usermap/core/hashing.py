"""Non-cryptographic identity hashing for user ids."""

_UINT32_MASK = 0xFFFFFFFF


def joaat_hash(value: str) -> int:
    """
    Jenkins one-at-a-time hash of the lowercased string, as an unsigned 32-bit int.

    Used for lightweight identity comparison and sharding only; never for security.
    """
    h = 0
    for char in value.lower():
        h = (h + ord(char)) & _UINT32_MASK
        h = (h + (h << 10)) & _UINT32_MASK
        h ^= h >> 6
    h = (h + (h << 3)) & _UINT32_MASK
    h ^= h >> 11
    h = (h + (h << 15)) & _UINT32_MASK
    return h
