"""Population count of 64-bit unsigned integers."""

_MASK64 = (1 << 64) - 1

# _PC[i] is the population count of i.
_PC: list[int] = [0] * 256
for _i in range(1, 256):
    _PC[_i] = _PC[_i // 2] + (_i & 1)
del _i


def pop_count(x: int) -> int:
    """Return the number of set bits in the 64-bit unsigned integer x."""
    if not 0 <= x <= _MASK64:
        raise ValueError(f"{x} is not a 64-bit unsigned integer")
    return sum(_PC[b] for b in x.to_bytes(8, "little"))