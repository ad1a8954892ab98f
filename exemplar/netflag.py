"""An integer type used as a bit field of interface flags."""

from __future__ import annotations

from enum import IntFlag


class Flags(IntFlag):
    """Network interface flags."""

    UP = 1 << 0
    BROADCAST = 1 << 1
    LOOPBACK = 1 << 2
    POINT_TO_POINT = 1 << 3
    MULTICAST = 1 << 4


def is_up(v: Flags) -> bool:
    """Report whether the interface is up."""
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return v with the up flag cleared."""
    return v & ~Flags.UP


def set_broadcast(v: Flags) -> Flags:
    """Return v with the broadcast flag set."""
    return v | Flags.BROADCAST


def is_cast(v: Flags) -> bool:
    """Report whether the interface supports broadcast or multicast."""
    return v & (Flags.BROADCAST | Flags.MULTICAST) != 0