"""The common data bus that broadcasts finished results."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from itertools import chain

from .buffers import Buffer
from .register import Register


class CommonDataBus:
    """Carries at most one result per call from a buffer to everything waiting on it."""

    def __init__(self) -> None:
        self.data: tuple[str, int] | None = None

    def execute(
        self,
        load_buffers: Sequence[Buffer],
        reservation_stations: Sequence[Buffer],
        registers: Mapping[str, Register],
        clock_cycle: int,
    ) -> tuple[str, int] | None:
        """Advance buffers until one produces a result, then broadcast it.

        Reservation stations are polled before load buffers. The result is
        handed to every buffer waiting on its tag and written into every
        register currently named by that tag. Returns the broadcast
        ``(tag, value)``, or None if nothing finished.
        """
        self.data = None
        for buffer in chain(reservation_stations, load_buffers):
            self.data = buffer.advance(clock_cycle)
            if self.data is not None:
                break
        else:
            return None

        tag, value = self.data
        for buffer in chain(load_buffers, reservation_stations):
            buffer.capture(tag, value, clock_cycle)

        for register in registers.values():
            if register.name == tag:
                register.value = value

        return self.data