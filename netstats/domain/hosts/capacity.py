"""
Network capacity aggregation.

Folds a stream of uptime fractions into a Capacity in a single pass.
Values are consumed one at a time so memory stays constant whether
the source is a list or a live database cursor.
"""

from collections.abc import AsyncIterable, Iterable

from netstats.domain.hosts.entities import Capacity


def tally_capacity(uptimes: Iterable[float]) -> Capacity:
    """Aggregate a synchronous sequence of uptimes.

    Args:
        uptimes: Uptime fractions, one per host. Bounds are not enforced.

    Returns:
        Capacity counts. Empty input yields all zeros.
    """
    capacity = Capacity()
    for uptime in uptimes:
        capacity.add_host(uptime)
    return capacity


async def tally_capacity_stream(uptimes: AsyncIterable[float]) -> Capacity:
    """Aggregate an asynchronous stream of uptimes.

    Any exception raised by the stream propagates; no partial
    Capacity is returned.
    """
    capacity = Capacity()
    async for uptime in uptimes:
        capacity.add_host(uptime)
    return capacity
