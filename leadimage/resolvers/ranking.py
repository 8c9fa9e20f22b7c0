# leadimage/resolvers/ranking.py
# Responsibility: Running-max selection shared by both resolvers.

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")


def pick_last_max(items: Sequence[T], key: Callable[[T], int]) -> Optional[T]:
    """
    Single left-to-right pass keeping the item whose key is >= the running
    max (which starts at 0): the last item tying the max wins. Items keyed
    below 0 are never picked.
    """
    best: Optional[T] = None
    running_max = 0
    for item in items:
        value = key(item)
        if value >= running_max:
            running_max = value
            best = item
    return best
