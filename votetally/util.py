'''Various utility functions for other modules of Votetally.

There should normally be no need to use these functions directly.
'''

from typing import Callable, Dict, Hashable, Iterable, List, TypeVar
from numbers import Number

T = TypeVar('T')


def add_to_count(counts: Dict[Hashable, int],
                 key: Hashable,
                 increment: int = 1,
                 ) -> None:
    counts[key] = counts.get(key, 0) + increment


def sorted_descending(items: Iterable[T],
                      key: Callable[[T], Number],
                      ) -> List[T]:
    '''Return items sorted by key in descending order.

    The sort is stable: items with equal keys keep their input order.
    '''
    return list(sorted(items, key=key, reverse=True))
