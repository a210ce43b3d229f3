import typing
from .types import *

if typing.TYPE_CHECKING:
    from .pipeline import Queryable

def from_iterable(source: Iterable[T] = ()) -> 'Queryable[T]':
    """create queryable over any iterable or iterator, pulled lazily"""
    from .pipeline import Queryable, IQueryable
    if isinstance(source, IQueryable):
        # same cursor, the new stage just reads through it
        return Queryable(source, upstream=source)
    return Queryable(source)

def of(*args: T) -> 'Queryable[T]':
    """create queryable over the given arguments"""
    return from_iterable(args)

def from_range(start_or_size: Number, stop: Optional[Number] = None, step: Number = 1) -> 'Queryable[Number]':
    """
    create queryable over an arithmetic progression. with a single argument it
    is the exclusive stop and start is 0. a negative step counts down while
    greater than stop; floats and math.inf are accepted for any bound.
    """
    from .pipeline import Queryable
    if stop is None:
        start_or_size, stop = 0, start_or_size
    if step == 0:
        raise ValueError("range step must not be zero")

    if all(isinstance(x, int) for x in (start_or_size, stop, step)):
        return Queryable(range(start_or_size, stop, step))

    def range_data(item=start_or_size):
        if step > 0:
            while item < stop:
                yield item
                item += step
        else:
            while item > stop:
                yield item
                item += step

    return Queryable(range_data())

def is_queryable(obj: Any) -> bool:
    """true only for queryable pipelines, not for plain iterables"""
    from .pipeline import IQueryable
    return isinstance(obj, IQueryable)

# --- aliases ---
queryable = from_iterable
Q = from_iterable
