from __future__ import annotations
import typing
from ..types import *
from ..callbacks import bind, skip, same_value

if typing.TYPE_CHECKING:
    from ..pipeline import Queryable

class _TerminalOperations(Generic[T]):
    """
    operations that drive the pipeline to a result. they pull from the current
    cursor position and stop as soon as the answer is known, leaving the rest
    of the sequence unread.
    """

    def find_index(self: 'Queryable[T]', callback: Predicate) -> int:
        """zero-based position of the first match, counted from the cursor, or -1"""
        predicate = bind(callback, 'find_index')
        for index, item in enumerate(self):
            if predicate(item, index, self):
                return index
        return -1

    def find(self: 'Queryable[T]', callback: Predicate, default: Optional[T] = None) -> Optional[T]:
        """first matching element, or default when nothing matches"""
        predicate = bind(callback, 'find')
        for index, item in enumerate(self):
            if predicate(item, index, self):
                return item
        return default

    def some(self: 'Queryable[T]', callback: Predicate) -> bool:
        return self.find_index(callback) >= 0

    def every(self: 'Queryable[T]', callback: Predicate) -> bool:
        predicate = bind(callback, 'every')
        return not self.some(lambda item, index, source: not predicate(item, index, source))

    def index_of(self: 'Queryable[T]', item: T, start_index: int = 0) -> int:
        """position of the first element == item at or after start_index, or -1"""
        skipped = skip(self, start_index)
        found = self.find_index(lambda x: x == item)
        return found if found < 0 else skipped + found

    def last_index_of(self: 'Queryable[T]', item: T, start_index: int = 0) -> int:
        """
        search from the end backwards, ignoring the last `start_index` elements.
        the result is still counted from the front. drains the sequence.
        """
        buffer = list(self)
        for position in range(len(buffer) - 1 - max(start_index, 0), -1, -1):
            if buffer[position] == item:
                return position
        return -1

    def includes(self: 'Queryable[T]', item: T, start_index: int = 0) -> bool:
        """like index_of, but nan is found when it is in the sequence"""
        skip(self, start_index)
        return self.some(lambda x: same_value(x, item))

    def for_each(self: 'Queryable[T]', callback: Callable[..., Any]) -> None:
        """drain the sequence for side effects. callback(element, index, upstream)"""
        action = bind(callback, 'for_each')
        for index, item in enumerate(self):
            action(item, index, self)

    def reduce(self: 'Queryable[T]', callback: Reducer, initial_value: Any = MISSING) -> Any:
        """
        fold the sequence with callback(accumulator, element, index, upstream).
        without initial_value the first element is pulled straight away as the
        seed; indices count callback calls from 0. an empty sequence with no
        seed gives None.
        """
        reducer = bind(callback, 'reduce', max_args=4, fallback=2)
        accumulator = self.advance().value if initial_value is MISSING else initial_value
        for index, item in enumerate(self):
            accumulator = reducer(accumulator, item, index, self)
        return accumulator

    def reduce_right(self: 'Queryable[T]', callback: Reducer, initial_value: Any = MISSING) -> Any:
        return self.reverse().reduce(callback, initial_value)

    def join(self: 'Queryable[T]', separator: str = ',') -> str:
        return separator.join(str(item) for item in self)
