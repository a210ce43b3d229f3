from __future__ import annotations
import logging
import math
import typing
from collections import deque
from ..types import *
from ..callbacks import skip

if typing.TYPE_CHECKING:
    from ..pipeline import Queryable

logger = logging.getLogger(__name__)


class _WindowOperations(Generic[T]):
    """
    stages that must look ahead of, or behind, the element they emit.
    all of them consume their upstream cursor directly, so anything skipped or
    buffered here is gone from the upstream as well.
    """

    def shift(self: 'Queryable[T]', length: Number = 1) -> 'Queryable[T]':
        """
        drop up to `length` leading elements, then pass the rest through.
        the drop happens on the first pull; a short source just ends early.
        """
        from ..pipeline import Queryable
        def shift_data():
            skip(self, length)
            yield from self
        return Queryable(shift_data(), upstream=self)

    def pop(self: 'Queryable[T]', length: Number = 1) -> 'Queryable[T]':
        """
        withhold the last `length` elements. elements are delayed through a fifo
        window of `length`, so memory stays bounded by the window size. a source
        shorter than the window emits nothing.
        """
        from ..pipeline import Queryable
        def pop_data():
            if length <= 0:
                yield from self
                return
            if length == math.inf:
                # everything is "the last n", nothing worth buffering
                skip(self, length)
                return
            window = deque()
            for item in self:
                window.append(item)
                if len(window) > length:
                    yield window.popleft()
            if len(window) < length:
                logger.debug(f"pop window of {length} never filled ({len(window)} elements)")
        return Queryable(pop_data(), upstream=self)

    def slice(self: 'Queryable[T]', begin: Number = 0, end: Number = math.inf) -> 'Queryable[T]':
        """
        elements from position `begin` up to, not including, `end`.
        a negative `end` drops that many trailing elements; a negative `begin`
        keeps only that many trailing elements (buffered in a bounded deque).
        """
        from ..pipeline import Queryable
        if begin < 0:
            return Queryable(self._tail_slice(begin, end), upstream=self)
        if end < 0:
            return self.shift(begin).pop(-end)

        def slice_data():
            skip(self, begin)
            remaining = end - begin
            while remaining > 0:
                value, done = self.advance()
                if done:
                    return
                yield value
                remaining -= 1
        return Queryable(slice_data(), upstream=self)

    def _tail_slice(self: 'Queryable[T]', begin: Number, end: Number) -> Iterator[T]:
        window = deque(maxlen=None if begin == -math.inf else int(-begin))
        total = 0
        for item in self:
            window.append(item)
            total += 1
        logger.debug(f"tail slice kept {len(window)} of {total} elements")
        stop = total + end if end < 0 else min(end, total)
        for position, item in enumerate(window, total - len(window)):
            if position >= stop:
                return
            yield item

    def splice(self: 'Queryable[T]', start: Number, delete_count: Number = math.inf,
               *new_items: T) -> 'Queryable[T]':
        """
        destructive, single-pass splice: emit the elements before `start`, then
        `new_items`, then skip `delete_count` elements and emit whatever is left.
        the three phases run over one cursor, in order, and never overlap.
        a negative `start` counts from the end.
        """
        from ..pipeline import Queryable
        def splice_data():
            # phase one: everything in front of start
            if start >= 0:
                emitted = 0
                while emitted < start:
                    value, done = self.advance()
                    if done:
                        break
                    yield value
                    emitted += 1
                rest = self
            else:
                window = deque()
                for item in self:
                    window.append(item)
                    if len(window) > -start:
                        yield window.popleft()
                logger.debug(f"splice held back {len(window)} trailing elements")
                rest = iter(window)

            # phase two: insertion
            yield from new_items

            # phase three: deletion, then the remainder
            if delete_count == math.inf:
                return
            skip(rest, delete_count)
            yield from rest
        return Queryable(splice_data(), upstream=self)

    def reverse(self: 'Queryable[T]') -> 'Queryable[T]':
        """
        emit the sequence back to front. the upstream is drained into a list on
        the first pull, so this never finishes on an infinite source.
        """
        from ..pipeline import Queryable
        def reverse_data():
            buffer = list(self)
            logger.debug(f"reverse buffered {len(buffer)} elements")
            yield from reversed(buffer)
        return Queryable(reverse_data(), upstream=self)
