from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..callbacks import bind, is_array_like

if typing.TYPE_CHECKING:
    from ..pipeline import Queryable

class _TransformOperations(Generic[T]):
    def map(self: 'Queryable[T]', callback: Selector) -> 'Queryable[U]':
        """project each element as it is pulled. callback(element, index, upstream)"""
        from ..pipeline import Queryable
        def map_data():
            # validated on first pull, not when the stage is built
            selector = bind(callback, 'map')
            for index, item in enumerate(self):
                yield selector(item, index, self)
        return Queryable(map_data(), upstream=self)

    def filter(self: 'Queryable[T]', callback: Predicate) -> 'Queryable[T]':
        """keep elements where callback(element, index, upstream) is truthy"""
        from ..pipeline import Queryable
        def filter_data():
            predicate = bind(callback, 'filter')
            # index counts every examined element, kept or not
            for index, item in enumerate(self):
                if predicate(item, index, self):
                    yield item
        return Queryable(filter_data(), upstream=self)

    def flat(self: 'Queryable[T]') -> 'Queryable[Any]':
        """spread list, tuple and queryable elements one level deep"""
        from ..pipeline import Queryable
        def flat_data():
            for item in self:
                if is_array_like(item):
                    yield from item
                else:
                    yield item
        return Queryable(flat_data(), upstream=self)

    def flat_map(self: 'Queryable[T]', callback: Selector) -> 'Queryable[Any]':
        """map, then flatten one level"""
        return self.map(callback).flat()

    def concat(self: 'Queryable[T]', *items: Any) -> 'Queryable[Any]':
        """
        this sequence followed by items. array-like items are spread,
        anything else is appended whole: of(1, 2).concat([3, 4], 5) -> 1, 2, 3, 4, 5
        """
        from ..pipeline import Queryable
        def concat_data():
            yield from self
            yield from Queryable(items).flat()
        return Queryable(concat_data(), upstream=self)

    def push(self: 'Queryable[T]', *items: T) -> 'Queryable[T]':
        """append items after the last element"""
        from ..pipeline import Queryable
        # chain pulls from self lazily, nothing is copied
        return Queryable(chain(self, items), upstream=self)

    def unshift(self: 'Queryable[T]', *items: T) -> 'Queryable[T]':
        """prepend items before the first element"""
        from ..pipeline import Queryable
        return Queryable(chain(items, self), upstream=self)

    def keys(self: 'Queryable[T]') -> 'Queryable[int]':
        return self.map(lambda _, index: index)

    def values(self: 'Queryable[T]') -> 'Queryable[T]':
        return self

    def entries(self: 'Queryable[T]') -> 'Queryable[Tuple[int, T]]':
        """(index, element) pairs"""
        return self.map(lambda item, index: (index, item))
