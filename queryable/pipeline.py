from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from .types import *

# --- operation mixins ---
from .extensions.transform import _TransformOperations
from .extensions.window import _WindowOperations
from .extensions.terminal import _TerminalOperations

# --- accessors ---
from .extensions.convert import ConvertAccessor

logger = logging.getLogger(__name__)

# --- abstract interface ---

class IQueryable(ABC, Generic[T]):
    """
    the combinator surface shared by every stage. a subclass that misses any of
    these cannot be instantiated, so whatever a combinator returns is complete.
    """

    # pull primitive
    @abstractmethod
    def advance(self) -> Step:
        """pull the next element as Step(value, done)"""
        pass

    @abstractmethod
    def close(self) -> None:
        """stop this stage and everything upstream of it"""
        pass

    # transformation stages
    @abstractmethod
    def map(self, callback: Selector) -> 'IQueryable': pass

    @abstractmethod
    def filter(self, callback: Predicate) -> 'IQueryable': pass

    @abstractmethod
    def concat(self, *items: Any) -> 'IQueryable': pass

    @abstractmethod
    def push(self, *items: Any) -> 'IQueryable': pass

    @abstractmethod
    def unshift(self, *items: Any) -> 'IQueryable': pass

    @abstractmethod
    def flat(self) -> 'IQueryable': pass

    @abstractmethod
    def flat_map(self, callback: Selector) -> 'IQueryable': pass

    @abstractmethod
    def keys(self) -> 'IQueryable[int]': pass

    @abstractmethod
    def values(self) -> 'IQueryable': pass

    @abstractmethod
    def entries(self) -> 'IQueryable[Tuple[int, Any]]': pass

    # windowed stages
    @abstractmethod
    def shift(self, length: Number = 1) -> 'IQueryable': pass

    @abstractmethod
    def pop(self, length: Number = 1) -> 'IQueryable': pass

    @abstractmethod
    def slice(self, begin: Number = 0, end: Number = math.inf) -> 'IQueryable': pass

    @abstractmethod
    def splice(self, start: Number, delete_count: Number = math.inf, *new_items: Any) -> 'IQueryable': pass

    @abstractmethod
    def reverse(self) -> 'IQueryable': pass

    # terminal operations
    @abstractmethod
    def find_index(self, callback: Predicate) -> int: pass

    @abstractmethod
    def find(self, callback: Predicate, default: Any = None) -> Any: pass

    @abstractmethod
    def some(self, callback: Predicate) -> bool: pass

    @abstractmethod
    def every(self, callback: Predicate) -> bool: pass

    @abstractmethod
    def index_of(self, item: Any, start_index: int = 0) -> int: pass

    @abstractmethod
    def last_index_of(self, item: Any, start_index: int = 0) -> int: pass

    @abstractmethod
    def includes(self, item: Any, start_index: int = 0) -> bool: pass

    @abstractmethod
    def for_each(self, callback: Callable[..., Any]) -> None: pass

    @abstractmethod
    def reduce(self, callback: Reducer, initial_value: Any = MISSING) -> Any: pass

    @abstractmethod
    def reduce_right(self, callback: Reducer, initial_value: Any = MISSING) -> Any: pass

    @abstractmethod
    def join(self, separator: str = ',') -> str: pass

# --- base cursor implementation ---

class _BaseQueryable(IQueryable[T]):
    def __init__(self, source: Iterable[T] = (), upstream: Optional[IQueryable] = None):
        """wrap source as this stage's cursor. upstream is the stage the cursor pulls from"""
        self._cursor: Iterator[T] = iter(source)
        self._upstream = upstream
        self._done = False
        self._closed = False

    def advance(self) -> Step:
        """pull one element. once done, every later call is done as well"""
        if self._done:
            return DONE
        try:
            value = next(self._cursor)
        except StopIteration:
            self._done = True
            return DONE
        return Step(value, False)

    def close(self) -> None:
        """
        finish this stage early. the cursor is closed first (running any pending
        finally blocks in generator stages), then the request travels upstream so
        the original source sees it too.
        """
        if self._closed:
            return
        self._closed = True
        self._done = True
        cursor_close = getattr(self._cursor, 'close', None)
        if cursor_close is not None:
            cursor_close()
        if self._upstream is not None:
            logger.debug(f"closing upstream of {self!r}")
            self._upstream.close()

    # iterating and advancing share one cursor, there is no restart
    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value, done = self.advance()
        if done:
            raise StopIteration
        return value

    def __enter__(self) -> '_BaseQueryable[T]':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = 'closed' if self._closed else 'exhausted' if self._done else 'live'
        return f"{type(self).__name__}({state})"

# --- main queryable class ---

class Queryable(
    _TransformOperations[T],
    _WindowOperations[T],
    _TerminalOperations[T],
    _BaseQueryable[T]
):
    """a lazy, single-pass query pipeline over any python iterable."""
    def __init__(self, source: Iterable[T] = (), upstream: Optional[IQueryable] = None):
        super().__init__(source, upstream)
        # --- initialize accessors ---
        self.to = ConvertAccessor(self)
