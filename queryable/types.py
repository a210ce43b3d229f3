from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callbacks receive (element, index, upstream); fewer params are fine
Predicate = Callable[..., Any]
Selector = Callable[..., U]
Reducer = Callable[..., U]

Number = Union[int, float]

# array-like members are spread by flat() and concat()
ARRAY_LIKE = (list, tuple)


class Step(NamedTuple):
    """result of a single pull: the element, or done=True once exhausted"""
    value: Any
    done: bool


DONE = Step(None, True)


class _Missing:
    """marks an omitted argument where None is a legitimate value"""

    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()
