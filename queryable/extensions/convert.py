from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..pipeline import Queryable

class ConvertAccessor(Generic[T]):
    """
    materializes whatever is left of a pipeline. every method drains the
    cursor, so a second call on the same queryable sees an empty sequence.
    """
    def __init__(self, queryable_instance: 'Queryable[T]'):
        self._queryable = queryable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._queryable)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._queryable)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._queryable)

    def dict(self, key_selector: Callable[[T], K],
             value_selector: Optional[Callable[[T], V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._queryable}

    def count(self) -> int:
        """number of remaining elements"""
        return sum(1 for _ in self._queryable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._queryable))

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._queryable))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self._queryable))
