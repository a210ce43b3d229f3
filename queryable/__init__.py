"""
queryable: lazy, pull-based array combinators over any python iterable.

    >>> from queryable import of
    >>> of(1, 2, 3, 4, 5).slice(1, -1).map(lambda x: x * 10).join('-')
    '20-30-40'
"""

# expose the main classes
from .pipeline import Queryable, IQueryable

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    from_range,
    is_queryable,
    queryable,
    Q
)

# expose supporting types
from .types import Step, MISSING

# define what `import *` does
__all__ = [
    "Queryable",
    "IQueryable",
    "from_iterable",
    "of",
    "from_range",
    "is_queryable",
    "queryable",
    "Q",
    "Step",
    "MISSING"
]
