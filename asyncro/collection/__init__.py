from .map import map, map_r, map_w, mapM
from .reduce import reduce, reduce_r, reduce_w, reduceM
from .select import (
    every,
    every_r,
    every_w,
    everyM,
    filter,
    filter_r,
    filter_w,
    filterM,
    find,
    find_r,
    find_w,
    findM,
    some,
    some_r,
    some_w,
    someM,
)

__all__ = (
    # Plain
    "every",
    "filter",
    "find",
    "map",
    "reduce",
    "some",
    # LazyCoroResult
    "every_r",
    "filter_r",
    "find_r",
    "map_r",
    "reduce_r",
    "some_r",
    # LazyCoroResultWriter
    "every_w",
    "filter_w",
    "find_w",
    "map_w",
    "reduce_w",
    "some_w",
    # Generic
    "everyM",
    "filterM",
    "findM",
    "mapM",
    "reduceM",
    "someM",
)
