"""Combinatorial indexers and allocation-free generators."""

from __future__ import annotations

from .bitmap import Bitmap
from .combiner import Combiner
from .enumerator import Enumerator
from .generator import Generator, retain_all
from .indexing import (
    count_combinations,
    count_permutations,
    count_states,
    encode_permutation,
    encode_permutation_reverse,
    encode_state,
    is_unique_linear,
    is_unique_quadratic,
    pick_permutation,
    pick_permutation_reverse,
    pick_state,
    pick_state_hyper,
)
from .permuter import Permuter, PermuterAlloc
from .split_combiner import Split, SplitCombiner
from .sticky_permuter import StickyAlloc

__all__ = [
    "Bitmap",
    "Combiner",
    "Enumerator",
    "Generator",
    "Permuter",
    "PermuterAlloc",
    "Split",
    "SplitCombiner",
    "StickyAlloc",
    "count_combinations",
    "count_permutations",
    "count_states",
    "encode_permutation",
    "encode_permutation_reverse",
    "encode_state",
    "is_unique_linear",
    "is_unique_quadratic",
    "pick_permutation",
    "pick_permutation_reverse",
    "pick_state",
    "pick_state_hyper",
    "retain_all",
]
