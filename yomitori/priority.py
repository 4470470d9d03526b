"""
Usage priority tags attached to dictionary spellings.

A spelling carries an opaque priority code which the dictionary decodes
into one or more tags such as ``news1`` or ``nf12``.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import FrozenSet, Iterable, Optional


class PriorityType(Enum):
    """
    Source of a priority tag, with its maximal rank and weight factor.

    Declaration order is significant: it is the order used when sorting
    priorities.
    """
    NEWS = ("news", 2, 27)   # wordfreq file, news1 = first 12000 words
    ICHI = ("ichi", 2, 9)    # "Ichimango goi bunruishuu"
    SPEC = ("spec", 2, 3)    # common words not included in other lists
    GAI = ("gai", 2, 1)      # common loanwords
    NF = ("nf", 49, 81)      # frequency-of-use sets of 500 words

    def __init__(self, label: str, max_rank: int, factor: int):
        self.label = label
        self.max_rank = max_rank
        self.factor = factor

    def weight(self, rank: Optional[int]) -> int:
        """
        Weight of a rank of this type, lower meaning more frequent.
        A missing rank weights as the maximal rank.
        """
        return ((rank - 1) if rank is not None else self.max_rank) * self.factor

    @property
    def order(self) -> int:
        return _TYPE_ORDER[self]

    @classmethod
    def from_label(cls, label: str) -> "PriorityType":
        for t in cls:
            if t.label == label:
                return t
        raise ValueError(f"Unknown priority type: {label!r}")


_TYPE_ORDER = {t: i for i, t in enumerate(PriorityType)}

# Types which flag a spelling as a common word.
COMMON_TYPES: FrozenSet[PriorityType] = frozenset({
    PriorityType.NEWS, PriorityType.ICHI, PriorityType.SPEC,
})


@total_ordering
@dataclass(frozen=True)
class Priority:
    """A decoded priority tag: a type and a rank within that type."""
    type: PriorityType
    rank: int

    def __post_init__(self):
        if not 1 <= self.rank <= self.type.max_rank:
            raise ValueError(
                f"Rank {self.rank} is out of range for type \"{self.type.label}\"."
            )

    @classmethod
    def parse(cls, name: str) -> "Priority":
        """
        Parse a tag like ``news1``, ``ichi2`` or ``nf24``.

        Raises:
            ValueError: If the tag can not be parsed or the rank is out of range.
        """
        name = name.strip()
        digits = len(name) - len(name.rstrip("0123456789"))
        if digits == 0 or digits == len(name):
            raise ValueError(f"Unparsable priority: {name!r}")
        return cls(PriorityType.from_label(name[:-digits]), int(name[-digits:]))

    @property
    def is_common(self) -> bool:
        return self.type in COMMON_TYPES

    def __lt__(self, other: "Priority") -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return (self.type.order, self.rank) < (other.type.order, other.rank)

    def __str__(self) -> str:
        return f"{self.type.label}{self.rank}"


def priority_weight(priorities: Iterable[Priority]) -> int:
    """
    Combined weight of a set of priority tags, lower meaning more frequent.

    Each priority type contributes the weight of the best rank found for
    it, or its maximal weight when absent.
    """
    best = {}
    for p in priorities:
        if p.type not in best or p.rank < best[p.type]:
            best[p.type] = p.rank
    return sum(t.weight(best.get(t)) for t in PriorityType)
