"""
Fact - Immutable three-field record stored by the TripleStore.

A Fact holds a subject, predicate and object string plus a unique integer id.
Pattern facts additionally carry a wildcard string: any field equal to it
matches anything. The three Orderings define the sort permutations the
engine keeps one container for each.
"""

from dataclasses import dataclass, field
from enum import Enum
from operator import attrgetter
from typing import Optional, Tuple

from triplestore.exceptions import InvalidArgumentError

FIELDS = ("subject", "predicate", "object")

# Width of each right-justified column in a rendered fact
RENDER_WIDTH = 8


def require_not_none(**arguments) -> None:
    """Raise InvalidArgumentError naming every argument that is None."""
    missing = [name for name, value in arguments.items() if value is None]
    if missing:
        raise InvalidArgumentError(
            f"Arguments must not be None: {', '.join(missing)}"
        )


@dataclass(frozen=True)
class Fact:
    """
    Represents a single triple, either stored data or a query pattern.

    Equality and hashing only look at the three fields, so two facts holding
    the same values are the same fact to the store regardless of id.

    Attributes:
        subject: First column (the entity)
        predicate: Second column (the relation)
        object: Third column (the property)
        id: Unique identifier handed out by a FactFactory
        wildcard: Wildcard string of a pattern fact, None for data facts
    """

    subject: str
    predicate: str
    object: str
    id: int = field(default=-1, compare=False)
    wildcard: Optional[str] = field(default=None, compare=False, repr=False)

    @property
    def is_pattern(self) -> bool:
        return self.wildcard is not None

    def is_wild(self, name: str) -> bool:
        """Return True if the named field equals this fact's wildcard."""
        return self.wildcard is not None and getattr(self, name) == self.wildcard

    @property
    def subject_wild(self) -> bool:
        return self.is_wild("subject")

    @property
    def predicate_wild(self) -> bool:
        return self.is_wild("predicate")

    @property
    def object_wild(self) -> bool:
        return self.is_wild("object")

    def wild_positions(self) -> Tuple[str, ...]:
        """Names of the wild fields, in subject/predicate/object order."""
        return tuple(name for name in FIELDS if self.is_wild(name))

    def as_tuple(self) -> Tuple[str, str, str]:
        return (self.subject, self.predicate, self.object)

    def matches(self, other: "Fact") -> bool:
        """
        Check whether two facts match field by field.

        A position matches when both values are equal or either side is
        wild there, each side judged by its own wildcard.
        """
        for name in FIELDS:
            if getattr(self, name) == getattr(other, name):
                continue
            if self.is_wild(name) or other.is_wild(name):
                continue
            return False
        return True

    def render(self) -> str:
        """Right-justify each field in a fixed-width column, space separated."""
        return "".join(
            f"{value:>{RENDER_WIDTH}} " for value in self.as_tuple()
        )

    def __str__(self) -> str:
        return self.render()


class Ordering(Enum):
    """
    Sort permutations over the three fields.

    Each member compares facts field by field in its priority order using
    plain string comparison, falling through to the next field only on
    equality.
    """

    SPO = ("subject", "predicate", "object")
    POS = ("predicate", "object", "subject")
    OSP = ("object", "subject", "predicate")

    def __init__(self, *fields: str):
        self._getter = attrgetter(*fields)

    @property
    def fields(self) -> Tuple[str, str, str]:
        return self.value

    def key(self, fact: Fact) -> Tuple[str, str, str]:
        """Sort key of a fact under this ordering."""
        return self._getter(fact)

    def compare(self, left: Fact, right: Fact) -> int:
        """Return negative, zero or positive like a classic comparator."""
        left_key = self.key(left)
        right_key = self.key(right)
        return (left_key > right_key) - (left_key < right_key)


compare_spo = Ordering.SPO.compare
compare_pos = Ordering.POS.compare
compare_osp = Ordering.OSP.compare


class FactFactory:
    """
    Builds facts and owns the id counter they draw from.

    Every fact built here, data or pattern, consumes one id. Each
    TripleStore holds its own factory so ids never depend on process-wide
    state.
    """

    def __init__(self, first_id: int = 0):
        self._next_id = first_id

    def next_id(self) -> int:
        """Consume and return the next id."""
        current = self._next_id
        self._next_id += 1
        return current

    def peek(self) -> int:
        """Return the id the next fact will receive, without consuming it."""
        return self._next_id

    def make(self, subject: str, predicate: str, obj: str) -> Fact:
        """Create a data fact. None fields raise InvalidArgumentError."""
        require_not_none(subject=subject, predicate=predicate, object=obj)
        return Fact(subject, predicate, obj, id=self.next_id())

    def make_pattern(
        self, wildcard: str, subject: str, predicate: str, obj: str
    ) -> Fact:
        """
        Create a pattern fact whose fields equal to wildcard match anything.

        Args:
            wildcard: The string that marks a wild field
            subject: Subject value or wildcard
            predicate: Predicate value or wildcard
            obj: Object value or wildcard

        Returns:
            A Fact carrying its own wildcard
        """
        require_not_none(
            wildcard=wildcard, subject=subject, predicate=predicate, object=obj
        )
        return Fact(subject, predicate, obj, id=self.next_id(), wildcard=wildcard)
