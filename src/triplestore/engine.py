"""
TripleStore - Three-column fact store with logarithmic wildcard lookups.

Keeps the same set of facts in three ordered containers, one per Ordering
(SPO, POS, OSP). Any combination of literal and wild fields has an ordering
that puts the literal fields first, so the matching facts form one
contiguous run found by a binary search plus a forward scan.

Target complexities, N stored facts and K matches:
- insert: O(log N)
- query:  O(K + log N)
- remove: O(K * log N)
"""

from typing import Dict, FrozenSet, Iterator, List, Optional

from sortedcontainers import SortedKeyList

from triplestore.fact import FIELDS, Fact, FactFactory, Ordering, require_not_none
from triplestore.utils.config import StoreConfig
from triplestore.utils.logger import get_logger

logger = get_logger("TripleStore")

DEFAULT_WILDCARD = "*"

# Literal fields of a pattern -> ordering whose sort key starts with them
_SEARCH_PLANS: Dict[FrozenSet[str], Ordering] = {
    frozenset(): Ordering.SPO,
    frozenset({"subject"}): Ordering.SPO,
    frozenset({"subject", "predicate"}): Ordering.SPO,
    frozenset({"subject", "predicate", "object"}): Ordering.SPO,
    frozenset({"predicate"}): Ordering.POS,
    frozenset({"predicate", "object"}): Ordering.POS,
    frozenset({"object"}): Ordering.OSP,
    frozenset({"object", "subject"}): Ordering.OSP,
}


def select_ordering(pattern: Fact) -> Ordering:
    """Pick the ordering whose leading sort fields are the pattern's literals."""
    literals = frozenset(name for name in FIELDS if not pattern.is_wild(name))
    return _SEARCH_PLANS[literals]


class TripleStore:
    """
    In-memory triple store indexed three ways.

    All three containers always hold the same facts; every mutation goes
    through helpers that touch each of them in the same call. Not
    thread-safe: callers sharing a store must serialize access.

    Args:
        wildcard: Initial wildcard string for query() and remove()
        factory: FactFactory supplying fact ids. A fresh one starting at 0
                 is created when omitted.
    """

    def __init__(
        self,
        wildcard: str = DEFAULT_WILDCARD,
        factory: Optional[FactFactory] = None,
    ):
        require_not_none(wildcard=wildcard)
        self._wildcard = wildcard
        self._factory = factory if factory is not None else FactFactory()
        self._indexes: Dict[Ordering, SortedKeyList] = {
            ordering: SortedKeyList(key=ordering.key) for ordering in Ordering
        }

    @classmethod
    def from_config(cls, config: StoreConfig) -> "TripleStore":
        """Build an empty store from a validated StoreConfig."""
        return cls(
            wildcard=config.wildcard,
            factory=FactFactory(first_id=config.first_id),
        )

    @property
    def _primary(self) -> SortedKeyList:
        return self._indexes[Ordering.SPO]

    # ------------------------------------------------------------------
    # Wildcard
    # ------------------------------------------------------------------

    def get_wildcard(self) -> str:
        return self._wildcard

    def set_wildcard(self, wildcard: str) -> None:
        """
        Change the wildcard used by subsequent query() and remove() calls.

        Stored facts are unaffected: they carry no wildcard of their own.
        """
        require_not_none(wildcard=wildcard)
        logger.debug(f"Wildcard changed from {self._wildcard!r} to {wildcard!r}")
        self._wildcard = wildcard

    wildcard = property(get_wildcard, set_wildcard)

    @property
    def factory(self) -> FactFactory:
        return self._factory

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, subject: str, predicate: str, obj: str) -> bool:
        """
        Ensure a fact is present, adding it if necessary.

        Values equal to the current wildcard are stored literally.

        Returns:
            True if the fact was added, False if an equal fact already exists

        Raises:
            InvalidArgumentError: If any field is None
        """
        fact = self._factory.make(subject, predicate, obj)
        if fact in self._primary:
            logger.debug(f"Duplicate fact skipped: {fact.as_tuple()}")
            return False

        for index in self._indexes.values():
            index.add(fact)
        logger.debug(f"Inserted fact {fact.id}: {fact.as_tuple()}")
        return True

    def remove(self, subject: str, predicate: str, obj: str) -> int:
        """
        Remove every fact matching the pattern.

        Any field equal to the current wildcard matches all values in that
        position.

        Returns:
            Number of facts removed, 0 if nothing matched

        Raises:
            InvalidArgumentError: If any field is None
        """
        pattern = self._factory.make_pattern(self._wildcard, subject, predicate, obj)
        doomed = list(self._scan(pattern))
        for fact in doomed:
            self._discard(fact)
        logger.debug(f"Removed {len(doomed)} fact(s) matching {pattern.as_tuple()}")
        return len(doomed)

    def clear(self) -> None:
        """Remove all facts. Ids keep counting from where they were."""
        for index in self._indexes.values():
            index.clear()

    def _discard(self, fact: Fact) -> None:
        for index in self._indexes.values():
            index.remove(fact)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def query(self, subject: str, predicate: str, obj: str) -> List[Fact]:
        """
        Return the stored facts matching a pattern.

        Fields equal to the current wildcard match anything. Results follow
        the sort order of the container chosen for the pattern, not
        insertion order.

        Returns:
            Matching facts with their original ids, empty if none match

        Raises:
            InvalidArgumentError: If any field is None
        """
        pattern = self._factory.make_pattern(self._wildcard, subject, predicate, obj)
        return list(self._scan(pattern))

    def _scan(self, pattern: Fact) -> Iterator[Fact]:
        """
        Yield facts matching pattern from the container suited to it.

        Binary search to the first key not below the literal prefix, then
        walk forward until the prefix stops matching.
        """
        ordering = select_ordering(pattern)
        index = self._indexes[ordering]
        width = len(FIELDS) - len(pattern.wild_positions())
        prefix = ordering.key(pattern)[:width]
        logger.debug(f"Scanning {ordering.name} for prefix {prefix}")

        start = index.bisect_key_left(prefix)
        for fact in index.islice(start):
            if ordering.key(fact)[:width] != prefix:
                break
            if pattern.matches(fact):
                yield fact

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def size(self) -> int:
        """Return number of stored facts."""
        return len(self._primary)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Fact]:
        return iter(self._primary)

    def __contains__(self, item) -> bool:
        """Membership by field values; accepts a Fact or a 3-tuple."""
        key = item.as_tuple() if isinstance(item, Fact) else tuple(item)
        position = self._primary.bisect_key_left(key)
        if position == len(self._primary):
            return False
        return self._primary[position].as_tuple() == key

    def render(self) -> str:
        """One rendered line per fact, sorted by subject, predicate, object."""
        return "".join(f"{fact.render()}\n" for fact in self._primary)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TripleStore(size={self.size()}, wildcard={self._wildcard!r})"
