"""
A dictionary backed by an association list.

Keys only need to provide an equality check: no hashing nor ordering is ever
used, so, keys may be lists, dicts, records with a custom `__eq__` (without a
matching `__hash__`), etc.

The entries are kept in a tuple with the most recently inserted entry first:

    d = AssocDict.empty().insert("a", 1).insert("b", 2)
    d.keys() == ["b", "a"]

    # Inserting an existing key replaces it and makes it the most recent one.
    d.insert("a", 3).keys() == ["a", "b"]

Instances are immutable (all the operations which would change the contents
return a new instance), so, they may be freely shared among threads.

Lookups are linear scans, so, this is only meant to be used with a
small/moderate number of entries.
"""
import operator
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
)

from assoc_collections.assoc_log import get_logger
from assoc_collections.basic import implements
from assoc_collections.options import Setup
from assoc_collections.protocols import (
    A,
    IAssocDict,
    IEquals,
    K,
    Sentinel,
    V,
    check_implements,
)

log = get_logger(__name__)

_Entries = Tuple[Tuple[Any, Any], ...]


def _equals_or_default(equals: Optional[IEquals]) -> IEquals:
    if equals is None:
        return operator.eq
    return equals


def _index_of(entries: Sequence[Tuple[Any, Any]], key: Any, equals: IEquals) -> int:
    for i, entry in enumerate(entries):
        if equals(entry[0], key):
            return i
    return -1


def _check_unique_keys(entries: _Entries, equals: IEquals) -> None:
    for i, entry in enumerate(entries):
        j = _index_of(entries[i + 1 :], entry[0], equals)
        if j != -1:
            msg = (
                "Duplicated key in AssocDict: %r (at positions: %s and %s). "
                "Check whether the `equals` used is symmetric and transitive."
            ) % (entry[0], i, i + 1 + j)
            log.critical(msg)
            raise AssertionError(msg)


class AssocDict(Generic[K, V]):
    """
    An immutable dictionary whose keys are compared only by equality.

    :param initial:
        An iterable with `(key, value)` pairs (see `from_list` for how
        duplicated keys are handled) or another AssocDict (its entries are
        copied keeping their order).

    :param equals:
        The predicate used to compare keys (`operator.eq` by default). Dicts
        created from this one keep using the same predicate (and binary
        operations use the predicate of the left operand).
    """

    __slots__ = ["_entries", "_equals"]

    # Keys may not be hashable (and equality doesn't consider the order).
    __hash__ = None  # type: ignore

    def __init__(
        self,
        initial: Optional[Iterable[Tuple[K, V]]] = None,
        equals: Optional[IEquals] = None,
    ) -> None:
        equals = _equals_or_default(equals)
        if initial is None:
            initial = ()
        elif isinstance(initial, AssocDict):
            initial = initial.items()
        self._equals: IEquals = equals
        self._entries: _Entries = self._collapse(initial, equals)
        if Setup.options.CHECK_INVARIANTS:
            _check_unique_keys(self._entries, equals)

    @classmethod
    def _from_entries(cls, entries: _Entries, equals: IEquals) -> "AssocDict[K, V]":
        ret = cls.__new__(cls)
        ret._equals = equals
        ret._entries = entries
        if Setup.options.CHECK_INVARIANTS:
            _check_unique_keys(entries, equals)
        return ret

    def _derive(self, entries: _Entries) -> "AssocDict[K, V]":
        return self._from_entries(entries, self._equals)

    @classmethod
    def _collapse(cls, pairs: Iterable[Tuple[K, V]], equals: IEquals) -> _Entries:
        # Same result as inserting from right to left: the first occurrence of
        # a key wins and the keys keep the order of their first occurrence.
        entries: List[Tuple[K, V]] = []
        duplicates = 0
        for key, value in pairs:
            if _index_of(entries, key, equals) == -1:
                entries.append((key, value))
            else:
                duplicates += 1

        if duplicates:
            log.debug(
                "Collapsed %s duplicated key(s) when creating AssocDict with %s entries.",
                duplicates,
                len(entries),
            )
        return tuple(entries)

    @classmethod
    def empty(cls, equals: Optional[IEquals] = None) -> "AssocDict[K, V]":
        return cls._from_entries((), _equals_or_default(equals))

    @classmethod
    def singleton(
        cls, key: K, value: V, equals: Optional[IEquals] = None
    ) -> "AssocDict[K, V]":
        return cls._from_entries(((key, value),), _equals_or_default(equals))

    @classmethod
    def from_list(
        cls, pairs: Iterable[Tuple[K, V]], equals: Optional[IEquals] = None
    ) -> "AssocDict[K, V]":
        """
        Creates a dict from `(key, value)` pairs inserting them from right to
        left, so, the first pair in `pairs` becomes the most recent entry (and
        `to_list()` gives back `pairs` when there are no duplicated keys).

        When a key appears more than once, its first occurrence wins.
        """
        equals = _equals_or_default(equals)
        return cls._from_entries(cls._collapse(pairs, equals), equals)

    @property
    def equals(self) -> IEquals:
        return self._equals

    @implements(IAssocDict.insert)
    def insert(self, key: K, value: V) -> "AssocDict[K, V]":
        entries = self._entries
        i = _index_of(entries, key, self._equals)
        if i == -1:
            return self._derive(((key, value),) + entries)
        return self._derive(((key, value),) + entries[:i] + entries[i + 1 :])

    @implements(IAssocDict.remove)
    def remove(self, key: K) -> "AssocDict[K, V]":
        entries = self._entries
        i = _index_of(entries, key, self._equals)
        if i == -1:
            return self
        return self._derive(entries[:i] + entries[i + 1 :])

    @implements(IAssocDict.update)
    def update(
        self, key: K, alter: Callable[[Optional[V]], Optional[V]]
    ) -> "AssocDict[K, V]":
        i = _index_of(self._entries, key, self._equals)
        current = None if i == -1 else self._entries[i][1]
        new_value = alter(current)
        if new_value is None:
            return self.remove(key)
        return self.insert(key, new_value)

    def _find(self, key: Any) -> Any:
        i = _index_of(self._entries, key, self._equals)
        if i == -1:
            return Sentinel.SENTINEL
        return self._entries[i][1]

    @implements(IAssocDict.get)
    def get(self, key: K, default: Any = None) -> Any:
        ret = self._find(key)
        if ret is Sentinel.SENTINEL:
            return default
        return ret

    def __getitem__(self, key: K) -> V:
        ret = self._find(key)
        if ret is Sentinel.SENTINEL:
            raise KeyError(key)
        return ret

    @implements(IAssocDict.is_empty)
    def is_empty(self) -> bool:
        return not self._entries

    @implements(IAssocDict.member)
    def member(self, key: K) -> bool:
        return _index_of(self._entries, key, self._equals) != -1

    @implements(IAssocDict.size)
    def size(self) -> int:
        return len(self._entries)

    @implements(IAssocDict.eq)
    def eq(self, other: "AssocDict[K, V]") -> bool:
        if len(self._entries) != len(other._entries):
            return False

        # Keys are unique on both sides, so, checking one direction is enough.
        equals = self._equals
        other_entries = other._entries
        for key, value in self._entries:
            i = _index_of(other_entries, key, equals)
            if i == -1 or not (other_entries[i][1] == value):
                return False
        return True

    @implements(IAssocDict.union)
    def union(self, other: "AssocDict[K, V]") -> "AssocDict[K, V]":
        entries = self._entries
        equals = self._equals
        missing = tuple(
            entry
            for entry in other._entries
            if _index_of(entries, entry[0], equals) == -1
        )
        if not missing:
            return self
        return self._derive(entries + missing)

    @implements(IAssocDict.intersect)
    def intersect(self, other: "AssocDict[K, V]") -> "AssocDict[K, V]":
        other_entries = other._entries
        equals = self._equals
        return self._derive(
            tuple(
                entry
                for entry in self._entries
                if _index_of(other_entries, entry[0], equals) != -1
            )
        )

    @implements(IAssocDict.diff)
    def diff(self, other: "AssocDict[K, V]") -> "AssocDict[K, V]":
        other_entries = other._entries
        equals = self._equals
        return self._derive(
            tuple(
                entry
                for entry in self._entries
                if _index_of(other_entries, entry[0], equals) == -1
            )
        )

    @implements(IAssocDict.keys)
    def keys(self) -> List[K]:
        return [entry[0] for entry in self._entries]

    @implements(IAssocDict.values)
    def values(self) -> List[V]:
        return [entry[1] for entry in self._entries]

    @implements(IAssocDict.items)
    def items(self) -> List[Tuple[K, V]]:
        return list(self._entries)

    @implements(IAssocDict.to_list)
    def to_list(self) -> List[Tuple[K, V]]:
        return list(self._entries)

    @implements(IAssocDict.foldl)
    def foldl(self, func: Callable[[K, V, A], A], initial: A) -> A:
        acc = initial
        for key, value in self._entries:
            acc = func(key, value, acc)
        return acc

    @implements(IAssocDict.foldr)
    def foldr(self, func: Callable[[K, V, A], A], initial: A) -> A:
        acc = initial
        for key, value in reversed(self._entries):
            acc = func(key, value, acc)
        return acc

    @implements(IAssocDict.filter)
    def filter(self, predicate: Callable[[K, V], bool]) -> "AssocDict[K, V]":
        return self._derive(
            tuple(entry for entry in self._entries if predicate(entry[0], entry[1]))
        )

    @implements(IAssocDict.partition)
    def partition(
        self, predicate: Callable[[K, V], bool]
    ) -> "Tuple[AssocDict[K, V], AssocDict[K, V]]":
        accepted = []
        rejected = []
        for entry in self._entries:
            if predicate(entry[0], entry[1]):
                accepted.append(entry)
            else:
                rejected.append(entry)
        return self._derive(tuple(accepted)), self._derive(tuple(rejected))

    @implements(IAssocDict.map_values)
    def map_values(self, func: Callable[[K, V], Any]) -> "AssocDict[K, Any]":
        return self._derive(
            tuple((key, func(key, value)) for key, value in self._entries)
        )

    @implements(IAssocDict.merge)
    def merge(
        self,
        other: "AssocDict[K, Any]",
        left_only: Callable[[K, V, A], A],
        both: Callable[[K, V, Any, A], A],
        right_only: Callable[[K, Any, A], A],
        initial: A,
    ) -> A:
        equals = self._equals
        other_entries = other._entries
        acc = initial
        for key, value in self._entries:
            i = _index_of(other_entries, key, equals)
            if i == -1:
                acc = left_only(key, value, acc)
            else:
                acc = both(key, value, other_entries[i][1], acc)

        entries = self._entries
        for key, value in other_entries:
            if _index_of(entries, key, equals) == -1:
                acc = right_only(key, value, acc)
        return acc

    def __iter__(self) -> Iterator[K]:
        for entry in self._entries:
            yield entry[0]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return _index_of(self._entries, key, self._equals) != -1

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssocDict):
            return NotImplemented
        return self.eq(other)

    def __or__(self, other):
        if not isinstance(other, AssocDict):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, AssocDict):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other):
        if not isinstance(other, AssocDict):
            return NotImplemented
        return self.diff(other)

    def __repr__(self) -> str:
        data = repr(list(self._entries)) if self._entries else ""
        return f"{self.__class__.__name__}({data})"

    __str__ = __repr__

    def __typecheckself__(self) -> None:
        _: IAssocDict = check_implements(self)
