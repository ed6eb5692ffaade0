import sys
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    Tuple,
)
from typing import TypeVar
import typing

from enum import Enum


if typing.TYPE_CHECKING:
    # This would lead to a circular import, so, do it only when type-checking.
    from assoc_collections.assoc_dict import AssocDict
    from assoc_collections.assoc_set import AssocSet

# Hack so that we don't break the runtime on versions prior to Python 3.8.
if sys.version_info[:2] < (3, 8):

    class Protocol(object):
        pass


else:
    from typing import Protocol


T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
A = TypeVar("A")


class Sentinel(Enum):
    SENTINEL = 0


class Unit(Enum):
    """
    The payload stored for every element of an AssocSet. It carries no
    information: only its presence matters.
    """

    UNIT = 0

    def __repr__(self):
        return "UNIT"


def check_implements(x: T) -> T:
    """
    Helper to check if a class implements some protocol.

    :important: It must be the last method in a class due to
                https://github.com/python/mypy/issues/9266

        Example:

    def __typecheckself__(self) -> None:
        _: IExpectedProtocol = check_implements(self)

    Mypy should complain if `self` is not implementing the IExpectedProtocol.
    """
    return x


class IEquals(Protocol):
    def __call__(self, a: Any, b: Any) -> bool:
        """
        The equality used to compare keys. It must be reflexive, symmetric and
        transitive (this isn't checked: a misbehaving predicate is a contract
        violation from the caller).
        """


class ILog(Protocol):
    def critical(self, msg: str = "", *args: Any):
        pass

    def info(self, msg: str = "", *args: Any):
        pass

    def warn(self, msg: str = "", *args: Any):
        pass

    def debug(self, msg: str = "", *args: Any):
        pass

    def exception(self, msg: str = "", *args: Any):
        pass

    def error(self, msg: str = "", *args: Any):
        pass


class IAssocDict(Generic[K, V], Protocol):
    """
    An ordered dictionary which only requires keys to provide an equality
    check (no hashing nor ordering is used).

    Entries are kept with the most recently inserted first. Instances are
    immutable: all the operations which would change the contents return a new
    instance.
    """

    def insert(self, key: K, value: V) -> "AssocDict[K, V]":
        """
        :return:
            A new dict where `key` maps to `value`. If the key was already
            there, its entry is replaced and becomes the most recent one.
        """

    def remove(self, key: K) -> "AssocDict[K, V]":
        """
        :return:
            A new dict without `key` (an equivalent dict if it wasn't there).
        """

    def update(
        self, key: K, alter: Callable[[Optional[V]], Optional[V]]
    ) -> "AssocDict[K, V]":
        """
        :param alter:
            Receives the current value (or None if the key isn't there) and
            returns the new value (or None to remove the key).
        """

    def get(self, key: K, default: Any = None) -> Any:
        pass

    def is_empty(self) -> bool:
        pass

    def member(self, key: K) -> bool:
        pass

    def size(self) -> int:
        pass

    def eq(self, other: "AssocDict[K, V]") -> bool:
        """
        :return:
            True if both have the same (key, value) pairs regardless of the
            order in which those were inserted.
        """

    def union(self, other: "AssocDict[K, V]") -> "AssocDict[K, V]":
        """
        :return:
            All the entries from this dict followed by the entries of `other`
            whose keys are not in this dict (on collisions this dict wins).
        """

    def intersect(self, other: "AssocDict[K, V]") -> "AssocDict[K, V]":
        """
        :return:
            The entries from this dict whose keys are also in `other`.
        """

    def diff(self, other: "AssocDict[K, V]") -> "AssocDict[K, V]":
        """
        :return:
            The entries from this dict whose keys are not in `other`.
        """

    def keys(self) -> List[K]:
        pass

    def values(self) -> List[V]:
        pass

    def items(self) -> List[Tuple[K, V]]:
        pass

    def to_list(self) -> List[Tuple[K, V]]:
        pass

    def foldl(self, func: Callable[[K, V, A], A], initial: A) -> A:
        """
        Folds from the most recently inserted entry to the least recent one.
        """

    def foldr(self, func: Callable[[K, V, A], A], initial: A) -> A:
        """
        Folds from the least recently inserted entry to the most recent one.
        """

    def filter(self, predicate: Callable[[K, V], bool]) -> "AssocDict[K, V]":
        pass

    def partition(
        self, predicate: Callable[[K, V], bool]
    ) -> "Tuple[AssocDict[K, V], AssocDict[K, V]]":
        pass

    def map_values(self, func: Callable[[K, V], Any]) -> "AssocDict[K, Any]":
        pass

    def merge(
        self,
        other: "AssocDict[K, Any]",
        left_only: Callable[[K, V, A], A],
        both: Callable[[K, V, Any, A], A],
        right_only: Callable[[K, Any, A], A],
        initial: A,
    ) -> A:
        """
        Walks the union of the keys of both dicts accumulating a result.

        Entries of this dict are visited first (most recent first) and then
        the entries which are only in `other` (most recent first).
        """

    def __iter__(self) -> Iterator[K]:
        pass

    def __len__(self) -> int:
        pass

    def __contains__(self, key: object) -> bool:
        pass


class IAssocSet(Generic[T], Protocol):
    """
    A set which only requires its elements to provide an equality check.

    It's backed by an IAssocDict whose values are always `Unit.UNIT`, so, the
    ordering (most recent first) and complexity are the same.
    """

    def insert(self, element: T) -> "AssocSet[T]":
        pass

    def remove(self, element: T) -> "AssocSet[T]":
        pass

    def is_empty(self) -> bool:
        pass

    def member(self, element: T) -> bool:
        pass

    def size(self) -> int:
        pass

    def eq(self, other: "AssocSet[T]") -> bool:
        pass

    def union(self, other: "AssocSet[T]") -> "AssocSet[T]":
        pass

    def intersect(self, other: "AssocSet[T]") -> "AssocSet[T]":
        pass

    def diff(self, other: "AssocSet[T]") -> "AssocSet[T]":
        pass

    def to_list(self) -> List[T]:
        """
        :return:
            The elements with the most recently inserted first.
        """

    def foldl(self, func: Callable[[T, A], A], initial: A) -> A:
        pass

    def foldr(self, func: Callable[[T, A], A], initial: A) -> A:
        pass

    def map(
        self, func: Callable[[T], Any], equals: Optional[IEquals] = None
    ) -> "AssocSet[Any]":
        """
        :return:
            The set with the results of calling `func` for each element.
        """

    def filter(self, predicate: Callable[[T], bool]) -> "AssocSet[T]":
        pass

    def partition(
        self, predicate: Callable[[T], bool]
    ) -> "Tuple[AssocSet[T], AssocSet[T]]":
        pass

    def __iter__(self) -> Iterator[T]:
        pass

    def __len__(self) -> int:
        pass

    def __contains__(self, element: object) -> bool:
        pass
