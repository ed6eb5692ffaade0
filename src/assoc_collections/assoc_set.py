import collections
from typing import (
    Any,
    Callable,
    Deque,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
)

from assoc_collections.assoc_dict import AssocDict
from assoc_collections.basic import implements
from assoc_collections.protocols import (
    A,
    IAssocSet,
    IEquals,
    T,
    Unit,
    check_implements,
)

UNIT = Unit.UNIT


class AssocSet(Generic[T]):
    """
    An immutable set whose elements are compared only by equality (so, they
    don't need to be hashable).

    It's an AssocDict where all the values are `UNIT`: each operation is
    forwarded to the dict, so, the elements are also kept with the most
    recently inserted first.
    """

    __slots__ = ["_dict"]

    __hash__ = None  # type: ignore

    def __init__(
        self, initial: Optional[Iterable[T]] = None, equals: Optional[IEquals] = None
    ) -> None:
        if initial is None:
            initial = ()
        self._dict: AssocDict[T, Unit] = AssocDict.from_list(
            ((element, UNIT) for element in initial), equals
        )

    @classmethod
    def _wrap(cls, dct: "AssocDict[T, Unit]") -> "AssocSet[T]":
        ret = cls.__new__(cls)
        ret._dict = dct
        return ret

    @classmethod
    def empty(cls, equals: Optional[IEquals] = None) -> "AssocSet[T]":
        return cls._wrap(AssocDict.empty(equals))

    @classmethod
    def singleton(cls, element: T, equals: Optional[IEquals] = None) -> "AssocSet[T]":
        return cls._wrap(AssocDict.singleton(element, UNIT, equals))

    @classmethod
    def from_list(
        cls, elements: Iterable[T], equals: Optional[IEquals] = None
    ) -> "AssocSet[T]":
        """
        Inserts the elements from right to left, so:

            AssocSet.from_list([3, 1, 2, 3]).to_list() == [3, 1, 2]
        """
        return cls._wrap(
            AssocDict.from_list(((element, UNIT) for element in elements), equals)
        )

    @property
    def equals(self) -> IEquals:
        return self._dict.equals

    @implements(IAssocSet.insert)
    def insert(self, element: T) -> "AssocSet[T]":
        return self._wrap(self._dict.insert(element, UNIT))

    @implements(IAssocSet.remove)
    def remove(self, element: T) -> "AssocSet[T]":
        dct = self._dict.remove(element)
        if dct is self._dict:
            return self
        return self._wrap(dct)

    @implements(IAssocSet.is_empty)
    def is_empty(self) -> bool:
        return self._dict.is_empty()

    @implements(IAssocSet.member)
    def member(self, element: T) -> bool:
        return self._dict.member(element)

    @implements(IAssocSet.size)
    def size(self) -> int:
        return self._dict.size()

    @implements(IAssocSet.eq)
    def eq(self, other: "AssocSet[T]") -> bool:
        return self._dict.eq(other._dict)

    @implements(IAssocSet.union)
    def union(self, other: "AssocSet[T]") -> "AssocSet[T]":
        return self._wrap(self._dict.union(other._dict))

    @implements(IAssocSet.intersect)
    def intersect(self, other: "AssocSet[T]") -> "AssocSet[T]":
        return self._wrap(self._dict.intersect(other._dict))

    @implements(IAssocSet.diff)
    def diff(self, other: "AssocSet[T]") -> "AssocSet[T]":
        return self._wrap(self._dict.diff(other._dict))

    @implements(IAssocSet.to_list)
    def to_list(self) -> List[T]:
        return self._dict.keys()

    @implements(IAssocSet.foldl)
    def foldl(self, func: Callable[[T, A], A], initial: A) -> A:
        return self._dict.foldl(lambda element, _unit, acc: func(element, acc), initial)

    @implements(IAssocSet.foldr)
    def foldr(self, func: Callable[[T, A], A], initial: A) -> A:
        return self._dict.foldr(lambda element, _unit, acc: func(element, acc), initial)

    @implements(IAssocSet.map)
    def map(
        self, func: Callable[[T], Any], equals: Optional[IEquals] = None
    ) -> "AssocSet[Any]":
        """
        :param equals:
            The predicate to compare the new elements (`operator.eq` by
            default as the new elements may be of a different type).

        Note: the images are gathered most recent first (each one prepended
        to the accumulated images) and then given to `from_list`. When `func`
        maps different elements to equal images the resulting order follows
        from that (it shouldn't be relied upon).
        """

        def prepend(element: T, images: Deque[Any]) -> Deque[Any]:
            images.appendleft(func(element))
            return images

        images: Deque[Any] = self.foldl(prepend, collections.deque())
        return self.from_list(images, equals)

    @implements(IAssocSet.filter)
    def filter(self, predicate: Callable[[T], bool]) -> "AssocSet[T]":
        return self._wrap(self._dict.filter(lambda element, _unit: predicate(element)))

    @implements(IAssocSet.partition)
    def partition(
        self, predicate: Callable[[T], bool]
    ) -> "Tuple[AssocSet[T], AssocSet[T]]":
        accepted, rejected = self._dict.partition(
            lambda element, _unit: predicate(element)
        )
        return self._wrap(accepted), self._wrap(rejected)

    def __iter__(self) -> Iterator[T]:
        return iter(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def __contains__(self, element: object) -> bool:
        return element in self._dict

    def __bool__(self) -> bool:
        return bool(self._dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssocSet):
            return NotImplemented
        return self.eq(other)

    def __or__(self, other):
        if not isinstance(other, AssocSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, AssocSet):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other):
        if not isinstance(other, AssocSet):
            return NotImplemented
        return self.diff(other)

    def __repr__(self) -> str:
        elements = self._dict.keys()
        data = repr(elements) if elements else ""
        return f"{self.__class__.__name__}({data})"

    __str__ = __repr__

    def __typecheckself__(self) -> None:
        _: IAssocSet = check_implements(self)
