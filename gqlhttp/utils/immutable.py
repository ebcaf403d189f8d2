from typing import Any, Generic, Mapping, NoReturn, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ImmutableDict(dict, Generic[K, V]):
    """Read-only ``dict`` used for values shared with hooks and the engine.

    Stays a real ``dict`` subclass, so it is accepted anywhere a plain
    mapping is expected, including ``json.dumps``.
    """

    def _immutable(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError(
            "{} object is immutable".format(self.__class__.__name__)
        )

    __delitem__ = __setitem__ = _immutable  # type: ignore
    clear = pop = popitem = setdefault = update = _immutable  # type: ignore
    __ior__ = _immutable  # type: ignore

    def __repr__(self) -> str:
        return "{}({})".format(self.__class__.__name__, dict.__repr__(self))


def _to_immutable(value: Any) -> Any:
    if isinstance(value, dict):
        return to_immutable_dict(value)
    if isinstance(value, (list, tuple)):
        return tuple(_to_immutable(item) for item in value)
    return value


def to_immutable_dict(data: Mapping[K, V]) -> ImmutableDict[K, V]:
    """Copies data recursively, lists become tuples"""
    return ImmutableDict(
        {key: _to_immutable(value) for key, value in data.items()}
    )
