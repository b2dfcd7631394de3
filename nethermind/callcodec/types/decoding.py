from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Sequence


class DecodedParameters(Mapping[str, Any]):
    """
    Immutable result of decoding packed parameters.  Values are addressable by position (``0``, ``"0"``)
    and by the declared parameter name, if the parameter was named.

    >>> params = DecodedParameters(["Hello", True], ["greeting", ""])
    >>> params[0], params["0"], params["greeting"]
    ('Hello', 'Hello', 'Hello')
    >>> params.length
    2
    >>> list(params)
    ['0', '1', 'greeting']

    Names made only of digits are not added as keys, so positional lookups always return the value at that
    position.  When a name is declared more than once, the last declaration wins.

    >>> params = DecodedParameters(["a", "b", "c"], ["1", "x", "x"])
    >>> params["1"], params["x"]
    ('b', 'c')
    >>> list(params)
    ['0', '1', '2', 'x']

    """

    __slots__ = ("_values", "_names")

    _values: tuple[Any, ...]
    _names: dict[str, int]

    def __init__(self, values: Sequence[Any], names: Sequence[str | None] | None = None):
        values = tuple(values)
        names = list(names) if names is not None else []
        if len(names) > len(values):
            raise ValueError(f"Received {len(names)} names for {len(values)} decoded values")

        # Later declarations with a repeated name replace earlier ones
        name_index = {name: index for index, name in enumerate(names) if name}
        object.__setattr__(self, "_values", values)
        object.__setattr__(self, "_names", {name: i for name, i in name_index.items() if not name.isdigit()})

    def __setattr__(self, key, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def length(self) -> int:
        """Number of positional entries"""
        return len(self._values)

    @property
    def names(self) -> list[str]:
        """Declared names that can be used as keys, in declaration order"""
        return sorted(self._names, key=self._names.__getitem__)

    def __getitem__(self, key: int | str) -> Any:
        if isinstance(key, str):
            if key in self._names:
                return self._values[self._names[key]]
            # Positional keys are rendered without leading zeros: "01" is not an alias of "1"
            if key.isdigit() and str(int(key)) == key:
                key = int(key)

        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(self._values):
            return self._values[key]
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        yield from (str(i) for i in range(len(self._values)))
        yield from self.names

    def __len__(self) -> int:
        return len(self._values) + len(self._names)

    def as_tuple(self) -> tuple[Any, ...]:
        """Returns the decoded values in declaration order"""
        return self._values

    def as_dict(self) -> dict[str, Any]:
        """
        Returns a plain dictionary with both positional and named keys.  Nested ``DecodedParameters`` are
        converted recursively, lists of them element-wise.
        """
        return {key: _to_plain(self[key]) for key in self}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_dict()!r}, length={self.length})"


def _to_plain(value: Any) -> Any:
    if isinstance(value, DecodedParameters):
        return value.as_dict()
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    return value


class DecodedCall(DecodedParameters):
    """Decoded call data, carrying the canonical signature of the decoded method"""

    __slots__ = ("method",)

    method: str

    def __init__(self, values: Sequence[Any], names: Sequence[str | None] | None = None, *, method: str):
        super().__init__(values, names)
        object.__setattr__(self, "method", method)

    @classmethod
    def from_parameters(cls, params: DecodedParameters, method: str) -> "DecodedCall":
        """Attach a method signature to already decoded parameters"""
        names: list[str | None] = [None] * params.length
        for name in params.names:
            names[params._names[name]] = name  # pylint: disable=protected-access
        return cls(params.as_tuple(), names, method=method)

    def __eq__(self, other):
        if isinstance(other, DecodedCall) and self.method != other.method:
            return False
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_dict()!r}, length={self.length}, method={self.method!r})"


@dataclass(frozen=True)
class Scalar:
    """A return payload that decoded to exactly one value"""

    value: Any


@dataclass(frozen=True)
class Multiple:
    """A return payload that decoded to zero, or two or more values"""

    values: DecodedParameters


@dataclass(frozen=True)
class Empty:
    """Nothing to decode, either no return data or no declared outputs"""


@dataclass(frozen=True)
class Raw:
    """Constructor return data, passed through without decoding"""

    data: Any


ReturnValue = Scalar | Multiple | Empty | Raw


def unwrap(return_value: ReturnValue) -> Any:
    """
    Collapse a tagged return value into the value callers usually want.  Single values are returned bare,
    multiple values as ``DecodedParameters``, and empty results as ``None``.
    """
    match return_value:
        case Scalar(value=value):
            return value
        case Multiple(values=values):
            return values
        case Raw(data=data):
            return data
        case Empty():
            return None
    raise TypeError(f"Cannot unwrap {return_value!r}")
