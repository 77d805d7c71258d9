"""
Base data structures intended for inheritance.

The low-level records in :py:mod:`cel_tools.cel` inherit from the base
classes here and get attrs_ decoration to have data fields. They are
read-only: CEL and CL2 files are decoded, never written.

.. _attrs: https://www.attrs.org/en/stable/index.html
"""

import io
import logging
from typing import Any, BinaryIO, Iterator, TypeVar

from attrs import define, field, fields

from cel_tools.cel.bin_utils import trimmed_repr

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="BaseElement")


class BaseElement:
    """
    Base element of the CEL file structs.

    .. py:classmethod:: read(cls, fp)

        Read the element from a file-like object.

    .. py:classmethod:: frombytes(self, data, *args, **kwargs)

        Read the element from bytes.
    """

    @classmethod
    def read(cls: type[T], fp: BinaryIO, **kwargs: Any) -> T:
        raise NotImplementedError()

    @classmethod
    def frombytes(cls: type[T], data: bytes, *args: Any, **kwargs: Any) -> T:
        with io.BytesIO(data) as f:
            return cls.read(f, *args, **kwargs)

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("{name}(...)".format(name=self.__class__.__name__))
            return

        with p.group(2, "{name}(".format(name=self.__class__.__name__), ")"):
            p.breakable("")
            field_list = [f for f in fields(self.__class__) if f.repr]  # type: ignore[arg-type]
            for idx, field_item in enumerate(field_list):
                if idx:
                    p.text(",")
                    p.breakable()
                p.text("{field}=".format(field=field_item.name))
                p.text(trimmed_repr(getattr(self, field_item.name)))
            p.breakable("")


@define(repr=False, frozen=True)
class ListElement(BaseElement):
    """
    Immutable list-like element that has `items` tuple.
    """

    _items: tuple = field(factory=tuple, converter=tuple)

    def index(self, x: Any) -> int:
        return self._items.index(x)

    def count(self, x: Any) -> int:
        return self._items.count(x)

    def __len__(self) -> int:
        return self._items.__len__()

    def __iter__(self) -> Iterator[Any]:
        return self._items.__iter__()

    def __getitem__(self, key: Any) -> Any:
        return self._items.__getitem__(key)

    def __repr__(self) -> str:
        return list(self._items).__repr__()

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("[...]")
            return

        with p.group(2, "[", "]"):
            p.breakable("")
            for idx in range(len(self._items)):
                if idx:
                    p.text(",")
                    p.breakable()
                p.pretty(self._items[idx])
            p.breakable("")
