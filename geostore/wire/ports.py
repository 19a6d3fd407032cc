from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel


class IWireSerializable(ABC):
    """Port for values that know their own wire-format representation."""

    __slots__ = ()

    @abstractmethod
    def to_wire_value(self) -> BaseModel:
        raise NotImplementedError
