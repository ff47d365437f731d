"""
재고 관리 비즈니스 규칙 위반 타입과 결과 타입.

서비스는 규칙 위반을 예외로 던지지 않고 StockResult 에 담아 반환하며,
호출 측(라우터)이 result.ok 를 확인해서 처리한다.
"""

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class StockErrorKind(str, enum.Enum):
    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    STOCK_EXCEEDED = "STOCK_EXCEEDED"
    STOCK_BELOW_ZERO = "STOCK_BELOW_ZERO"


class StockError(ABC):
    kind: StockErrorKind

    @property
    @abstractmethod
    def message(self) -> str:
        ...


@dataclass(frozen=True)
class AlreadyExists(StockError):
    name: str
    kind = StockErrorKind.ALREADY_EXISTS

    @property
    def message(self) -> str:
        return f"Beer with name {self.name} already registered in the system."


@dataclass(frozen=True)
class NotFound(StockError):
    # ID 또는 이름
    ref: Union[int, str]
    kind = StockErrorKind.NOT_FOUND

    @property
    def message(self) -> str:
        if isinstance(self.ref, str):
            return f"Beer with name {self.ref} not found in the system."
        return f"Beer with id {self.ref} not found in the system."


@dataclass(frozen=True)
class StockExceeded(StockError):
    id: int
    kind = StockErrorKind.STOCK_EXCEEDED

    @property
    def message(self) -> str:
        return f"Beers with {self.id} ID to increment informed exceeds the max stock capacity"


@dataclass(frozen=True)
class StockBelowZero(StockError):
    id: int
    kind = StockErrorKind.STOCK_BELOW_ZERO

    @property
    def message(self) -> str:
        return f"Beers with {self.id} ID to decrement informed make stock capacity less than 0"


@dataclass(frozen=True)
class StockResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[StockError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T = None) -> "StockResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: StockError) -> "StockResult[T]":
        return cls(error=error)
