from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Service(ABC, Generic[T]):
    @abstractmethod
    def run(self) -> T:
        ...
