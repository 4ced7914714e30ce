from typing import Any, TypeVar

from typing_extensions import Protocol  # typing.Protocol is available in Python 3.8+


class Orderable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    def __ge__(self, other: Any) -> bool:
        ...


OrderableT = TypeVar("OrderableT", bound=Orderable)
