from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    Optional,
)


class IntegerTypeAPI(ABC):
    """
    A fixed-width integer type.  Provides the bounds of the type along with the
    primitive operations that stay inside the width, so that algorithms built
    on top never depend on Python's arbitrary precision integers to absorb an
    overflow.
    """

    name: str
    bits: int
    is_signed: bool

    @property
    @abstractmethod
    def min_value(self) -> int:
        """
        Return the smallest value representable by this type.
        """
        ...

    @property
    @abstractmethod
    def max_value(self) -> int:
        """
        Return the largest value representable by this type.
        """
        ...

    @property
    @abstractmethod
    def ceiling(self) -> int:
        """
        Return ``2 ** bits``, the number of distinct values of this type.
        """
        ...

    @abstractmethod
    def contains(self, value: int) -> bool:
        """
        Return ``True`` if ``value`` is representable by this type.
        """
        ...

    @abstractmethod
    def checked_mul(self, left: int, right: int) -> Optional[int]:
        """
        Return ``left * right``, or ``None`` if the product overflows this type.
        """
        ...

    @abstractmethod
    def wrapping_shr(self, value: int, shift: int) -> int:
        """
        Shift ``value`` right by ``shift`` modulo the bit width.
        """
        ...

    @abstractmethod
    def wrapping_shl(self, value: int, shift: int) -> int:
        """
        Shift ``value`` left by ``shift`` modulo the bit width, truncating the
        result to the width.
        """
        ...
