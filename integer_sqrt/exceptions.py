class IntegerSqrtError(Exception):
    """
    Base class for all integer-sqrt errors.
    """


class NegativeSquareRoot(IntegerSqrtError):
    """
    Raised by :func:`~integer_sqrt.isqrt.integer_sqrt` when asked for the square
    root of a negative number.  Callers that cannot rule out negative input
    should use :func:`~integer_sqrt.isqrt.checked_integer_sqrt` instead.
    """


class UnknownIntegerType(IntegerSqrtError, KeyError):
    """
    Raised when no integer type is registered under the requested name.
    """

    @property
    def type_name(self) -> str:
        return self.args[0]
