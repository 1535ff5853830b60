import sys

from integer_sqrt import (
    __version__,
)


def construct_runtime_identifier() -> str:
    """
    Constructs the integer-sqrt runtime identifier string

    e.g. 'Integer-Sqrt/v1.2.3/linux/cpython3.11.4'
    """
    platform = sys.platform
    v = sys.version_info
    imp = sys.implementation

    return (
        f"Integer-Sqrt/{__version__}/{platform}/"
        f"{imp.name}{v.major}.{v.minor}.{v.micro}"
    )
