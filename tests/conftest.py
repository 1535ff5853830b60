from eth_utils import (
    setup_DEBUG2_logging,
)
import pytest

from integer_sqrt.integers import (
    ALL_INTEGER_TYPES,
    SIGNED_INTEGER_TYPES,
    UNSIGNED_INTEGER_TYPES,
)

#
#  Setup DEBUG2 level logging.
#
setup_DEBUG2_logging()


@pytest.fixture(params=ALL_INTEGER_TYPES, ids=str)
def int_type(request):
    return request.param


@pytest.fixture(params=SIGNED_INTEGER_TYPES, ids=str)
def signed_int_type(request):
    return request.param


@pytest.fixture(params=UNSIGNED_INTEGER_TYPES, ids=str)
def unsigned_int_type(request):
    return request.param
