import pytest

from staffio.registry import EmployeeRegistry


# This applies to all tests, so that identifiers and creation counts start from
# scratch in every test instead of accumulating on the process-wide registry
@pytest.fixture(scope="function", autouse=True)
def registry():
    with EmployeeRegistry() as fresh:
        yield fresh
