import io
from typing import Callable

import pytest

from staffio.console import Console
from staffio.registry import EmployeeRegistry


class ConsoleFixture:
    @pytest.fixture(scope="function")
    def stdout(self) -> io.StringIO:
        return io.StringIO()

    @pytest.fixture(scope="function")
    def make_console(
        self, registry: EmployeeRegistry, stdout: io.StringIO
    ) -> Callable[[str], Console]:
        def factory(answers: str) -> Console:
            return Console(
                stdin=io.StringIO(answers), stdout=stdout, registry=registry
            )

        return factory
