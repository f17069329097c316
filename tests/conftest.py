import pytest

from patternkit.domain.builder import ConcreteBuilder1, Director
from patternkit.domain.command import Receiver
from patternkit.infrastructure.adapters import MemoryOutputAdapter


@pytest.fixture
def memory_output():
    """Output port recording every message in order."""
    return MemoryOutputAdapter()


@pytest.fixture
def receiver(memory_output):
    return Receiver(output=memory_output)


@pytest.fixture
def builder():
    return ConcreteBuilder1()


@pytest.fixture
def director(builder):
    """Director already wired to the builder fixture."""
    return Director(builder)
