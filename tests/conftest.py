"""Central test fixtures."""

import pytest

from sequent.domain import Aggregate, LinkedAggregate, ListAggregate


@pytest.fixture(params=[ListAggregate, LinkedAggregate], ids=["list", "linked"])
def aggregate_type(request) -> type[Aggregate]:
    """Each bundled aggregate backing, so contract tests run against both."""
    return request.param


@pytest.fixture
def aggregate(aggregate_type: type[Aggregate]) -> Aggregate[str]:
    """Create an empty aggregate of the parametrized backing."""
    return aggregate_type()


@pytest.fixture
def abc_aggregate(aggregate: Aggregate[str]) -> Aggregate[str]:
    """Create an aggregate holding "A", "B", "C" in that order."""
    for item in ("A", "B", "C"):
        aggregate.append(item)
    return aggregate
