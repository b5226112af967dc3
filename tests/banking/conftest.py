import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def banking_bed():
    from banking.domain import banking

    bed = DomainFixture(banking)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(banking_bed):
    with banking_bed.domain_context():
        yield
