"""Unit tests for the demo operation runner."""

import io

import pytest

from recordkeeper.adapters.repository import KeyedRepository, StockRepository
from recordkeeper.domain.model import ElectronicItem
from recordkeeper.service_layer.operations import ErrorKind, error_kind_of, run_operation


@pytest.fixture
def repo() -> StockRepository[int, ElectronicItem]:
    repo = StockRepository("Item")
    repo.add(ElectronicItem(id=1, name="Smartphone", quantity=50, brand="Samsung", warranty_months=24))
    return repo


class TestRunOperation:
    def test_success(self, repo):
        out = io.StringIO()
        outcome = run_operation("Update", lambda: repo.update_quantity(1, 45), out)

        assert outcome.ok
        assert outcome.error_kind is None
        assert out.getvalue() == ""

    @pytest.mark.parametrize(
        ("action", "kind"),
        [
            (lambda r: r.add(ElectronicItem(id=1, name="Phone", quantity=10, brand="Apple", warranty_months=12)),
             ErrorKind.DUPLICATE_KEY),
            (lambda r: r.update_quantity(99, 10), ErrorKind.NOT_FOUND),
            (lambda r: r.update_quantity(1, -5), ErrorKind.VALIDATION),
            (lambda r: r.remove(999), ErrorKind.NOT_FOUND),
        ],
    )
    def test_expected_failures_become_outcomes(self, repo, action, kind):
        out = io.StringIO()
        outcome = run_operation("Failing step", lambda: action(repo), out)

        assert not outcome.ok
        assert outcome.error_kind is kind
        assert out.getvalue().startswith("Error: ")
        assert repo.get(1).quantity == 50

    def test_failure_log_carries_structured_fields(self, repo, caplog):
        with caplog.at_level("INFO", logger="recordkeeper.service_layer.operations"):
            run_operation("Remove missing", lambda: repo.remove(999), io.StringIO())

        record = caplog.records[0]
        assert (record.entity_type, record.key, record.error_kind) == ("Item", 999, "not_found")

    def test_unexpected_errors_propagate(self):
        def boom():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            run_operation("Boom", boom, io.StringIO())

    def test_later_operations_still_run(self):
        """Test one failure never stops the next step."""
        repo = KeyedRepository("Item")
        out = io.StringIO()
        first = run_operation("Remove missing", lambda: repo.remove(1), out)
        second = run_operation("Count", repo.count, out)

        assert first.error_kind is ErrorKind.NOT_FOUND
        assert second.ok


def test_error_kind_of_rejects_base_class():
    from recordkeeper.domain.errors import RepositoryError

    with pytest.raises(TypeError):
        error_kind_of(RepositoryError("generic"))
