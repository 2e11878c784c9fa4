# tests/model_tests/test_transaction_table.py

"""TransactionTimestampTable – lookups and read-only sharing."""

import pytest
from model.transaction_table import TransactionTimestampTable
from model.exceptions import UnknownTransaction


def test_lookup():
    table = TransactionTimestampTable({1: 5, 2: 10})
    assert table.get(1) == 5
    assert table[2] == 10
    assert len(table) == 2
    assert list(table) == [1, 2]


def test_unknown_transaction_raises():
    table = TransactionTimestampTable({1: 5})
    with pytest.raises(UnknownTransaction) as exc_info:
        table.get(3)
    assert exc_info.value.transaction_id == 3
    assert "t3" in str(exc_info.value)


def test_mapping_view_is_read_only():
    table = TransactionTimestampTable({1: 5})
    with pytest.raises(TypeError):
        table.as_mapping()[1] = 99  # type: ignore[index]
    assert table.get(1) == 5


def test_source_mapping_is_copied():
    source = {1: 5}
    table = TransactionTimestampTable(source)
    source[1] = 42
    source[2] = 7
    assert table.get(1) == 5
    assert 2 not in table


def test_string_form():
    assert str(TransactionTimestampTable({1: 8, 2: 9})) == "[t1=8, t2=9]"
