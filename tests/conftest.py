# tests/conftest.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tempora tests.

The configuration handles:
- Python path setup for module imports
- Common fixtures for declarations, tables and the example dataset
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from model.data_object import DataObjectRegistry  # noqa: E402
from model.transaction_table import TransactionTimestampTable  # noqa: E402
from core.evaluator import TimestampOrderingEvaluator  # noqa: E402
from utils.example_input import EXAMPLE_INPUT_LINES  # noqa: E402


@pytest.fixture
def object_names():
    """Objects declared by the example dataset."""
    return ["A", "B", "C", "D"]


@pytest.fixture
def example_timestamps():
    """Transaction timestamps of the example dataset: t1=8, t2=9, t3=1, t4=4."""
    return {1: 8, 2: 9, 3: 1, 4: 4}


@pytest.fixture
def registry(object_names):
    return DataObjectRegistry(object_names)


@pytest.fixture
def transactions(example_timestamps):
    return TransactionTimestampTable(example_timestamps)


@pytest.fixture
def evaluator(registry, transactions):
    return TimestampOrderingEvaluator(registry, transactions)


@pytest.fixture
def two_transaction_evaluator():
    """Evaluator over objects {A, B} with t1=5 and t2=10."""
    return TimestampOrderingEvaluator(
        DataObjectRegistry(["A", "B"]), TransactionTimestampTable({1: 5, 2: 10})
    )


@pytest.fixture
def example_lines():
    """The documented nine-schedule example input."""
    return list(EXAMPLE_INPUT_LINES)
