import datetime
import logging
import pytest
from ledger_export import logging_setup
from ledger_export.config import ExportConfig
from ledger_export.schema import PolicyType, Transaction


@pytest.fixture
def config():
    return ExportConfig(fiscal_start_month=1, app_name='CoverApp',
                        date_format='%d %B %Y', expense_account='EXP1')


@pytest.fixture
def household():
    return Transaction(
        amount=1,
        date=datetime.date(2020, 9, 15),
        description='transaction description',
        policy_type=PolicyType.HOUSEHOLD,
        entity_code='abc1',
        household_id='mno5',
        income_account='pqr6',
        name='stu7',
    )


@pytest.fixture
def team():
    return Transaction(
        amount=2,
        date=datetime.date(2020, 9, 16),
        description='transaction description',
        policy_type=PolicyType.TEAM,
        entity_code='zyx9',
        policy_name='nml5',
        account_number='kji4',
        cost_center='hgf3',
    )


@pytest.fixture
def package_logger(monkeypatch):
    """The package logger, with its handlers and level restored afterwards."""
    logger = logging.getLogger(logging_setup.PACKAGE_LOGGER)
    monkeypatch.setattr(logging_setup, '_handler', None)
    monkeypatch.setattr(logger, 'handlers', [])
    monkeypatch.setattr(logger, 'propagate', True)
    level = logger.level
    yield logger
    logger.setLevel(level)
