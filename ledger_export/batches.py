"""Construct the batch for a destination."""


from enum import Enum
from functools import partial
import logging
from ledger_export.errors import UnsupportedDestination
from ledger_export.fiscal import fiscal_period, fiscal_year
from ledger_export.formatting import month_year
from ledger_export.formats.netsuite import NetSuiteBatch
from ledger_export.formats.policy import PolicyStatement
from ledger_export.formats.sage import SageBatch, SageJournalBatch


logger = logging.getLogger(__name__)


class Destination(Enum):
    SAGE = 'sage'
    SAGE_JOURNAL = 'sage-journal'
    POLICY = 'policy'
    NETSUITE = 'netsuite'


def destinations():
    """Get the identifiers of every supported destination"""
    return [d.value for d in Destination]


def journal_description(date, app_name):
    """e.g. 'September 2020 Cover JE'"""
    return '{} {} JE'.format(month_year(date), app_name)


def _pick_destination(destination):
    try:
        return Destination(destination)
    except ValueError as e:
        raise UnsupportedDestination(
            'unsupported destination {!r}, expected one of: {}'.format(
                destination, ', '.join(destinations()))) from e


def _sage(cls, date, config, annual):
    return cls(
        period=fiscal_period(date.month, config.fiscal_start_month),
        year=date.year,
        journal_description=journal_description(date, config.app_name),
    )


def _policy(date, config, annual):
    return PolicyStatement(config.date_format)


def _netsuite(date, config, annual):
    return NetSuiteBatch(
        period=fiscal_period(date.month, config.fiscal_start_month),
        year=fiscal_year(date, config.fiscal_start_month),
        journal_description=journal_description(date, config.app_name),
        date=date,
        annual=annual,
    )


_builders = {
    Destination.SAGE: partial(_sage, SageBatch),
    Destination.SAGE_JOURNAL: partial(_sage, SageJournalBatch),
    Destination.POLICY: _policy,
    Destination.NETSUITE: _netsuite,
}
assert set(_builders) == set(Destination)


def new_batch(destination, reference_date, config, annual=False):
    """
    Make an empty batch for destination, bound to the fiscal period and
    journal description of reference_date.

    Raises:
        UnsupportedDestination
    """
    dest = _pick_destination(destination)
    batch = _builders[dest](reference_date, config, annual)
    logger.debug('new %s batch for %s', dest.value, reference_date)
    return batch
