"""Read transaction and ledger sources and write rendered payloads."""


import datetime
import json
import os
from atomicwrites import atomic_write
from ledger_export.errors import InputError
from ledger_export.ledger import EntryType, LedgerEntry
from ledger_export.schema import PolicyType, Transaction


def _string_fields(record_type):
    return [f for f, t in record_type.__annotations__.items() if t is str]


def _check_fields(obj, record_type, optional=()):
    unknown = set(obj) - set(record_type._fields)
    if unknown:
        raise ValueError('unknown fields: ' + ', '.join(sorted(unknown)))
    amount = obj.get('amount')
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError('amount must be an integer number of cents')
    for field in _string_fields(record_type):
        if not isinstance(obj.get(field, ''), str):
            raise ValueError('{} must be a string'.format(field))
    for field in optional:
        value = obj.get(field)
        if value is not None and not isinstance(value, str):
            raise ValueError('{} must be a string or null'.format(field))
    if 'policy_type' in obj:
        obj['policy_type'] = PolicyType(obj['policy_type'])


def _parse_transaction(obj):
    block = obj.pop('block', '')
    if not isinstance(block, str):
        raise ValueError('block must be a string')
    _check_fields(obj, Transaction, optional=('account', 'reference'))
    obj['date'] = datetime.date.fromisoformat(obj['date'])
    return Transaction(**obj), block


def _parse_ledger_entry(obj):
    _check_fields(obj, LedgerEntry, optional=('parent_entity',))
    obj['type'] = EntryType(obj['type'])
    obj['date_submitted'] = datetime.date.fromisoformat(obj['date_submitted'])
    return LedgerEntry(**obj)


def _read_records(path, parse, kind):
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise InputError('cannot read {}: {}'.format(path, e)) from e
    if not isinstance(data, list):
        raise InputError('{}: expected a JSON array'.format(path))
    result = []
    for i, obj in enumerate(data):
        try:
            if not isinstance(obj, dict):
                raise ValueError('expected an object')
            result.append(parse(dict(obj)))
        except (KeyError, TypeError, ValueError) as e:
            raise InputError('{}: {} {}: {}'.format(path, kind, i, e)) from e
    return result


def read_transactions(path):
    """
    Read a JSON array of transaction objects. Returns a list of
    (Transaction, block) pairs in file order.

    Raises:
        InputError
    """
    return _read_records(path, _parse_transaction, 'transaction')


def read_ledger_entries(path):
    """
    Read a JSON array of ledger entry objects, e.g.
    {"type": "NewCoverage", "amount": -1500, "date_submitted": "2020-09-15",
     "policy_type": "Team", "income_account": "4000", ...}

    Raises:
        InputError
    """
    return _read_records(path, _parse_ledger_entry, 'entry')


def write_payload(path, data, overwrite=False):
    """
    Atomically write rendered bytes to path.

    Raises:
        FileExistsError when path exists and overwrite is False
    """
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with atomic_write(path, mode='wb', overwrite=overwrite) as f:
        f.write(data)
