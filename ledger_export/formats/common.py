"""Behaviour shared by every batch format."""


import logging


CONTENT_CSV = 'text/csv'
CONTENT_ZIP = 'application/zip'

logger = logging.getLogger(__name__)


class Batch:
    """
    An append-only run of transactions bound to one destination.

    Zero-amount transactions are never exported; append drops them.
    render() only reads the accumulated transactions, so it can be called
    any number of times with identical results.
    """
    content_type = CONTENT_CSV

    def __init__(self):
        self._transactions = []

    @property
    def transactions(self):
        return tuple(self._transactions)

    def __len__(self):
        return len(self._transactions)

    def append(self, transaction):
        if transaction.amount == 0:
            logger.debug('dropping zero amount transaction %r',
                         transaction.description)
            return
        self._transactions.append(transaction)

    def header(self):
        return ''

    def rows(self):
        raise NotImplementedError

    def render(self):
        """Return the payload bytes and their content type."""
        logger.info('rendering %s with %d transactions',
                    type(self).__name__, len(self._transactions))
        text = self.header() + ''.join(self.rows())
        return text.encode('utf-8'), self.content_type


def with_suffix(ref, suffix):
    """Append ' / suffix' to ref when suffix is non-empty."""
    if suffix == '':
        return ref
    return '{} / {}'.format(ref, suffix)
