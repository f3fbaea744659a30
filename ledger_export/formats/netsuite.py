"""NetSuite journal imports, one CSV per block bundled in a zip archive."""


from io import BytesIO
import logging
import zipfile
from ledger_export.formats.common import Batch, CONTENT_ZIP, CONTENT_CSV
from ledger_export.formatting import currency, iso_date, us_date


HEADER = (
    '"SystemSubsidiary","GroupID","TransactionID","TransactionDate",'
    '"Description","DebitAccount","CreditAccount","InterCoAccount","Amount",'
    '"Currency","Reference"\n'
)
ROW_TEMPLATE = (
    'USA,,{id},{date},"{description}","{debit}","{credit}",,{amount},USD,'
    '"{reference}"\n'
)

logger = logging.getLogger(__name__)


def first_row_id(year, period, annual):
    base = (year * 100 + period) * 10
    if annual:
        base += 1
    return base * 100000


class NetSuiteBatch(Batch):
    content_type = CONTENT_ZIP

    def __init__(self, period, year, journal_description, date, annual=False):
        super().__init__()
        self.period = period
        self.year = year
        self.journal_description = journal_description
        self.date = date
        self.base_row_id = first_row_id(year, period, annual)
        self._blocks = {}

    @property
    def blocks(self):
        return {name: tuple(ts) for name, ts in self._blocks.items()}

    def append(self, transaction, block=''):
        if transaction.amount == 0:
            logger.debug('dropping zero amount transaction %r',
                         transaction.description)
            return
        self._transactions.append(transaction)
        self._blocks.setdefault(block, []).append(transaction)

    def debit_account(self, t):
        if t.account is not None:
            return t.account
        if t.policy_type.is_household:
            return t.household_id
        return t.entity_code

    def credit_account(self, t):
        return t.account_number + t.cost_center

    def reference(self, t, row_id):
        if t.reference is not None:
            ref = t.reference
        elif t.policy_type.is_household:
            ref = t.name
        else:
            ref = t.policy_name
        if ref == '':
            return ref
        return '{} / {}'.format(row_id, ref)

    def block_csv(self, transactions, first_id):
        lines = [HEADER]
        for row_id, t in enumerate(transactions, start=first_id):
            lines.append(ROW_TEMPLATE.format(
                id=row_id,
                date=us_date(t.date),
                description=t.description,
                debit=self.debit_account(t),
                credit=self.credit_account(t),
                amount=currency(-t.amount),
                reference=self.reference(t, row_id),
            ))
        return ''.join(lines).encode('utf-8')

    def member_name(self, block):
        return '{}_{}.csv'.format(block, iso_date(self.date))

    def render(self):
        logger.info('rendering %s with %d transactions in %d blocks',
                    type(self).__name__, len(self._transactions),
                    len(self._blocks))
        # member timestamps come from the batch date, not the clock
        timestamp = (max(self.date.year, 1980), self.date.month, self.date.day,
                     0, 0, 0)
        buf = BytesIO()
        with zipfile.ZipFile(buf, 'w', zipfile.ZIP_DEFLATED) as archive:
            next_id = self.base_row_id + 1
            for block, transactions in self._blocks.items():
                info = zipfile.ZipInfo(self.member_name(block), timestamp)
                info.compress_type = zipfile.ZIP_DEFLATED
                archive.writestr(info, self.block_csv(transactions, next_id))
                next_id += len(transactions)
        return buf.getvalue(), CONTENT_ZIP

    def render_block(self, block):
        """Render a single block as plain CSV, numbered as in the archive."""
        next_id = self.base_row_id + 1
        for name, transactions in self._blocks.items():
            if name == block:
                return self.block_csv(transactions, next_id), CONTENT_CSV
            next_id += len(transactions)
        raise KeyError(block)
