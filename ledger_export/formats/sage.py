"""
Sage general-ledger journal batches.

Both formats share two control headers, a batch summary row and a
transaction row template. They differ in how a row's account and reference
are chosen: SageBatch derives them from the policy, SageJournalBatch writes
what the caller already resolved.
"""


from ledger_export.errors import BatchFullError
from ledger_export.formats.common import Batch, with_suffix
from ledger_export.formatting import currency, compact_date, truncate


HEADER_BATCH = (
    '"RECTYPE","BATCHID","BTCHENTRY","ORIGCOMP","SRCELEDGER","SRCETYPE",'
    '"FSCSYR","FSCSPERD","SWEDIT","JRNLDESC","REVPERD","ERRBATCH",'
    '"ERRENTRY","DETAILCNT","PROCESSCMD"\n'
)
HEADER_TRANSACTION = (
    '"RECTYPE","BATCHNBR","JOURNALID","TRANSNBR","DESCOMP","ROUTE","ACCTID",'
    '"COMPANYID","TRANSAMT","SCURNDEC","TRANSDESC","TRANSREF","TRANSDATE",'
    '"SRCELDGR","SRCETYPE"\n'
)
SUMMARY_TEMPLATE = (
    '"1","000000","00001","","GL","JE","{year}","{period:02d}",0,'
    '"{description}","00",0,0,0,2\n'
)
ROW_TEMPLATE = (
    '"2","000000","00001","{number:010d}","",0,"{account}","",{amount},"2",'
    '"{description}","{reference}",{date},"GL","JE"\n'
)

DESCRIPTION_WIDTH = 60
ROW_NUMBER_STEP = 20
# TRANSNBR is ten digits wide
MAX_ROWS = 9999999999 // ROW_NUMBER_STEP


class SageBatch(Batch):
    def __init__(self, period, year, journal_description):
        super().__init__()
        self.period = period
        self.year = year
        self.journal_description = journal_description

    def append(self, transaction):
        """
        Raises:
            BatchFullError
        """
        if transaction.amount != 0 and len(self) >= MAX_ROWS:
            raise BatchFullError(
                'batch already holds the maximum of {} rows'.format(MAX_ROWS))
        super().append(transaction)

    def account(self, t):
        if t.account is not None:
            return t.account
        if t.policy_type.is_household:
            return t.household_id
        return t.entity_code

    def reference(self, t):
        if t.reference is not None:
            return t.reference
        if t.policy_type.is_household:
            return with_suffix('MC', t.name)
        return with_suffix(t.account_number + t.cost_center, t.policy_name)

    def header(self):
        return HEADER_BATCH + HEADER_TRANSACTION + SUMMARY_TEMPLATE.format(
            year=self.year,
            period=self.period,
            description=self.journal_description,
        )

    def rows(self):
        for i, t in enumerate(self._transactions, start=1):
            yield ROW_TEMPLATE.format(
                number=ROW_NUMBER_STEP * i,
                account=self.account(t),
                amount=currency(-t.amount),
                description=truncate(t.description, DESCRIPTION_WIDTH),
                reference=self.reference(t),
                date=compact_date(t.date),
            )


class SageJournalBatch(SageBatch):
    """Rows carry the account and reference exactly as appended."""

    def account(self, t):
        return t.account or ''

    def reference(self, t):
        return t.reference or ''
