"""
Turn policy ledger entries into export transactions.

Journal batches group entries into blocks by income account and risk
category cost center. Each block is followed by a balancing line that
posts the block total against the block's account.
"""


import datetime
from enum import Enum
from typing import NamedTuple, Optional
from ledger_export.batches import Destination, new_batch
from ledger_export.formats.common import with_suffix
from ledger_export.schema import PolicyType, Transaction


PAYOUT_FMV = 'FMV'
PAYOUT_REPLACE = 'ReplaceActual'
PAYOUT_REPAIR = 'RepairActual'

_payout_descriptions = {
    PAYOUT_FMV: 'Claim payout: Fair Market Value',
    PAYOUT_REPLACE: 'Claim payout: Replace',
    PAYOUT_REPAIR: 'Claim payout: Repair',
}


class EntryType(Enum):
    NEW_COVERAGE = 'NewCoverage'
    COVERAGE_CHANGE = 'CoverageChange'
    COVERAGE_REFUND = 'CoverageRefund'
    COVERAGE_RENEWAL = 'CoverageRenewal'
    POLICY_ADJUSTMENT = 'PolicyAdjustment'
    CLAIM = 'Claim'
    CLAIM_ADJUSTMENT = 'ClaimAdjustment'
    LEGACY_5 = '5'
    LEGACY_20 = '20'

    @property
    def is_claim(self):
        return self in (EntryType.CLAIM, EntryType.CLAIM_ADJUSTMENT)

    def describe(self, claim_payout_option, amount):
        if self is EntryType.NEW_COVERAGE:
            return 'Coverage premium: Add'
        if self is EntryType.COVERAGE_RENEWAL:
            return 'Coverage premium: Renew'
        if self is EntryType.COVERAGE_REFUND:
            return 'Coverage reimbursement: Remove'
        if self in (EntryType.COVERAGE_CHANGE, EntryType.POLICY_ADJUSTMENT):
            # reimbursements are positive, charges negative
            if amount >= 0:
                return 'Coverage reimbursement: Reduce'
            return 'Coverage premium: Increase'
        if self.is_claim:
            return _payout_descriptions.get(claim_payout_option,
                                            'Claim transaction')
        return 'unknown transaction type'


class LedgerEntry(NamedTuple):
    type: EntryType
    amount: int
    date_submitted: datetime.date
    policy_type: PolicyType = PolicyType.OTHER
    entity_code: str = ''
    parent_entity: Optional[str] = None
    risk_category_name: str = ''
    risk_category_cc: str = ''
    household_id: str = ''
    cost_center: str = ''
    account_number: str = ''
    income_account: str = ''
    name: str = ''
    policy_name: str = ''
    claim_payout_option: str = ''

    @property
    def block_key(self):
        return self.income_account + self.risk_category_cc

    def description(self):
        """
        '<type description> / <policy name>', and for non-household
        policies ' (<name>)' after that.
        """
        description = self.type.describe(self.claim_payout_option, self.amount)
        if self.policy_name == '':
            return description
        description = with_suffix(description, self.policy_name)
        if self.policy_type.is_household or self.name == '':
            return description
        return '{} ({})'.format(description, self.name)

    def reference(self):
        if self.policy_type.is_household:
            return with_suffix('MC ' + self.household_id, self.name)
        return with_suffix(
            '{} {}{}'.format(self.entity_code, self.account_number,
                             self.cost_center),
            self.policy_name,
        )

    def balance_description(self):
        entity = self.parent_entity or self.entity_code
        kind = 'Premiums'
        if self.type.is_claim:
            kind = 'Claims'
            # every entity shares the claims account
            entity = 'all'
        return 'Total {} {} {}'.format(entity, self.risk_category_name, kind)

    def to_transaction(self, **overrides):
        fields = dict(
            amount=self.amount,
            date=self.date_submitted,
            description=self.description(),
            policy_type=self.policy_type,
            household_id=self.household_id,
            entity_code=self.entity_code,
            account_number=self.account_number,
            cost_center=self.cost_center,
            policy_name=self.policy_name,
            name=self.name,
            income_account=self.income_account,
        )
        fields.update(overrides)
        return Transaction(**fields)


def make_blocks(entries):
    """Group entries by block key, in the order keys first appear."""
    blocks = {}
    for entry in entries:
        blocks.setdefault(entry.block_key, []).append(entry)
    return blocks


def journal_batch(entries, date, config):
    """Build a balanced journal batch ready for the accounting system."""
    batch = new_batch(Destination.SAGE_JOURNAL, date, config)
    for account, block in make_blocks(entries).items():
        balance = 0
        for entry in block:
            batch.append(entry.to_transaction(
                account=config.expense_account,
                reference=entry.reference(),
            ))
            balance -= entry.amount
        batch.append(Transaction(
            amount=balance,
            date=date,
            description=block[0].balance_description(),
            account=account,
            reference='',
        ))
    return batch


def policy_statement(entries, date, config):
    """Build the statement a policyholder sees for the given entries."""
    batch = new_batch(Destination.POLICY, date, config)
    for entry in entries:
        batch.append(entry.to_transaction())
    return batch
