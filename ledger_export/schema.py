"""The schema for transactions awaiting export."""


import datetime
from enum import Enum
from typing import NamedTuple, Optional


class PolicyType(Enum):
    HOUSEHOLD = 'Household'
    TEAM = 'Team'
    OTHER = 'Other'

    def __str__(self):
        return self.value

    @property
    def is_household(self):
        return self is PolicyType.HOUSEHOLD


class Transaction(NamedTuple):
    """
    One ledger line. Amounts are integer cents from the policy's point of
    view; every format writes them negated.
    """
    amount: int
    date: datetime.date
    description: str = ''
    account: Optional[str] = None
    reference: Optional[str] = None
    policy_type: PolicyType = PolicyType.OTHER
    household_id: str = ''
    entity_code: str = ''
    account_number: str = ''
    cost_center: str = ''
    policy_name: str = ''
    name: str = ''
    income_account: str = ''
