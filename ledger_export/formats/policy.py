"""Per-policy statements sent directly to policyholders."""


from ledger_export.formats.common import Batch, CONTENT_ZIP, with_suffix
from ledger_export.formatting import currency, display_date


HEADER = '"Amount","Description","Reference","Date Entered"\n'
ROW_TEMPLATE = '{amount},"{description}","{reference}",{date}\n'


class PolicyStatement(Batch):
    def __init__(self, date_format):
        super().__init__()
        self.date_format = date_format

    def reference(self, t):
        if t.reference is not None:
            return t.reference
        if t.policy_type.is_household:
            return with_suffix('MC ' + t.household_id, t.name)
        return with_suffix(
            '{} {}{}'.format(t.entity_code, t.account_number, t.cost_center),
            t.policy_name,
        )

    def header(self):
        return HEADER

    def rows(self):
        for t in self._transactions:
            yield ROW_TEMPLATE.format(
                amount=currency(-t.amount),
                description=t.description,
                reference=self.reference(t),
                date=display_date(t.date, self.date_format),
            )

    def render_archive(self):
        """
        Bundle several statements into one archive.

        No archive layout has been agreed with the recipients yet, so this
        returns an empty payload.
        """
        return b'', CONTENT_ZIP
