"""Fiscal calendar arithmetic."""


def fiscal_period(month, start_month):
    """
    Position of a calendar month within a fiscal year that begins in
    start_month. Both arguments are 1-12; the result is 1-12.
    """
    return ((month - start_month + 12) % 12) + 1


def fiscal_year(date, start_month):
    """
    The fiscal year a date falls in. A fiscal year that does not begin in
    January is named for the calendar year in which it ends.
    """
    if start_month != 1 and date.month >= start_month:
        return date.year + 1
    return date.year
