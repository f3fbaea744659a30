"""Amount and date encodings shared by every batch format."""


from decimal import Decimal


CURRENCY_FACTOR = 100


def currency(amount):
    """
    Render integer cents as a plain two-place decimal, e.g. -150 -> '-1.50'.
    """
    return '{:.2f}'.format(Decimal(int(amount)) / CURRENCY_FACTOR)


# strftime('%Y') does not pad years before 1000 on every platform


def compact_date(date):
    return '{:04}{:02}{:02}'.format(date.year, date.month, date.day)


def iso_date(date):
    return '{:04}-{:02}-{:02}'.format(date.year, date.month, date.day)


def us_date(date):
    return '{:02}/{:02}/{:04}'.format(date.month, date.day, date.year)


def month_year(date):
    """e.g. 'September 2020'"""
    return '{} {:04}'.format(date.strftime('%B'), date.year)


def display_date(date, fmt):
    return date.strftime(fmt)


def truncate(text, width):
    return text[:width]
