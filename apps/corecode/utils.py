"""
Display helpers shared by templates, receipts and management commands
"""
import datetime


def group_indian(number):
    """Group digits the Indian way: 4500000 -> '45,00,000'"""
    digits = str(abs(int(number)))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        digits = ",".join(pairs + [tail])
    return f"-{digits}" if int(number) < 0 else digits


def format_inr(amount):
    """Whole-rupee amount with the rupee sign, e.g. ₹45,000"""
    if amount is None or amount == "":
        return ""
    value = int(round(float(amount)))
    if value < 0:
        return f"-₹{group_indian(-value)}"
    return f"₹{group_indian(value)}"


def parse_date(value):
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not value:
        return None
    return datetime.date.fromisoformat(str(value)[:10])


def format_date_long(value):
    """15 January 2024"""
    date = parse_date(value)
    if date is None:
        return ""
    return f"{date.day} {date:%B %Y}"


def format_date_short(value):
    """15 Jan 2024"""
    date = parse_date(value)
    if date is None:
        return ""
    return f"{date:%d %b %Y}"
