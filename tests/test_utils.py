import datetime

import pytest

from apps.corecode.utils import format_date_long, format_date_short, format_inr, group_indian


@pytest.mark.parametrize(
    "amount, expected",
    [(0, "₹0"), (999, "₹999"), (15000, "₹15,000"), (45000, "₹45,000"), (4500000, "₹45,00,000"), (-2000, "-₹2,000")],
)
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected


def test_group_indian_crore():
    assert group_indian(123456789) == "12,34,56,789"


def test_dates_accept_strings_and_dates():
    assert format_date_long("2024-01-15") == "15 January 2024"
    assert format_date_long(datetime.date(2024, 1, 5)) == "5 January 2024"
    assert format_date_short("2024-07-15") == "15 Jul 2024"
    assert format_date_short(None) == ""
