"""
Fee summary, payment search and receipt rendering for the student fee view
"""
from dataclasses import dataclass

from django.conf import settings

from apps.corecode.utils import format_date_short, format_inr


@dataclass(frozen=True)
class FeeSummary:
    total_fee: int
    paid: int
    remaining: int
    progress: float

    @property
    def progress_display(self):
        """Whole percent, truncated"""
        return int(self.progress)

    @property
    def progress_width(self):
        """Progress bar width, kept within 0-100"""
        return max(0, min(100, self.progress_display))


def summarize_fees(fee_structure, payments):
    """
    Totals for the fee overview cards.

    Only completed payments count towards ``paid``. ``remaining`` and
    ``progress`` are not clamped, so overpayment shows as a negative
    remainder and progress above 100.
    """
    total_fee = fee_structure.total_fee if fee_structure is not None else 0
    paid = sum(p.amount_paid for p in payments if p.status == "completed")
    progress = paid / total_fee * 100 if total_fee else 0
    return FeeSummary(
        total_fee=total_fee,
        paid=paid,
        remaining=total_fee - paid,
        progress=progress,
    )


def select_fee_structure(fee_structures, selected_id=None, profile=None):
    """
    The structure named by ``selected_id``, else the one matching the student's program.
    """
    if selected_id not in (None, ""):
        for fee in fee_structures:
            if str(fee.id) == str(selected_id):
                return fee
        return None

    profile = profile or settings.STUDENT_PROFILE
    match = getattr(settings, "STUDENT_PROGRAM_MATCH", "B.Ed")
    for fee in fee_structures:
        if match in fee.program_name or fee.program_name == profile.get("program"):
            return fee
    return None


def filter_payments(payments, query):
    """Case-insensitive match on transaction id or payment method"""
    query = (query or "").strip().lower()
    if not query:
        return list(payments)
    return [
        p
        for p in payments
        if query in p.transaction_id.lower() or query in p.payment_method.lower()
    ]


def render_receipt(payment, profile=None):
    profile = profile or settings.STUDENT_PROFILE
    lines = [
        "FEE PAYMENT RECEIPT",
        "--------------------",
        f"Student: {profile.get('name', '')}",
        f"Student ID: {profile.get('student_id', '')}",
        f"Program: {profile.get('program', '')}",
        "",
        f"Payment Date: {format_date_short(payment.payment_date)}",
        f"Transaction ID: {payment.transaction_id}",
        f"Amount Paid: {format_inr(payment.amount_paid)}",
        f"Payment Method: {payment.payment_method}",
        f"Installment: {payment.installment_number}",
        "",
        f"Status: {payment.status.upper()}",
        "",
        "Thank you for your payment!",
    ]
    return "\n".join(lines) + "\n"
