import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import Http404, HttpResponse
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.generic import TemplateView

from apps.corecode.gateway import GatewayError
from apps.corecode.listing import fetch_listing
from apps.corecode.uploads import FEE_STRUCTURE_BUCKET, store_image
from apps.corecode.views_crud import (
    ListingMixin,
    ManagementDeleteView,
    ManagementFormView,
    ManagementListView,
)

from .fallback import FEE_STRUCTURES_FALLBACK, PAYMENTS_FALLBACK
from .forms import FeeStructureForm, PaymentSearchForm
from .utils import filter_payments, render_receipt, select_fee_structure, summarize_fees

logger = logging.getLogger(__name__)


# ==================== STUDENT FEE VIEW ====================


def get_student_payments(request, gateway=None):
    """Payments of the configured student, newest first"""
    profile = settings.STUDENT_PROFILE
    listing = fetch_listing(
        "payments",
        PAYMENTS_FALLBACK,
        order_by="-payment_date",
        gateway=gateway,
        student_id=profile["student_id"],
    )
    if listing.is_fallback and hasattr(request, "content_fallback_tables"):
        request.content_fallback_tables.append("payments")
    return listing


class StudentFeesView(ListingMixin, TemplateView):
    """Fee overview, structure details and payment history of one student"""

    template_name = "finance/student_fees.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        profile = settings.STUDENT_PROFILE

        fee_structures = self.get_listing("fees", FEE_STRUCTURES_FALLBACK, order_by="-academic_year")
        payments = get_student_payments(self.request, gateway=self.get_gateway())

        selected = select_fee_structure(
            fee_structures.items, self.request.GET.get("fee_structure"), profile=profile
        )
        search_form = PaymentSearchForm(self.request.GET or None)
        query = search_form.cleaned_data["q"] if search_form.is_valid() else ""

        context.update(
            {
                "student": profile,
                "fee_structures": fee_structures,
                "selected_fee_structure": selected,
                "summary": summarize_fees(selected, payments.items),
                "payments": payments,
                "filtered_payments": filter_payments(payments.items, query),
                "search_form": search_form,
                "query": query,
            }
        )
        return context


def download_receipt(request, transaction_id):
    """Plain-text receipt of one of the student's payments"""
    payments = get_student_payments(request)
    for payment in payments:
        if payment.transaction_id == transaction_id:
            break
    else:
        raise Http404(_("Payment not found"))

    response = HttpResponse(render_receipt(payment), content_type="text/plain; charset=utf-8")
    response["Content-Disposition"] = f'attachment; filename="receipt-{transaction_id}.txt"'
    logger.info(f"Receipt downloaded for {transaction_id}")
    return response


# ==================== MANAGEMENT: FEE STRUCTURES ====================


class FeeStructureListView(ManagementListView):
    table = "fees"
    fallback = FEE_STRUCTURES_FALLBACK
    title = _("Fees Management")
    template_name = "finance/fee_structure_list.html"
    columns = [
        (_("Program"), "program_name"),
        (_("Academic Year"), "academic_year"),
        (_("Total Fee"), "total_fee_display"),
        (_("Due Date"), "due_date_display"),
    ]
    create_url = "finance:fee_structure_create"
    update_url = "finance:fee_structure_update"
    delete_url = "finance:fee_structure_delete"


class FeeStructureFormView(ManagementFormView):
    """
    Add/edit a fee structure with an optional fee chart image.

    A new image is validated and stored before the row write; if the write
    then fails, the stored object is removed again so no orphan remains.
    """

    table = "fees"
    title = _("Fee Structure")
    form_class = FeeStructureForm
    template_name = "finance/fee_structure_form.html"
    success_url = reverse_lazy("finance:fee_structure_list")
    error_message = _("Error saving fee structure. Please try again.")

    def save_row(self, form):
        gateway = self.get_gateway()
        values = self.get_row_values(form)

        uploaded = None
        image = form.cleaned_data.get("image")
        if image:
            uploaded = store_image(image, FEE_STRUCTURE_BUCKET, gateway=gateway)
            values["fee_structure_image"] = uploaded
        elif form.cleaned_data.get("remove_image"):
            values["fee_structure_image"] = ""

        try:
            return self.write_row(values)
        except (ValidationError, GatewayError):
            if uploaded:
                logger.warning(f"Removing orphaned upload {uploaded}")
                gateway.remove(uploaded)
            raise


class FeeStructureDeleteView(ManagementDeleteView):
    table = "fees"
    title = _("Fee Structure")
    success_url = reverse_lazy("finance:fee_structure_list")
    error_message = _("Error deleting fee structure. Please try again.")
