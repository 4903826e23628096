from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.corecode.utils import format_date_short, format_inr


class FeeStructure(models.Model):
    """Fee breakdown of one program for one academic year"""

    SUB_FEES = (
        "tuition_fee",
        "admission_fee",
        "examination_fee",
        "library_fee",
        "laboratory_fee",
        "other_fees",
    )

    # Recomputed by the data gateway on every write
    DERIVED_FIELDS = {"total_fee": "compute_total_fee"}

    program_name = models.CharField(max_length=200, verbose_name=_("Program Name"))
    academic_year = models.CharField(
        max_length=20, default="2024-25", verbose_name=_("Academic Year")
    )

    # Fee items (rupees)
    tuition_fee = models.PositiveIntegerField(default=0, verbose_name=_("Tuition Fee"))
    admission_fee = models.PositiveIntegerField(default=0, verbose_name=_("Admission Fee"))
    examination_fee = models.PositiveIntegerField(default=0, verbose_name=_("Examination Fee"))
    library_fee = models.PositiveIntegerField(default=0, verbose_name=_("Library Fee"))
    laboratory_fee = models.PositiveIntegerField(default=0, verbose_name=_("Laboratory Fee"))
    other_fees = models.PositiveIntegerField(default=0, verbose_name=_("Other Fees"))
    total_fee = models.PositiveIntegerField(
        default=0,
        editable=False,
        verbose_name=_("Total Fee"),
    )

    due_date = models.DateField(verbose_name=_("Due Date"))
    fee_structure_image = models.CharField(
        max_length=500,
        blank=True,
        verbose_name=_("Fee Structure Image"),
        help_text=_("Storage path or absolute URL of the published fee chart"),
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "fees"
        ordering = ["-academic_year", "program_name"]
        verbose_name = _("Fee Structure")
        verbose_name_plural = _("Fee Structures")

    def __str__(self):
        return f"{self.program_name} ({self.academic_year})"

    def compute_total_fee(self):
        return sum(getattr(self, name) or 0 for name in self.SUB_FEES)

    def save(self, *args, **kwargs):
        self.total_fee = self.compute_total_fee()
        super().save(*args, **kwargs)

    @property
    def total_fee_display(self):
        return format_inr(self.total_fee)

    @property
    def due_date_display(self):
        return format_date_short(self.due_date)

    @property
    def fee_structure_image_url(self):
        if not self.fee_structure_image:
            return ""
        if self.fee_structure_image.startswith(("http://", "https://")):
            return self.fee_structure_image

        from apps.corecode.gateway import get_gateway

        return get_gateway().public_url(self.fee_structure_image)


class PaymentRecord(models.Model):
    """A payment made by a student against a fee structure"""

    class Status(models.TextChoices):
        COMPLETED = "completed", _("Completed")
        PENDING = "pending", _("Pending")
        FAILED = "failed", _("Failed")

    student_id = models.CharField(max_length=50, db_index=True, verbose_name=_("Student ID"))
    fee_structure = models.ForeignKey(
        FeeStructure,
        on_delete=models.DO_NOTHING,
        null=True,
        blank=True,
        db_constraint=False,
        related_name="payments",
        verbose_name=_("Fee Structure"),
    )
    amount_paid = models.PositiveIntegerField(verbose_name=_("Amount Paid"))
    payment_date = models.DateField(verbose_name=_("Payment Date"))
    payment_method = models.CharField(max_length=50, verbose_name=_("Payment Method"))
    transaction_id = models.CharField(max_length=100, unique=True, verbose_name=_("Transaction ID"))
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        verbose_name=_("Status"),
    )
    installment_number = models.PositiveSmallIntegerField(default=1, verbose_name=_("Installment"))
    due_date = models.DateField(null=True, blank=True, verbose_name=_("Due Date"))
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "payments"
        ordering = ["-payment_date"]
        verbose_name = _("Payment Record")
        verbose_name_plural = _("Payment Records")

    def __str__(self):
        return f"{self.transaction_id} - {self.student_id}"

    @property
    def is_completed(self):
        return self.status == self.Status.COMPLETED

    @property
    def amount_display(self):
        return format_inr(self.amount_paid)

    @property
    def payment_date_display(self):
        return format_date_short(self.payment_date)
