from django import forms
from django.utils.translation import gettext_lazy as _

from apps.corecode.uploads import validate_image_upload

from .models import FeeStructure


class FeeStructureForm(forms.ModelForm):
    """Fee structure form; the total is computed on save and never entered"""

    image = forms.FileField(
        required=False,
        label=_("Fee Structure Image"),
        help_text=_("Upload fee structure image (max 5MB)"),
        widget=forms.ClearableFileInput(attrs={"accept": "image/*"}),
    )
    remove_image = forms.BooleanField(required=False, label=_("Remove current image"))

    class Meta:
        model = FeeStructure
        fields = [
            "program_name",
            "academic_year",
            "tuition_fee",
            "admission_fee",
            "examination_fee",
            "library_fee",
            "laboratory_fee",
            "other_fees",
            "due_date",
        ]
        widgets = {
            "due_date": forms.DateInput(attrs={"type": "date"}),
            "academic_year": forms.TextInput(attrs={"placeholder": "e.g., 2024-25"}),
        }

    def clean_image(self):
        image = self.cleaned_data.get("image")
        if image:
            validate_image_upload(image)
        return image

    def preview_total(self):
        """Sum of the sub-fees as currently entered, for the read-only total"""
        if self.is_bound and hasattr(self, "cleaned_data"):
            return sum(self.cleaned_data.get(name) or 0 for name in FeeStructure.SUB_FEES)
        return self.instance.compute_total_fee()


class PaymentSearchForm(forms.Form):
    q = forms.CharField(
        required=False,
        label=_("Search payments"),
        widget=forms.TextInput(attrs={"placeholder": _("Search payments...")}),
    )
