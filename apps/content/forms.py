from django import forms
from django.utils import timezone

from .models import CulturalProgram, GalleryItem, NewsItem, Program


class NewsItemForm(forms.ModelForm):
    class Meta:
        model = NewsItem
        fields = ["title", "content", "category", "date"]
        widgets = {
            "date": forms.DateInput(attrs={"type": "date"}),
            "content": forms.Textarea(attrs={"rows": 5}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.instance.pk:
            self.fields["date"].initial = timezone.localdate()


class GalleryItemForm(forms.ModelForm):
    class Meta:
        model = GalleryItem
        fields = ["title", "description", "image_url", "date"]
        widgets = {
            "date": forms.DateInput(attrs={"type": "date"}),
            "description": forms.Textarea(attrs={"rows": 3}),
            "image_url": forms.URLInput(attrs={"placeholder": "https://example.com/image.jpg"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.instance.pk:
            self.fields["date"].initial = timezone.localdate()


class ProgramForm(forms.ModelForm):
    class Meta:
        model = Program
        fields = ["name", "description", "duration", "eligibility", "fee"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 4}),
            "duration": forms.TextInput(attrs={"placeholder": "e.g., 2 Years"}),
            "eligibility": forms.TextInput(attrs={"placeholder": "e.g., Graduate with minimum 50% marks"}),
        }


class CulturalProgramForm(forms.ModelForm):
    class Meta:
        model = CulturalProgram
        fields = ["name", "description", "type", "date", "time", "venue", "status", "eligibility"]
        widgets = {
            "date": forms.DateInput(attrs={"type": "date"}),
            "description": forms.Textarea(attrs={"rows": 3}),
            "time": forms.TextInput(attrs={"placeholder": "e.g., 10:00 AM"}),
        }
