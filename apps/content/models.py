from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.corecode.utils import format_date_long, format_inr


class NewsItem(models.Model):
    """News post shown on the public news page"""

    class Category(models.TextChoices):
        CULTURAL = "Cultural", _("Cultural")
        LABORATORY = "Laboratory", _("Laboratory")
        TRAINING = "Training", _("Training")
        ACADEMIC = "Academic", _("Academic")
        SPORTS = "Sports", _("Sports")
        OTHER = "Other", _("Other")

    title = models.CharField(max_length=200, verbose_name=_("Title"))
    content = models.TextField(verbose_name=_("Content"))
    category = models.CharField(
        max_length=20,
        choices=Category.choices,
        default=Category.CULTURAL,
        verbose_name=_("Category"),
    )
    date = models.DateField(verbose_name=_("Date"))
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "news"
        ordering = ["-created_at"]
        verbose_name = _("News Item")
        verbose_name_plural = _("News")

    def __str__(self):
        return self.title

    @property
    def date_display(self):
        return format_date_long(self.date)


class GalleryItem(models.Model):
    """Photo hosted elsewhere, referenced by URL"""

    title = models.CharField(max_length=200, verbose_name=_("Title"))
    description = models.TextField(blank=True, verbose_name=_("Description"))
    image_url = models.URLField(max_length=500, verbose_name=_("Image URL"))
    date = models.DateField(verbose_name=_("Date"))
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "gallery"
        ordering = ["-created_at"]
        verbose_name = _("Gallery Item")
        verbose_name_plural = _("Gallery")

    def __str__(self):
        return self.title

    @property
    def date_display(self):
        return format_date_long(self.date)


class Program(models.Model):
    """Course offered by the college"""

    name = models.CharField(max_length=200, verbose_name=_("Program Name"))
    description = models.TextField(verbose_name=_("Description"))
    duration = models.CharField(max_length=50, verbose_name=_("Duration"))
    eligibility = models.CharField(max_length=255, verbose_name=_("Eligibility"))
    fee = models.PositiveIntegerField(default=0, verbose_name=_("Annual Fee (₹)"))
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "programs"
        ordering = ["-created_at"]
        verbose_name = _("Program")
        verbose_name_plural = _("Programs")

    def __str__(self):
        return self.name

    @property
    def fee_display(self):
        return format_inr(self.fee)


class CulturalProgram(models.Model):
    """Scheduled cultural event. Status is set by an operator, not derived from the date."""

    class Type(models.TextChoices):
        EVENT = "event", _("Event")
        WORKSHOP = "workshop", _("Workshop")
        COMPETITION = "competition", _("Competition")
        FESTIVAL = "festival", _("Festival")

    class Status(models.TextChoices):
        UPCOMING = "upcoming", _("Upcoming")
        ONGOING = "ongoing", _("Ongoing")
        COMPLETED = "completed", _("Completed")

    name = models.CharField(max_length=200, verbose_name=_("Name"))
    description = models.TextField(verbose_name=_("Description"))
    type = models.CharField(
        max_length=20,
        choices=Type.choices,
        default=Type.EVENT,
        verbose_name=_("Type"),
    )
    date = models.DateField(verbose_name=_("Date"))
    time = models.CharField(max_length=50, blank=True, verbose_name=_("Time"))
    venue = models.CharField(max_length=200, verbose_name=_("Venue"))
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.UPCOMING,
        verbose_name=_("Status"),
    )
    eligibility = models.CharField(max_length=255, blank=True, verbose_name=_("Eligibility"))
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "cultural_programs"
        ordering = ["date"]
        verbose_name = _("Cultural Program")
        verbose_name_plural = _("Cultural Programs")

    def __str__(self):
        return f"{self.name} ({self.get_type_display()})"

    @property
    def date_display(self):
        return format_date_long(self.date)
