from django.http import Http404
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.generic import TemplateView

from apps.corecode.gateway import GatewayError, RowNotFound
from apps.corecode.listing import as_rows
from apps.corecode.views_crud import (
    ListingMixin,
    ManagementDeleteView,
    ManagementFormView,
    ManagementListView,
)

from .fallback import (
    CULTURAL_PROGRAMS_FALLBACK,
    GALLERY_FALLBACK,
    NEWS_FALLBACK,
    PROGRAMS_FALLBACK,
)
from .forms import CulturalProgramForm, GalleryItemForm, NewsItemForm, ProgramForm
from .models import CulturalProgram, NewsItem

# ==================== PUBLIC PAGES ====================


class HomeView(ListingMixin, TemplateView):
    """Hero followed by the news, gallery and programs sections"""

    template_name = "content/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["news"] = self.get_listing("news", NEWS_FALLBACK)
        context["gallery"] = self.get_listing("gallery", GALLERY_FALLBACK)
        context["programs"] = self.get_listing("programs", PROGRAMS_FALLBACK)
        return context


class NewsView(ListingMixin, TemplateView):
    template_name = "content/news.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        listing = self.get_listing("news", NEWS_FALLBACK)

        selected = self.request.GET.get("category", "all")
        if selected != "all" and selected not in NewsItem.Category.values:
            selected = "all"

        items = listing.items
        if selected != "all":
            items = [item for item in items if item.category == selected]

        context["listing"] = listing
        context["news_items"] = items
        context["categories"] = ["all"] + list(NewsItem.Category.values)
        context["selected_category"] = selected
        return context


class GalleryView(ListingMixin, TemplateView):
    template_name = "content/gallery.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["gallery"] = self.get_listing("gallery", GALLERY_FALLBACK)
        return context


class GalleryDetailView(ListingMixin, TemplateView):
    """Full-size preview of one gallery photo"""

    template_name = "content/gallery_detail.html"

    def get_item(self):
        gateway = self.get_gateway()
        pk = self.kwargs["pk"]
        try:
            return gateway.get("gallery", pk)
        except RowNotFound:
            raise Http404(_("Gallery item not found"))
        except GatewayError:
            self.request.content_fallback_tables.append("gallery")
            for item in as_rows(gateway.model_for("gallery"), GALLERY_FALLBACK):
                if item.id == pk:
                    return item
            raise Http404(_("Gallery item not found"))

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["item"] = self.get_item()
        return context


class ProgramsView(ListingMixin, TemplateView):
    template_name = "content/programs.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["programs"] = self.get_listing("programs", PROGRAMS_FALLBACK)
        return context


class CulturalProgramsView(ListingMixin, TemplateView):
    """Scheduled items are listed soonest first"""

    template_name = "content/cultural_programs.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        listing = self.get_listing("cultural_programs", CULTURAL_PROGRAMS_FALLBACK, order_by="date")

        status = self.request.GET.get("status", "")
        items = listing.items
        if status in CulturalProgram.Status.values:
            items = [item for item in items if item.status == status]
        else:
            status = ""

        context["listing"] = listing
        context["cultural_programs"] = items
        context["statuses"] = CulturalProgram.Status.choices
        context["selected_status"] = status
        return context


# ==================== MANAGEMENT: NEWS ====================


class NewsManageListView(ManagementListView):
    table = "news"
    fallback = NEWS_FALLBACK
    title = _("News Management")
    columns = [(_("Title"), "title"), (_("Category"), "category"), (_("Date"), "date_display")]
    create_url = "content:news_create"
    update_url = "content:news_update"
    delete_url = "content:news_delete"


class NewsFormView(ManagementFormView):
    table = "news"
    title = _("News Item")
    form_class = NewsItemForm
    success_url = reverse_lazy("content:news_manage")
    error_message = _("Error saving news item. Please try again.")


class NewsDeleteView(ManagementDeleteView):
    table = "news"
    title = _("News Item")
    success_url = reverse_lazy("content:news_manage")
    error_message = _("Error deleting news item. Please try again.")


# ==================== MANAGEMENT: GALLERY ====================


class GalleryManageListView(ManagementListView):
    table = "gallery"
    fallback = GALLERY_FALLBACK
    title = _("Gallery Management")
    columns = [(_("Title"), "title"), (_("Description"), "description"), (_("Date"), "date_display")]
    create_url = "content:gallery_create"
    update_url = "content:gallery_update"
    delete_url = "content:gallery_delete"


class GalleryFormView(ManagementFormView):
    table = "gallery"
    title = _("Gallery Item")
    form_class = GalleryItemForm
    success_url = reverse_lazy("content:gallery_manage")
    error_message = _("Error saving gallery item. Please try again.")


class GalleryDeleteView(ManagementDeleteView):
    table = "gallery"
    title = _("Gallery Item")
    success_url = reverse_lazy("content:gallery_manage")
    error_message = _("Error deleting gallery item. Please try again.")


# ==================== MANAGEMENT: PROGRAMS ====================


class ProgramManageListView(ManagementListView):
    table = "programs"
    fallback = PROGRAMS_FALLBACK
    title = _("Programs Management")
    columns = [
        (_("Name"), "name"),
        (_("Duration"), "duration"),
        (_("Eligibility"), "eligibility"),
        (_("Fee"), "fee_display"),
    ]
    create_url = "content:program_create"
    update_url = "content:program_update"
    delete_url = "content:program_delete"


class ProgramFormView(ManagementFormView):
    table = "programs"
    title = _("Program")
    form_class = ProgramForm
    success_url = reverse_lazy("content:program_manage")
    error_message = _("Error saving program. Please try again.")


class ProgramDeleteView(ManagementDeleteView):
    table = "programs"
    title = _("Program")
    success_url = reverse_lazy("content:program_manage")
    error_message = _("Error deleting program. Please try again.")


# ==================== MANAGEMENT: CULTURAL PROGRAMS ====================


class CulturalManageListView(ManagementListView):
    table = "cultural_programs"
    fallback = CULTURAL_PROGRAMS_FALLBACK
    order_by = "date"
    title = _("Cultural Programs Management")
    columns = [
        (_("Name"), "name"),
        (_("Type"), "get_type_display"),
        (_("Date"), "date_display"),
        (_("Venue"), "venue"),
        (_("Status"), "get_status_display"),
    ]
    create_url = "content:cultural_create"
    update_url = "content:cultural_update"
    delete_url = "content:cultural_delete"


class CulturalFormView(ManagementFormView):
    table = "cultural_programs"
    title = _("Cultural Program")
    form_class = CulturalProgramForm
    success_url = reverse_lazy("content:cultural_manage")
    error_message = _("Error saving cultural program. Please try again.")


class CulturalDeleteView(ManagementDeleteView):
    table = "cultural_programs"
    title = _("Cultural Program")
    success_url = reverse_lazy("content:cultural_manage")
    error_message = _("Error deleting cultural program. Please try again.")
