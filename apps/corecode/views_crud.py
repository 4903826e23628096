"""
Shared building blocks for the management screens.

Every management screen is a list of one table plus an add/edit form and a
delete confirmation. Reads and writes go through the data gateway; after a
successful write the browser is redirected back to the list, which reads the
table again.
"""
import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.core.exceptions import ValidationError
from django.http import Http404
from django.shortcuts import redirect
from django.utils.translation import gettext_lazy as _
from django.views.generic import FormView, TemplateView

from .gateway import GatewayError, get_gateway
from .listing import fetch_listing
from .policy import can_access_admin

logger = logging.getLogger(__name__)


class AdminRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """Anonymous users are sent to the login form; users the policy rejects get 403"""

    def test_func(self):
        return can_access_admin(self.request.user)


class GatewayMixin:
    gateway = None

    def get_gateway(self):
        return self.gateway or get_gateway()


class ListingMixin(GatewayMixin):
    def get_listing(self, table, fallback, order_by="-created_at", **filters):
        listing = fetch_listing(
            table, fallback, order_by=order_by, gateway=self.get_gateway(), **filters
        )
        if listing.is_fallback and hasattr(self.request, "content_fallback_tables"):
            self.request.content_fallback_tables.append(table)
        return listing


class ManagementListView(AdminRequiredMixin, ListingMixin, TemplateView):
    """Table of one entity with edit/delete links"""

    template_name = "corecode/manage/list.html"
    table = None
    fallback = ()
    order_by = "-created_at"
    title = ""
    columns = ()
    create_url = None
    update_url = None
    delete_url = None

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["listing"] = self.get_listing(self.table, self.fallback, order_by=self.order_by)
        context["title"] = self.title
        context["columns"] = self.columns
        context["create_url"] = self.create_url
        context["update_url"] = self.update_url
        context["delete_url"] = self.delete_url
        return context


class ManagementFormView(AdminRequiredMixin, GatewayMixin, FormView):
    """
    Add/edit form for one row.

    Without ``pk`` in the URL the form starts blank and submits an insert;
    with ``pk`` it is pre-populated and submits an update of that row.
    """

    template_name = "corecode/manage/form.html"
    table = None
    title = ""
    success_url = None
    error_message = _("Error saving item. Please try again.")

    def dispatch(self, request, *args, **kwargs):
        self.object = None
        return super().dispatch(request, *args, **kwargs)

    @property
    def is_edit(self):
        return "pk" in self.kwargs

    def get_object(self):
        if self.object is None and self.is_edit:
            try:
                self.object = self.get_gateway().get(self.table, self.kwargs["pk"])
            except GatewayError as e:
                raise Http404(str(e))
        return self.object

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["instance"] = self.get_object()
        return kwargs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        verb = _("Edit") if self.is_edit else _("Add New")
        context["title"] = f"{verb} {self.title}"
        context["object"] = self.object
        context["is_edit"] = self.is_edit
        context["cancel_url"] = self.get_success_url()
        return context

    def get_row_values(self, form):
        """Model field values taken from the form"""
        return {
            name: value
            for name, value in form.cleaned_data.items()
            if name in form._meta.fields
        }

    def write_row(self, values):
        """Exactly one gateway write: update-by-id when editing, insert otherwise"""
        gateway = self.get_gateway()
        if self.is_edit:
            return gateway.update(self.table, self.kwargs["pk"], values)
        return gateway.insert(self.table, values)

    def save_row(self, form):
        return self.write_row(self.get_row_values(form))

    def form_valid(self, form):
        try:
            self.object = self.save_row(form)
        except ValidationError as e:
            for message in e.messages:
                form.add_error(None, message)
            messages.error(self.request, self.error_message)
            return self.form_invalid(form)
        except GatewayError as e:
            logger.error(f"Saving {self.table} failed: {e}")
            messages.error(self.request, self.error_message)
            return self.form_invalid(form)

        if self.is_edit:
            messages.success(self.request, _("%(title)s updated successfully") % {"title": self.title})
        else:
            messages.success(self.request, _("%(title)s created successfully") % {"title": self.title})
        return redirect(self.get_success_url())


class ManagementDeleteView(AdminRequiredMixin, GatewayMixin, TemplateView):
    """Confirm on GET, delete on POST"""

    template_name = "corecode/manage/confirm_delete.html"
    table = None
    title = ""
    success_url = None
    error_message = _("Error deleting item. Please try again.")

    def get_object(self):
        try:
            return self.get_gateway().get(self.table, self.kwargs["pk"])
        except GatewayError as e:
            raise Http404(str(e))

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["object"] = self.get_object()
        context["title"] = self.title
        context["cancel_url"] = self.success_url
        return context

    def post(self, request, *args, **kwargs):
        try:
            self.get_gateway().delete(self.table, self.kwargs["pk"])
        except GatewayError as e:
            logger.error(f"Deleting {self.table}#{self.kwargs['pk']} failed: {e}")
            messages.error(request, self.error_message)
            return redirect(self.success_url)

        messages.success(request, _("%(title)s deleted successfully") % {"title": self.title})
        return redirect(self.success_url)
