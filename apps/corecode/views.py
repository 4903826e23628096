from django.contrib.auth.views import LoginView, LogoutView
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.views.generic import TemplateView

from .forms import AdminLoginForm
from .gateway import GatewayError
from .policy import can_access_admin
from .views_crud import AdminRequiredMixin, GatewayMixin


class CustomLoginView(LoginView):
    """Login form for the management panel"""

    template_name = "registration/login.html"
    authentication_form = AdminLoginForm
    redirect_authenticated_user = False

    def dispatch(self, request, *args, **kwargs):
        # Signed-in users that the policy admits never see the login form
        if request.user.is_authenticated and can_access_admin(request.user):
            return redirect(self.get_success_url())
        return super().dispatch(request, *args, **kwargs)


class CustomLogoutView(LogoutView):
    next_page = reverse_lazy("content:home")


class AdminPanelView(AdminRequiredMixin, GatewayMixin, TemplateView):
    """Management dashboard with one tab per content table"""

    template_name = "corecode/admin_panel.html"

    TABS = [
        {"table": "news", "title": "News Management", "url": "content:news_manage"},
        {"table": "gallery", "title": "Gallery Management", "url": "content:gallery_manage"},
        {"table": "programs", "title": "Programs Management", "url": "content:program_manage"},
        {"table": "cultural_programs", "title": "Cultural Programs", "url": "content:cultural_manage"},
        {"table": "fees", "title": "Fees Management", "url": "finance:fee_structure_list"},
    ]

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        gateway = self.get_gateway()

        tabs = []
        for tab in self.TABS:
            try:
                count = len(gateway.select(tab["table"], order_by=None))
            except GatewayError:
                count = None
            tabs.append({**tab, "count": count})

        context["tabs"] = tabs
        return context
