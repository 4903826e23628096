from django.urls import path

from . import views

app_name = "corecode"

urlpatterns = [
    path("login/", views.CustomLoginView.as_view(), name="login"),
    path("logout/", views.CustomLogoutView.as_view(), name="logout"),
    path("", views.AdminPanelView.as_view(), name="admin_panel"),
]
