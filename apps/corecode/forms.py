from django import forms
from django.contrib.auth.forms import AuthenticationForm
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _


class AdminLoginForm(AuthenticationForm):
    """E-mail/password sign-in with distinct failure messages"""

    error_messages = {
        "invalid_login": _("Invalid email or password. Please check your credentials."),
        "inactive": _("Please verify your email address before logging in."),
        "missing": _("Please enter both email and password"),
    }

    username = forms.CharField(
        label=_("Email Address"),
        required=False,
        widget=forms.EmailInput(
            attrs={"autofocus": True, "autocomplete": "email", "placeholder": _("Enter your email")}
        ),
    )
    password = forms.CharField(
        label=_("Password"),
        required=False,
        strip=False,
        widget=forms.PasswordInput(
            attrs={"autocomplete": "current-password", "placeholder": _("Enter your password")}
        ),
    )

    def clean(self):
        email = (self.cleaned_data.get("username") or "").strip()
        password = self.cleaned_data.get("password") or ""

        if not email or not password:
            raise ValidationError(self.error_messages["missing"], code="missing")

        self.cleaned_data["username"] = email
        return super().clean()
