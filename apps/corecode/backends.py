from django.contrib.auth import get_user_model
from django.contrib.auth.backends import AllowAllUsersModelBackend


class EmailBackend(AllowAllUsersModelBackend):
    """
    Authenticate with e-mail address and password.

    Inactive accounts are returned so the login form can tell an
    unconfirmed account apart from bad credentials; the form refuses them.
    """

    def authenticate(self, request, username=None, password=None, email=None, **kwargs):
        email = (email or username or "").strip()
        if not email or password is None:
            return None

        UserModel = get_user_model()
        user = (
            UserModel._default_manager.filter(email__iexact=email).order_by("pk").first()
        )
        if user is None:
            # Same hashing cost as an existing user
            UserModel().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
