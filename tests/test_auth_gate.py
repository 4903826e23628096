import pytest
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import ImproperlyConfigured

from apps.corecode.policy import can_access_admin, get_user_role
from apps.corecode.session import build_session_context

pytestmark = pytest.mark.django_db


def login(client, email, password):
    return client.post("/panel/login/", {"username": email, "password": password})


def test_anonymous_user_is_sent_to_login(client):
    response = client.get("/panel/")

    assert response.status_code == 302
    assert response["Location"] == "/panel/login/?next=/panel/"


def test_signed_in_user_sees_panel(editor_client):
    response = editor_client.get("/panel/")

    assert response.status_code == 200
    assert response.context["session_context"].role == "admin"


def test_sign_in_with_email(client, editor, password):
    response = login(client, "Editor@JPTT.edu", password)

    assert response.status_code == 302
    assert response["Location"] == "/panel/"
    assert client.get("/panel/").status_code == 200


def test_sign_in_honours_next(client, editor, password):
    response = client.post(
        "/panel/login/?next=/manage/news/",
        {"username": editor.email, "password": password, "next": "/manage/news/"},
    )

    assert response["Location"] == "/manage/news/"


def test_bad_credentials_message(client, editor):
    response = login(client, editor.email, "wrong")

    assert response.status_code == 200
    assert response.context["form"].non_field_errors() == [
        "Invalid email or password. Please check your credentials."
    ]


def test_unconfirmed_account_message(client, editor, password):
    editor.is_active = False
    editor.save()

    response = login(client, editor.email, password)

    assert response.context["form"].non_field_errors() == [
        "Please verify your email address before logging in."
    ]


@pytest.mark.parametrize("email, password", [("", "x"), ("editor@jptt.edu", ""), ("  ", "")])
def test_missing_fields_message(client, email, password):
    response = login(client, email, password)

    assert response.context["form"].non_field_errors() == ["Please enter both email and password"]


def test_sign_out_requires_post_and_ends_session(editor_client):
    response = editor_client.post("/panel/logout/")

    assert response.status_code == 302
    assert response["Location"] == "/"
    assert editor_client.get("/panel/").status_code == 302


def test_signed_in_admin_skips_login_form(editor_client):
    response = editor_client.get("/panel/login/")

    assert response.status_code == 302
    assert response["Location"] == "/panel/"


def test_staff_policy_forbids_plain_users(settings, editor_client):
    settings.ADMIN_ACCESS_POLICY = "staff"

    assert editor_client.get("/panel/").status_code == 403
    assert editor_client.get("/manage/news/").status_code == 403
    assert editor_client.post("/manage/news/create/", {"title": "x"}).status_code == 403


def test_staff_policy_admits_staff(settings, client, site_admin):
    settings.ADMIN_ACCESS_POLICY = "staff"
    client.force_login(site_admin)

    assert client.get("/panel/").status_code == 200


def test_admin_role_policy(settings, editor, site_admin):
    settings.ADMIN_ACCESS_POLICY = "admin_role"

    assert can_access_admin(site_admin)
    assert not can_access_admin(editor)
    assert get_user_role(editor) == "member"
    assert get_user_role(AnonymousUser()) == "public"


def test_unknown_policy_is_a_configuration_error(settings, editor):
    settings.ADMIN_ACCESS_POLICY = "everyone"

    with pytest.raises(ImproperlyConfigured):
        can_access_admin(editor)


def test_session_context_for_anonymous_visitor():
    context = build_session_context(AnonymousUser())

    assert not context.is_authenticated
    assert not context.can_access_admin
    assert context.email == ""


def test_public_pages_show_login_link_to_visitors(client):
    body = client.get("/").content.decode()

    assert "Admin Login" in body
    assert "Admin Panel" not in body
