import datetime
from unittest import mock

import pytest
from django.contrib.messages import get_messages

from apps.content.models import CulturalProgram, GalleryItem, NewsItem, Program
from apps.corecode.gateway import DataGateway, GatewayError

pytestmark = pytest.mark.django_db


def message_texts(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


@pytest.fixture
def news_item():
    return NewsItem.objects.create(
        title="Teacher Training Workshop",
        content="Modern teaching methodologies.",
        category="Training",
        date=datetime.date(2024, 1, 5),
    )


@pytest.mark.parametrize(
    "url",
    ["/manage/news/", "/manage/news/create/", "/manage/gallery/", "/manage/programs/", "/manage/fees/"],
)
def test_management_screens_require_sign_in(client, url):
    response = client.get(url)

    assert response.status_code == 302
    assert response["Location"].startswith("/panel/login/?next=")


def test_add_appends_exactly_one_row(editor_client, news_item):
    response = editor_client.post(
        "/manage/news/create/",
        {"title": "Sports Day 2024", "content": "Athletics meet.", "category": "Sports", "date": "2024-01-08"},
    )

    assert response.status_code == 302
    assert response["Location"] == "/manage/news/"
    assert NewsItem.objects.count() == 2
    assert "News Item created successfully" in message_texts(response)

    listing = editor_client.get("/manage/news/").context["listing"]
    assert [item.title for item in listing] == ["Sports Day 2024", "Teacher Training Workshop"]


def test_add_form_starts_blank(editor_client):
    response = editor_client.get("/manage/news/create/")

    assert response.status_code == 200
    assert response.context["is_edit"] is False
    assert response.context["form"].instance.pk is None


def test_edit_form_is_prepopulated(editor_client, news_item):
    response = editor_client.get(f"/manage/news/{news_item.pk}/update/")

    assert response.context["is_edit"] is True
    assert response.context["form"]["title"].value() == "Teacher Training Workshop"


def test_edit_changes_only_that_row(editor_client, news_item):
    other = NewsItem.objects.create(title="Other", content="x", date=datetime.date(2024, 1, 1))

    response = editor_client.post(
        f"/manage/news/{news_item.pk}/update/",
        {"title": "Workshop (updated)", "content": "Changed.", "category": "Academic", "date": "2024-01-06"},
    )

    assert response.status_code == 302
    news_item.refresh_from_db()
    other.refresh_from_db()
    assert news_item.title == "Workshop (updated)"
    assert news_item.category == "Academic"
    assert other.title == "Other"
    assert NewsItem.objects.count() == 2


def test_edit_of_missing_row_is_404(editor_client):
    assert editor_client.get("/manage/news/999/update/").status_code == 404


def test_invalid_submission_rerenders_with_values(editor_client):
    response = editor_client.post(
        "/manage/programs/create/",
        {"name": "", "description": "x", "duration": "2 Years", "eligibility": "Graduate", "fee": "45000"},
    )

    assert response.status_code == 200
    assert response.context["form"]["duration"].value() == "2 Years"
    assert Program.objects.count() == 0


def test_write_failure_shows_error_and_keeps_form(editor_client):
    with mock.patch.object(DataGateway, "insert", side_effect=GatewayError("write refused")):
        response = editor_client.post(
            "/manage/gallery/create/",
            {
                "title": "Sports Day",
                "description": "Athletics",
                "image_url": "https://images.example.com/sports.jpg",
                "date": "2024-01-08",
            },
        )

    assert response.status_code == 200
    assert "Error saving gallery item. Please try again." in message_texts(response)
    assert response.context["form"]["title"].value() == "Sports Day"
    assert GalleryItem.objects.count() == 0


def test_delete_asks_for_confirmation_then_deletes(editor_client, news_item):
    confirm = editor_client.get(f"/manage/news/{news_item.pk}/delete/")
    assert confirm.status_code == 200
    assert NewsItem.objects.filter(pk=news_item.pk).exists()

    response = editor_client.post(f"/manage/news/{news_item.pk}/delete/")

    assert response.status_code == 302
    assert not NewsItem.objects.filter(pk=news_item.pk).exists()
    assert "News Item deleted successfully" in message_texts(response)


def test_cultural_program_crud_round(editor_client):
    response = editor_client.post(
        "/manage/cultural-programs/create/",
        {
            "name": "Saraswati Puja",
            "description": "Celebration",
            "type": "festival",
            "date": "2024-02-14",
            "time": "10:00 AM",
            "venue": "Auditorium",
            "status": "upcoming",
            "eligibility": "",
        },
    )

    assert response.status_code == 302
    event = CulturalProgram.objects.get()
    assert event.get_type_display() == "Festival"

    page = editor_client.get("/cultural-programs/")
    assert [e.name for e in page.context["cultural_programs"]] == ["Saraswati Puja"]


def test_programs_page_formats_fee(client):
    Program.objects.create(
        name="B.Ed", description="x", duration="2 Years", eligibility="Graduate", fee=4500000
    )

    response = client.get("/programs/")

    assert "₹45,00,000" in response.content.decode()


def test_admin_panel_counts_rows(editor_client, news_item):
    response = editor_client.get("/panel/")

    counts = {tab["table"]: tab["count"] for tab in response.context["tabs"]}
    assert counts["news"] == 1
    assert counts["gallery"] == 0
