import datetime
from unittest import mock

import pytest

from apps.content.fallback import (
    CULTURAL_PROGRAMS_FALLBACK,
    GALLERY_FALLBACK,
    NEWS_FALLBACK,
    PROGRAMS_FALLBACK,
)
from apps.content.models import NewsItem
from apps.corecode.gateway import DataGateway, GatewayError
from apps.corecode.listing import fetch_listing
from apps.finance.fallback import FEE_STRUCTURES_FALLBACK, PAYMENTS_FALLBACK


def store_down(*args, **kwargs):
    raise GatewayError("could not connect to server", operation="select")


@pytest.fixture
def unreachable_store():
    with mock.patch.object(DataGateway, "select", side_effect=store_down) as patched:
        yield patched


@pytest.mark.django_db
def test_empty_table_is_not_a_fallback():
    listing = fetch_listing("news", NEWS_FALLBACK)

    assert not listing.is_fallback
    assert len(listing) == 0


@pytest.mark.django_db
def test_rows_are_returned_newest_first():
    NewsItem.objects.create(title="First", content="x", date=datetime.date(2024, 1, 1))
    NewsItem.objects.create(title="Second", content="x", date=datetime.date(2024, 1, 2))

    listing = fetch_listing("news", NEWS_FALLBACK)

    assert [item.title for item in listing] == ["Second", "First"]


@pytest.mark.parametrize(
    "table, fallback",
    [
        ("news", NEWS_FALLBACK),
        ("gallery", GALLERY_FALLBACK),
        ("programs", PROGRAMS_FALLBACK),
        ("cultural_programs", CULTURAL_PROGRAMS_FALLBACK),
        ("fees", FEE_STRUCTURES_FALLBACK),
        ("payments", PAYMENTS_FALLBACK),
    ],
)
def test_read_failure_substitutes_fallback(unreachable_store, table, fallback):
    listing = fetch_listing(table, fallback)

    assert listing.is_fallback
    assert "could not connect" in listing.error
    assert len(listing) == len(fallback)


def test_fallback_counts():
    assert (len(NEWS_FALLBACK), len(GALLERY_FALLBACK), len(PROGRAMS_FALLBACK)) == (3, 6, 3)
    assert (len(FEE_STRUCTURES_FALLBACK), len(PAYMENTS_FALLBACK)) == (2, 2)


def test_fallback_rows_behave_like_model_rows(unreachable_store):
    listing = fetch_listing("programs", PROGRAMS_FALLBACK)

    assert listing.items[0].fee_display == "₹45,000"


@pytest.mark.django_db
def test_home_page_renders_fallback_with_header(client, unreachable_store):
    response = client.get("/")

    assert response.status_code == 200
    assert response["X-Content-Fallback"] == "gallery,news,programs"
    assert len(response.context["news"]) == 3
    assert len(response.context["gallery"]) == 6
    assert len(response.context["programs"]) == 3
    assert "Annual Cultural Function 2024" in response.content.decode()
    assert "could not connect" not in response.content.decode()


@pytest.mark.django_db
def test_no_header_when_store_is_readable(client):
    response = client.get("/news/")

    assert response.status_code == 200
    assert "X-Content-Fallback" not in response
    assert "No news available in this category." in response.content.decode()


@pytest.mark.django_db
def test_news_category_filter(client):
    NewsItem.objects.create(title="Sports Day", content="x", category="Sports", date=datetime.date(2024, 1, 8))
    NewsItem.objects.create(title="Lab Opening", content="x", category="Laboratory", date=datetime.date(2024, 1, 10))

    response = client.get("/news/", {"category": "Sports"})

    assert [item.title for item in response.context["news_items"]] == ["Sports Day"]
    assert response.context["selected_category"] == "Sports"


@pytest.mark.django_db
def test_unknown_category_shows_all(client):
    NewsItem.objects.create(title="Sports Day", content="x", category="Sports", date=datetime.date(2024, 1, 8))

    response = client.get("/news/", {"category": "Nope"})

    assert response.context["selected_category"] == "all"
    assert len(response.context["news_items"]) == 1


@pytest.mark.django_db
def test_cultural_programs_fallback_sorted_and_filtered(client, unreachable_store):
    response = client.get("/cultural-programs/", {"status": "upcoming"})

    assert response.status_code == 200
    assert response["X-Content-Fallback"] == "cultural_programs"
    assert len(response.context["cultural_programs"]) == 3


@pytest.mark.django_db
def test_gallery_detail_falls_back_to_demo_item(client):
    with mock.patch.object(DataGateway, "get", side_effect=GatewayError("timeout")):
        response = client.get("/gallery/2/")

    assert response.status_code == 200
    assert response.context["item"].title == "Science Laboratory"
    assert response["X-Content-Fallback"] == "gallery"


@pytest.mark.django_db
def test_gallery_detail_missing_row_is_404(client):
    assert client.get("/gallery/42/").status_code == 404


@pytest.mark.django_db
def test_fallback_alert_is_mailed_once_per_table(settings, mailoutbox, unreachable_store):
    settings.ADMINS = [("Ops", "ops@jptt.edu")]

    fetch_listing("news", NEWS_FALLBACK)
    fetch_listing("news", NEWS_FALLBACK)
    fetch_listing("gallery", GALLERY_FALLBACK)

    subjects = sorted(message.subject for message in mailoutbox)
    assert len(subjects) == 2
    assert subjects[0].endswith("Content fallback: gallery")
    assert subjects[1].endswith("Content fallback: news")
    assert mailoutbox[0].to == ["ops@jptt.edu"]


@pytest.mark.django_db
def test_alerts_disabled_with_zero_interval(settings, mailoutbox, unreachable_store):
    settings.ADMINS = [("Ops", "ops@jptt.edu")]
    settings.FALLBACK_ALERT_INTERVAL = 0

    fetch_listing("news", NEWS_FALLBACK)

    assert mailoutbox == []


@pytest.mark.django_db
def test_failed_alert_queueing_does_not_suppress_next_alert(settings, mailoutbox, unreachable_store):
    settings.ADMINS = [("Ops", "ops@jptt.edu")]

    with mock.patch("tasks.dispatch", side_effect=RuntimeError("broker down")):
        fetch_listing("news", NEWS_FALLBACK)
    assert mailoutbox == []

    fetch_listing("news", NEWS_FALLBACK)

    assert len(mailoutbox) == 1
    assert mailoutbox[0].subject.endswith("Content fallback: news")
