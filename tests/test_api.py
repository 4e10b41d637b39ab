"""Tests for the HTTP API."""
from datetime import date

from librolog.models.book import BookDetails, Recommendation


def _create(client, **fields):
    body = {"title": "Dune", "logDate": "2024-03-05"}
    body.update(fields)
    resp = client.post("/api/books/", json=body)
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_create_generates_id_and_applies_editor_rules(client, books_path):
    book = _create(client, rating=4, quotes=["Fear is the mind-killer.", "  "])
    assert book["id"]
    assert book["startDate"] == "2024-03-05"
    assert book["rating"] is None
    assert book["quotes"] == ["Fear is the mind-killer."]
    assert books_path.exists()


def test_create_rejects_blank_title_and_bad_rating(client):
    assert client.post("/api/books/", json={"title": "  ", "logDate": "2024-03-05"}).status_code == 422
    assert client.post(
        "/api/books/", json={"title": "X", "logDate": "2024-03-05", "endDate": "2024-03-06", "rating": 6}
    ).status_code == 422
    assert client.post("/api/books/", json={"title": "X", "logDate": "03/05/2024"}).status_code == 422


def test_get_replace_delete(client):
    book = _create(client)
    assert client.get(f"/api/books/{book['id']}").json()["title"] == "Dune"

    resp = client.put(
        f"/api/books/{book['id']}",
        json={"title": "Dune", "logDate": "2024-03-05", "endDate": "2024-03-20", "rating": 5},
    )
    assert resp.status_code == 200
    assert resp.json()["rating"] == 5
    assert resp.json()["id"] == book["id"]

    assert client.delete(f"/api/books/{book['id']}").status_code == 204
    assert client.get(f"/api/books/{book['id']}").status_code == 404
    # Deleting again is a no-op
    assert client.delete(f"/api/books/{book['id']}").status_code == 204


def test_replace_unknown_book_is_404_and_changes_nothing(client, state):
    _create(client)
    before = state.store.books
    resp = client.put("/api/books/missing", json={"title": "Ghost", "logDate": "2024-03-05"})
    assert resp.status_code == 404
    assert state.store.books == before


def test_list_books_with_filter_and_query(client):
    _create(client, title="Dune", endDate="2024-03-10")
    _create(client, title="Dune Messiah")
    _create(client, title="Hyperion", review="dune-like", endDate="2024-03-11")
    resp = client.get("/api/books/", params={"filter": "finished", "q": "DUNE"})
    assert [b["title"] for b in resp.json()] == ["Dune", "Hyperion"]
    assert client.get("/api/books/", params={"filter": "bogus"}).status_code == 422


def test_current_books(client):
    _create(client, title="A")
    _create(client, title="B", endDate="2024-03-10")
    _create(client, title="C")
    assert [b["title"] for b in client.get("/api/books/current").json()] == ["A", "C"]


def test_summary(client):
    _create(client, title="A")
    _create(client, title="B", endDate="2024-03-10")
    assert client.get("/api/summary/").json() == {"total": 2, "completed": 1, "inProgress": 1}


def test_calendar_month(client):
    for title in "ABCD":
        _create(client, title=title)
    data = client.get("/api/calendar/", params={"date": "2024-03-20"}).json()
    assert data["label"] == "March 2024"
    assert data["monthStart"] == "2024-03-01"
    assert data["monthEnd"] == "2024-03-31"
    assert data["previous"] == "2024-02-20"
    assert data["weekdays"][0] == "Sun"
    assert all(len(week) == 7 for week in data["weeks"])
    cell = next(c for week in data["weeks"] for c in week if c["date"] == "2024-03-05")
    assert [b["title"] for b in cell["books"]] == ["A", "B", "C"]
    assert cell["overflowCount"] == 1


def test_calendar_offset_moves_by_month(client):
    data = client.get("/api/calendar/", params={"date": "2024-01-31", "offset": 1}).json()
    assert data["reference"] == "2024-02-29"
    assert data["label"] == "February 2024"


def test_calendar_defaults_to_current_month(client):
    data = client.get("/api/calendar/").json()
    today = date.today().isoformat()
    assert any(c["isToday"] and c["date"] == today for week in data["weeks"] for c in week)


def test_calendar_day_detail(client):
    for title in "ABCD":
        _create(client, title=title)
    data = client.get("/api/calendar/day/2024-03-05").json()
    assert [b["title"] for b in data["books"]] == ["A", "B", "C", "D"]
    assert client.get("/api/calendar/day/2024-03-06").json()["books"] == []


def test_list_selection_and_bulk_delete(client, state):
    dune = _create(client, title="Dune", endDate="2024-03-10")
    _create(client, title="Dune Messiah")
    _create(client, title="Hyperion", endDate="2024-03-11")

    view = client.put("/api/list/params", json={"filter": "finished", "query": "dune"}).json()
    assert [b["title"] for b in view["books"]] == ["Dune"]

    view = client.post(f"/api/list/toggle/{dune['id']}").json()
    assert view["selected"] == [dune["id"]]
    assert view["allSelected"] is True

    result = client.post("/api/list/delete-selected").json()
    assert result["deleted"] == 1
    assert result["selected"] == []
    assert [b.title for b in state.store.books] == ["Dune Messiah", "Hyperion"]


def test_list_toggle_all(client):
    _create(client, title="A")
    _create(client, title="B", endDate="2024-03-10")
    view = client.post("/api/list/toggle-all").json()
    assert len(view["selected"]) == 2
    view = client.post("/api/list/toggle-all").json()
    assert view["selected"] == []


def test_enrich_endpoint(client, enrichment):
    book = _create(client)
    enrichment.details = BookDetails("Desert planet.", "Fiction", None)
    data = client.post(f"/api/books/{book['id']}/enrich").json()
    assert data["enriched"] is True
    assert data["book"]["category"] == "Fiction"
    assert enrichment.lookups == ["Dune"]
    assert client.post("/api/books/missing/enrich").status_code == 404


def test_enrich_endpoint_without_result(client, enrichment):
    book = _create(client)
    data = client.post(f"/api/books/{book['id']}/enrich").json()
    assert data == {"enriched": False, "book": book}


def test_enrichment_details_and_recommendation(client, enrichment):
    assert client.get("/api/enrichment/details", params={"title": "Dune"}).json() is None
    enrichment.details = BookDetails("d", "c", "i.jpg")
    assert client.get("/api/enrichment/details", params={"title": "Dune"}).json() == {
        "description": "d", "category": "c", "imageUrl": "i.jpg",
    }

    _create(client, title="Dune")
    _create(client, title="Done", endDate="2024-03-10")
    assert client.get("/api/enrichment/recommendation").json() is None
    enrichment.recommendation = Recommendation("Hyperion", "Dan Simmons", "Pilgrims.", "Fiction")
    assert client.get("/api/enrichment/recommendation").json() == {
        "title": "Hyperion", "author": "Dan Simmons", "description": "Pilgrims.", "category": "Fiction",
    }
    assert enrichment.recommendation_calls[-1] == ["Dune"]
