"""Tests for the contact listing and lookup endpoints."""

import pytest

TOTAL_RECORDS = 5


def ids(response):
    return sorted(int(contact["id"]) for contact in response.json()["data"])


def test_contact_assembly_end_to_end(client):
    response = client.get("/api/contacts/1")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {
            "id": "1",
            "name": "John Doe",
            "location": "Lagos Hub",
            "category": "Lagos Hub",
            "phone": "08011112222",
            "whatsapp": "2348011112222",
            "rank": "Inspector",
            "province": "Lagos",
            "state": "Lagos State",
        },
    }


def test_contact_with_category_from_secondary_family(client):
    contact = client.get("/api/contacts/2").json()["data"]
    assert contact["name"] == "Ada"
    assert contact["location"] == contact["category"] == "MK Five"
    assert contact["phone"] == "+234 803 123 4567"
    assert contact["whatsapp"] == "2348031234567"
    assert contact["rank"] == ""


def test_contact_without_names_or_category(client):
    contact = client.get("/api/contacts/3").json()["data"]
    assert contact["name"] == "Unknown"
    assert contact["location"] == "Unknown"
    assert contact["phone"] == "8031234567"
    assert contact["whatsapp"] == "2348031234567"
    assert contact["province"] == ""
    assert contact["state"] == ""


def test_dangling_location_falls_through_to_service_category(client):
    assert client.get("/api/contacts/4").json()["data"]["category"] == "Service One"


def test_unknown_contact_is_404(client):
    response = client.get("/api/contacts/999")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Contact not found"}


@pytest.mark.parametrize("bad_id", ["abc", "1.5", "12abc"])
def test_non_numeric_contact_id_is_400(client, bad_id):
    response = client.get(f"/api/contacts/{bad_id}")
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_list_without_filters(client):
    response = client.get("/api/contacts")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert ids(response) == [1, 2, 3, 4, 5]
    assert body["pagination"] == {"total": TOTAL_RECORDS, "limit": 50, "offset": 0, "hasMore": False}


def test_search_is_case_insensitive_over_names(client):
    response = client.get("/api/contacts", params={"search": "dOE"})
    assert ids(response) == [1]
    assert response.json()["pagination"]["total"] == 1


def test_search_matches_any_phone_field(client):
    assert ids(client.get("/api/contacts", params={"search": "803"})) == [2, 3]


def test_search_wildcards_are_literal(client):
    response = client.get("/api/contacts", params={"search": "%"})
    assert response.json()["data"] == []
    assert response.json()["pagination"]["total"] == 0


def test_blank_search_is_ignored(client):
    assert client.get("/api/contacts", params={"search": "   "}).json()["pagination"]["total"] == TOTAL_RECORDS


def test_province_and_state_filters(client):
    assert ids(client.get("/api/contacts", params={"province": "lagos"})) == [1, 4]
    assert ids(client.get("/api/contacts", params={"state": "FCT"})) == [2, 5]
    assert ids(client.get("/api/contacts", params={"province": "Abuja", "state": "lagos"})) == []


def test_location_filter_resolves_to_location_id(client):
    response = client.get("/api/contacts", params={"location": "hub"})
    assert ids(response) == [1]
    assert response.json()["pagination"]["total"] == 1


def test_unmatched_location_filter_returns_nothing(client):
    response = client.get("/api/contacts", params={"location": "Atlantis"})
    assert response.status_code == 200
    assert response.json()["data"] == []
    assert response.json()["pagination"] == {"total": 0, "limit": 50, "offset": 0, "hasMore": False}


def test_filters_combine_with_and(client):
    assert ids(client.get("/api/contacts", params={"location": "Abuja Central", "search": "bola"})) == [5]
    assert ids(client.get("/api/contacts", params={"location": "Abuja Central", "search": "john"})) == []


def test_pagination_pages_and_has_more(client):
    first = client.get("/api/contacts", params={"limit": 2, "offset": 0}).json()
    last = client.get("/api/contacts", params={"limit": 2, "offset": 4}).json()

    assert len(first["data"]) == 2
    assert first["pagination"] == {"total": TOTAL_RECORDS, "limit": 2, "offset": 0, "hasMore": True}
    assert len(last["data"]) == 1
    assert last["pagination"]["hasMore"] is False


def test_pages_cover_every_record_once(client):
    seen = []
    for offset in range(0, TOTAL_RECORDS, 2):
        seen.extend(ids(client.get("/api/contacts", params={"limit": 2, "offset": offset})))
    assert sorted(seen) == [1, 2, 3, 4, 5]


def test_offset_past_end_is_empty_success(client):
    body = client.get("/api/contacts", params={"offset": 100}).json()
    assert body["success"] is True
    assert body["data"] == []
    assert body["pagination"]["hasMore"] is False


@pytest.mark.parametrize(
    "params, limit, offset",
    [
        ({"limit": 0}, 1, 0),
        ({"limit": -5}, 1, 0),
        ({"limit": 5000}, 1000, 0),
        ({"offset": -3}, 50, 0),
    ],
)
def test_out_of_range_pagination_is_clamped(client, params, limit, offset):
    response = client.get("/api/contacts", params=params)
    assert response.status_code == 200
    pagination = response.json()["pagination"]
    assert (pagination["limit"], pagination["offset"]) == (limit, offset)
    assert len(response.json()["data"]) <= limit


@pytest.mark.parametrize("params", [{"limit": "abc"}, {"offset": "ten"}, {"limit": "1.5"}])
def test_non_numeric_pagination_is_400(client, params):
    response = client.get("/api/contacts", params=params)
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Invalid request parameters"


def test_huge_offset_is_capped_to_an_empty_page(client):
    response = client.get("/api/contacts", params={"offset": 10**20})

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == []
    assert body["pagination"] == {"total": TOTAL_RECORDS, "limit": 50, "offset": 2**63 - 1, "hasMore": False}


def test_contact_id_beyond_64_bits_is_404(client):
    response = client.get(f"/api/contacts/{10**20}")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Contact not found"}
