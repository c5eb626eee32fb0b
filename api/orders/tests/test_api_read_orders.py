"""API tests for the order read endpoints (list, paged list, get)."""
import json
import math

from orders.entities import Order

BASE_URL = "/api/Orders"


def test_get_all_orders_returns_every_order(client):
    r = client.get(BASE_URL)
    assert r.status_code == 200
    body = r.json()
    assert [o["order_id"] for o in body] == [1, 2, 3]
    assert body[0]["ship_name"] == "Vins et alcools Chevalier"
    assert body[0]["order_details"] == []


def test_get_order_by_id_returns_200_and_payload(client):
    r = client.get(f"{BASE_URL}/2")
    assert r.status_code == 200
    body = r.json()
    assert body["order_id"] == 2
    assert body["customer_id"] == "TOMSP"
    assert body["freight"] == 11.61


def test_get_order_not_found_returns_404_with_empty_body(client):
    r = client.get(f"{BASE_URL}/999")
    assert r.status_code == 404
    assert r.content == b""


def test_get_order_with_non_integer_id_returns_400(client):
    r = client.get(f"{BASE_URL}/abc")
    assert r.status_code == 400


def test_get_order_with_details_includes_details_and_product(client):
    r = client.get(f"{BASE_URL}/GetOrderWithDetails/1")
    assert r.status_code == 200
    body = r.json()
    assert body["order_id"] == 1
    assert len(body["order_details"]) == 1
    detail = body["order_details"][0]
    assert detail["product_id"] == 11
    assert detail["quantity"] == 12
    assert detail["product"]["product_name"] == "Queso Cabrales"


def test_get_order_with_details_without_rows_returns_empty_list(client):
    r = client.get(f"{BASE_URL}/GetOrderWithDetails/2")
    assert r.status_code == 200
    assert r.json()["order_details"] == []


def test_get_order_with_details_not_found_returns_404(client):
    r = client.get(f"{BASE_URL}/GetOrderWithDetails/404")
    assert r.status_code == 404


def test_get_orders_applies_paging(client):
    r = client.get(f"{BASE_URL}/GetOrders", params={"page_number": 2, "page_size": 2})
    assert r.status_code == 200
    assert [o["order_id"] for o in r.json()] == [3]
    assert "X-Pagination" not in r.headers


def test_get_orders_filters_by_ship_country(client):
    r = client.get(f"{BASE_URL}/GetOrders", params={"ship_country": "Germany"})
    assert r.status_code == 200
    assert [o["order_id"] for o in r.json()] == [2]


def test_get_orders_rejects_page_number_zero(client):
    r = client.get(f"{BASE_URL}/GetOrders", params={"page_number": 0})
    assert r.status_code == 400


def test_paged_list_sets_pagination_header(client):
    r = client.get(f"{BASE_URL}/GetOrdersPagedList", params={"page_number": 1, "page_size": 2})
    assert r.status_code == 200
    meta = json.loads(r.headers["X-Pagination"])
    assert meta == {
        "CurrentPage": 1,
        "TotalCount": 3,
        "TotalPages": 2,
        "PageSize": 2,
        "HasPrevios": False,
        "HastNext": True,
    }
    body = r.json()
    assert [o["order_id"] for o in body["items"]] == [1, 2]
    assert body["total_count"] == 3
    assert body["has_next"] is True


def test_paged_list_total_pages_is_ceiling_of_count(client, store):
    for i in range(4, 12):
        store.add_order(Order(order_id=i, customer_id="VINET", ship_name=f"Ship {i}"))

    r = client.get(f"{BASE_URL}/GetOrdersPagedList", params={"page_size": 4, "customer_id": "VINET"})
    meta = json.loads(r.headers["X-Pagination"])
    assert meta["TotalCount"] == 9
    assert meta["TotalPages"] == math.ceil(9 / 4)


def test_paged_list_clamps_oversized_page(client, monkeypatch):
    monkeypatch.setenv("ORDERS_MAX_PAGE_SIZE", "2")
    r = client.get(f"{BASE_URL}/GetOrdersPagedList", params={"page_size": 500})
    meta = json.loads(r.headers["X-Pagination"])
    assert meta["PageSize"] == 2
    assert len(r.json()["items"]) == 2


def test_out_of_range_id_is_rejected_before_the_repository(client, repository, monkeypatch):
    calls = []

    async def spy(order_id):
        calls.append(order_id)
        return None

    monkeypatch.setattr(repository.orders, "get_order_by_id", spy)
    monkeypatch.setattr(repository.orders, "get_order_with_details", spy)

    assert client.get(f"{BASE_URL}/{2**40}").status_code == 400
    assert client.get(f"{BASE_URL}/GetOrderWithDetails/{2**31}").status_code == 400
    assert calls == []


def test_largest_column_id_is_still_a_lookup(client):
    r = client.get(f"{BASE_URL}/{2**31 - 1}")
    assert r.status_code == 404


def test_negative_id_is_not_found(client):
    assert client.get(f"{BASE_URL}/-5").status_code == 404


def test_page_number_beyond_column_range_returns_400(client):
    r = client.get(f"{BASE_URL}/GetOrdersPagedList", params={"page_number": 2**40})
    assert r.status_code == 400
    assert "X-Pagination" not in r.headers
