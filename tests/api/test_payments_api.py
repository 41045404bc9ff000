"""HTTP tests for /api/payments.

Tests cover:
- Status codes: 201 with Location, 204, 400 and 404
- Failures are returned as application/problem+json
- camelCase field names and Decimal amounts serialized as strings
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from cashdesk_payments.infrastructure.time_provider import FixedTimeProvider


def payment_body(fixed_time: datetime, **overrides) -> dict:
    body = {
        "cashDeskNumber": 1,
        "employeeRegistrationNumber": 1001,
        "paymentDateTime": fixed_time.isoformat(),
        "paymentType": "Cash",
    }
    body.update(overrides)
    return body


def create(client: TestClient, fixed_time: datetime, **overrides) -> int:
    response = client.post("/api/payments", json=payment_body(fixed_time, **overrides))
    assert response.status_code == 201, response.text
    return response.json()


def assert_problem(response, status: int, detail: str) -> None:
    assert response.status_code == status
    assert response.headers["content-type"].startswith("application/problem+json")
    body = response.json()
    assert body["status"] == status
    assert body["detail"] == detail


class TestCreatePayment:
    def test_created_with_location(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        response = seeded_client.post("/api/payments", json=payment_body(fixed_time))

        assert response.status_code == 201
        payment_id = response.json()
        assert response.headers["location"].endswith(f"/api/payments/{payment_id}")

    def test_created_with_items(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        payment_id = create(
            seeded_client,
            fixed_time,
            paymentItems=[
                {"articleName": "Apfel", "amount": 2, "price": "1.50"},
                {"articleName": "Brot", "amount": 1, "price": 2.25},
            ],
        )

        body = seeded_client.get(f"/api/payments/{payment_id}").json()

        assert [item["articleName"] for item in body["paymentItems"]] == ["Apfel", "Brot"]
        assert body["paymentItems"][0]["price"] == "1.50"

    @pytest.mark.parametrize(
        ("overrides", "detail"),
        [
            ({"cashDeskNumber": 99}, "Invalid cashdesk"),
            ({"employeeRegistrationNumber": 99}, "Invalid employee"),
            ({"paymentType": "Bitcoin"}, "Invalid payment type."),
            (
                {"employeeRegistrationNumber": 2002, "paymentType": "CreditCard"},
                "Insufficient rights to create a credit card payment.",
            ),
        ],
    )
    def test_validation_failures(
        self, seeded_client: TestClient, fixed_time: datetime, overrides: dict, detail: str
    ) -> None:
        response = seeded_client.post("/api/payments", json=payment_body(fixed_time, **overrides))

        assert_problem(response, 400, detail)
        assert response.json()["instance"] == "/api/payments"

    def test_future_date_is_rejected(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        response = seeded_client.post(
            "/api/payments",
            json=payment_body(fixed_time + timedelta(minutes=2)),
        )

        assert_problem(response, 400, "Invalid payment date")

    def test_malformed_body_is_unprocessable(self, seeded_client: TestClient) -> None:
        response = seeded_client.post("/api/payments", json={"cashDeskNumber": "one"})

        assert response.status_code == 422


class TestReadPayments:
    def test_list_uses_camel_case_and_string_totals(
        self, seeded_client: TestClient, fixed_time: datetime
    ) -> None:
        payment_id = create(
            seeded_client,
            fixed_time,
            paymentItems=[{"articleName": "Apfel", "amount": 1, "price": "0.99"}],
        )

        [payment] = seeded_client.get("/api/payments").json()

        assert payment["id"] == payment_id
        assert payment["employeeFirstName"] == "Anna"
        assert payment["employeeLastName"] == "Manager"
        assert payment["cashDeskNumber"] == 1
        assert payment["paymentType"] == "Cash"
        assert payment["totalAmount"] == "0.99"

    def test_list_filters(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        seeded_client.post("/api/cashdesks", json={"number": 2})
        three_days_ago = (fixed_time - timedelta(days=3)).isoformat()
        old = create(seeded_client, fixed_time, paymentDateTime=three_days_ago)
        recent = create(seeded_client, fixed_time)
        other = create(seeded_client, fixed_time, cashDeskNumber=2)

        by_desk = seeded_client.get("/api/payments", params={"cashDesk": 1}).json()
        by_date = seeded_client.get(
            "/api/payments", params={"dateFrom": (fixed_time - timedelta(hours=1)).isoformat()}
        ).json()

        assert [p["id"] for p in by_desk] == [old, recent]
        assert [p["id"] for p in by_date] == [recent, other]

    def test_get_unknown_payment(self, seeded_client: TestClient) -> None:
        response = seeded_client.get("/api/payments/42")

        assert_problem(response, 404, "Payment not found.")
        assert response.json()["instance"] == "/api/payments/42"

    def test_unknown_route_is_a_problem(self, client: TestClient) -> None:
        response = client.get("/api/nothing-here")

        assert_problem(response, 404, "Not Found")


class TestConfirmPayment:
    def test_confirm(
        self, seeded_client: TestClient, fixed_time: datetime, time_provider: FixedTimeProvider
    ) -> None:
        payment_id = create(seeded_client, fixed_time)
        confirmed_at = time_provider.advance(timedelta(minutes=3))

        response = seeded_client.post(f"/api/payments/{payment_id}/confirm")

        assert response.status_code == 204
        body = seeded_client.get(f"/api/payments/{payment_id}").json()
        assert datetime.fromisoformat(body["confirmed"].replace("Z", "+00:00")) == confirmed_at

    def test_confirm_twice(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        payment_id = create(seeded_client, fixed_time)
        seeded_client.post(f"/api/payments/{payment_id}/confirm")

        response = seeded_client.post(f"/api/payments/{payment_id}/confirm")

        assert_problem(response, 400, "Payment already confirmed")

    def test_confirm_unknown(self, seeded_client: TestClient) -> None:
        assert_problem(
            seeded_client.post("/api/payments/42/confirm"), 404, "Payment not found"
        )


class TestPaymentItems:
    def test_add_item(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        payment_id = create(seeded_client, fixed_time)

        response = seeded_client.post(
            f"/api/payments/{payment_id}/items",
            json={"articleName": "Milch", "amount": 2, "price": "1.19"},
        )

        assert response.status_code == 201
        items = seeded_client.get(f"/api/payments/{payment_id}").json()["paymentItems"]
        assert items == [
            {"id": response.json(), "articleName": "Milch", "amount": 2, "price": "1.19"}
        ]

    def test_add_invalid_item(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        payment_id = create(seeded_client, fixed_time)

        response = seeded_client.post(
            f"/api/payments/{payment_id}/items",
            json={"articleName": "Milch", "amount": 0, "price": "1.19"},
        )

        assert response.status_code == 400

    def test_add_item_with_sub_cent_price(
        self, seeded_client: TestClient, fixed_time: datetime
    ) -> None:
        payment_id = create(seeded_client, fixed_time)

        response = seeded_client.post(
            f"/api/payments/{payment_id}/items",
            json={"articleName": "Milch", "amount": 1, "price": "1.005"},
        )

        assert response.status_code == 422
        assert seeded_client.get(f"/api/payments/{payment_id}").json()["paymentItems"] == []

    def test_add_item_to_confirmed_payment(
        self, seeded_client: TestClient, fixed_time: datetime
    ) -> None:
        payment_id = create(seeded_client, fixed_time)
        seeded_client.post(f"/api/payments/{payment_id}/confirm")

        response = seeded_client.post(
            f"/api/payments/{payment_id}/items",
            json={"articleName": "Milch", "amount": 1, "price": "1.19"},
        )

        assert_problem(response, 400, "Payment already confirmed.")

    def test_add_item_to_unknown_payment(self, seeded_client: TestClient) -> None:
        response = seeded_client.post(
            "/api/payments/42/items",
            json={"articleName": "Milch", "amount": 1, "price": "1.19"},
        )

        assert_problem(response, 404, "Payment not found.")


class TestChangePayment:
    def test_put_replaces_payment(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        payment_id = create(
            seeded_client,
            fixed_time,
            employeeRegistrationNumber=2002,
            paymentItems=[{"articleName": "Alt", "amount": 1, "price": "5.00"}],
        )

        response = seeded_client.put(
            f"/api/payments/{payment_id}",
            json=payment_body(
                fixed_time,
                paymentType="CreditCard",
                paymentItems=[{"articleName": "Neu", "amount": 3, "price": "0.50"}],
            ),
        )

        assert response.status_code == 204
        body = seeded_client.get(f"/api/payments/{payment_id}").json()
        assert body["employeeRegistrationNumber"] == 1001
        assert body["paymentType"] == "CreditCard"
        assert [item["articleName"] for item in body["paymentItems"]] == ["Neu"]

    def test_put_unknown_payment(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        response = seeded_client.put("/api/payments/42", json=payment_body(fixed_time))

        assert_problem(response, 404, "Payment not found.")

    def test_patch_payment_type(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        payment_id = create(seeded_client, fixed_time)

        response = seeded_client.patch(
            f"/api/payments/{payment_id}", json={"paymentType": "creditcard"}
        )

        assert response.status_code == 204
        body = seeded_client.get(f"/api/payments/{payment_id}").json()
        assert body["paymentType"] == "CreditCard"

    def test_patch_without_payment_type(
        self, seeded_client: TestClient, fixed_time: datetime
    ) -> None:
        payment_id = create(seeded_client, fixed_time)

        response = seeded_client.patch(f"/api/payments/{payment_id}", json={})

        assert_problem(response, 400, "Missing 'paymentType'.")

    def test_patch_credit_card_by_cashier(
        self, seeded_client: TestClient, fixed_time: datetime
    ) -> None:
        payment_id = create(seeded_client, fixed_time, employeeRegistrationNumber=2002)

        response = seeded_client.patch(
            f"/api/payments/{payment_id}", json={"paymentType": "CreditCard"}
        )

        assert_problem(response, 400, "Insufficient rights to create a credit card payment.")


class TestDeletePayment:
    def test_delete_without_items(self, seeded_client: TestClient, fixed_time: datetime) -> None:
        payment_id = create(seeded_client, fixed_time)

        response = seeded_client.delete(f"/api/payments/{payment_id}")

        assert response.status_code == 204
        assert seeded_client.get(f"/api/payments/{payment_id}").status_code == 404

    def test_delete_with_items_requires_flag(
        self, seeded_client: TestClient, fixed_time: datetime
    ) -> None:
        payment_id = create(
            seeded_client,
            fixed_time,
            paymentItems=[{"articleName": "Apfel", "amount": 1, "price": "1.00"}],
        )

        refused = seeded_client.delete(f"/api/payments/{payment_id}")
        deleted = seeded_client.delete(
            f"/api/payments/{payment_id}", params={"deleteItems": "true"}
        )

        assert_problem(refused, 400, "Payment has payment items.")
        assert deleted.status_code == 204

    def test_delete_unknown(self, seeded_client: TestClient) -> None:
        assert_problem(seeded_client.delete("/api/payments/42"), 404, "Payment not found.")
