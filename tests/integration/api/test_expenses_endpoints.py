"""Integration tests for expense endpoints."""

from fastapi.testclient import TestClient

from pennywise.domain.shared import today_utc


class TestExpenses:
    def test_create_defaults_date(
        self,
        test_client: TestClient,
        auth_headers: dict,
        category_ids: dict,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/expenses",
            headers=auth_headers,
            json={"amount": "42.50", "category_id": category_ids["Food"]},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["amount"] == "42.50"
        assert data["date"] == today_utc().isoformat()
        assert data["description"] is None
        assert data["category_name"] == "Food"

    def test_list_most_recent_first(
        self,
        test_client: TestClient,
        auth_headers: dict,
        category_ids: dict,
        api_v1_prefix,
    ):
        for day in ("2024-03-01", "2024-03-20", "2024-03-10"):
            test_client.post(
                f"{api_v1_prefix}/expenses",
                headers=auth_headers,
                json={"amount": "1.00", "category_id": category_ids["Food"], "date": day},
            )

        response = test_client.get(f"{api_v1_prefix}/expenses", headers=auth_headers)

        assert [e["date"] for e in response.json()] == [
            "2024-03-20",
            "2024-03-10",
            "2024-03-01",
        ]

    def test_invalid_amount(
        self,
        test_client: TestClient,
        auth_headers: dict,
        category_ids: dict,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/expenses",
            headers=auth_headers,
            json={"amount": "-3", "category_id": category_ids["Food"]},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_update(
        self,
        test_client: TestClient,
        auth_headers: dict,
        category_ids: dict,
        api_v1_prefix,
    ):
        created = test_client.post(
            f"{api_v1_prefix}/expenses",
            headers=auth_headers,
            json={"amount": "10.00", "category_id": category_ids["Food"]},
        ).json()

        response = test_client.patch(
            f"{api_v1_prefix}/expenses/{created['id']}",
            headers=auth_headers,
            json={"description": "Train ticket", "category_id": category_ids["Travel"]},
        )

        assert response.status_code == 200
        assert response.json()["description"] == "Train ticket"
        assert response.json()["category_name"] == "Travel"
        assert response.json()["amount"] == "10.00"

    def test_other_users_expense_is_invisible(
        self,
        test_client: TestClient,
        auth_headers: dict,
        other_auth_headers: dict,
        category_ids: dict,
        api_v1_prefix,
    ):
        created = test_client.post(
            f"{api_v1_prefix}/expenses",
            headers=auth_headers,
            json={"amount": "10.00", "category_id": category_ids["Food"]},
        ).json()

        response = test_client.patch(
            f"{api_v1_prefix}/expenses/{created['id']}",
            headers=other_auth_headers,
            json={"amount": "1.00"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "EXPENSE_NOT_FOUND"

    def test_delete(
        self,
        test_client: TestClient,
        auth_headers: dict,
        category_ids: dict,
        api_v1_prefix,
    ):
        created = test_client.post(
            f"{api_v1_prefix}/expenses",
            headers=auth_headers,
            json={"amount": "10.00", "category_id": category_ids["Food"]},
        ).json()

        response = test_client.delete(
            f"{api_v1_prefix}/expenses/{created['id']}",
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert test_client.get(f"{api_v1_prefix}/expenses", headers=auth_headers).json() == []
