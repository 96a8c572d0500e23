import pytest
from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)


@pytest.mark.parametrize("path, expected", [
    ("/finance/interest/simple", 150.0),
    ("/finance/amount/simple", 1150.0),
])
def test_simple_interest_endpoints(path, expected):
    response = client.post(path, json={"principal": 1000, "rate": 0.05, "duration": 3})
    assert response.status_code == 200
    assert response.json()["value"] == expected


@pytest.mark.parametrize("path, expected", [
    ("/finance/interest/compound", 102.5),
    ("/finance/amount/compound", 1102.5),
])
def test_compound_interest_endpoints(path, expected):
    response = client.post(path, json={"principal": 1000, "rate": 0.05, "duration": 2})
    assert response.status_code == 200
    assert response.json()["value"] == expected


def test_monthly_payment_endpoint():
    response = client.post(
        "/finance/loan/monthly-payment",
        json={"principal": 10000, "monthly_rate": 0.01, "number_of_months": 12},
    )
    assert response.status_code == 200
    assert response.json()["value"] == 888.49


def test_monthly_payment_zero_rate_is_bad_request():
    response = client.post(
        "/finance/loan/monthly-payment",
        json={"principal": 10000, "monthly_rate": 0, "number_of_months": 12},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "monthly rate must be greater than zero to amortize a loan"


@pytest.mark.parametrize("path", ["/finance/interest/compound", "/finance/amount/compound"])
def test_overflowing_result_is_bad_request(path):
    response = client.post(path, json={"principal": 1000, "rate": 1.0, "duration": 2000})
    assert response.status_code == 400
    assert response.json()["detail"] == "result is too large to be represented"


def test_monthly_payment_negligible_rate_is_bad_request():
    response = client.post(
        "/finance/loan/monthly-payment",
        json={"principal": 1000, "monthly_rate": 1e-17, "number_of_months": 12},
    )
    assert response.status_code == 400


def test_rate_conversion_endpoint():
    response = client.post("/finance/rate/annual-to-monthly", json={"annual_rate": 0.12})
    assert response.status_code == 200
    assert response.json()["monthly_rate"] == pytest.approx(0.009489, abs=1e-6)


def test_simulate_loan_endpoint():
    response = client.post(
        "/finance/loan/simulate",
        json={"principal": 12000, "annual_rate": 0.12, "number_of_months": 12},
    )
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"monthly_rate", "monthly_payment", "total_payment", "total_interest"}
    assert data["total_interest"] > 0


@pytest.mark.parametrize("payload, detail", [
    ({"principal": 0, "rate": 0.05, "duration": 1}, "principal must be greater than zero"),
    ({"principal": 100, "rate": -0.01, "duration": 1}, "rate cannot be negative"),
    ({"principal": 100, "rate": 0.05, "duration": 0}, "duration must be greater than zero"),
])
def test_invalid_arguments_return_400(payload, detail):
    response = client.post("/finance/interest/simple", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == detail


def test_negative_annual_rate_returns_400():
    response = client.post("/finance/rate/annual-to-monthly", json={"annual_rate": -0.01})
    assert response.status_code == 400
    assert response.json()["detail"] == "annual rate cannot be negative"


def test_malformed_payload_returns_422():
    response = client.post("/finance/interest/simple", json={"principal": 1000, "rate": 0.05})
    assert response.status_code == 422
    response = client.post("/finance/interest/simple", json={"principal": "mil", "rate": 0.05, "duration": 1})
    assert response.status_code == 422


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
