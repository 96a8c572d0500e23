import math

from fastapi import APIRouter

from app import finance
from app.config import get_settings
from app.schemas.finance import (
    AmountResponse,
    InterestRequest,
    LoanSimulationRequest,
    LoanSimulationResponse,
    MonthlyPaymentRequest,
    RateConversionRequest,
    RateResponse,
)
from app.services.loan_simulation import simulate_loan

router = APIRouter()


def _money(value: float) -> AmountResponse:
    # JSON has no NaN or Infinity
    if not math.isfinite(value):
        raise finance.InvalidArgumentError("result is too large to be represented")
    return AmountResponse(value=round(value, get_settings().money_decimals))


@router.post("/interest/simple", response_model=AmountResponse)
async def simple_interest_endpoint(request: InterestRequest):
    return _money(finance.simple_interest(request.principal, request.rate, request.duration))


@router.post("/interest/compound", response_model=AmountResponse)
async def compound_interest_endpoint(request: InterestRequest):
    return _money(finance.compound_interest(request.principal, request.rate, request.duration))


@router.post("/amount/simple", response_model=AmountResponse)
async def final_amount_simple_endpoint(request: InterestRequest):
    return _money(finance.final_amount_simple(request.principal, request.rate, request.duration))


@router.post("/amount/compound", response_model=AmountResponse)
async def final_amount_compound_endpoint(request: InterestRequest):
    return _money(finance.final_amount_compound(request.principal, request.rate, request.duration))


@router.post("/loan/monthly-payment", response_model=AmountResponse)
async def monthly_payment_endpoint(request: MonthlyPaymentRequest):
    payment = finance.monthly_payment(request.principal, request.monthly_rate, request.number_of_months)
    if not math.isfinite(payment):
        raise finance.InvalidArgumentError("monthly rate must be greater than zero to amortize a loan")
    return _money(payment)


@router.post("/rate/annual-to-monthly", response_model=RateResponse)
async def annual_to_monthly_rate_endpoint(request: RateConversionRequest):
    rate = finance.annual_to_monthly_rate(request.annual_rate)
    return RateResponse(monthly_rate=round(rate, get_settings().rate_decimals))


@router.post("/loan/simulate", response_model=LoanSimulationResponse)
async def simulate_loan_endpoint(request: LoanSimulationRequest):
    result = simulate_loan(request.principal, request.annual_rate, request.number_of_months)
    return result
