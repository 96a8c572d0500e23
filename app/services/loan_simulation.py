import logging
import math
from typing import Dict

from app.config import get_settings
from app.finance import InvalidArgumentError, annual_to_monthly_rate, monthly_payment

logger = logging.getLogger(__name__)


def simulate_loan(principal: float, annual_rate: float, number_of_months: int) -> Dict[str, float]:
    """
    Simula un préstamo a tasa fija: cuota mensual, total a pagar e interés total.

    :param principal: Monto del préstamo
    :param annual_rate: Tasa efectiva anual en decimal (0.12 para 12%)
    :param number_of_months: Plazo en meses
    :return: Diccionario con monthly_rate, monthly_payment, total_payment y total_interest
    """
    settings = get_settings()
    monthly_rate = annual_to_monthly_rate(annual_rate)
    payment = monthly_payment(principal, monthly_rate, number_of_months)
    if not math.isfinite(payment):
        raise InvalidArgumentError("monthly rate must be greater than zero to amortize a loan")

    total_payment = payment * number_of_months
    total_interest = total_payment - principal
    logger.debug(
        "simulate_loan principal=%s annual_rate=%s months=%s payment=%s",
        principal, annual_rate, number_of_months, payment,
    )
    return {
        "monthly_rate": round(monthly_rate, settings.rate_decimals),
        "monthly_payment": round(payment, settings.money_decimals),
        "total_payment": round(total_payment, settings.money_decimals),
        "total_interest": round(total_interest, settings.money_decimals),
    }
