import math


class InvalidArgumentError(ValueError):
    """Parámetro fuera del dominio de una fórmula financiera."""


def simple_interest(principal: float, rate: float, duration: int) -> float:
    """
    Calcula el interés simple de un capital a una tasa durante un número de periodos.

    :param principal: Capital invertido (mayor a cero)
    :param rate: Tasa por periodo en decimal (0.05 para 5%)
    :param duration: Número de periodos, normalmente años (mayor a cero)
    :return: Interés simple generado
    """
    _validate_principal_rate_duration(principal, rate, duration)
    return principal * rate * duration


def compound_interest(principal: float, rate: float, duration: int) -> float:
    """
    Calcula el interés compuesto, capitalizando una vez por periodo.

    :param principal: Capital invertido (mayor a cero)
    :param rate: Tasa por periodo en decimal (0.05 para 5%)
    :param duration: Número de periodos (mayor a cero)
    :return: Interés compuesto generado
    """
    _validate_principal_rate_duration(principal, rate, duration)
    return principal * (_growth(rate, duration) - 1)


def final_amount_simple(principal: float, rate: float, duration: int) -> float:
    """Capital más el interés simple del periodo."""
    _validate_principal_rate_duration(principal, rate, duration)
    return principal + simple_interest(principal, rate, duration)


def final_amount_compound(principal: float, rate: float, duration: int) -> float:
    """Capital acumulado a interés compuesto."""
    _validate_principal_rate_duration(principal, rate, duration)
    return principal * _growth(rate, duration)


def monthly_payment(principal: float, monthly_rate: float, number_of_months: int) -> float:
    """
    Calcula la cuota mensual fija que amortiza un préstamo.

    Si el denominador se anula se sigue la división IEEE: con tasa mensual
    cero la fórmula queda 0 / 0 y el resultado es NaN; con una tasa tan
    pequeña que 1 + tasa == 1 el resultado es infinito. No se aplica
    ninguna cuota alternativa.

    :param principal: Monto del préstamo (mayor a cero)
    :param monthly_rate: Tasa mensual en decimal (0.01 para 1%)
    :param number_of_months: Plazo en meses (mayor a cero)
    :return: Cuota mensual
    """
    _validate_principal_rate_months(principal, monthly_rate, number_of_months)
    numerator = principal * monthly_rate
    denominator = 1 - _growth(monthly_rate, -number_of_months)
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def annual_to_monthly_rate(annual_rate: float) -> float:
    """
    Convierte una tasa efectiva anual a su equivalente mensual: (1 + i) ** (1/12) - 1.

    :param annual_rate: Tasa anual en decimal (0.12 para 12%), cero permitido
    :return: Tasa mensual equivalente
    """
    if annual_rate < 0:
        raise InvalidArgumentError("annual rate cannot be negative")
    return (1 + annual_rate) ** (1 / 12) - 1


def _growth(rate: float, periods: int) -> float:
    """(1 + rate) ** periods en coma flotante; infinito si desborda."""
    try:
        return float(1 + rate) ** periods
    except OverflowError:
        return math.inf


def _validate_principal_rate_duration(principal: float, rate: float, duration: int) -> None:
    if principal <= 0:
        raise InvalidArgumentError("principal must be greater than zero")
    if rate < 0:
        raise InvalidArgumentError("rate cannot be negative")
    if duration <= 0:
        raise InvalidArgumentError("duration must be greater than zero")


def _validate_principal_rate_months(principal: float, monthly_rate: float, number_of_months: int) -> None:
    if principal <= 0:
        raise InvalidArgumentError("principal must be greater than zero")
    if monthly_rate < 0:
        raise InvalidArgumentError("monthly rate cannot be negative")
    if number_of_months <= 0:
        raise InvalidArgumentError("number of months must be greater than zero")
