from pydantic import BaseModel, Field


class InterestRequest(BaseModel):
    principal: float = Field(..., description="Capital invertido")
    rate: float = Field(..., description="Tasa por periodo en decimal (0.05 para 5%)")
    duration: int = Field(..., description="Número de periodos")


class MonthlyPaymentRequest(BaseModel):
    principal: float = Field(..., description="Monto del préstamo")
    monthly_rate: float = Field(..., description="Tasa mensual en decimal")
    number_of_months: int = Field(..., description="Plazo en meses")


class RateConversionRequest(BaseModel):
    annual_rate: float = Field(..., description="Tasa efectiva anual en decimal")


class LoanSimulationRequest(BaseModel):
    principal: float = Field(..., description="Monto del préstamo")
    annual_rate: float = Field(..., description="Tasa efectiva anual en decimal")
    number_of_months: int = Field(..., description="Plazo en meses")


class AmountResponse(BaseModel):
    value: float = Field(..., description="Resultado de la fórmula")


class RateResponse(BaseModel):
    monthly_rate: float = Field(..., description="Tasa mensual equivalente")


class LoanSimulationResponse(BaseModel):
    monthly_rate: float
    monthly_payment: float = Field(..., description="Cuota mensual")
    total_payment: float = Field(..., description="Monto total a pagar")
    total_interest: float = Field(..., description="Interés total")
