from typing import List, Literal

from pydantic import BaseModel, ConfigDict

CreditTier = Literal["excellent", "good", "fair", "poor"]
LoanProgram = Literal["conventional", "fha", "va", "usda"]
QualificationTier = Literal["strong", "moderate", "weak"]


class LoanInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    home_price: float = 450000.0
    down_payment: float = 90000.0
    annual_interest_rate_pct: float = 6.5
    term_years: int = 30
    annual_property_tax_rate_pct: float = 1.2
    annual_insurance_premium: float = 1800.0
    include_pmi: bool = True


class PaymentBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    principal: float
    principal_and_interest: float
    monthly_property_tax: float
    monthly_insurance: float
    monthly_pmi: float
    total_monthly_payment: float
    total_interest_over_term: float
    total_cost_over_term: float


class AmortizationRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int
    payment_amount: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float


class AffordabilityInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    annual_income: float = 85000.0
    additional_annual_income: float = 0.0
    monthly_debt_payments: float = 500.0
    credit_tier: CreditTier = "good"
    liquid_savings: float = 30000.0
    gift_funds: float = 0.0
    loan_program: LoanProgram = "conventional"
    desired_down_payment_pct: float = 10.0


class AffordabilityResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_purchase_price: float
    max_loan_amount: float
    estimated_monthly_payment: float
    estimated_rate_pct: float
    debt_to_income_ratio_pct: float
    effective_down_payment_pct: float
    qualification_tier: QualificationTier
    is_qualified: bool
    eligible_programs: List[str]
    recommendations: List[str]


class SellerNetSheetInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    sale_price: float = 425000.0
    mortgage_balance: float = 0.0
    commission_rate_pct: float = 6.0
    title_insurance: float = 0.0
    escrow_fees: float = 0.0
    prorations: float = 0.0
    repair_credits: float = 0.0
    home_warranty: float = 0.0
    other_credits: float = 0.0


class SellerNetSheet(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross_proceeds: float
    commission: float
    total_closing_costs: float
    net_before_mortgage: float
    mortgage_payoff: float
    estimated_net_proceeds: float
    is_short_sale: bool


class BuyerCashToCloseInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    purchase_price: float = 425000.0
    down_payment_pct: float = 20.0
    loan_program: LoanProgram = "conventional"
    interest_rate_pct: float = 6.875
    closing_cost_pct: float = 3.0
    title_insurance: float = 0.0
    escrow_fees: float = 0.0
    prepaid_insurance: float = 0.0
    prepaid_taxes: float = 0.0
    inspection_fees: float = 0.0
    appraisal_fee: float = 0.0
    seller_credits: float = 0.0


class BuyerCashToClose(BaseModel):
    model_config = ConfigDict(frozen=True)

    down_payment: float
    loan_amount: float
    closing_costs: float
    seller_credits: float
    total_cash_needed: float
    monthly_principal_and_interest: float
    monthly_mortgage_insurance: float
    monthly_taxes: float
    monthly_insurance: float
    total_monthly_payment: float
