"""Policy tables and defaults for the calculators.

These values are business rules baked into the quoting tools, not facts about
lending.  They are kept together so a change of policy is a one-line edit.
"""

DISCLAIMER = (
    "Estimates only. Rates, taxes, insurance and mortgage insurance are "
    "illustrative and are not a loan offer or commitment to lend. Actual terms "
    "depend on full underwriting, credit review and lender overlays."
)

LOAN_TERMS = [10, 15, 20, 25, 30]

# Payment calculator
PMI_ANNUAL_PCT = 0.7
PMI_DOWN_PAYMENT_THRESHOLD = 0.20
SAMPLED_MONTHS = (60, 120, 180, 240, 300)
SAMPLED_FIRST_MONTHS = 12

# Pre-qualification
CREDIT_TIERS = ["excellent", "good", "fair", "poor"]
LOAN_PROGRAMS = ["conventional", "fha", "va", "usda"]
BASE_RATE_BY_CREDIT_TIER = {"excellent": 6.25, "good": 6.75, "fair": 7.50, "poor": 8.50}
PROGRAM_RATE_ADJUSTMENT = {"conventional": 0.0, "fha": 0.25, "va": -0.25, "usda": 0.0}
MAX_DTI_BY_PROGRAM = {"conventional": 0.45, "fha": 0.50, "va": 0.55, "usda": 0.45}
MIN_DOWN_PCT_BY_PROGRAM = {"conventional": 3.0, "fha": 3.5, "va": 0.0, "usda": 0.0}
PREQUAL_TERM_MONTHS = 360
SAFETY_HAIRCUT = 0.8
CLOSING_COST_RESERVE_PCT = 3.0
RESERVES_TARGET_PCT = 6.0

STRONG_DTI_LIMIT = 36.0
MODERATE_DTI_LIMIT = 45.0
QUALIFIED_DTI_LIMIT = 50.0
QUALIFIED_MIN_PRICE = 100000.0
REDUCE_DEBT_DTI = 43.0
CONVENTIONAL_ELIGIBLE_DTI = 36.0
PMI_FREE_DOWN_PCT = 20.0

# Credit score cutoffs for the tiers above, highest first
CREDIT_SCORE_TIERS = [(740, "excellent"), (670, "good"), (580, "fair")]

# Net sheets
BUYER_MI_ANNUAL_PCT = {"conventional": 0.5, "fha": 0.55, "va": 0.0, "usda": 0.5}
NET_SHEET_TERM_YEARS = 30

# Form defaults
LOAN_DEFAULTS = {
    "home_price": 450000.0,
    "down_payment": 90000.0,
    "annual_interest_rate_pct": 6.5,
    "term_years": 30,
    "annual_property_tax_rate_pct": 1.2,
    "annual_insurance_premium": 1800.0,
    "include_pmi": True,
}
PREQUAL_DEFAULTS = {
    "annual_income": 85000.0,
    "additional_annual_income": 0.0,
    "monthly_debt_payments": 500.0,
    "credit_tier": "good",
    "liquid_savings": 30000.0,
    "gift_funds": 0.0,
    "loan_program": "conventional",
    "desired_down_payment_pct": 10.0,
    "credit_score": 700.0,
}
SELLER_DEFAULTS = {
    "sale_price": 425000.0,
    "mortgage_balance": 280000.0,
    "commission_rate_pct": 6.0,
    "title_insurance": 2500.0,
    "escrow_fees": 1200.0,
    "prorations": 800.0,
    "repair_credits": 0.0,
    "home_warranty": 500.0,
    "other_credits": 0.0,
}
BUYER_DEFAULTS = {
    "purchase_price": 425000.0,
    "down_payment_pct": 20.0,
    "loan_program": "conventional",
    "interest_rate_pct": 6.875,
    "closing_cost_pct": 3.0,
    "title_insurance": 1800.0,
    "escrow_fees": 1200.0,
    "prepaid_insurance": 2400.0,
    "prepaid_taxes": 3500.0,
    "inspection_fees": 450.0,
    "appraisal_fee": 550.0,
    "seller_credits": 0.0,
}
