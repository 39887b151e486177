import streamlit as st
from core.utils import fmt_currency
from homequote.errors import CalculatorError
from homequote.models import BuyerCashToCloseInputs, SellerNetSheetInputs
from homequote.net_sheet import buyer_cash_to_close, seller_net_sheet
from homequote.presets import BUYER_DEFAULTS, LOAN_PROGRAMS, SELLER_DEFAULTS

SELLER_FIELDS = [
    ("sale_price", "Sale Price"),
    ("mortgage_balance", "Mortgage Balance"),
    ("commission_rate_pct", "Commission %"),
    ("title_insurance", "Title Insurance"),
    ("escrow_fees", "Escrow Fees"),
    ("prorations", "Tax Prorations"),
    ("repair_credits", "Repair Credits"),
    ("home_warranty", "Home Warranty"),
    ("other_credits", "Other Credits"),
]

BUYER_FIELDS = [
    ("purchase_price", "Purchase Price"),
    ("down_payment_pct", "Down Payment %"),
    ("interest_rate_pct", "Interest Rate %"),
    ("closing_cost_pct", "Lender Closing Costs %"),
    ("title_insurance", "Buyer Title Insurance"),
    ("escrow_fees", "Buyer Escrow Fees"),
    ("prepaid_insurance", "Prepaid Insurance (1 year)"),
    ("prepaid_taxes", "Prepaid Taxes"),
    ("inspection_fees", "Inspection Fees"),
    ("appraisal_fee", "Appraisal Fee"),
    ("seller_credits", "Seller Credits"),
]


def _number_fields(values: dict, fields):
    cols = st.columns(2)
    for idx, (field, label) in enumerate(fields):
        with cols[idx % 2]:
            values[field] = st.number_input(label, value=float(values.get(field, 0.0)), min_value=0.0)


def render_seller_sheet():
    st.session_state.setdefault("seller_sheet", dict(SELLER_DEFAULTS))
    s = st.session_state.seller_sheet
    _number_fields(s, SELLER_FIELDS)
    try:
        res = seller_net_sheet(SellerNetSheetInputs(**s))
    except CalculatorError as exc:
        st.error(str(exc))
        return None
    st.session_state["seller_calc"] = res.model_dump()
    cols = st.columns(3)
    cols[0].metric("Commission", fmt_currency(res.commission))
    cols[1].metric("Total Closing Costs", fmt_currency(res.total_closing_costs))
    cols[2].metric("Estimated Net Proceeds", fmt_currency(res.estimated_net_proceeds))
    if res.is_short_sale:
        st.warning("Sale price does not cover costs and mortgage payoff.")
    return res


def render_buyer_sheet():
    st.session_state.setdefault("buyer_sheet", dict(BUYER_DEFAULTS))
    b = st.session_state.buyer_sheet
    program = b.get("loan_program", "conventional")
    b["loan_program"] = st.selectbox(
        "Loan Program",
        LOAN_PROGRAMS,
        index=LOAN_PROGRAMS.index(program) if program in LOAN_PROGRAMS else 0,
        format_func=str.upper,
        key="buyer_program",
    )
    _number_fields(b, BUYER_FIELDS)
    try:
        res = buyer_cash_to_close(BuyerCashToCloseInputs(**b))
    except CalculatorError as exc:
        st.error(str(exc))
        return None
    st.session_state["buyer_calc"] = res.model_dump()
    cols = st.columns(3)
    cols[0].metric("Down Payment", fmt_currency(res.down_payment))
    cols[1].metric("Closing Costs", fmt_currency(res.closing_costs))
    cols[2].metric("Total Cash Needed", fmt_currency(res.total_cash_needed))
    st.caption(
        f"Loan: {fmt_currency(res.loan_amount)} • P&I: ${res.monthly_principal_and_interest:,.2f}"
        f" • MI: ${res.monthly_mortgage_insurance:,.2f} • Monthly Total: ${res.total_monthly_payment:,.2f}"
    )
    return res


def render_net_sheet_view():
    """Seller net proceeds or buyer cash-to-close."""
    st.header("Net Sheet")
    sheet = st.radio("Sheet", ["Seller", "Buyer"], horizontal=True, key="net_sheet_type")
    if sheet == "Seller":
        return render_seller_sheet()
    return render_buyer_sheet()
