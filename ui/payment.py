import io

import streamlit as st
from core.utils import fmt_currency
from export.pdf_export import build_quote_summary, write_quote_pdf
from homequote.calculators import compare_rates, compute_schedule, schedule_frame
from homequote.errors import CalculatorError
from homequote.models import LoanInputs
from homequote.presets import LOAN_DEFAULTS, LOAN_TERMS, PMI_ANNUAL_PCT


def render_payment_view():
    """Payment calculator with PITI breakdown and amortization schedule."""
    st.session_state.setdefault("loan_inputs", dict(LOAN_DEFAULTS))
    h = st.session_state.loan_inputs
    st.header("Mortgage Payment")
    c1, c2 = st.columns(2)
    with c1:
        h["home_price"] = st.number_input(
            "Home Price", value=float(h.get("home_price", 0.0)), min_value=0.0, step=5000.0
        )
        h["down_payment"] = st.number_input(
            "Down Payment", value=float(h.get("down_payment", 0.0)), min_value=0.0, step=1000.0
        )
        if h["home_price"] > 0:
            st.caption(f"Down Payment: {h['down_payment'] / h['home_price'] * 100:.1f}% of price")
        h["annual_interest_rate_pct"] = st.number_input(
            "Rate %", value=float(h.get("annual_interest_rate_pct", 0.0)), min_value=0.0, step=0.125
        )
        term = int(h.get("term_years", 30))
        h["term_years"] = st.selectbox(
            "Term (years)",
            LOAN_TERMS,
            index=LOAN_TERMS.index(term) if term in LOAN_TERMS else len(LOAN_TERMS) - 1,
        )
    with c2:
        h["annual_property_tax_rate_pct"] = st.number_input(
            "Tax Rate %",
            value=float(h.get("annual_property_tax_rate_pct", 0.0)),
            min_value=0.0,
            step=0.1,
            help="Annual property tax as a percent of the home price",
        )
        h["annual_insurance_premium"] = st.number_input(
            "Insurance Annual",
            value=float(h.get("annual_insurance_premium", 0.0)),
            min_value=0.0,
            step=100.0,
            help="Annual homeowners insurance premium",
        )
        h["include_pmi"] = st.checkbox(
            "Include PMI", value=bool(h.get("include_pmi", True)), help="Applies under 20% down"
        )

    pmi_pct = st.session_state.get("pmi_annual_pct", PMI_ANNUAL_PCT)
    try:
        inputs = LoanInputs(**h)
        breakdown, rows = compute_schedule(inputs, pmi_annual_pct=pmi_pct)
    except CalculatorError as exc:
        st.session_state.pop("payment_calc", None)
        st.error(str(exc))
        return None
    st.session_state["payment_calc"] = breakdown.model_dump()

    st.metric("Total Monthly Payment", fmt_currency(breakdown.total_monthly_payment, cents=True))
    st.caption(f"Monthly P&I: ${breakdown.principal_and_interest:,.2f}")
    st.caption(
        f"Tax: ${breakdown.monthly_property_tax:,.2f} • Insurance: ${breakdown.monthly_insurance:,.2f}"
        f" • PMI: ${breakdown.monthly_pmi:,.2f}"
    )
    st.caption(
        f"Loan Amount: {fmt_currency(breakdown.principal)} • Total Interest: "
        f"{fmt_currency(breakdown.total_interest_over_term)} • Total Cost: "
        f"{fmt_currency(breakdown.total_cost_over_term)}"
    )

    if st.checkbox("Show amortization schedule", key="show_amortization"):
        st.dataframe(schedule_frame(rows), hide_index=True)

    with st.expander("Compare Rates"):
        rate = inputs.annual_interest_rate_pct
        rates = sorted({max(0.0, rate - 0.5), rate, rate + 0.5})
        st.dataframe(compare_rates(inputs, rates, pmi_annual_pct=pmi_pct), hide_index=True)

    _, full_rows = compute_schedule(inputs, full=True, pmi_annual_pct=pmi_pct)
    d1, d2, d3 = st.columns(3)
    d1.download_button(
        "Download Schedule CSV",
        schedule_frame(full_rows).to_csv(index=False).encode(),
        file_name="amortization.csv",
        mime="text/csv",
    )
    d2.download_button(
        "Download Quote",
        build_quote_summary(
            {
                "breakdown": breakdown.model_dump(),
                "schedule": [r.model_dump() for r in rows],
            }
        ),
        file_name="payment_quote.txt",
    )
    pdf = io.BytesIO()
    write_quote_pdf(pdf, {"title": "Mortgage Payment Quote"}, breakdown, rows)
    d3.download_button(
        "Download PDF",
        pdf.getvalue(),
        file_name="payment_quote.pdf",
        mime="application/pdf",
    )
    return breakdown
