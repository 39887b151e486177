import streamlit as st
from core.utils import credit_score_to_tier, fmt_currency
from export.pdf_export import build_quote_summary
from homequote.affordability import estimate_affordability, what_if_affordability
from homequote.errors import CalculatorError
from homequote.models import AffordabilityInputs
from homequote.presets import (
    BASE_RATE_BY_CREDIT_TIER,
    LOAN_PROGRAMS,
    PREQUAL_DEFAULTS,
    PROGRAM_RATE_ADJUSTMENT,
)

TIER_BANNERS = {
    "strong": ("success", "You're Pre-Qualified!"),
    "moderate": ("warning", "Conditionally Qualified"),
    "weak": ("error", "Let's Improve Your Numbers"),
}


def render_prequal_view():
    """Pre-qualification estimator with what-if toggles."""
    st.session_state.setdefault("prequal_inputs", dict(PREQUAL_DEFAULTS))
    p = st.session_state.prequal_inputs
    st.header("Instant Pre-Qualification")
    c1, c2 = st.columns(2)
    with c1:
        p["annual_income"] = st.number_input(
            "Annual Income", value=float(p.get("annual_income", 0.0)), min_value=0.0, step=1000.0
        )
        p["additional_annual_income"] = st.number_input(
            "Additional Annual Income",
            value=float(p.get("additional_annual_income", 0.0)),
            min_value=0.0,
            step=1000.0,
        )
        p["monthly_debt_payments"] = st.number_input(
            "Monthly Debt Payments",
            value=float(p.get("monthly_debt_payments", 0.0)),
            min_value=0.0,
            step=50.0,
            help="Car loans, student loans, card minimums, child support",
        )
        p["credit_score"] = st.number_input(
            "Credit Score", value=float(p.get("credit_score", 700.0)), min_value=300.0, max_value=850.0
        )
        p["credit_tier"] = credit_score_to_tier(p["credit_score"])
        st.caption(f"Credit tier: {p['credit_tier']}")
    with c2:
        p["liquid_savings"] = st.number_input(
            "Savings", value=float(p.get("liquid_savings", 0.0)), min_value=0.0, step=1000.0
        )
        p["gift_funds"] = st.number_input(
            "Gift Funds", value=float(p.get("gift_funds", 0.0)), min_value=0.0, step=1000.0
        )
        program = p.get("loan_program", "conventional")
        p["loan_program"] = st.selectbox(
            "Loan Program",
            LOAN_PROGRAMS,
            index=LOAN_PROGRAMS.index(program) if program in LOAN_PROGRAMS else 0,
            format_func=str.upper,
        )
        p["desired_down_payment_pct"] = st.number_input(
            "Down Payment %",
            value=float(p.get("desired_down_payment_pct", 0.0)),
            min_value=0.0,
            max_value=99.0,
            step=1.0,
        )

    base_rates = st.session_state.get("base_rates_table", BASE_RATE_BY_CREDIT_TIER)
    adjustments = st.session_state.get("rate_adjustments_table", PROGRAM_RATE_ADJUSTMENT)
    try:
        inputs = AffordabilityInputs(**p)
        res = estimate_affordability(inputs, base_rates, adjustments)
    except CalculatorError as exc:
        st.session_state.pop("prequal_calc", None)
        st.error(str(exc))
        return None
    st.session_state["prequal_calc"] = res.model_dump()

    kind, banner = TIER_BANNERS[res.qualification_tier]
    getattr(st, kind)(banner)
    cols = st.columns(4)
    cols[0].metric("Max Purchase Price", fmt_currency(res.max_purchase_price))
    cols[1].metric("Max Loan", fmt_currency(res.max_loan_amount))
    cols[2].metric("Est. Payment (P&I)", fmt_currency(res.estimated_monthly_payment))
    cols[3].metric("DTI", f"{res.debt_to_income_ratio_pct:.1f}%")
    st.caption(
        f"Estimated Rate: {res.estimated_rate_pct:.3f}% • Down Payment Used: "
        f"{res.effective_down_payment_pct:.1f}% • Qualified: {'Yes' if res.is_qualified else 'No'}"
    )
    if res.eligible_programs:
        st.subheader("Programs")
        for program_name in res.eligible_programs:
            st.markdown(f"- {program_name}")
    if res.recommendations:
        st.subheader("Recommendations")
        for rec in res.recommendations:
            st.markdown(f"- {rec}")

    c1, c2, c3 = st.columns(3)
    with c1:
        more_savings = st.checkbox("Add $10k savings", key="pq_more_savings")
    with c2:
        more_debt = st.checkbox("Add $300 monthly debt", key="pq_more_debt")
    with c3:
        better_credit = st.checkbox("Improve credit one tier", key="pq_better_credit")

    ticked = [
        (key, label)
        for key, label, on in (
            ("savings_plus_10k", "+$10k savings", more_savings),
            ("debt_plus_300", "+$300 debt", more_debt),
            ("credit_tier_up", "better credit", better_credit),
        )
        if on
    ]
    if ticked:
        scenarios = what_if_affordability(inputs, base_rates, adjustments)
        for key, label in ticked:
            alt = scenarios[key]
            st.caption(
                f"What-If Max Price ({label}): {fmt_currency(alt.max_purchase_price)} • DTI: "
                f"{alt.debt_to_income_ratio_pct:.1f}% • Tier: {alt.qualification_tier}"
            )

    override = ""
    if not res.is_qualified:
        override = st.text_input("Override reason to share this estimate", key="pq_override")
    if res.is_qualified or override:
        st.download_button(
            "Download Pre-Qualification",
            build_quote_summary({"qualification": res.model_dump(), "override_reason": override}),
            file_name="prequalification.txt",
        )
    return res
