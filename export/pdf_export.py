"""Quote exports for sharing a payment or pre-qualification with a client."""
from __future__ import annotations
from typing import Any, Dict, List, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from homequote.models import AmortizationRow, PaymentBreakdown
from homequote.presets import DISCLAIMER

BREAKDOWN_LABELS = [
    ("principal", "Loan Amount"),
    ("principal_and_interest", "Principal & Interest"),
    ("monthly_property_tax", "Property Tax"),
    ("monthly_insurance", "Homeowners Insurance"),
    ("monthly_pmi", "PMI"),
    ("total_monthly_payment", "Total Monthly Payment"),
    ("total_interest_over_term", "Total Interest"),
    ("total_cost_over_term", "Total Cost"),
]

TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("BOX", (0, 0), (-1, -1), 1, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]
)


def build_quote_summary(data: Dict[str, Any]) -> bytes:
    """Build a plain-text quote from a payment breakdown and/or pre-qualification.

    ``data`` may hold ``breakdown`` (a ``PaymentBreakdown`` dump), ``schedule``
    (amortization row dumps) and ``qualification`` (an ``AffordabilityResult``
    dump).  Sharing a pre-qualification the buyer does not meet requires an
    ``override_reason``, which is recorded in the output.
    """

    qualification = data.get("qualification")
    override_reason = data.get("override_reason")
    if qualification is not None and not qualification.get("is_qualified", False):
        if not override_reason:
            raise ValueError("override_reason required to share a non-qualifying estimate")

    lines: List[str] = []
    breakdown = data.get("breakdown")
    if breakdown:
        lines.append("Payment Breakdown:")
        for key, label in BREAKDOWN_LABELS:
            if key in breakdown:
                lines.append(f"{label}: ${breakdown[key]:,.2f}")

    schedule = data.get("schedule", [])
    if schedule:
        lines.append("Amortization (month / principal / interest / balance):")
        for row in schedule:
            lines.append(
                f"{row['month']}: ${row['principal_portion']:,.2f} / "
                f"${row['interest_portion']:,.2f} / ${row['remaining_balance']:,.2f}"
            )

    if qualification is not None:
        lines.append("Pre-Qualification:")
        lines.append(f"Max Purchase Price: ${qualification['max_purchase_price']:,.0f}")
        lines.append(f"Estimated Rate: {qualification['estimated_rate_pct']:.3f}%")
        lines.append(f"DTI: {qualification['debt_to_income_ratio_pct']:.1f}%")
        lines.append(f"Qualification: {qualification['qualification_tier']}")
        for program in qualification.get("eligible_programs", []):
            lines.append(f"[program] {program}")
        for rec in qualification.get("recommendations", []):
            lines.append(f"[tip] {rec}")

    if override_reason:
        lines.append(f"Override Reason: {override_reason}")

    lines.append(f"Disclaimer: {DISCLAIMER}")
    return "\n".join(lines).encode()


def write_quote_pdf(
    out_path,
    branding: dict,
    breakdown: PaymentBreakdown,
    rows: Sequence[AmortizationRow],
) -> None:
    """Render a payment quote with its amortization excerpt as a PDF."""

    styles = getSampleStyleSheet()
    doc = SimpleDocTemplate(out_path, pagesize=LETTER, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    story = []
    title = branding.get("title", "Mortgage Payment Quote")
    story += [Paragraph(f"<b>{title}</b>", styles["Title"]), Spacer(1, 6)]
    if branding.get("agent"):
        story.append(Paragraph(f"Agent: {branding['agent']}", styles["Normal"]))
    if branding.get("contact"):
        story.append(Paragraph(f"Contact: {branding['contact']}", styles["Normal"]))
    story.append(Spacer(1, 12))

    values = breakdown.model_dump()
    pay_rows = [[label, f"${values[key]:,.2f}"] for key, label in BREAKDOWN_LABELS]
    t = Table([["Payment Breakdown", ""]] + pay_rows, hAlign="LEFT", colWidths=[200, 320])
    t.setStyle(TABLE_STYLE)
    story += [t, Spacer(1, 12)]

    if rows:
        sched = [["Month", "Payment", "Principal", "Interest", "Balance"]] + [
            [
                str(r.month),
                f"${r.payment_amount:,.2f}",
                f"${r.principal_portion:,.2f}",
                f"${r.interest_portion:,.2f}",
                f"${r.remaining_balance:,.2f}",
            ]
            for r in rows
        ]
        t = Table(sched, hAlign="LEFT")
        t.setStyle(TABLE_STYLE)
        story += [Paragraph("<b>Amortization Schedule</b>", styles["Heading3"]), Spacer(1, 6), t, Spacer(1, 12)]

    story += [Spacer(1, 12), Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles["Normal"])]
    doc.build(story)
