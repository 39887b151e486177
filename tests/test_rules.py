from homequote.rules import evaluate_program_eligibility, evaluate_recommendations


def _codes(rules, state):
    return [r.code for r in rules(state)]


def test_program_matches_loan_program():
    assert "VA_ZERO_DOWN" in _codes(evaluate_program_eligibility, {"loan_program": "va"})
    assert "FHA_LOW_DOWN" in _codes(evaluate_program_eligibility, {"loan_program": "fha"})
    assert "USDA_RURAL" in _codes(evaluate_program_eligibility, {"loan_program": "usda"})
    assert _codes(evaluate_program_eligibility, {"loan_program": "conventional", "dti_pct": 40}) == []


def test_best_rate_for_excellent_credit():
    codes = _codes(evaluate_program_eligibility, {"credit_tier": "excellent", "dti_pct": 50})
    assert codes == ["BEST_RATE"]


def test_conventional_needs_price_and_low_dti():
    state = {"max_purchase_price": 250000, "dti_pct": 35.9}
    assert "CONVENTIONAL_ELIGIBLE" in _codes(evaluate_program_eligibility, state)
    state["dti_pct"] = 36.0
    assert "CONVENTIONAL_ELIGIBLE" not in _codes(evaluate_program_eligibility, state)
    assert "CONVENTIONAL_ELIGIBLE" not in _codes(
        evaluate_program_eligibility, {"max_purchase_price": 0, "dti_pct": 10}
    )


def test_program_order():
    state = {"loan_program": "va", "credit_tier": "excellent", "max_purchase_price": 300000, "dti_pct": 20}
    assert _codes(evaluate_program_eligibility, state) == [
        "VA_ZERO_DOWN",
        "BEST_RATE",
        "CONVENTIONAL_ELIGIBLE",
    ]


def test_reduce_debt_above_43():
    assert "REDUCE_DEBT" in _codes(evaluate_recommendations, {"dti_pct": 43.1})
    assert "REDUCE_DEBT" not in _codes(evaluate_recommendations, {"dti_pct": 43.0})


def test_improve_credit_for_fair_and_poor():
    assert "IMPROVE_CREDIT" in _codes(evaluate_recommendations, {"credit_tier": "fair"})
    assert "IMPROVE_CREDIT" in _codes(evaluate_recommendations, {"credit_tier": "poor"})
    assert "IMPROVE_CREDIT" not in _codes(evaluate_recommendations, {"credit_tier": "good"})


def test_avoid_pmi_below_twenty_percent():
    assert "AVOID_PMI" in _codes(evaluate_recommendations, {"desired_down_payment_pct": 19.9})
    assert "AVOID_PMI" not in _codes(evaluate_recommendations, {"desired_down_payment_pct": 20})


def test_build_reserves_against_price():
    state = {"desired_down_payment_pct": 20, "max_purchase_price": 300000, "available_funds": 17999}
    results = evaluate_recommendations(state)
    assert [r.code for r in results] == ["BUILD_RESERVES"]
    assert results[0].context["target"] == 18000
    state["available_funds"] = 18000
    assert _codes(evaluate_recommendations, state) == []


def test_recommendation_order():
    state = {
        "dti_pct": 48,
        "credit_tier": "poor",
        "desired_down_payment_pct": 5,
        "max_purchase_price": 200000,
        "available_funds": 1000,
    }
    assert _codes(evaluate_recommendations, state) == [
        "REDUCE_DEBT",
        "IMPROVE_CREDIT",
        "AVOID_PMI",
        "BUILD_RESERVES",
    ]
