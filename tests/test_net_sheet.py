import pytest

from homequote.errors import InvalidInput
from homequote.models import BuyerCashToCloseInputs, SellerNetSheetInputs
from homequote.net_sheet import buyer_cash_to_close, buyer_mi_monthly, seller_net_sheet
from homequote.presets import BUYER_DEFAULTS, SELLER_DEFAULTS


def test_seller_defaults():
    res = seller_net_sheet(SellerNetSheetInputs(**SELLER_DEFAULTS))
    assert res.gross_proceeds == 425000
    assert res.commission == pytest.approx(25500)
    assert res.total_closing_costs == pytest.approx(30500)
    assert res.net_before_mortgage == pytest.approx(394500)
    assert res.mortgage_payoff == 280000
    assert res.estimated_net_proceeds == pytest.approx(114500)
    assert not res.is_short_sale


def test_seller_short_sale():
    res = seller_net_sheet(SellerNetSheetInputs(sale_price=300000.0, mortgage_balance=295000.0))
    assert res.estimated_net_proceeds == pytest.approx(300000 - 18000 - 295000)
    assert res.is_short_sale


def test_seller_rejects_bad_amounts():
    with pytest.raises(InvalidInput):
        seller_net_sheet(SellerNetSheetInputs(sale_price=0.0))
    with pytest.raises(InvalidInput):
        seller_net_sheet(SellerNetSheetInputs(escrow_fees=-1.0))


def test_buyer_defaults():
    res = buyer_cash_to_close(BuyerCashToCloseInputs(**BUYER_DEFAULTS))
    assert res.down_payment == pytest.approx(85000)
    assert res.loan_amount == pytest.approx(340000)
    assert res.closing_costs == pytest.approx(20100)
    assert res.total_cash_needed == pytest.approx(105100)
    assert res.monthly_mortgage_insurance == 0
    assert res.monthly_taxes == pytest.approx(3500 / 12)
    assert res.monthly_insurance == pytest.approx(200)
    assert res.total_monthly_payment == pytest.approx(
        res.monthly_principal_and_interest + 3500 / 12 + 200
    )


def test_seller_credits_reduce_cash_needed():
    values = dict(BUYER_DEFAULTS, seller_credits=5000.0)
    res = buyer_cash_to_close(BuyerCashToCloseInputs(**values))
    assert res.total_cash_needed == pytest.approx(100100)


def test_buyer_mortgage_insurance_by_program():
    assert buyer_mi_monthly(382500, 10, "fha") == pytest.approx(382500 * 0.0055 / 12)
    assert buyer_mi_monthly(382500, 10, "conventional") == pytest.approx(382500 * 0.005 / 12)
    assert buyer_mi_monthly(382500, 10, "usda") == pytest.approx(382500 * 0.005 / 12)
    assert buyer_mi_monthly(403750, 5, "va") == 0
    assert buyer_mi_monthly(340000, 20, "fha") == 0


def test_buyer_rejects_bad_down_payment():
    with pytest.raises(InvalidInput):
        buyer_cash_to_close(BuyerCashToCloseInputs(down_payment_pct=101.0))
    with pytest.raises(InvalidInput):
        buyer_cash_to_close(BuyerCashToCloseInputs(purchase_price=-5.0))
