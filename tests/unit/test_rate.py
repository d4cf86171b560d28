from decimal import Decimal

import pytest

from app.core.errors import ValidationError
from app.quoting.rate import StorePricingConfig, calculate_rate, round_to_hundred


def sale_store(factor: float) -> StorePricingConfig:
    return StorePricingConfig(store_id="s", rate_factor=factor, requires_sale_amount=True)


def flat_store(factor: float) -> StorePricingConfig:
    return StorePricingConfig(store_id="s", rate_factor=factor, requires_sale_amount=False)


def test_flat_formula_single_space_no_markup():
    # 1400 + 1882.41 = 3282.41
    assert calculate_rate(flat_store(0), 1) == 3300


def test_sale_formula_with_markup():
    # (960.16*2 + 0.066354*50000 + 1782.41) * 1.08 = 7020.43 * 1.08 = 7582.0644
    assert calculate_rate(sale_store(0.08), 2, 50000) == 7600


@pytest.mark.parametrize(
    "factor,spaces,expected",
    [
        (0.1, 3, 6700),  # 6082.41 * 1.1 = 6690.651
        (0.25, 8, 16400),  # 13082.41 * 1.25 = 16353.0125
        (0, 100, 141900),  # no upper bound on spaces
    ],
)
def test_flat_formula(factor, spaces, expected):
    assert calculate_rate(flat_store(factor), spaces) == expected


def test_sale_formula_no_markup():
    # 960.16 + 6635.4 + 1782.41 = 9377.97
    assert calculate_rate(sale_store(0), 1, 100000) == 9400


def test_flat_formula_ignores_sale_amount():
    assert calculate_rate(flat_store(0.1), 2, 0) == calculate_rate(flat_store(0.1), 2, 999999)


@pytest.mark.parametrize("sale_amount", [0, None])
def test_sale_amount_required(sale_amount):
    with pytest.raises(ValidationError, match="sale amount required"):
        calculate_rate(sale_store(0.08), 2, sale_amount)


@pytest.mark.parametrize("spaces", [0, -1, 1.5, True])
def test_number_of_spaces_must_be_positive_int(spaces):
    with pytest.raises(ValidationError):
        calculate_rate(flat_store(0), spaces)


def test_negative_inputs_rejected():
    with pytest.raises(ValidationError):
        calculate_rate(sale_store(0), 1, -5)
    with pytest.raises(ValidationError):
        calculate_rate(flat_store(-0.1), 1)


def test_result_is_always_a_multiple_of_100():
    for factor in (0, 0.03, 0.1, 0.5, 1.75):
        for spaces in range(1, 9):
            assert calculate_rate(flat_store(factor), spaces) % 100 == 0
            assert calculate_rate(sale_store(factor), spaces, 12345) % 100 == 0


def test_round_to_hundred_is_half_up():
    assert round_to_hundred(Decimal("3250")) == 3300
    assert round_to_hundred(Decimal("3249.99")) == 3200
    assert round_to_hundred(Decimal("49.99")) == 0
