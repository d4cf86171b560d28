import pytest

from app.quoting.normalize import parse_sale_amount, to_title_case


def test_to_title_case_trims_and_capitalizes_each_word():
    assert to_title_case("  jUAN pérez ") == "Juan Pérez"
    assert to_title_case("MARIA") == "Maria"


def test_to_title_case_only_splits_on_spaces():
    assert to_title_case("o'neil smith-jones") == "O'neil Smith-jones"


def test_to_title_case_blank():
    assert to_title_case("   ") == ""


def test_parse_sale_amount_keeps_digits():
    assert parse_sale_amount("RD$ 1,250,000") == 1250000
    assert parse_sale_amount("50.000") == 50000
    assert parse_sale_amount(750) == 750
    assert parse_sale_amount("") == 0
    assert parse_sale_amount(None) == 0


def test_parse_sale_amount_rejects_bool():
    with pytest.raises(ValueError):
        parse_sale_amount(True)


@pytest.mark.parametrize("value", ["-50000", "RD$ -1,000", "1250.50", "1.250,5", 1250.5])
def test_parse_sale_amount_rejects_sign_and_fractions(value):
    with pytest.raises(ValueError):
        parse_sale_amount(value)


def test_parse_sale_amount_keeps_three_digit_groups():
    assert parse_sale_amount("1.250.000") == 1250000
    assert parse_sale_amount(1250.0) == 1250
