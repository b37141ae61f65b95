"""
Unit tests for template formatters.
"""

from decimal import Decimal

from app.utils.formatters import image_src, money, year, yes_no


def test_money():
    assert money(21000) == '21,000.00'
    assert money(Decimal('3990.5')) == '3,990.50'
    assert money('544500') == '544,500.00'
    assert money(0) == '0.00'


def test_money_invalid():
    assert money(None) == '-'
    assert money('') == '-'
    assert money('abc') == '-'


def test_year_and_yes_no():
    assert year(2022) == '2022'
    assert year(None) == '-'
    assert yes_no(True) == 'Yes'
    assert yes_no(False) == 'No'


def test_image_src(app):
    with app.test_request_context():
        assert image_src('https://example.com/a.png') == 'https://example.com/a.png'
        assert image_src('images/no-picture-Square210.png') == '/static/images/no-picture-Square210.png'
        assert image_src('/images/no-picture-Square210.png') == '/static/images/no-picture-Square210.png'
        assert image_src(None) == ''
