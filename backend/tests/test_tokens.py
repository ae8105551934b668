import pytest

from snooker import db
from snooker.services.house.errors import InsufficientBalance, InvalidAmount, SnookerError
from snooker.services.house.tokens import get_balance, mint, transfer


def test_unknown_account_has_zero_balance(flask_app):
    assert get_balance('XLM', 'nobody') == 0


def test_mint_and_transfer(flask_app):
    mint('XLM', 'alice', 500)
    transfer('XLM', 'alice', 'bob', 200)
    db.session.commit()
    assert get_balance('XLM', 'alice') == 300
    assert get_balance('XLM', 'bob') == 200
    # Balances are per token
    assert get_balance('SNK', 'alice') == 0


def test_transfer_above_balance_fails(flask_app):
    mint('XLM', 'alice', 50)
    with pytest.raises(InsufficientBalance):
        transfer('XLM', 'alice', 'bob', 51)
    assert get_balance('XLM', 'alice') == 50


def test_non_positive_amounts_rejected(flask_app):
    with pytest.raises(SnookerError):
        mint('XLM', 'alice', 0)
    mint('XLM', 'alice', 10)
    with pytest.raises(SnookerError):
        transfer('XLM', 'alice', 'bob', -5)


def test_mint_cli(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['mint', 'XLM', 'carol', '42'])
    assert result.exit_code == 0
    assert 'carol now holds 42 XLM' in result.output
    assert get_balance('XLM', 'carol') == 42


def test_amounts_outside_64_bits_rejected(flask_app):
    with pytest.raises(InvalidAmount):
        mint('XLM', 'alice', 2 ** 63)
    mint('XLM', 'alice', 2 ** 63 - 1)
    with pytest.raises(InvalidAmount):
        mint('XLM', 'alice', 1)
    with pytest.raises(InvalidAmount):
        transfer('XLM', 'alice', 'bob', 2 ** 64)
    db.session.rollback()
    assert get_balance('XLM', 'bob') == 0


def test_mint_cli_reports_errors(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['mint', 'XLM', 'carol', '0'])
    assert result.exit_code == 1
    assert 'Mint amount must be positive' in result.output
    assert get_balance('XLM', 'carol') == 0
