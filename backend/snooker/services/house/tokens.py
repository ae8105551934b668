from snooker import db
from snooker.models import TokenBalance
from .errors import InsufficientBalance, InvalidAmount, SnookerError

# Amounts and balances are stored in BigInteger columns.
AMOUNT_MIN = -(1 << 63)
AMOUNT_MAX = (1 << 63) - 1


def check_amount(amount, name: str = 'amount') -> int:
    if isinstance(amount, bool) or not isinstance(amount, int) or not AMOUNT_MIN <= amount <= AMOUNT_MAX:
        raise InvalidAmount(f'{name} must be a 64-bit integer')
    return amount


def _account(token: str, account: str, create: bool = False):
    row = TokenBalance.query.filter_by(token=token, account=account).first()
    if row is None and create:
        row = TokenBalance(token=token, account=account, amount=0)
        db.session.add(row)
    return row


def _credit(row: TokenBalance, amount: int) -> None:
    total = int(row.amount or 0) + amount
    if total > AMOUNT_MAX:
        raise InvalidAmount(f'{row.account} balance of {row.token} would exceed {AMOUNT_MAX}')
    row.amount = total


def get_balance(token: str, account: str) -> int:
    row = _account(token, account)
    return int(row.amount) if row else 0


def mint(token: str, account: str, amount: int) -> int:
    check_amount(amount)
    if amount <= 0:
        raise SnookerError('Mint amount must be positive')
    row = _account(token, account, create=True)
    _credit(row, amount)
    db.session.flush()
    return row.amount


def transfer(token: str, source: str, destination: str, amount: int) -> None:
    """Move ``amount`` of ``token`` between accounts (not committed)."""
    check_amount(amount)
    if amount <= 0:
        raise SnookerError('Transfer amount must be positive')
    src = _account(token, source)
    if src is None or src.amount < amount:
        raise InsufficientBalance(f'{source} cannot cover {amount} {token}')
    dst = _account(token, destination, create=True)
    if dst is not src:
        _credit(dst, amount)
        src.amount -= amount
    db.session.flush()
