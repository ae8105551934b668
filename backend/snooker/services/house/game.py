"""Turn lifecycle: bootstrap, dealing a table, scoring a shot, withdrawals.

Each function runs inside the caller's database transaction. Nothing here
commits; on any raised error the caller rolls back and no partial state
survives.
"""

from typing import List, Sequence

from flask import current_app

from snooker import db
from snooker.models import AdminConfig, PlaySession, PoolTable, User
from snooker.services.pool.physics import Ball, I128_MAX, I128_MIN, ShotOverflowError
from snooker.services.pool.scoring import MAX_BREAK, compute_score
from snooker.services.pool.session import validate_session
from snooker.services.pool.table import MAX_BALLS, Table, create_table, table_seed
from . import ledger, tokens
from .errors import (
    AlreadyInitialized,
    InvalidPoolTable,
    InvalidShot,
    NoAdmin,
    SnookerError,
    Unauthorized,
)


def _house_account() -> str:
    return current_app.config.get('HOUSE_ACCOUNT', 'snooker')


def get_admin_config() -> AdminConfig:
    config = AdminConfig.query.first()
    if config is None:
        raise NoAdmin()
    return config


def initialize(admin: str, payment_token: str, payment_amount: int,
               reward_token: str, reward_amount: int) -> AdminConfig:
    if AdminConfig.query.first() is not None:
        raise AlreadyInitialized()
    if not User.query.filter_by(username=admin).first():
        raise SnookerError(f'Unknown admin account {admin!r}')
    tokens.check_amount(payment_amount, 'payment_amount')
    tokens.check_amount(reward_amount, 'reward_amount')
    config = AdminConfig(
        admin=admin,
        payment_token=payment_token,
        payment_amount=payment_amount,
        reward_token=reward_token,
        reward_amount=reward_amount,
    )
    db.session.add(config)
    db.session.flush()
    current_app.logger.info(
        f"[initialize] admin={admin} payment={payment_amount} {payment_token} reward={reward_amount} {reward_token}"
    )
    return config


def parse_cue_balls(raw) -> List[Ball]:
    """Turn submitted ``[x, y, vx, vy]`` lists or ``{x, y, vx, vy}`` objects into balls."""
    if not isinstance(raw, (list, tuple)) or len(raw) < MAX_BALLS:
        raise InvalidShot(f'At least {MAX_BALLS} cue balls are required')
    balls = []
    for item in raw:
        if isinstance(item, dict):
            values = [item.get(k) for k in ('x', 'y', 'vx', 'vy')]
        elif isinstance(item, (list, tuple)) and len(item) == 4:
            values = list(item)
        else:
            raise InvalidShot('Each cue ball needs x, y, vx and vy')
        for v in values:
            if isinstance(v, bool) or not isinstance(v, int) or not I128_MIN <= v <= I128_MAX:
                raise InvalidShot('Cue ball components must be 128-bit integers')
        balls.append(Ball.from_list(values))
    return balls


def insert_coin(player: User) -> PoolTable:
    """Charge the entry fee and deal ``player`` a fresh table."""
    config = get_admin_config()
    if config.payment_amount > 0:
        tokens.transfer(config.payment_token, player.username, _house_account(), config.payment_amount)

    info = ledger.close_ledger()
    table = create_table(table_seed(info.timestamp, info.sequence))

    session = PlaySession.query.filter_by(player_id=player.id).first()
    if session is None:
        session = PlaySession(player_id=player.id)
    session.ledger_time = info.timestamp
    db.session.add(session)

    record = PoolTable.query.filter_by(player_id=player.id).first()
    if record is None:
        record = PoolTable(player_id=player.id)
    record.set_table(table)
    record.ledger_time = info.timestamp
    record.sequence = info.sequence
    db.session.add(record)
    db.session.flush()
    current_app.logger.info(
        f"[insertcoin] player={player.username} ledger_time={info.timestamp} sequence={info.sequence}"
    )
    return record


def _load_playable_table(player: User) -> PoolTable:
    session = PlaySession.query.filter_by(player_id=player.id).first()
    record = PoolTable.query.filter_by(player_id=player.id).first()
    if session is None or record is None:
        raise InvalidPoolTable()
    turn_duration = int(current_app.config.get('TURN_DURATION_SEC', 180))
    if not validate_session(session.ledger_time, ledger.now(), record.to_table(), turn_duration):
        raise InvalidPoolTable('Pool table is stale or incomplete')
    return record


def _consume_table(record: PoolTable) -> Table:
    """Delete the stored table, failing if another call already took it."""
    table = record.to_table()
    deleted = PoolTable.query.filter_by(id=record.id, sequence=record.sequence).delete(
        synchronize_session=False
    )
    if deleted != 1:
        raise InvalidPoolTable()
    db.session.expunge(record)
    return table


def play(player: User, cue_balls: Sequence[Ball]) -> int:
    """Score ``cue_balls`` against the player's table and pay out a maximum break."""
    config = get_admin_config()
    if len(cue_balls) < MAX_BALLS:
        raise InvalidShot(f'At least {MAX_BALLS} cue balls are required')

    record = _load_playable_table(player)
    table = _consume_table(record)

    try:
        score = compute_score(table, cue_balls)
    except ShotOverflowError as exc:
        raise InvalidShot(str(exc)) from exc
    current_app.logger.info(f"[play] player={player.username} score={score}")

    if score == MAX_BREAK and config.reward_amount > 0:
        tokens.transfer(config.reward_token, _house_account(), player.username, config.reward_amount)
        current_app.logger.info(
            f"[reward] player={player.username} amount={config.reward_amount} token={config.reward_token}"
        )
    return score


def withdraw(caller: User, account: str, amount: int) -> int:
    """Move house reward tokens to ``account``. Returns the balance before the move."""
    config = get_admin_config()
    if caller.username != config.admin:
        raise Unauthorized()
    tokens.check_amount(amount)
    balance = tokens.get_balance(config.reward_token, _house_account())
    if amount <= balance:
        tokens.transfer(config.reward_token, _house_account(), account, amount)
        current_app.logger.info(f"[withdraw] account={account} amount={amount} token={config.reward_token}")
    else:
        current_app.logger.warning(f"[withdraw] amount={amount} exceeds house balance={balance}")
    return balance
