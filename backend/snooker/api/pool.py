from flask import Blueprint, jsonify, request, current_app
from flask_login import current_user, login_required
from snooker import db, socketio
from snooker.models import PoolTable
from snooker.services.house.errors import SnookerError
from snooker.services.house.expiry import schedule_table_expiry as svc_schedule_table_expiry
from snooker.services.house import game as svc_game
from snooker.services.house.tokens import get_balance
from snooker.services.pool.scoring import MAX_BREAK


pool = Blueprint('pool', __name__)


def _error_response(exc: SnookerError):
    db.session.rollback()
    current_app.logger.warning(f"[rejected] {request.path} code={exc.code} {exc}")
    return jsonify(exc.to_dict()), exc.status


def _player_room() -> str:
    return f"player:{current_user.username}"


def _int_field(data: dict, name: str, default=None):
    value = data.get(name, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SnookerError(f'{name} must be an integer')
    return value


@pool.route('/initialize', methods=['POST'])
@login_required
def initialize():
    data = request.get_json(silent=True) or {}
    admin = data.get('admin')
    payment_token = data.get('payment_token')
    reward_token = data.get('reward_token')
    if not all([admin, payment_token, reward_token]):
        return jsonify({'error': 'admin, payment_token and reward_token are required'}), 400
    try:
        config = svc_game.initialize(
            admin,
            payment_token,
            _int_field(data, 'payment_amount', 0),
            reward_token,
            _int_field(data, 'reward_amount', 0),
        )
        db.session.commit()
    except SnookerError as exc:
        return _error_response(exc)
    return jsonify(config.to_dict()), 201


@pool.route('/insertcoin', methods=['POST'])
@login_required
def insert_coin():
    try:
        record = svc_game.insert_coin(current_user)
        db.session.commit()
    except SnookerError as exc:
        return _error_response(exc)

    payload = record.to_dict()
    socketio.emit('table_created', payload, to=_player_room(), namespace='/ws')
    svc_schedule_table_expiry(current_app._get_current_object(), current_user.id, payload['sequence'])
    return jsonify(payload), 201


@pool.route('/table', methods=['GET'])
@login_required
def get_table():
    record = PoolTable.query.filter_by(player_id=current_user.id).first()
    if not record:
        return jsonify({'error': 'No table dealt'}), 404
    return jsonify(record.to_dict())


@pool.route('/play', methods=['POST'])
@login_required
def play():
    data = request.get_json(silent=True) or {}
    try:
        cue_balls = svc_game.parse_cue_balls(data.get('cue_balls'))
        score = svc_game.play(current_user, cue_balls)
        db.session.commit()
    except SnookerError as exc:
        return _error_response(exc)

    result = {'score': score, 'max_break': score == MAX_BREAK}
    socketio.emit('shot_scored', result, to=_player_room(), namespace='/ws')
    return jsonify(result)


@pool.route('/withdraw', methods=['POST'])
@login_required
def withdraw():
    data = request.get_json(silent=True) or {}
    account = data.get('account')
    if not account:
        return jsonify({'error': 'account is required'}), 400
    try:
        balance = svc_game.withdraw(current_user, account, _int_field(data, 'amount'))
        db.session.commit()
    except SnookerError as exc:
        return _error_response(exc)
    return jsonify({'balance': balance})


@pool.route('/balance/<string:token>', methods=['GET'])
@login_required
def balance(token):
    return jsonify({'token': token, 'account': current_user.username, 'balance': get_balance(token, current_user.username)})
