from flask_login import current_user
from flask_socketio import join_room, leave_room, emit
from snooker import socketio


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def _own_player(data):
    """Name of the room owner, if the connected user may use that room."""
    if not current_user.is_authenticated:
        emit('error', {'message': 'login required'})
        return None
    player = (data or {}).get('player') or current_user.username
    if player != current_user.username:
        emit('error', {'message': 'that room belongs to another player'})
        return None
    return player


def handle_join_player(data):
    player = _own_player(data)
    if not player:
        return
    room = f"player:{player}"
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_player(data):
    player = _own_player(data)
    if not player:
        return
    room = f"player:{player}"
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('join_player', handle_join_player, namespace='/ws')
    socketio.on_event('leave_player', handle_leave_player, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
