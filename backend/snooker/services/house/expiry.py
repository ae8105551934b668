import time
from typing import Set, Tuple

from snooker import db, socketio
from snooker.models import PoolTable, User


_scheduled_expiries: Set[Tuple[int, int]] = set()


def schedule_table_expiry(app, player_id: int, sequence: int) -> None:
    """Purge the player's table once its turn window has passed.

    - No-ops in TESTING mode unless ENABLE_SCHEDULER_IN_TESTS is set
    - Ensures a single timer per (player_id, sequence)
    - Only deletes the table that was dealt at ``sequence``; a newer deal
      for the same player is left alone
    """
    if app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        return

    key = (player_id, sequence)
    if key in _scheduled_expiries:
        app.logger.info(f"[expiry-skip] player={player_id} sequence={sequence} already scheduled")
        return
    _scheduled_expiries.add(key)

    delay = int(app.config.get('TURN_DURATION_SEC', 180)) + int(app.config.get('TABLE_EXPIRY_GRACE_SEC', 30))
    app.logger.info(f"[expiry-set] player={player_id} sequence={sequence} delay={delay}s")

    def _worker(pid: int, seq: int, wait: int):
        time.sleep(wait)
        with app.app_context():
            _scheduled_expiries.discard((pid, seq))
            deleted = PoolTable.query.filter_by(player_id=pid, sequence=seq).delete(synchronize_session=False)
            db.session.commit()
            app.logger.info(f"[expiry-fire] player={pid} sequence={seq} purged={deleted}")
            if not deleted:
                return
            user = db.session.get(User, pid)
            if user:
                socketio.emit('table_expired', {'sequence': seq}, to=f"player:{user.username}", namespace='/ws')

    if app.config.get('TESTING'):
        _worker(player_id, sequence, delay)
    else:
        socketio.start_background_task(_worker, player_id, sequence, delay)
