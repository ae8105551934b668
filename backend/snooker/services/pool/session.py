from .table import MAX_BALLS, Table

# Seconds a player has to submit a shot once the table is dealt.
TURN_DURATION = 180


def is_fresh(session_timestamp: int, now: int, turn_duration: int = TURN_DURATION) -> bool:
    return session_timestamp + turn_duration >= now


def validate_session(session_timestamp: int, now: int, table: Table,
                     turn_duration: int = TURN_DURATION) -> bool:
    """Check that a table may still be scored: not stale and fully dealt."""
    if not is_fresh(session_timestamp, now, turn_duration):
        return False
    return len(table.balls) >= MAX_BALLS and len(table.pockets) >= MAX_BALLS
