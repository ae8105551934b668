"""Ledger clock: wall time plus a monotonic sequence number."""

import time
from collections import namedtuple

from snooker import db
from snooker.models import LedgerState

LedgerInfo = namedtuple('LedgerInfo', ['timestamp', 'sequence'])


def now() -> int:
    return int(time.time())


def close_ledger() -> LedgerInfo:
    """Advance the sequence counter and return the new ledger entry."""
    state = db.session.get(LedgerState, 1)
    if state is None:
        state = LedgerState(id=1, sequence=0)
    state.sequence += 1
    db.session.add(state)
    db.session.flush()
    return LedgerInfo(timestamp=now(), sequence=state.sequence)
