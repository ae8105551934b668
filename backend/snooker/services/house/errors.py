class SnookerError(Exception):
    """Base for failures reported to the caller as ``{'error', 'code'}``."""
    code = 0
    status = 400
    message = 'Request failed'

    def __init__(self, message=None):
        super().__init__(message or self.message)

    def to_dict(self):
        return {'error': str(self), 'code': self.code}


class NoAdmin(SnookerError):
    code = 1
    status = 503
    message = 'Snooker has not been initialized'


class AlreadyInitialized(SnookerError):
    code = 2
    status = 409
    message = 'Snooker is already initialized'


class InvalidPoolTable(SnookerError):
    code = 3
    status = 400
    message = 'No valid pool table for this player'


class InsufficientBalance(SnookerError):
    code = 4
    status = 402
    message = 'Insufficient token balance'


class InvalidShot(SnookerError):
    code = 5
    status = 400
    message = 'Invalid cue balls'


class Unauthorized(SnookerError):
    code = 6
    status = 403
    message = 'Only the admin may do this'


class InvalidAmount(SnookerError):
    code = 7
    status = 400
    message = 'Token amounts must be 64-bit integers'
