"""Shot builders and client helpers shared by the test modules."""

from snooker.services.pool.physics import Ball


def aim(ball, pocket):
    """Cue ball that knocks ``ball`` straight toward ``pocket``.

    The cue sits 200 units below the ball and travels along the line of
    centres, so the color ball leaves along that same line. Its x offset is
    chosen so the projected potting line runs from the ball to the pocket.
    """
    xd = (300 * (pocket.x - ball.x)) // ball.x
    yd = -200
    return Ball(ball.x - xd, ball.y - yd, xd, yd)


def aim_table(table):
    return [aim(b, p) for b, p in zip(table.balls, table.pockets)]


def as_payload(balls):
    return [b.to_list() for b in balls]


MISSES = [[0, 0, 0, 0]] * 5


def login(client, username, password='password'):
    res = client.post('/login', json={'username': username, 'password': password})
    assert res.status_code == 200
    return res
