from helpers import MISSES


def test_expired_table_is_purged(expiring_client):
    res = expiring_client.post('/api/pool/insertcoin')
    assert res.status_code == 201
    assert expiring_client.get('/api/pool/table').status_code == 404
    res = expiring_client.post('/api/pool/play', json={'cue_balls': MISSES})
    assert res.status_code == 400
    assert res.get_json()['code'] == 3


def test_scheduler_disabled_in_tests_by_default(initialized):
    initialized.post('/api/pool/insertcoin')
    assert initialized.get('/api/pool/table').status_code == 200
