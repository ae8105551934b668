import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///snooker.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # A dealt table must be played within this many seconds
    TURN_DURATION_SEC = int(os.environ.get('TURN_DURATION_SEC', '180'))
    # Extra time before a stale table is purged by the expiry task (seconds)
    TABLE_EXPIRY_GRACE_SEC = int(os.environ.get('TABLE_EXPIRY_GRACE_SEC', '30'))
    # Token account that receives payments and pays out rewards
    HOUSE_ACCOUNT = os.environ.get('HOUSE_ACCOUNT', 'snooker')
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173'
    ).split(',') if o.strip()]
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', '12'))
