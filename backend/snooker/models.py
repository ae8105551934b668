from snooker import db, bcrypt
from snooker.services.pool.table import Table
from flask_login import UserMixin
import json

class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
        }

class AdminConfig(db.Model):
    """Payment and reward settings. At most one row, written once."""
    __tablename__ = 'admin_config'
    id = db.Column(db.Integer, primary_key=True)
    admin = db.Column(db.String(64), nullable=False)
    payment_token = db.Column(db.String(64), nullable=False)
    payment_amount = db.Column(db.BigInteger, nullable=False, default=0)
    reward_token = db.Column(db.String(64), nullable=False)
    reward_amount = db.Column(db.BigInteger, nullable=False, default=0)

    def to_dict(self):
        return {
            'admin': self.admin,
            'payment_token': self.payment_token,
            'payment_amount': self.payment_amount,
            'reward_token': self.reward_token,
            'reward_amount': self.reward_amount,
        }

class PlaySession(db.Model):
    __tablename__ = 'play_session'
    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('user.id'), unique=True, nullable=False)
    ledger_time = db.Column(db.BigInteger, nullable=False)

class PoolTable(db.Model):
    __tablename__ = 'pool_table'
    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('user.id'), unique=True, nullable=False)
    balls = db.Column(db.Text, nullable=False)  # JSON-encoded [[x, y, vx, vy], ...]
    pockets = db.Column(db.Text, nullable=False)  # JSON-encoded [[x, y], ...]
    ledger_time = db.Column(db.BigInteger, nullable=False)
    sequence = db.Column(db.BigInteger, nullable=False)

    def to_table(self) -> Table:
        return Table.from_dict({
            'balls': json.loads(self.balls or '[]'),
            'pockets': json.loads(self.pockets or '[]'),
        })

    def set_table(self, table: Table) -> None:
        data = table.to_dict()
        self.balls = json.dumps(data['balls'])
        self.pockets = json.dumps(data['pockets'])

    def to_dict(self):
        payload = self.to_table().to_dict()
        payload['ledger_time'] = self.ledger_time
        payload['sequence'] = self.sequence
        return payload

class LedgerState(db.Model):
    __tablename__ = 'ledger_state'
    id = db.Column(db.Integer, primary_key=True)
    sequence = db.Column(db.BigInteger, nullable=False, default=0)

class TokenBalance(db.Model):
    __tablename__ = 'token_balance'
    __table_args__ = (db.UniqueConstraint('token', 'account', name='uq_token_account'),)
    id = db.Column(db.Integer, primary_key=True)
    token = db.Column(db.String(64), nullable=False, index=True)
    account = db.Column(db.String(64), nullable=False, index=True)
    amount = db.Column(db.BigInteger, nullable=False, default=0)

    def to_dict(self):
        return {
            'token': self.token,
            'account': self.account,
            'amount': self.amount,
        }
