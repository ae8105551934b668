from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    origins = flask_app.config.get('CORS_ORIGINS') or []

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from snooker.main import main
    flask_app.register_blueprint(main)

    from snooker.api.pool import pool
    flask_app.register_blueprint(pool, url_prefix='/api/pool')

    from snooker.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    from snooker.models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            # Seed users
            for name in ['admin', 'player1', 'player2']:
                user = User(username=name)
                user.set_password('password')
                db.session.add(user)

            db.session.commit()
            click.echo('Database has been reset and seeded!')

    @click.command('mint')
    @click.argument('token')
    @click.argument('account')
    @click.argument('amount', type=int)
    def mint_command(token, account, amount):
        """Credits AMOUNT of TOKEN to ACCOUNT."""
        from snooker.services.house.errors import SnookerError
        from snooker.services.house.tokens import mint
        with flask_app.app_context():
            try:
                balance = mint(token, account, amount)
            except SnookerError as exc:
                db.session.rollback()
                click.echo(str(exc), err=True)
                raise SystemExit(1)
            db.session.commit()
            click.echo(f'{account} now holds {balance} {token}')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(mint_command)

    return flask_app
