from flask import Flask, jsonify
from flask_cors import CORS
from pymongo.errors import PyMongoError
# import config from hammer.config file
from hammer.config import Config
from hammer.database import Database
from hammer.errors import HammerError, UpstreamFailure
from hammer.extensions import init_services
from hammer.payments import get_razorpay_client
from hammer.utils import MongoJSONProvider, logger


def register_error_handlers(app):
    @app.errorhandler(HammerError)
    def handle_hammer_error(e):
        return jsonify({"message": e.message}), e.status

    @app.errorhandler(PyMongoError)
    def handle_database_error(e):
        logger.error(f"Database error: {e}")
        failure = UpstreamFailure("Database operation failed")
        return jsonify({"message": failure.message}), failure.status


def create_app(config_object=Config, database=None, payment_client=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json = MongoJSONProvider(app)
    CORS(app)

    # Initialize database
    if database is None:
        database = Database(app.config["MONGO_URI"], app.config["DATABASE_NAME"])
    database.connect()

    if payment_client is None:
        payment_client = get_razorpay_client(app.config["KEY_ID"], app.config["KEY_SECRET"])

    init_services(app, database, payment_client)

    from hammer.routes.main import main_bp
    from hammer.routes.booking import booking_bp
    from hammer.routes.auth import auth_bp
    from hammer.routes.catalog import catalog_bp
    from hammer.routes.misc import misc_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(booking_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(misc_bp)

    register_error_handlers(app)

    return app
