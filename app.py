import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from admin_panel.routes.auth import auth_bp
from admin_panel.routes.news import news_bp
from admin_panel.routes.stoerer import stoerer_bp
from services.auth import AuthService
from services.news import NewsService
from services.stoerer import StoererService
from utils.config import Config, DEFAULT_JWT_SECRET, jwt_settings
from utils.database import Database
from utils.errors import InvalidToken, MissingToken, StoreError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _init_jwt(app):
    jwt = JWTManager(app)

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify(message=MissingToken.message), MissingToken.status_code

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify(message=InvalidToken.message), InvalidToken.status_code

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify(message=InvalidToken.message), InvalidToken.status_code

    return jwt


def create_app(overrides: dict = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.config.update(jwt_settings(app.config))

    logging.basicConfig(level=app.config["LOG_LEVEL"].upper(), format=LOG_FORMAT)
    if app.config["APP_ENV"] == "production" and app.config["JWT_SECRET"] == DEFAULT_JWT_SECRET:
        app.logger.warning("JWT_SECRET is not set, tokens are signed with the default secret!")

    CORS(
        app,
        origins=[app.config["CLIENT_URL"]],
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Cookie"],
    )
    _init_jwt(app)

    # Init DB (connects lazily on first use)
    db = Database(app.config["MONGO_URI"], app.config["DB_NAME"], **app.config["MONGO_CLIENT_OPTIONS"])
    app.extensions["database"] = db
    app.extensions["auth_service"] = AuthService(db)
    app.extensions["news_service"] = NewsService(db)
    app.extensions["stoerer_service"] = StoererService(db)

    app.register_blueprint(auth_bp, url_prefix="/api/admin")
    app.register_blueprint(stoerer_bp, url_prefix="/api")
    app.register_blueprint(news_bp, url_prefix="/news")

    with app.app_context():
        try:
            app.extensions["auth_service"].ensure_bootstrap_admin()
        except StoreError as e:
            # server still starts, login fails until the database is reachable
            app.logger.error("Fehler beim Erstellen des Admin-Accounts: %s", e)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"])
