from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import get_jwt, jwt_required, set_access_cookies, unset_jwt_cookies
from pydantic import ValidationError as SchemaError

from admin_panel.schemas import LoginPayload
from utils.errors import InvalidCredentials, StoreError

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
def login():
    try:
        payload = LoginPayload.model_validate(request.get_json(silent=True) or {})
    except SchemaError:
        payload = LoginPayload()

    if not payload.username or not payload.password:
        return jsonify(message="Benutzername und Passwort erforderlich"), 400

    try:
        admin, token = current_app.extensions["auth_service"].login(payload.username, payload.password)
    except InvalidCredentials as e:
        return jsonify(message=e.message), e.status_code
    except StoreError as e:
        current_app.logger.exception("Login-Fehler: %s", e)
        return jsonify(message="Fehler beim Login"), 500

    response = jsonify(message="Erfolgreich angemeldet", username=admin.username)
    set_access_cookies(response, token, max_age=int(current_app.config["TOKEN_TTL"].total_seconds()))
    return response


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify(message="Erfolgreich abgemeldet")
    unset_jwt_cookies(response)
    return response


@auth_bp.route("/verify", methods=["GET"])
@jwt_required()
def verify():
    return jsonify(valid=True, username=get_jwt().get("username"))
