from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required
from pydantic import ValidationError as SchemaError

from admin_panel.schemas import StoererPayload
from utils.errors import StoreError

# public read lives under /api, writes under /api/admin
stoerer_bp = Blueprint("stoerer", __name__)


def _service():
    return current_app.extensions["stoerer_service"]


@stoerer_bp.route("/stoerer", methods=["GET"])
def get_stoerer():
    try:
        return jsonify(_service().get())
    except StoreError as e:
        current_app.logger.exception("Fehler beim Abrufen des Störers: %s", e)
        return jsonify(message="Fehler beim Abrufen des Störers"), 500


@stoerer_bp.route("/admin/stoerer", methods=["PUT"])
@jwt_required()
def update_stoerer():
    try:
        payload = StoererPayload.model_validate(request.get_json(silent=True) or {})
    except SchemaError as e:
        current_app.logger.warning("Invalid stoerer payload: %s", e)
        return jsonify(message="Ungültige Störer-Daten"), 400

    try:
        _service().set(payload.line1, payload.line2, payload.isActive)
    except StoreError as e:
        current_app.logger.exception("Fehler beim Aktualisieren: %s", e)
        return jsonify(message="Fehler beim Aktualisieren des Störers"), 500

    return jsonify(message="Störer erfolgreich aktualisiert")


@stoerer_bp.route("/admin/stoerer", methods=["DELETE"])
@jwt_required()
def delete_stoerer():
    try:
        _service().clear()
    except StoreError as e:
        current_app.logger.exception("Fehler beim Löschen: %s", e)
        return jsonify(message="Fehler beim Löschen des Störers"), 500

    return jsonify(message="Störer erfolgreich gelöscht")
