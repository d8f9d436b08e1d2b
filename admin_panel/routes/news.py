from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError as SchemaError

from admin_panel.schemas import NewsPayload
from utils.errors import StoreError, ValidationError

news_bp = Blueprint("news", __name__)


def _service():
    return current_app.extensions["news_service"]


def _payload():
    data = request.get_json(silent=True)
    try:
        return NewsPayload.clean(data)
    except SchemaError as e:
        raise ValidationError(f"Invalid news item: {e.errors(include_url=False)[0]['msg']}")


@news_bp.route("", methods=["GET"])
def list_news():
    try:
        return jsonify(_service().list()), 200
    except StoreError as e:
        current_app.logger.exception("Error fetching news: %s", e)
        return f"Error fetching news: {e.message}", 500


@news_bp.route("", methods=["POST"])
def add_news():
    try:
        _service().create(_payload())
    except ValidationError as e:
        return e.message, e.status_code
    except StoreError as e:
        current_app.logger.exception("Error adding news: %s", e)
        return f"Error adding news: {e.message}", 500
    return "News added successfully", 200


@news_bp.route("/<news_id>", methods=["PUT"])
def update_news(news_id):
    try:
        _service().update(news_id, _payload())
    except ValidationError as e:
        return e.message, e.status_code
    except StoreError as e:
        current_app.logger.exception("Error updating news: %s", e)
        return f"Error updating news: {e.message}", 500
    return "News updated successfully", 200


@news_bp.route("/<news_id>", methods=["DELETE"])
def delete_news(news_id):
    try:
        _service().delete(news_id)
    except ValidationError as e:
        return e.message, e.status_code
    except StoreError as e:
        current_app.logger.exception("Error deleting news: %s", e)
        return f"Error deleting news: {e.message}", 500
    return "News deleted successfully", 200
