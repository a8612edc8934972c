from flask import Blueprint, jsonify, make_response
from werkzeug.exceptions import HTTPException

from common.errors import CatalogError
from common.utils.logging_service import logger

bp = Blueprint("exceptions", __name__)


@bp.app_errorhandler(CatalogError)
def handle_catalog_error(error: CatalogError):
    if error.status_code >= 500:
        logger.error(f"{type(error).__name__}: {error.message}", exc_info=error)
    return make_response(jsonify(error.to_dict()), error.status_code)


@bp.app_errorhandler(HTTPException)
def handle_http_exception(error: HTTPException):
    return make_response(jsonify({"message": error.description}), error.code)


@bp.app_errorhandler(Exception)
def handle_unexpected_error(error: Exception):
    logger.exception(f"Unhandled error: {error}")
    return make_response(jsonify({"message": "Internal Server Error"}), 500)
