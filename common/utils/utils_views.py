from flask import Blueprint, jsonify

from common.errors import StorageError
from common.utils.context_service import get_media_store


bp_name = "utils"
bp = Blueprint(bp_name, __name__)


def check_store():
    try:
        get_media_store().load()
        return True
    except StorageError:
        return False


@bp.route("/health", methods=["GET"])
def health_check():
    store_status = check_store()

    return jsonify(
        {
            "store": "up" if store_status else "down",
        }
    )
