from typing import Any

from flask import (
    Blueprint,
    jsonify,
    make_response,
    request,
    send_file,
    send_from_directory,
)

import media.media_service as media_service
import reviews.reviews_service as reviews_service
from common.errors import ValidationError
from common.utils.context_service import (
    get_config,
    get_media_store,
    get_poster_storage,
    get_remote_poster_storage,
)

bp_name = "media"
bp_url_prefix = "/media"
bp = Blueprint(bp_name, __name__, url_prefix=bp_url_prefix)

POSTER_FIELD = "poster"


def __get_poster_file():
    poster = request.files.get(POSTER_FIELD)
    if poster is None or not poster.filename:
        raise ValidationError(
            [{"field": POSTER_FIELD, "message": "A poster file is required"}]
        )
    return poster.filename, poster.read()


@bp.route("", methods=["GET"])
def show_all_media() -> Any:
    media = media_service.list_all(get_media_store())
    return make_response(jsonify(media), 200)


@bp.route("/search/<string:search_query>", methods=["GET"])
def search_media(search_query):
    media = media_service.search(get_media_store(), search_query)
    return make_response(jsonify(media), 200)


@bp.route("/<string:id>", methods=["GET"])
def show_one_media(id):
    media = media_service.get_by_id(get_media_store(), id)
    return make_response(jsonify(media), 200)


@bp.route("", methods=["POST"], endpoint="createMedia")
def createMedia():
    body = request.get_json(silent=True)
    new_media = media_service.create(get_media_store(), body)
    return make_response(jsonify(new_media), 200)


@bp.route("/<string:id>", methods=["PUT"])
def updateMedia(id):
    body = request.get_json(silent=True)
    updated_media = media_service.update(get_media_store(), id, body)
    return make_response(jsonify(updated_media), 200)


@bp.route("/<string:id>", methods=["DELETE"])
def deleteMedia(id):
    media_service.delete(get_media_store(), id)
    return make_response("", 204)


@bp.route("/<string:id>/uploadPoster", methods=["PUT"])
def uploadPoster(id):
    filename, data = __get_poster_file()
    updated_media = media_service.attach_poster(
        get_media_store(), id, data, filename, get_poster_storage()
    )
    return make_response(jsonify(updated_media), 200)


@bp.route("/<string:id>/poster", methods=["PUT"])
def uploadRemotePoster(id):
    filename, data = __get_poster_file()
    media_service.attach_poster(
        get_media_store(), id, data, filename, get_remote_poster_storage()
    )
    return make_response("new poster added", 200)


@bp.route("/public/img/<path:filename>", methods=["GET"])
def serve_poster(filename):
    return send_from_directory(get_config().image_folder_path, filename)


@bp.route("/<string:id>/reviews", methods=["GET"])
def fetch_all_reviews(id):
    reviews = reviews_service.list_reviews(get_media_store(), id)
    return make_response(jsonify(reviews), 200)


@bp.route("/<string:id>/reviews", methods=["POST"])
def createReview(id):
    body = request.get_json(silent=True)
    updated_media = reviews_service.add_review(get_media_store(), id, body)
    return make_response(jsonify(updated_media), 200)


@bp.route("/<string:id>/reviews/<string:review_id>", methods=["DELETE"])
def deleteReview(id, review_id):
    updated_media = reviews_service.delete_review(get_media_store(), id, review_id)
    return make_response(jsonify(updated_media), 200)


@bp.route("/<string:id>/PDFDownload", methods=["GET"])
def downloadPdf(id):
    source = media_service.export_pdf(get_media_store(), id)
    return send_file(
        source,
        mimetype="application/pdf",
        as_attachment=True,
        download_name="media.pdf",
    )
