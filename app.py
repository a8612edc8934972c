from apispec import APISpec
from flask_apispec import FlaskApiSpec
from flask_cors import CORS
from flask_talisman import Talisman
from flask import Flask
import logging
import sys

from common.config import CatalogConfig
from common.utils.azure_blob import BlobPosterStorage
from common.utils.context_service import EXTENSION_KEY
from common.utils.local_storage import LocalPosterStorage
from common.utils.utils_views import bp as utils_bp
from media.media_store import MediaStore
from media.media_views import bp as media_bp, createMedia
from schema.media_schema import MediaResponseSchema, MediaSchema, ReviewRequestSchema
from security.guards import origin_guard
import exceptions_views
from apispec.ext.marshmallow import MarshmallowPlugin

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],  # Log to stdout
)

logger = logging.getLogger(__name__)


def create_app(
    config: CatalogConfig = None,
    poster_storage=None,
    remote_poster_storage=None,
):
    if config is None:
        config = CatalogConfig.from_env()

    app = Flask(__name__, instance_relative_config=True)

    api_spec = APISpec(
        title="Media Catalog API",
        version="v1",
        plugins=[MarshmallowPlugin()],
        openapi_version="3.0.2",
    )
    api_spec.components.schema("Media", schema=MediaSchema)
    api_spec.components.schema("MediaRecord", schema=MediaResponseSchema)
    api_spec.components.schema("ReviewRequest", schema=ReviewRequestSchema)

    app.config.update(
        {
            "APISPEC_SPEC": api_spec,
            "APISPEC_SWAGGER_URL": "/swagger/",  # JSON
            "APISPEC_SWAGGER_UI_URL": "/swagger-ui/",  # UI
        }
    )

    csp = {"default-src": ["'self'"], "frame-ancestors": ["'none'"]}
    Talisman(
        app,
        force_https=config.force_https,
        frame_options="DENY",
        content_security_policy=csp,
        referrer_policy="no-referrer",
        x_content_type_options=True,
        strict_transport_security=config.force_https,
    )

    @app.after_request
    def add_no_cache(response):
        response.headers["Cache-Control"] = "no-store, max-age=0, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
        return response

    if remote_poster_storage is None and config.remote_storage_configured:
        remote_poster_storage = BlobPosterStorage.from_config(config)

    app.extensions[EXTENSION_KEY] = {
        "config": config,
        "store": MediaStore(config.media_file_path),
        "poster_storage": poster_storage
        or LocalPosterStorage(config.image_folder_path, config.public_image_base_url),
        "remote_poster_storage": remote_poster_storage,
    }

    CORS(app, origins=config.origins)
    app.before_request(origin_guard(config.origins))

    app.register_blueprint(media_bp)
    app.register_blueprint(utils_bp)
    app.register_blueprint(exceptions_views.bp)

    app.logger.handlers = logging.getLogger().handlers
    app.logger.setLevel(logging.DEBUG)

    docs = FlaskApiSpec(app)
    docs.register(createMedia, blueprint="media", endpoint="createMedia")

    logger.info(
        f"Serving media from {config.media_file_path}, allowed origins: {config.origins}"
    )
    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True, port=app.extensions[EXTENSION_KEY]["config"].port)
