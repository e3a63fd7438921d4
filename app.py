import logging
from flask import Flask, jsonify, request
from flask_cors import CORS

from config.settings import Config
from routes.generate_route import generate_bp, ROUTES

# Logging configuration
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def create_app(config=Config):
    app = Flask(__name__)
    app.config["PLAN_CONFIG"] = config
    app.json.sort_keys = False  # keep the document's section order

    # CORS: the caller's origin is echoed only when it is on the allow-list;
    # any other origin gets no CORS headers at all.
    CORS(
        app,
        origins=config.CORS_ORIGINS,
        methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=86400,
    )

    app.register_blueprint(generate_bp)

    @app.route('/', defaults={'path': ''}, methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS'])
    @app.route('/<path:path>', methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS'])
    def routing_info(path):
        # Preflight for any path; everything else just lists the real routes.
        if request.method == 'OPTIONS':
            return '', 204
        return jsonify({"ok": True, "routes": ROUTES}), 200

    logger.info(f"Marketing plan service ready (allowed origins: {', '.join(config.CORS_ORIGINS)})")
    return app


app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=Config.PORT, debug=Config.FLASK_DEBUG)
