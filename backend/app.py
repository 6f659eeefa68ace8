# app.py
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
from pydantic import ValidationError

import config
from gpt_engine import GatewayError, generate_positioning_outputs
from models import PositioningRequest, PositioningResult, WebhookRecord
from webhook import WebhookError, send_to_webhook

# ---------------------------
# Setup
# ---------------------------
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# CORS (single origin or CSV via env; "*" allowed)
_origins_env = config.FRONTEND_ORIGINS
_allowed_origins = "*" if (_origins_env.strip() == "*") else [o.strip() for o in _origins_env.split(",") if o.strip()]

CORS(
    app,
    resources={r"/*": {"origins": _allowed_origins}},
    methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "apikey", "x-client-info"],
)


@app.after_request
def add_cors_headers(resp):
    origin = request.headers.get("Origin")
    if _allowed_origins == "*":
        resp.headers.setdefault("Access-Control-Allow-Origin", "*")
    elif origin and origin in _allowed_origins:
        resp.headers.setdefault("Access-Control-Allow-Origin", origin)
    resp.headers.setdefault("Vary", "Origin")
    resp.headers.setdefault("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
    return resp


@app.route("/health")
def health():
    return {"status": "ok"}, 200


def _error(message, status, **extra):
    body = {"status": "error", "error": message}
    body.update(extra)
    return jsonify(body), status


# ---------------------------
# Routes
# ---------------------------
@app.route('/generate_positioning', methods=['POST', 'OPTIONS'])
def generate_positioning():
    if request.method == 'OPTIONS':
        return ("", 204)

    try:
        data = request.get_json(silent=True) or {}
        try:
            inputs = PositioningRequest.model_validate(data)
        except ValidationError:
            return _error("Invalid request body.", 400)

        problem = inputs.validation_error()
        if problem:
            return _error(problem, 400)

        try:
            result = generate_positioning_outputs(inputs)
        except GatewayError as e:
            logger.error("Positioning generation failed: %s", e)
            return _error(str(e), e.status_code)

        body = result.model_dump()
        body["status"] = "success"
        return jsonify(body), 200

    except Exception as e:
        logger.exception("Error in generate_positioning")
        return _error("Unexpected server error.", 500, details=str(e))


@app.route('/send_to_webhook', methods=['POST', 'OPTIONS'])
def send_record():
    if request.method == 'OPTIONS':
        return ("", 204)

    try:
        data = request.get_json(silent=True) or {}
        try:
            inputs = PositioningRequest.model_validate(data)
        except ValidationError:
            return _error("Invalid request body.", 400)

        outputs = PositioningResult(**{
            key: str(data.get(key) or "").strip() for key in ("positioning", "uvp", "tagline")
        })
        record = WebhookRecord.from_outputs(inputs, outputs)
        if not record.is_complete():
            return _error("Please generate positioning outputs first", 400)

        try:
            send_to_webhook(record)
        except WebhookError as e:
            return _error(str(e), 502)

        return jsonify({"status": "success"}), 200

    except Exception as e:
        logger.exception("Error in send_to_webhook")
        return _error("Unexpected server error.", 500, details=str(e))


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app.run(debug=True)
