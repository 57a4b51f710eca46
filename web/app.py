from __future__ import annotations

import logging
import random
from typing import Optional

from flask import Flask, jsonify, request
from pydantic import ValidationError

from core.session import SessionController
from core.settings import settings
from schemas.session import StartSessionRequest, SubmitAnswerRequest
from tools.session_tools import (
    build_report_payload,
    build_snapshot_payload,
    list_grades_payload,
)

logger = logging.getLogger(__name__)


def _snapshot_response(controller: SessionController, applied: Optional[bool] = None):
    body = build_snapshot_payload(controller).model_dump(mode="json")
    if applied is not None:
        body["applied"] = applied
    return jsonify(body)


def _bad_request(exc: ValidationError):
    return jsonify({"error": "invalid request", "details": exc.errors(include_url=False, include_context=False)}), 400


def create_app(controller: Optional[SessionController] = None) -> Flask:
    """
    Builds the JSON surface over a single session controller. One process,
    one learner: every request acts on the same session.
    """
    if controller is None:
        controller = SessionController(rng=random.Random(settings.random_seed))

    app = Flask(__name__)
    app.config["SESSION_CONTROLLER"] = controller

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({"grades": [grade.model_dump(mode="json") for grade in list_grades_payload()]})

    @app.route("/session", methods=["GET"])
    def session_state():
        return _snapshot_response(controller)

    @app.route("/session/start", methods=["POST"])
    def start_session():
        try:
            payload = StartSessionRequest.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            return _bad_request(exc)
        applied = controller.start(payload.grade)
        return _snapshot_response(controller, applied)

    @app.route("/session/answer", methods=["POST"])
    def submit_answer():
        try:
            payload = SubmitAnswerRequest.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            return _bad_request(exc)
        applied = controller.submit_answer(payload.option)
        return _snapshot_response(controller, applied)

    @app.route("/session/advance", methods=["POST"])
    def advance():
        applied = controller.advance()
        return _snapshot_response(controller, applied)

    @app.route("/session/reset", methods=["POST"])
    def reset():
        controller.reset()
        return _snapshot_response(controller)

    @app.route("/session/report", methods=["GET"])
    def report():
        payload = build_report_payload(controller)
        if payload is None:
            return jsonify({"error": "session is not finished"}), 409
        return jsonify(payload.model_dump(mode="json"))

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(host=settings.web_host, port=settings.web_port, debug=settings.web_debug)
