"""Web API for the LCAAJ transcriber.

Usage:
    python -m lcaaj_transcriber serve

Then a client can call:
    POST http://127.0.0.1:8080/api/transcribe
    {"data": "a94 QTA"}

and receives the transcription as plain text.
"""

import logging

from flask import Flask, Response, jsonify, request

from .engine import Transcriber, get_transcriber


def read_notation():
    """Read the notation string from a JSON body or a form field.

    A body without form fields is decoded as JSON whatever its content type.
    Returns None if the request carries no usable string.
    """
    if request.is_json or not request.form:
        payload = request.get_json(force=True, silent=True)
        if not isinstance(payload, dict):
            return None
        data = payload.get("data")
    else:
        data = request.form.get("data")
    return data if isinstance(data, str) else None


def create_app(transcriber: Transcriber = None) -> Flask:
    """Create the Flask app serving the transcriber."""
    app = Flask(__name__)
    app.config["TRANSCRIBER"] = transcriber or get_transcriber()

    @app.route("/health", methods=["GET"])
    def health():
        """Health check endpoint"""
        return jsonify({"status": "ok", "service": "lcaaj-transcriber"}), 200

    @app.route("/api/transcribe", methods=["POST"])
    def transcribe():
        """Transcribe the "data" field of the request to IPA."""
        notation = read_notation()
        if notation is None:
            logging.info("Rejected request without notation data")
            return jsonify({"error": "Expected a string in the 'data' field"}), 400
        result = app.config["TRANSCRIBER"].transcribe(notation)
        return Response(result, mimetype="text/plain")

    return app
