# src/routes/envelope.py
from flask import jsonify, request
from pydantic import ValidationError


def succeeded(output: dict):
    return jsonify({"status": "succeeded", "output": output})


def failed(error: str, code: int = 500):
    return jsonify({"status": "failed", "error": error}), code


def read_input(model):
    """Validate the JSON body against `model`. A missing or non-object body counts as {}."""
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        body = {}
    return model.model_validate(body)


def describe_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", ""))
    return "Invalid input: " + "; ".join(parts)
