from typing import Any


def success_response(payload: Any = None) -> dict:
    return {"response": payload, "success": True}


def error_response(message: Any) -> dict:
    return {"response": message, "success": False}
