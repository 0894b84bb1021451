from typing import Any, Dict, Tuple


def validate_analyze_payload(data: Dict[str, Any]) -> str:
    url = data.get("url")
    if not url:
        raise ValueError("GitHub URL is required")
    if not isinstance(url, str):
        raise ValueError("Field 'url' must be a string")
    return url.strip()


def error_body(error: str, message: str, status: int) -> Tuple[Dict[str, str], int]:
    return {"error": error, "message": message}, status
