from typing import Any, Dict, Tuple


def validate_query_payload(data: Any) -> Tuple[Any, str]:
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    if "request_id" not in data:
        raise ValueError("Field 'request_id' is required")
    request_id = data["request_id"]
    term = data.get("term")
    if term is None:
        term = ""
    if not isinstance(term, str):
        raise ValueError("Field 'term' must be a string")
    return request_id, term


def map_response(request_id: Any, records, resource_urls: Dict[str, str]) -> Dict[str, Any]:
    return {
        "request_id": request_id,
        "suggestions": records,
        "resources": resource_urls,
    }
