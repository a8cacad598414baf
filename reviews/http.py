# reviews/http.py
import json
from functools import wraps

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "authorization, x-client-info, apikey, content-type, x-supabase-client-platform, "
        "x-supabase-client-platform-version, x-supabase-client-runtime, x-supabase-client-runtime-version"
    ),
}


def with_cors(response):
    for header, value in CORS_HEADERS.items():
        response[header] = value
    return response


def error_response(message: str, status: int) -> JsonResponse:
    return with_cors(JsonResponse({"error": message}, status=status))


def read_json_body(request):
    """Decoded JSON object from the request body, or None if it isn't one."""
    try:
        data = json.loads(request.body or b"null")
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def cors_endpoint(view_func):
    """Answer CORS preflight with an empty 200 and stamp CORS headers on every response."""

    @csrf_exempt
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if request.method == "OPTIONS":
            return with_cors(HttpResponse(status=200))
        return with_cors(view_func(request, *args, **kwargs))

    return wrapper
