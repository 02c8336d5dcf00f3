"""
core/http.py
────────────
Small request/response helpers shared by the page views and the JSON API.
Nothing here depends on any app's models (no circular imports).
"""

import json
from functools import wraps

from django.http import HttpResponseNotAllowed, JsonResponse


def require_POST_or_405(view_fn):
    """
    Decorator: return HTTP 405 Method Not Allowed for any non-POST request
    instead of silently redirecting.  Use on write-only endpoints.
    """
    @wraps(view_fn)
    def wrapper(req, *args, **kwargs):
        if req.method != 'POST':
            return HttpResponseNotAllowed(['POST'])
        return view_fn(req, *args, **kwargs)
    return wrapper


def json_error(message, status=400, **extra):
    """Uniform error body for the API: {"error": "...", ...}."""
    return JsonResponse({'error': message, **extra}, status=status)


def validation_error_response(exc, status=400):
    """Turn a django ValidationError into a 400 with per-field messages when available."""
    if hasattr(exc, 'error_dict'):
        return json_error('Validation failed.', status=status, fields=exc.message_dict)
    return json_error(' '.join(exc.messages), status=status)


class BadJSON(ValueError):
    pass


def json_body(req):
    """Decode a JSON object request body. Raises BadJSON for anything else."""
    if not req.body:
        return {}
    try:
        payload = json.loads(req.body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise BadJSON(f'Malformed JSON body: {exc}') from exc
    if not isinstance(payload, dict):
        raise BadJSON('Request body must be a JSON object.')
    return payload


def add_form_control_class(form):
    """Inject a CSS class onto every visible widget so templates can style them uniformly."""
    for field in form.fields.values():
        field.widget.attrs.setdefault('class', 'form-control-input')
    return form
