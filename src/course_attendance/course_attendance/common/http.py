from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import jsonify

from ..core.enums import ErrorKind
from ..core.results import Failure, OperationResult
from ..store.domain_store import DomainStore
from ..store.serializers import result_to_dict, snapshot_to_dict

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTH: 401,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.CONFLICT: 409,
    ErrorKind.REMOTE: 502,
}


def status_for(result: Optional[OperationResult]) -> int:
    if isinstance(result, Failure):
        return STATUS_BY_KIND.get(result.kind, 400)
    return 200


def state_response(store: DomainStore, result: Optional[OperationResult] = None, **extra: Any):
    """JSON body with the operation result and the store snapshot after it."""
    body = {"result": result_to_dict(result), "state": snapshot_to_dict(store.snapshot())}
    body.update(extra)
    return jsonify(body), status_for(result)


def error_response(kind: ErrorKind, message: str):
    return jsonify({"result": result_to_dict(Failure(kind, message))}), STATUS_BY_KIND[kind]


def login_required(store: DomainStore):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if store.current_user is None:
                return error_response(ErrorKind.AUTH, "Please log in to continue")
            return view(*args, **kwargs)

        return wrapper

    return decorator
