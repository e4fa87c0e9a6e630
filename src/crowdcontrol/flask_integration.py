"""Flask integration helpers: HTTP Basic login backed by Crowd."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import wraps
from typing import TYPE_CHECKING, Any

from flask import Flask, Response, abort, current_app, g, request

if TYPE_CHECKING:
    from crowdcontrol.interactors import AuthenticationInteractor, GroupInteractor

logger = logging.getLogger("crowdcontrol.flask")


def setup_flask_integration(
    app: Flask, authenticator: AuthenticationInteractor, realm: str = "Crowd"
) -> None:
    """Set up before_request hook to authenticate users from Basic credentials."""
    app.config.setdefault("CROWD_REALM", realm)

    @app.before_request
    def _load_user() -> None:
        g.user = None
        auth = request.authorization
        if auth is None or auth.type != "basic" or not auth.username:
            return
        try:
            result = authenticator.execute(auth.username, auth.password or "")
        except Exception as e:
            logger.error(f"Authentication error: {e}")
            return
        if result.is_error():
            logger.info(f"Login refused for {auth.username}: {result.get_error().reason}")
            return
        g.user = result.get_value()


def _challenge() -> Response:
    realm = current_app.config.get("CROWD_REALM", "Crowd")
    return Response(
        "Authentication required",
        status=401,
        headers={"WWW-Authenticate": f'Basic realm="{realm}"'},
    )


def login_required_decorator(f: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that asks for Basic credentials if not authenticated."""

    @wraps(f)
    def decorated_function(*args: Any, **kwargs: Any) -> Any:
        if g.get("user") is None:
            return _challenge()
        return f(*args, **kwargs)

    return decorated_function


def group_required_decorator(
    groups: GroupInteractor, group_name: str
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator factory that requires direct membership of a Crowd group."""

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def decorated_function(*args: Any, **kwargs: Any) -> Any:
            user = g.get("user")
            if user is None:
                return _challenge()
            result = groups.execute(user.username, group_name)
            if result.is_error():
                logger.info(f"{user.username} denied, not in {group_name}: {result.get_error().reason}")
                abort(403)
            return f(*args, **kwargs)

        return decorated_function

    return decorator
