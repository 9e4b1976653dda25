from fastapi import Header, Request

from .jwt import parse_authorization_header, token_authority


def get_current_user(request: Request, authorization: str | None = Header(default=None)) -> dict:
    """
    Access guard for protected routes.

    Runs before the route touches the store. On success the identity
    ``{"userId", "username"}`` is returned and also stored on ``request.state.user``.
    """
    token = parse_authorization_header(authorization)
    user = token_authority.verify(token)
    request.state.user = user
    return user
