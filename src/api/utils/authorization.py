"""
Authorization Gate Dependencies

FastAPI bindings of AuthorizationGate:

- enforce_route_table: app-wide dependency consulting the central route table
- require(predicate): per-route dependency bound at registration
- ignore_authorization: endpoint marker that switches both off

Both reject before the endpoint runs and leave the resolved principal on
request.state.principal.
"""

from fastapi import Depends, Request, status

from libs.result import Error, Result
from src.api.error import ClientError
from src.app.services.authorization_gate import AuthorizationGate
from src.depends import AuthContext, get_auth_context
from src.domain.predicates import NOT_AUTHENTICATED, RoutePredicate
from src.domain.principal import Principal


def ignore_authorization(endpoint):
    """
    Exempt an endpoint from every gate check, including checks declared on
    its router or matched by the route table.

    Usage:
        @router.get("/health")
        @ignore_authorization
        async def health(): ...
    """
    endpoint.authorization_ignored = True
    return endpoint


def _is_ignored(request: Request) -> bool:
    # Starlette records the matched endpoint before dependencies resolve
    return getattr(request.scope.get("endpoint"), "authorization_ignored", False)


def _raise_on_denial(result: Result, context: AuthContext) -> None:
    if result.is_ok():
        return
    if result.error.code == NOT_AUTHENTICATED:
        # Prefer the resolution error (expired, kicked out...) over the generic one
        raise ClientError(
            context.error or result.error, status_code=status.HTTP_401_UNAUTHORIZED
        )
    raise ClientError(result.error, status_code=status.HTTP_403_FORBIDDEN)


async def enforce_route_table(
    request: Request, context: AuthContext = Depends(get_auth_context)
):
    """Interceptor-style gate over app.state.gate's route table"""
    if not _is_ignored(request):
        gate: AuthorizationGate = request.app.state.gate
        result = gate.authorize_path(context.principal, request.url.path, request.method)
        _raise_on_denial(result, context)
    request.state.principal = context.principal


def require(predicate: RoutePredicate):
    """
    Annotation-style gate for one route.

    Usage:
        @router.get("/add", dependencies=[Depends(require(RequireRole(roles={"admin"})))])
    """
    gate = AuthorizationGate()

    async def check(request: Request, context: AuthContext = Depends(get_auth_context)):
        if not _is_ignored(request):
            result = gate.authorize(context.principal, [predicate])
            _raise_on_denial(result, context)
        request.state.principal = context.principal

    return check


def get_request_principal(request: Request) -> Principal:
    """Principal left on the request by the gate"""
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise ClientError(
            Error(NOT_AUTHENTICATED, "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return principal
