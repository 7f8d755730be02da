"""
Authorization Gate

Decides allow/deny for a request before its handler runs. Two ways of
declaring requirements feed the same evaluation:

- a central RouteTable of Ant-style path patterns (interceptor style)
- a predicate bound to a single route at registration (annotation style)

Every predicate that applies to a request must pass.
"""

import logging
import re
from functools import lru_cache
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, TypeAdapter

from libs.result import Result, Return
from src.domain.predicates import (
    RequireLogin,
    RequirePermission,
    RequireRole,
    RoutePredicate,
)
from src.domain.principal import Principal

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Pattern[str]:
    """
    Compile an Ant-style path pattern.

    `?` matches one character, `*` anything within a segment, `**` any number
    of segments. A trailing `/**` also matches the bare prefix.
    """
    regex = ""
    i = 0
    while i < len(pattern):
        if pattern.startswith("/**", i):
            regex += "(?:/.*)?"
            i += 3
        elif pattern.startswith("**", i):
            regex += ".*"
            i += 2
        elif pattern[i] == "*":
            regex += "[^/]*"
            i += 1
        elif pattern[i] == "?":
            regex += "[^/]"
            i += 1
        else:
            regex += re.escape(pattern[i])
            i += 1
    return re.compile(f"^{regex}$")


def path_matches(pattern: str, path: str) -> bool:
    return compile_pattern(pattern).match(path) is not None


class RouteRule(BaseModel):
    """Central table entry: pattern -> predicate, minus exclusions"""

    model_config = ConfigDict(frozen=True)

    pattern: str
    predicate: RoutePredicate
    exclude: Tuple[str, ...] = ()
    methods: Optional[Tuple[str, ...]] = None

    def applies_to(self, path: str, method: str) -> bool:
        if self.methods is not None and method.upper() not in {m.upper() for m in self.methods}:
            return False
        if not path_matches(self.pattern, path):
            return False
        return not any(path_matches(excluded, path) for excluded in self.exclude)


route_rules_adapter = TypeAdapter(List[RouteRule])


class RouteTable:
    """Ordered collection of route rules"""

    def __init__(self, rules: Iterable[RouteRule] = ()):
        self.rules: List[RouteRule] = list(rules)

    @classmethod
    def from_config(cls, raw_rules: Optional[list]) -> "RouteTable":
        """Build from ROUTE_RULES config, falling back to the built-in table"""
        if raw_rules is None:
            return default_route_table()
        return cls(route_rules_adapter.validate_python(raw_rules))

    def add(self, pattern: str, predicate: RoutePredicate, *exclude: str) -> "RouteTable":
        self.rules.append(RouteRule(pattern=pattern, predicate=predicate, exclude=exclude))
        return self

    def predicates_for(self, path: str, method: str = "GET") -> List[RoutePredicate]:
        return [rule.predicate for rule in self.rules if rule.applies_to(path, method)]


PUBLIC_PATHS = (
    "/health",
    "/auth/doLogin",
    "/auth/register",
    "/auth/isLogin",
    "/session/login",
    "/session/isLogin",
    "/session/compare",
    "/session/custom/**",
    "/basic/**",
    "/advanced/**",
)


def default_route_table() -> RouteTable:
    """Login everywhere except public paths, then per-module requirements"""
    return (
        RouteTable()
        .add("/**", RequireLogin(), *PUBLIC_PATHS)
        .add("/admin/**", RequireRole(roles={"admin", "super-admin"}))
        .add("/user/**", RequirePermission(permissions={"user"}))
        .add("/admin/**", RequirePermission(permissions={"admin"}))
        .add("/goods/**", RequirePermission(permissions={"goods"}))
        .add("/orders/**", RequirePermission(permissions={"orders"}))
        .add("/notice/**", RequirePermission(permissions={"notice"}))
        .add("/comment/**", RequirePermission(permissions={"comment"}))
    )


class AuthorizationGate:
    """
    Evaluates predicates against the caller.

    Business Rules:
    - Anonymous caller + any login-implying predicate -> NOT_AUTHENTICATED
    - Authenticated caller failing any predicate -> FORBIDDEN
    - All predicates are ANDed; the first failure wins
    """

    def __init__(self, route_table: Optional[RouteTable] = None):
        self.route_table = route_table or RouteTable()

    def authorize(
        self, principal: Optional[Principal], predicates: Sequence[RoutePredicate]
    ) -> Result[Optional[Principal]]:
        for predicate in predicates:
            error = predicate.evaluate(principal)
            if error is not None:
                return Return.err(error)
        return Return.ok(principal)

    def authorize_path(
        self, principal: Optional[Principal], path: str, method: str = "GET"
    ) -> Result[Optional[Principal]]:
        result = self.authorize(principal, self.route_table.predicates_for(path, method))
        if result.is_err():
            logger.info(
                f"Gate denied {method} {path} for "
                f"{principal.login_id if principal else 'anonymous'}: {result.error.code}"
            )
        return result
