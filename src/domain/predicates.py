"""
Route Predicates

Tagged union of access requirements attached to a route, either through the
central route table or per route. Predicates are immutable and resolved once
when the route is registered.
"""

from enum import Enum
from typing import Annotated, ClassVar, FrozenSet, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from libs.result import Error
from src.domain.principal import Principal

NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
FORBIDDEN = "FORBIDDEN"


class CheckMode(str, Enum):
    """How a set of roles/permissions is combined"""

    AND = "and"
    OR = "or"


def _not_authenticated() -> Error:
    return Error(NOT_AUTHENTICATED, "Authentication required")


class _Predicate(BaseModel):
    model_config = ConfigDict(frozen=True)

    requires_login: ClassVar[bool] = True

    def evaluate(self, principal: Optional[Principal]) -> Optional[Error]:
        """Return None when the caller passes, otherwise the rejection"""
        if principal is None:
            return _not_authenticated() if self.requires_login else None
        return self._check(principal)

    def _check(self, principal: Principal) -> Optional[Error]:
        return None


class NoRequirement(_Predicate):
    """Anonymous access allowed"""

    kind: Literal["none"] = "none"
    requires_login: ClassVar[bool] = False


class RequireLogin(_Predicate):
    """Any authenticated caller"""

    kind: Literal["login"] = "login"


class RequireRole(_Predicate):
    """Caller's role must be one of `roles` (OR) or cover all of them (AND)"""

    kind: Literal["role"] = "role"
    roles: FrozenSet[str]
    mode: CheckMode = CheckMode.OR

    def _check(self, principal: Principal) -> Optional[Error]:
        if self.mode == CheckMode.OR:
            passed = any(principal.has_role(role) for role in self.roles)
        else:
            passed = all(principal.has_role(role) for role in self.roles)
        if passed:
            return None
        return Error(
            FORBIDDEN, f"Role required: {_describe(self.roles, self.mode)}"
        )


class RequirePermission(_Predicate):
    """
    Caller must hold all (AND) or any (OR) of `permissions`.

    A caller whose role is in `or_roles` passes regardless of permissions.
    """

    kind: Literal["permission"] = "permission"
    permissions: FrozenSet[str]
    mode: CheckMode = CheckMode.AND
    or_roles: FrozenSet[str] = Field(default_factory=frozenset)

    def _check(self, principal: Principal) -> Optional[Error]:
        if any(principal.has_role(role) for role in self.or_roles):
            return None
        if self.mode == CheckMode.AND:
            passed = all(principal.has_permission(p) for p in self.permissions)
        else:
            passed = any(principal.has_permission(p) for p in self.permissions)
        if passed:
            return None
        return Error(
            FORBIDDEN,
            f"Permission required: {_describe(self.permissions, self.mode)}",
        )


class RequireBoth(_Predicate):
    """Role membership AND permission superset"""

    kind: Literal["both"] = "both"
    roles: FrozenSet[str]
    permissions: FrozenSet[str]

    def _check(self, principal: Principal) -> Optional[Error]:
        return (
            RequireRole(roles=self.roles)._check(principal)
            or RequirePermission(permissions=self.permissions)._check(principal)
        )


class RequireAny(_Predicate):
    """Passes when any nested predicate passes; otherwise the first rejection"""

    kind: Literal["any"] = "any"
    any_of: Tuple["RoutePredicate", ...] = Field(min_length=1)

    def evaluate(self, principal: Optional[Principal]) -> Optional[Error]:
        errors = [predicate.evaluate(principal) for predicate in self.any_of]
        if any(error is None for error in errors):
            return None
        return errors[0]


RoutePredicate = Annotated[
    Union[
        NoRequirement,
        RequireLogin,
        RequireRole,
        RequirePermission,
        RequireBoth,
        RequireAny,
    ],
    Field(discriminator="kind"),
]

RequireAny.model_rebuild()

route_predicate_adapter = TypeAdapter(RoutePredicate)


def _describe(values: FrozenSet[str], mode: CheckMode) -> str:
    joiner = " and " if mode == CheckMode.AND else " or "
    return joiner.join(sorted(values))
