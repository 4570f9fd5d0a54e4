"""
Access-control gate for page requests.

``decide(path, token)`` classifies the path and returns what to do with the
request: let it through, send it to the login page, or send an already
signed-in user to the dashboard. It is a pure function; the HTTP wiring lives
in ``api.middleware``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from config.settings import config


class PathClass(str, Enum):
    PROTECTED = "protected"
    PUBLIC_AUTH = "public-auth"
    UNCLASSIFIED = "unclassified"


class GateAction(str, Enum):
    ALLOW = "allow"
    REDIRECT_LOGIN = "redirect-to-login"
    REDIRECT_DASHBOARD = "redirect-to-dashboard"


@dataclass(frozen=True)
class GateConfig:
    protected_prefixes: Tuple[str, ...] = ("/dashboard", "/profile")
    public_auth_paths: Tuple[str, ...] = ("/login", "/register")
    matcher: Tuple[str, ...] = (
        "/dashboard/:path*",
        "/profile/:path*",
        "/login",
        "/register",
    )
    login_path: str = "/login"
    dashboard_path: str = "/dashboard"

    @classmethod
    def from_settings(cls) -> "GateConfig":
        return cls(
            protected_prefixes=tuple(config.gate_protected_prefixes),
            public_auth_paths=tuple(config.gate_public_auth_paths),
            matcher=tuple(config.gate_matcher),
            login_path=config.gate_login_path,
            dashboard_path=config.gate_dashboard_path,
        )


@dataclass(frozen=True)
class GateDecision:
    action: GateAction
    path_class: PathClass
    redirect_to: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.action is GateAction.ALLOW


DEFAULT_GATE_CONFIG = GateConfig()

_WILDCARD_SUFFIX = "/:path*"


def matches_filter(path: str, matcher: Sequence[str]) -> bool:
    """
    True if ``path`` is selected by any matcher pattern.

    ``/base/:path*`` matches ``/base`` and anything below it; any other
    pattern must match exactly.
    """
    for pattern in matcher:
        if pattern.endswith(_WILDCARD_SUFFIX):
            base = pattern[: -len(_WILDCARD_SUFFIX)]
            if path == base or path.startswith(base + "/"):
                return True
        elif path == pattern:
            return True
    return False


def classify_path(path: str, gate_config: GateConfig = DEFAULT_GATE_CONFIG) -> PathClass:
    # protected wins when the two sets overlap
    if any(path.startswith(prefix) for prefix in gate_config.protected_prefixes):
        return PathClass.PROTECTED
    if path in gate_config.public_auth_paths:
        return PathClass.PUBLIC_AUTH
    return PathClass.UNCLASSIFIED


def decide(
    path: str,
    token: Optional[str],
    gate_config: GateConfig = DEFAULT_GATE_CONFIG,
) -> GateDecision:
    """Decide what to do with a request for ``path`` carrying ``token`` (or none)."""
    path_class = classify_path(path, gate_config)
    has_token = bool(token)

    if path_class is PathClass.PROTECTED and not has_token:
        return GateDecision(GateAction.REDIRECT_LOGIN, path_class, gate_config.login_path)
    if path_class is PathClass.PUBLIC_AUTH and has_token:
        return GateDecision(GateAction.REDIRECT_DASHBOARD, path_class, gate_config.dashboard_path)
    return GateDecision(GateAction.ALLOW, path_class)
