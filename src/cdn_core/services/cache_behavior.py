"""Builds CloudFront cache behaviors from the cache defaults of the inputs."""

# Standard Library
from typing import Dict, List, Optional, Any

# Local Modules
from cdn_core.models import CacheDefaults, ForwardOptions
from cdn_core.utils import AllowedMethod, CookieForward, ViewerProtocolPolicy

DEFAULT_MIN_TTL = 0
DEFAULT_DEFAULT_TTL = 86400
DEFAULT_MAX_TTL = 31536000
DEFAULT_ALLOWED_METHODS = [AllowedMethod.get, AllowedMethod.head]


def _counted(items: List[Any]) -> Dict[str, Any]:
    return {"Quantity": len(items), "Items": items}


def get_forwarded_values(forward: ForwardOptions) -> Dict[str, Any]:
    """Translates forward options into CloudFront `ForwardedValues`.

    Parameters
    ----------
    forward : ForwardOptions
        The forward options of the cache defaults.

    Returns
    -------
    Dict[str, Any]
        The `ForwardedValues` record of a cache behavior.
    """
    if isinstance(forward.cookies, list) or (
        forward.cookies == CookieForward.whitelist
    ):
        names = forward.cookies if isinstance(forward.cookies, list) else []
        cookies = {
            "Forward": CookieForward.whitelist.value,
            "WhitelistedNames": _counted(list(names)),
        }
    else:
        cookies = {"Forward": CookieForward(forward.cookies).value}

    return {
        "QueryString": forward.query_string,
        "Cookies": cookies,
        "Headers": _counted(list(forward.headers)),
        "QueryStringCacheKeys": _counted(list(forward.query_string_cache_keys)),
    }


def get_allowed_methods(
    methods: Optional[List[AllowedMethod]],
) -> Dict[str, Any]:
    """Builds `AllowedMethods`, caching GET and HEAD plus OPTIONS if allowed.

    Parameters
    ----------
    methods : Optional[List[AllowedMethod]]
        The allowed methods, or None for GET and HEAD.

    Returns
    -------
    Dict[str, Any]
        The `AllowedMethods` record including `CachedMethods`.
    """
    allowed: List[str] = []
    for method in methods or DEFAULT_ALLOWED_METHODS:
        value = AllowedMethod(method).value
        if value not in allowed:
            allowed.append(value)

    cached = [AllowedMethod.get.value, AllowedMethod.head.value]
    if AllowedMethod.options.value in allowed:
        cached.append(AllowedMethod.options.value)

    return {**_counted(allowed), "CachedMethods": _counted(cached)}


def _build_cache_behavior(
    origin_id: str, defaults: Optional[CacheDefaults]
) -> Dict[str, Any]:
    defaults = defaults or CacheDefaults()

    viewer_protocol_policy = (
        defaults.viewer_protocol_policy or ViewerProtocolPolicy.redirect_to_https
    )

    # Explicit zero TTLs are valid overrides
    return {
        "TargetOriginId": origin_id,
        "ForwardedValues": get_forwarded_values(defaults.forward),
        "TrustedSigners": {"Enabled": False, "Quantity": 0},
        "ViewerProtocolPolicy": ViewerProtocolPolicy(
            viewer_protocol_policy
        ).value,
        "MinTTL": (
            defaults.min_ttl if defaults.min_ttl is not None else DEFAULT_MIN_TTL
        ),
        "DefaultTTL": (
            defaults.default_ttl
            if defaults.default_ttl is not None
            else DEFAULT_DEFAULT_TTL
        ),
        "MaxTTL": (
            defaults.max_ttl if defaults.max_ttl is not None else DEFAULT_MAX_TTL
        ),
        "AllowedMethods": get_allowed_methods(defaults.allowed_http_methods),
        "SmoothStreaming": False,
        "Compress": bool(defaults.compress),
        "LambdaFunctionAssociations": {"Quantity": 0},
        "FieldLevelEncryptionId": "",
    }


def get_default_cache_behavior(
    origin_id: str, defaults: Optional[CacheDefaults] = None
) -> Dict[str, Any]:
    """Builds the mandatory default cache behavior of a distribution.

    Parameters
    ----------
    origin_id : str
        The ID of the origin the behavior routes to, normally the first one.
    defaults : Optional[CacheDefaults], default None
        Overrides for the built-in defaults. Absent options keep the
        built-in value.

    Returns
    -------
    Dict[str, Any]
        The `DefaultCacheBehavior` record.
    """
    return _build_cache_behavior(origin_id, defaults)


def get_cache_behavior(
    path_pattern: str,
    origin_id: str,
    defaults: Optional[CacheDefaults] = None,
) -> Dict[str, Any]:
    """Builds a cache behavior routing `path_pattern` to `origin_id`."""
    return {
        "PathPattern": path_pattern,
        **_build_cache_behavior(origin_id, defaults),
    }
