"""Translates the declarative origin list into CloudFront `Origins` and
`CacheBehaviors`.

An origin is S3 backed when it is a bare bucket name or bucket domain, or a
URL whose host is an S3 REST endpoint. S3 website endpoints and every other
URL are custom HTTP origins. Origin IDs are derived from the bucket name or
host name, so parsing the same input twice yields the same IDs.
"""

# Standard Library
import re
from typing import Dict, List, Optional, Set, Tuple, Union, Any
from urllib.parse import urlparse

# Local Modules
from cdn_core.models import CacheDefaults, Origin
from cdn_core.services.cache_behavior import get_cache_behavior
from cdn_core.utils import OriginProtocolPolicy

S3_HOST_PATTERN = re.compile(
    r"^(?P<bucket>.+?)\.s3(\.[a-z0-9-]+)?\.amazonaws\.com$"
)
S3_WEBSITE_HOST_PATTERN = re.compile(
    r"^.+?\.s3-website[.-][a-z0-9-]+(\.[a-z0-9-]+)?\.amazonaws\.com$"
)
S3_DOMAIN_SUFFIX = ".s3.amazonaws.com"
ORIGIN_ACCESS_IDENTITY_PREFIX = "origin-access-identity/cloudfront/"
DEFAULT_HTTP_PORT = 80
DEFAULT_HTTPS_PORT = 443


def _format_origin_path(path: str) -> str:
    """Normalizes a URL path into a CloudFront `OriginPath`."""
    if not path or path == "/":
        return ""
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/")


def _split_location(
    url: str,
) -> Tuple[Optional[str], str, Optional[int], str]:
    """Splits an origin location into scheme, host, port and path."""
    if "://" in url:
        parsed = urlparse(url)
        return parsed.scheme, parsed.hostname or "", parsed.port, parsed.path
    host, _, path = url.partition("/")
    return None, host, None, "/" + path if path else ""


def _get_custom_headers(headers: Dict[str, str]) -> Dict[str, Any]:
    items = [
        {"HeaderName": name, "HeaderValue": value}
        for name, value in headers.items()
    ]
    return {"Quantity": len(items), "Items": items}


def get_origin_config(
    origin: Union[str, Origin],
    origin_access_identity_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Builds the CloudFront origin record of a single origin.

    Parameters
    ----------
    origin : Union[str, Origin]
        A bare location or a structured origin.
    origin_access_identity_id : Optional[str], default None
        The access identity attached to private S3 origins.

    Returns
    -------
    Dict[str, Any]
        The origin record, with either `S3OriginConfig` or
        `CustomOriginConfig`.
    """
    if isinstance(origin, str):
        origin = Origin(url=origin)

    scheme, host, port, path = _split_location(origin.url)
    s3_match = S3_HOST_PATTERN.match(host)
    website = S3_WEBSITE_HOST_PATTERN.match(host) is not None

    config: Dict[str, Any] = {
        "OriginPath": _format_origin_path(path),
        "CustomHeaders": _get_custom_headers(origin.headers),
    }

    if s3_match or (scheme is None and not website):
        bucket_name = s3_match.group("bucket") if s3_match else host
        # Regional endpoints are kept as given
        domain_name = host if s3_match else f"{bucket_name}{S3_DOMAIN_SUFFIX}"
        access_identity = ""
        if origin.private and origin_access_identity_id:
            access_identity = (
                f"{ORIGIN_ACCESS_IDENTITY_PREFIX}{origin_access_identity_id}"
            )
        config.update(
            {
                "Id": bucket_name,
                "DomainName": domain_name,
                "S3OriginConfig": {"OriginAccessIdentity": access_identity},
            }
        )
        return config

    # Website endpoints only speak HTTP
    protocol_policy = origin.protocol_policy or (
        OriginProtocolPolicy.http_only
        if website
        else OriginProtocolPolicy.https_only
    )
    http_port = port if port and scheme == "http" else DEFAULT_HTTP_PORT
    https_port = port if port and scheme == "https" else DEFAULT_HTTPS_PORT
    config.update(
        {
            "Id": host,
            "DomainName": host,
            "CustomOriginConfig": {
                "HTTPPort": http_port,
                "HTTPSPort": https_port,
                "OriginProtocolPolicy": OriginProtocolPolicy(
                    protocol_policy
                ).value,
                "OriginSslProtocols": {"Quantity": 1, "Items": ["TLSv1.2"]},
                "OriginReadTimeout": 30,
                "OriginKeepaliveTimeout": 5,
            },
        }
    )
    return config


def parse_input_origins(
    origins: List[Union[str, Origin]],
    origin_access_identity_id: Optional[str] = None,
    defaults: Optional[CacheDefaults] = None,
) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
    """Parses the input origins into CloudFront `Origins` and `CacheBehaviors`.

    Parameters
    ----------
    origins : List[Union[str, Origin]]
        The input origins, in order. The first becomes the default origin.
    origin_access_identity_id : Optional[str], default None
        The access identity attached to private S3 origins. It must be
        provisioned before parsing when any origin is private.
    defaults : Optional[CacheDefaults], default None
        Cache overrides applied to the path cache behaviors.

    Returns
    -------
    Tuple[Dict[str, Any], Optional[Dict[str, Any]]]
        The counted `Origins` collection and the counted `CacheBehaviors`
        collection, or None when no origin specifies a path.
    """
    origin_items: List[Dict[str, Any]] = []
    behavior_items: List[Dict[str, Any]] = []
    seen_ids: Set[str] = set()

    for index, origin in enumerate(origins):
        origin_config = get_origin_config(origin, origin_access_identity_id)

        # Two origins on the same host still need distinct IDs
        if origin_config["Id"] in seen_ids:
            origin_config["Id"] = f"{origin_config['Id']}-{index}"
        seen_ids.add(origin_config["Id"])
        origin_items.append(origin_config)

        if isinstance(origin, Origin) and origin.path:
            behavior_items.append(
                get_cache_behavior(origin.path, origin_config["Id"], defaults)
            )

    parsed_origins = {"Quantity": len(origin_items), "Items": origin_items}
    if not behavior_items:
        return parsed_origins, None
    return parsed_origins, {
        "Quantity": len(behavior_items),
        "Items": behavior_items,
    }


def get_s3_bucket_names(origins: Dict[str, Any]) -> List[str]:
    """Returns the distinct bucket names behind the S3 backed origins."""
    bucket_names = [
        S3_HOST_PATTERN.match(item["DomainName"]).group("bucket")
        for item in origins.get("Items", [])
        if "S3OriginConfig" in item
    ]
    return list(dict.fromkeys(bucket_names))
