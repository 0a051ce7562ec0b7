"""Pydantic models for the declarative distribution inputs."""

# Standard Library
from typing import Dict, List, Optional, Union

# Third Party
from pydantic import BaseModel, Field, ConfigDict

# Local Modules
from cdn_core.utils import (
    AllowedMethod,
    CookieForward,
    OriginProtocolPolicy,
    ViewerProtocolPolicy,
)


class Origin(BaseModel):
    """A structured origin descriptor.

    Attributes:
        url: Bucket name, bucket domain or full URL of the origin.
        path: Path pattern routed to this origin through its own cache behavior.
        headers: Custom headers CloudFront sends to a custom origin.
        private: Restrict bucket access to the CloudFront origin access identity.
        protocol_policy: Protocol CloudFront uses towards a custom origin.
    """

    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(..., min_length=1, description="Origin location")
    path: Optional[str] = Field(
        None, description="Path pattern routed to this origin"
    )
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Custom origin headers"
    )
    private: bool = Field(
        False, description="Serve the bucket only through the access identity"
    )
    protocol_policy: Optional[OriginProtocolPolicy] = Field(
        None,
        alias="protocolPolicy",
        description="Protocol used to reach a custom origin",
    )


class ForwardOptions(BaseModel):
    """Values forwarded to the origin and used as cache keys.

    Attributes:
        cookies: `all`, `none` or the list of cookie names to forward.
        query_string: Whether query strings are forwarded.
        headers: Header names to forward.
        query_string_cache_keys: Query string parameters used as cache keys.
    """

    model_config = ConfigDict(populate_by_name=True)

    cookies: Union[CookieForward, List[str]] = Field(
        CookieForward.none, description="Cookie forwarding mode or names"
    )
    query_string: bool = Field(
        False, alias="queryString", description="Forward query strings"
    )
    headers: List[str] = Field(
        default_factory=list, description="Header names to forward"
    )
    query_string_cache_keys: List[str] = Field(
        default_factory=list,
        alias="queryStringCacheKeys",
        description="Query string parameters used as cache keys",
    )


class CacheDefaults(BaseModel):
    """Overrides for the cache behaviors built from the origins.

    Every field is optional; an absent field keeps the built-in default.
    """

    model_config = ConfigDict(populate_by_name=True)

    allowed_http_methods: Optional[List[AllowedMethod]] = Field(
        None, alias="allowedHttpMethods", description="Allowed HTTP methods"
    )
    forward: ForwardOptions = Field(
        default_factory=ForwardOptions, description="Forwarded values"
    )
    min_ttl: Optional[int] = Field(None, alias="minTTL", ge=0)
    max_ttl: Optional[int] = Field(None, alias="maxTTL", ge=0)
    default_ttl: Optional[int] = Field(None, alias="defaultTTL", ge=0)
    viewer_protocol_policy: Optional[ViewerProtocolPolicy] = Field(
        None, alias="viewerProtocolPolicy"
    )
    compress: Optional[bool] = Field(
        None, description="Compress objects automatically"
    )


class CloudFrontInputs(BaseModel):
    """The declarative input of a create or update.

    Attributes:
        origins: Origins of the distribution, the first one is the default.
        defaults: Cache behavior overrides.
        comment: Comment stored on the distribution.
        enabled: Whether the distribution accepts viewer requests.
    """

    model_config = ConfigDict(populate_by_name=True)

    origins: List[Union[str, Origin]] = Field(
        ..., min_length=1, description="Origins, the first is the default"
    )
    defaults: Optional[CacheDefaults] = Field(
        None, description="Cache behavior overrides"
    )
    comment: str = Field("", description="Distribution comment")
    enabled: bool = Field(True, description="Whether the distribution is enabled")
