# Standard Library
from enum import Enum


class AllowedMethod(str, Enum):
    """Enumeration of HTTP methods a cache behavior can allow.

    Attributes:
        get: HTTP GET method.
        head: HTTP HEAD method.
        options: HTTP OPTIONS method.
        put: HTTP PUT method.
        post: HTTP POST method.
        patch: HTTP PATCH method.
        delete: HTTP DELETE method.
    """

    get = "GET"
    head = "HEAD"
    options = "OPTIONS"
    put = "PUT"
    post = "POST"
    patch = "PATCH"
    delete = "DELETE"


class ViewerProtocolPolicy(str, Enum):
    """Enumeration of viewer protocol policies.

    Attributes:
        allow_all: Serve both HTTP and HTTPS.
        https_only: Reject plain HTTP requests.
        redirect_to_https: Redirect HTTP requests to HTTPS.
    """

    allow_all = "allow-all"
    https_only = "https-only"
    redirect_to_https = "redirect-to-https"


class OriginProtocolPolicy(str, Enum):
    """Enumeration of protocols CloudFront uses towards a custom origin.

    Attributes:
        http_only: Always connect over HTTP.
        https_only: Always connect over HTTPS.
        match_viewer: Use the protocol of the viewer request.
    """

    http_only = "http-only"
    https_only = "https-only"
    match_viewer = "match-viewer"


class CookieForward(str, Enum):
    """Enumeration of cookie forwarding modes.

    Attributes:
        all: Forward every cookie.
        none: Forward no cookies.
        whitelist: Forward only the named cookies.
    """

    all = "all"
    none = "none"
    whitelist = "whitelist"


class ProvisionAction(str, Enum):
    """Enumeration of actions the provisioner Lambda accepts.

    Attributes:
        create: Create a new distribution.
        update: Update an existing distribution.
        delete: Delete (or disable) an existing distribution.
        invalidate: Invalidate cached paths of a distribution.
    """

    create = "create"
    update = "update"
    delete = "delete"
    invalidate = "invalidate"
