# Standard Library
from typing import Any, Dict, Optional

# Third Party
from pydantic import BaseModel, Field


class DistributionResult(BaseModel):
    """The identifying triple returned by the lifecycle operations.

    Attributes:
        id: The distribution ID.
        arn: The distribution ARN.
        url: `https://` followed by the distribution domain name.
    """

    id: Optional[str] = Field(None, description="Distribution ID")
    arn: Optional[str] = Field(None, description="Distribution ARN")
    url: str = Field(..., description="Distribution URL")

    @classmethod
    def from_distribution(
        cls, distribution: Dict[str, Any]
    ) -> "DistributionResult":
        return cls(
            id=distribution.get("Id"),
            arn=distribution.get("ARN"),
            url=f"https://{distribution.get('DomainName')}",
        )


class InvalidationResult(BaseModel):
    """The invalidation created for a distribution."""

    id: Optional[str] = Field(None, description="Invalidation ID")
    status: Optional[str] = Field(None, description="Invalidation status")
