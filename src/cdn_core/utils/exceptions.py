class DistributionConfigNotFoundError(Exception):
    """Raised when CloudFront returns no config for a distribution."""

    def __init__(self, distribution_id: str) -> None:
        self.distribution_id = distribution_id
        super().__init__("Could not get a distribution config")
