"""
CloudFront distribution in front of an S3 website endpoint.

The S3 website endpoint is a custom (HTTP-only) origin, so CloudFront talks
to it over plain HTTP and terminates HTTPS for viewers with the default
``*.cloudfront.net`` certificate. Caching is fixed at ten minutes for the
read-only methods, and an origin 404 is answered with the site's error
document while keeping the 404 status.

The args builders are module-level functions so the fixed policy can be
asserted in tests without a Pulumi stack.
"""

import pulumi
import pulumi_aws as aws

from components._helpers import error_page_path

ID: str = "static-site:aws:SiteCdn"

CACHE_TTL_SECONDS: int = 600
CACHE_METHODS: list[str] = ["GET", "HEAD", "OPTIONS"]
ORIGIN_SSL_PROTOCOLS: list[str] = ["TLSv1.2"]
PRICE_CLASS: str = "PriceClass_100"


def origin_args(
    origin_id: pulumi.Input[str],
    domain_name: pulumi.Input[str],
) -> aws.cloudfront.DistributionOriginArgs:
    custom_origin_config = aws.cloudfront.DistributionOriginCustomOriginConfigArgs(
        origin_protocol_policy="http-only",
        http_port=80,
        https_port=443,
        origin_ssl_protocols=ORIGIN_SSL_PROTOCOLS,
    )
    return aws.cloudfront.DistributionOriginArgs(
        origin_id=origin_id,
        domain_name=domain_name,
        custom_origin_config=custom_origin_config,
    )


def default_cache_behavior_args(
    target_origin_id: pulumi.Input[str],
) -> aws.cloudfront.DistributionDefaultCacheBehaviorArgs:
    """
    Redirect viewers to HTTPS and cache read-only methods for a fixed TTL.

    Query strings and all cookies are forwarded to the origin unchanged.
    """
    forwarded_values = aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesArgs(
        query_string=True,
        cookies=aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesCookiesArgs(
            forward="all",
        ),
    )
    return aws.cloudfront.DistributionDefaultCacheBehaviorArgs(
        target_origin_id=target_origin_id,
        viewer_protocol_policy="redirect-to-https",
        allowed_methods=CACHE_METHODS,
        cached_methods=CACHE_METHODS,
        default_ttl=CACHE_TTL_SECONDS,
        max_ttl=CACHE_TTL_SECONDS,
        min_ttl=CACHE_TTL_SECONDS,
        forwarded_values=forwarded_values,
    )


def custom_error_responses_args(
    error_document: str,
) -> list[aws.cloudfront.DistributionCustomErrorResponseArgs]:
    """Serve the error document for origin 404s, still reporting 404."""
    return [
        aws.cloudfront.DistributionCustomErrorResponseArgs(
            error_code=404,
            response_code=404,
            response_page_path=error_page_path(error_document),
        )
    ]


def restrictions_args() -> aws.cloudfront.DistributionRestrictionsArgs:
    return aws.cloudfront.DistributionRestrictionsArgs(
        geo_restriction=aws.cloudfront.DistributionRestrictionsGeoRestrictionArgs(
            restriction_type="none",
        ),
    )


def viewer_certificate_args() -> aws.cloudfront.DistributionViewerCertificateArgs:
    return aws.cloudfront.DistributionViewerCertificateArgs(
        cloudfront_default_certificate=True,
    )


class SiteCdn(pulumi.ComponentResource):
    """
    CloudFront distribution with a single S3 website origin.

    Resources: Distribution.
    """

    def __init__(
        self,
        name: str,
        origin_id: pulumi.Input[str],
        origin_domain: pulumi.Input[str],
        error_document: str,
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the CloudFront distribution.

        Args:
            name: Pulumi resource name for the distribution.
            origin_id: Identifier of the origin (the bucket ARN).
            origin_domain: S3 website endpoint hostname.
            error_document: Object key served for origin 404s.
            opts: Options for the component itself.

        Outputs (set on self, registered for the component):
            domain_name: Distribution FQDN.
            url: HTTPS URL of the distribution.
        """
        super().__init__(ID, name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.distribution = aws.cloudfront.Distribution(
            resource_name=f"{name}-distribution",
            enabled=True,
            origins=[origin_args(origin_id, origin_domain)],
            default_cache_behavior=default_cache_behavior_args(origin_id),
            price_class=PRICE_CLASS,
            custom_error_responses=custom_error_responses_args(error_document),
            restrictions=restrictions_args(),
            viewer_certificate=viewer_certificate_args(),
            opts=child_opts,
        )
        pulumi.log.debug(
            f"404 responses served from {error_page_path(error_document)}",
            resource=self,
        )

        self.domain_name: pulumi.Output[str] = self.distribution.domain_name
        self.url: pulumi.Output[str] = pulumi.Output.concat(
            "https://", self.distribution.domain_name
        )
        self.register_outputs(
            {
                "domain_name": self.domain_name,
                "url": self.url,
            }
        )
