"""
Static website - Pulumi entrypoint.

Wires two ComponentResources using Pulumi config and output chaining:

- **SiteBucket**: S3 bucket served as a website, with the local ``path``
  directory synced into it as public-read objects.
- **SiteCdn**: CloudFront distribution whose only origin is the bucket's
  website endpoint; origin 404s are answered with ``errorDocument``.

Stack exports: originURL, originHostname, cdnURL, cdnHostname.
"""

import pulumi

from components import SiteBucket, SiteCdn
from config import SiteConfig


def main():
    """
    Build the site bucket and CDN and export stack outputs.

    Reads config (path, indexDocument, errorDocument), declares the bucket and
    its synced folder, points the distribution at the website endpoint, and
    exports the origin and CDN URLs and hostnames.
    """
    config = SiteConfig.from_pulumi_config(pulumi.Config())
    pulumi.log.info(
        f"site config: path={config.path} index={config.index_document} "
        f"error={config.error_document}"
    )

    site = SiteBucket(
        name="site",
        path=config.path,
        index_document=config.index_document,
        error_document=config.error_document,
    )

    cdn = SiteCdn(
        name="cdn",
        origin_id=site.bucket.arn,
        origin_domain=site.website_endpoint,
        error_document=config.error_document,
    )

    for output_name, value in [
        ("originURL", site.website_url),
        ("originHostname", site.website_endpoint),
        ("cdnURL", cdn.url),
        ("cdnHostname", cdn.domain_name),
    ]:
        pulumi.export(output_name, value)


if __name__ == "__main__":
    main()
