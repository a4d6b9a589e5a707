"""
Static website components.

Each concern is encapsulated in its own ComponentResource. Use from the
Pulumi entrypoint (``__main__.py``) with config and output chaining:

- **SiteBucket**: S3 website bucket, access settings and synced site files;
  exposes website_endpoint as the CDN origin.
- **SiteCdn**: CloudFront distribution over the website endpoint; exposes
  domain_name and url.
"""

from components.cdn import SiteCdn
from components.storage import SiteBucket

__all__ = ["SiteBucket", "SiteCdn"]
