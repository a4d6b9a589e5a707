"""
S3 website bucket plus a synced folder of site files.

This component creates an S3 bucket configured for website hosting (index and
error documents), sets object ownership to ``ObjectWriter`` and lifts the
public-ACL block so uploaded objects can carry ``public-read``. The local site
directory is then synced into the bucket with a synced folder. The sync is
declared after the ownership controls and the public access block, otherwise
objects could be uploaded before ACLs are allowed.

``website_endpoint`` is an ``Output[str]`` so the CDN component can use it as
its origin and the entrypoint can export it.
"""

import pulumi
import pulumi_aws as aws
import pulumi_synced_folder as synced_folder

ID: str = "static-site:aws:SiteBucket"

# Uploader owns the object, so the ACL set by the synced folder applies.
OBJECT_OWNERSHIP: str = "ObjectWriter"

# Applied to the bucket so objects may be made public through their ACL.
# Used by tests and callers to assert on the access policy.
S3_ALLOW_PUBLIC_ACLS: dict[str, bool] = {
    "block_public_acls": False,
}

OBJECT_ACL: str = "public-read"


class SiteBucket(pulumi.ComponentResource):
    """
    S3 website bucket with public-read objects synced from a local folder.

    Resources: Bucket, BucketWebsiteConfiguration, BucketOwnershipControls,
    BucketPublicAccessBlock, S3BucketFolder.
    """

    def __init__(
        self,
        name: str,
        path: str,
        index_document: str,
        error_document: str,
        opts: pulumi.ResourceOptions | None = None,
    ):
        """
        Create the bucket, its website and access settings, and the sync.

        Args:
            name: Pulumi resource name; child resources are prefixed with it.
            path: Local directory whose files are synced into the bucket.
            index_document: Suffix served for directory requests.
            error_document: Object key served by the website on errors.
            opts: Options for the component itself.

        Outputs (set on self, registered for the component):
            website_endpoint: S3 website hostname (CDN origin).
            website_url: Plain-HTTP URL of the website endpoint.
        """
        super().__init__(ID, name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.bucket = aws.s3.Bucket(
            resource_name=f"{name}-bucket",
            opts=child_opts,
        )

        index = aws.s3.BucketWebsiteConfigurationIndexDocumentArgs(
            suffix=index_document,
        )
        error = aws.s3.BucketWebsiteConfigurationErrorDocumentArgs(
            key=error_document,
        )
        self.website = aws.s3.BucketWebsiteConfiguration(
            resource_name=f"{name}-website",
            bucket=self.bucket.bucket,
            index_document=index,
            error_document=error,
            opts=child_opts,
        )

        self.ownership_controls = aws.s3.BucketOwnershipControls(
            resource_name=f"{name}-ownership-controls",
            bucket=self.bucket.bucket,
            rule=aws.s3.BucketOwnershipControlsRuleArgs(
                object_ownership=OBJECT_OWNERSHIP,
            ),
            opts=child_opts,
        )

        self.public_access_block = aws.s3.BucketPublicAccessBlock(
            resource_name=f"{name}-public-access-block",
            bucket=self.bucket.bucket,
            opts=child_opts,
            **S3_ALLOW_PUBLIC_ACLS,
        )

        # Objects are uploaded with a public-read ACL, which S3 rejects until
        # both settings above are in place.
        self.sync_dependencies: list[pulumi.Resource] = [
            self.ownership_controls,
            self.public_access_block,
        ]
        sync_opts = pulumi.ResourceOptions(
            parent=self,
            depends_on=self.sync_dependencies,
        )
        self.folder = synced_folder.S3BucketFolder(
            f"{name}-folder",
            path=path,
            bucket_name=self.bucket.bucket,
            acl=OBJECT_ACL,
            opts=sync_opts,
        )
        pulumi.log.debug(f"syncing {path} into {name}-bucket", resource=self)

        self.website_endpoint: pulumi.Output[str] = self.website.website_endpoint
        self.website_url: pulumi.Output[str] = pulumi.Output.concat(
            "http://", self.website_endpoint
        )
        self.register_outputs(
            {
                "website_endpoint": self.website_endpoint,
                "website_url": self.website_url,
            }
        )
