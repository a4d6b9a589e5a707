"""
Pure helpers for CloudFront paths. Testable without Pulumi runtime.

Used by the CDN component. No Pulumi types; functions accept and return plain
Python types so they can be unit-tested without a Pulumi stack.
"""


def error_page_path(
    error_document: str,
) -> str:
    """
    Build the CloudFront ``response_page_path`` for an error document.

    The path is ``/`` followed by the document key, unchanged
    (e.g. "404.html" -> "/404.html").
    """
    return f"/{error_document}"
