"""
Recover asset store identifiers from photo access URLs.

Blogs persist the asset identifier next to the URL at upload time, so this
module is only the fallback for records that predate that column.

Precondition: decoding is positional. The identifier is taken to be the
last path segment of the URL without its file extension, e.g.
``https://res.cloudinary.com/demo/image/upload/v1710000000/abc123.jpg``
decodes to ``abc123``. This is only correct for assets uploaded without a
folder prefix or a custom public id; ``.../upload/v1/blogs/abc123.jpg``
decodes to ``abc123`` although the real identifier is ``blogs/abc123``.
"""

from pathlib import PurePosixPath
from urllib.parse import unquote, urlsplit

from blog_service.errors.asset import InvalidAssetReferenceError
from blog_service.models.blog import BlogDB


def decode_asset_id(access_url: str) -> str:
    """
    Derive the asset identifier from an access URL.

    Args:
        access_url: URL returned by the asset store at upload time

    Returns:
        str: Last path segment without its extension

    Raises:
        InvalidAssetReferenceError: If the URL has no usable path segment
    """
    path = unquote(urlsplit(access_url.strip()).path)
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        raise InvalidAssetReferenceError(access_url)

    asset_id = PurePosixPath(segments[-1]).stem
    if not asset_id:
        raise InvalidAssetReferenceError(access_url)
    return asset_id


def resolve_asset_id(blog: BlogDB) -> str:
    """
    Return the identifier needed to delete a blog's photo.

    The persisted ``photo_asset_id`` wins; the URL is decoded only when it
    is missing.
    """
    if blog.photo_asset_id:
        return blog.photo_asset_id
    return decode_asset_id(blog.photo_url)
