"""
File attachment resolution.

The body of a file message is not human-readable text but a JSON document
describing the uploaded file:

    {"guid": "010203", "filename": "photo.jpg", "content_type": "image/jpeg",
     "size": 1024, "image": {"size": {"width": 640, "height": 480}}}

`get_attachment()` turns that document into a `FileInfo` whose download URL
is signed with the visitor's session credentials.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from webim.backend.protocols import SessionContext
from webim.types import FileInfo, ImageInfo

logger = logging.getLogger(__name__)

ATTACHMENT_URL_EXPIRES_PERIOD = 300  # seconds
DOWNLOAD_PATH = "/l/v/m/download"
THUMB_PARAMETER = "&thumb=ios"


class ImageSize(BaseModel):
    width: Optional[int] = None
    height: Optional[int] = None


class ImageParameters(BaseModel):
    size: Optional[ImageSize] = None


class FileParameters(BaseModel):
    """File description stored in the text of a file message."""

    model_config = ConfigDict(extra="allow")

    guid: str
    file_name: str = Field(alias="filename")
    content_type: Optional[str] = None
    size: Optional[int] = None
    image: Optional[ImageParameters] = None


def get_attachment(
    server_url_string: str,
    text: str,
    client: SessionContext,
    expires_in: int = ATTACHMENT_URL_EXPIRES_PERIOD,
) -> FileInfo | None:
    """
    Resolve a file message body into a FileInfo.

    Args:
        server_url_string: Base server URL the download path is appended to
        text: Raw file message body (JSON file description)
        client: Live session, read for credentials only
        expires_in: Lifetime of the signed download URL, in seconds

    Returns:
        FileInfo, or None if the text does not describe a file
    """
    try:
        params = FileParameters.model_validate_json(text)
    except ValidationError as e:
        logger.warning(
            f"Failed to parse file parameters: {text[:100]} ({e.error_count()} errors)"
        )
        return None

    url = _build_download_url(server_url_string, params, client, expires_in)

    image_info = None
    if params.image is not None:
        size = params.image.size or ImageSize()
        image_info = ImageInfo(
            thumb_url=url + THUMB_PARAMETER if url else None,
            width=size.width,
            height=size.height,
        )

    return FileInfo(
        file_name=params.file_name,
        guid=params.guid,
        content_type=params.content_type,
        size=params.size,
        url=url,
        image_info=image_info,
    )


def _build_download_url(
    server_url_string: str,
    params: FileParameters,
    client: SessionContext,
    expires_in: int,
) -> str | None:
    """Sign a download URL, or return None if the session is not authorized yet."""
    authorization_data = client.get_authorization_data()
    if authorization_data is None:
        logger.debug(f"No authorization data, file {params.guid} has no URL")
        return None

    expires = int(time.time()) + expires_in
    digest = hmac.new(
        authorization_data.authorization_token.encode("utf-8"),
        (params.guid + str(expires)).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()

    return (
        f"{server_url_string}{DOWNLOAD_PATH}/{params.guid}/{quote(params.file_name)}"
        f"?page-id={authorization_data.page_id}&expires={expires}&hash={digest}"
    )
