"""Extension and mime-group to MIME type lookup for the ``mimes`` rule."""

import logging
import mimetypes

logger = logging.getLogger(__name__)

DEFAULT_MIME = "application/octet-stream"

# Common upload extensions, checked before the platform registry
MIME_TYPES: dict[str, str] = {
    "bmp": "image/bmp",
    "csv": "text/csv",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "gif": "image/gif",
    "htm": "text/html",
    "html": "text/html",
    "ico": "image/x-icon",
    "jpe": "image/jpeg",
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "json": "application/json",
    "mp3": "audio/mpeg",
    "mp4": "video/mp4",
    "odt": "application/vnd.oasis.opendocument.text",
    "pdf": "application/pdf",
    "png": "image/png",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "rtf": "application/rtf",
    "svg": "image/svg+xml",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    "txt": "text/plain",
    "wav": "audio/wav",
    "webm": "video/webm",
    "webp": "image/webp",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "xml": "application/xml",
    "zip": "application/zip",
}

# Group tokens accepted as wildcards
MIME_GROUPS = {"audio", "image", "text", "video"}


class MimeLookup:
    """Translate extension or mime-group tokens to MIME types."""

    def __init__(self, overrides: dict[str, str] | None = None):
        self.types = dict(MIME_TYPES)
        if overrides:
            self.types.update({key.lower(): value for key, value in overrides.items()})

    def mime(self, token: str) -> str:
        """Get the MIME type for a token.

        Args:
            token: An extension (``jpg``, ``.pdf``), a group (``image``) or a MIME type

        Returns:
            The MIME type, ``application/octet-stream`` when unknown
        """
        token = str(token).strip().lower().lstrip(".")

        if "/" in token:
            return token
        if token in self.types:
            return self.types[token]
        if token in MIME_GROUPS:
            return f"{token}/*"

        guessed, _ = mimetypes.guess_type(f"upload.{token}", strict=False)
        if guessed:
            return guessed

        logger.debug(f"No MIME type known for '{token}', using {DEFAULT_MIME}")
        return DEFAULT_MIME

    def accept(self, tokens) -> str:
        """Comma-joined MIME types for a list of tokens."""
        return ",".join(self.mime(token) for token in tokens)


default_mime_lookup = MimeLookup()
