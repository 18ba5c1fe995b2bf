"""
Resume upload handling.

``save_resume`` takes the ``FileStorage`` posted under the ``resume`` field and
either writes it to the upload folder, returning a ``StoredResume``, or raises
an ``UploadRejected`` subclass. Nothing is written for a rejected file.
"""
import logging
import os
import time
from collections import namedtuple

logger = logging.getLogger(__name__)

StoredResume = namedtuple(
    "StoredResume", ["filename", "original_filename", "path", "content_type", "size"]
)


class UploadRejected(Exception):
    message = "Upload rejected"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class MissingFile(UploadRejected):
    message = "No file uploaded"


class UnsupportedFileType(UploadRejected):
    message = "Unsupported file type"


class FileTooLarge(UploadRejected):
    message = "File too large"


def is_allowed_type(content_type):
    content_type = (content_type or "").lower()
    return content_type.startswith("image/") or content_type == "application/pdf"


def _timestamp_ms():
    return int(time.time() * 1000)


def _open_unique(upload_folder, extension):
    stamp = _timestamp_ms()
    while True:
        filename = f"{stamp}{extension}"
        path = os.path.join(upload_folder, filename)
        try:
            return filename, path, open(path, "xb")
        except FileExistsError:
            stamp += 1


def save_resume(file, upload_folder, max_size):
    if file is None or not file.filename:
        raise MissingFile()

    if not is_allowed_type(file.mimetype):
        logger.warning("Rejected resume %r with content type %r", file.filename, file.mimetype)
        raise UnsupportedFileType()

    data = file.stream.read(max_size + 1)
    if len(data) > max_size:
        logger.warning("Rejected resume %r larger than %d bytes", file.filename, max_size)
        raise FileTooLarge()

    extension = os.path.splitext(os.path.basename(file.filename))[1]
    if not extension[1:].isalnum():
        extension = ""
    filename, path, handle = _open_unique(upload_folder, extension)
    with handle:
        handle.write(data)

    logger.info("Stored resume %r as %s (%d bytes)", file.filename, filename, len(data))
    return StoredResume(
        filename=filename,
        original_filename=file.filename,
        path=os.path.abspath(path),
        content_type=file.mimetype,
        size=len(data),
    )
