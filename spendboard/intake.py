"""Spreadsheet upload and receipt capture entry points.

Neither parses anything yet: they look at the file name only, log it and
hand back a confirmation for the dashboard to show. The store is never touched.
"""

import logging
import mimetypes
import os

from spendboard.config import SPREADSHEET_EXTENSIONS
from spendboard.functional import Either, Left, Right

logger = logging.getLogger(__name__)


def accept_spreadsheet(filename: str) -> Either[dict, str]:
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in SPREADSHEET_EXTENSIONS:
        return Left({
            "error": "unsupported_file",
            "message": f"{filename!r} is not a spreadsheet ({', '.join(SPREADSHEET_EXTENSIONS)})",
            "filename": filename,
        })
    logger.info("File uploaded: %s", filename)
    return Right(
        f'Excel file "{filename}" uploaded successfully! '
        "(This is a demo - file parsing would happen here)"
    )


def accept_receipt(filename: str) -> Either[dict, str]:
    mime, _ = mimetypes.guess_type(filename or "")
    if not mime or not mime.startswith("image/"):
        return Left({
            "error": "unsupported_file",
            "message": f"{filename!r} is not an image",
            "filename": filename,
        })
    logger.info("Receipt captured: %s", filename)
    return Right("Receipt image captured! (This is a demo - OCR would extract expense data here)")
