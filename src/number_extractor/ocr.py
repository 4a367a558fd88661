"""OCR adapter — turn an image into RawText and classify it.

The OCR engine is a black box to the extractor.  Tesseract (via
pytesseract) is the default recognizer; any ``Callable[[image], str]``
can stand in for it.  A failing recognizer counts as "no text", so OCR
errors never reach the classifier.
"""

from __future__ import annotations
import string
from pathlib import Path
from typing import Any, Callable

from .engine import Engine, classify
from .log import get_logger
from .types import ClassificationResult

log = get_logger(__name__)

Recognizer = Callable[[Any], str]

LANGUAGES = "ukr+eng"
CHAR_WHITELIST = string.digits + "+-()" + string.ascii_uppercase + string.ascii_lowercase


def _tesseract_config() -> str:
    return (
        f"-c tessedit_char_whitelist={CHAR_WHITELIST} "
        "-c preserve_interword_spaces=1"
    )


def tesseract_recognizer(image: Any) -> str:
    """Recognize text with Tesseract.  *image* is a path or a PIL image."""
    import pytesseract  # optional dependency
    from PIL import Image

    if isinstance(image, (str, Path)):
        with Image.open(image) as img:
            return pytesseract.image_to_string(img, lang=LANGUAGES, config=_tesseract_config())
    return pytesseract.image_to_string(image, lang=LANGUAGES, config=_tesseract_config())


def extract_from_image(
    image: Any,
    engine: Engine | None = None,
    *,
    recognizer: Recognizer | None = None,
) -> ClassificationResult:
    """OCR an image and classify the numbers in it.

    Args:
        image: Whatever the recognizer accepts (path or PIL image for Tesseract).
        engine: Engine to classify with (None = default configuration).
        recognizer: OCR callable (None = Tesseract).
    """
    recognize = recognizer or tesseract_recognizer
    try:
        text = recognize(image)
    except Exception as e:
        log.warning("ocr failed", error=str(e), error_type=type(e).__name__)
        text = ""
    log.debug("ocr completed", text_length=len(text or ""))
    if engine is None:
        return classify(text)
    return engine.classify(text)
