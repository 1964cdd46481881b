"""Split `data:<mime>;base64,<payload>` strings into MIME type and payload."""
import re

from floradoc.constants import DATA_URI_PAYLOAD_SEPARATOR, DEFAULT_IMAGE_MIME_TYPE

_MIME_PATTERN = re.compile(r":(.*?);")


def parse_data_uri(value: str) -> tuple[str, str]:
    """Return (mime_type, payload). Never raises; the payload is not validated.

    Splits at the first comma only, so a payload that itself contains commas
    comes back intact. Missing comma or missing `:...;` in the header falls
    back to image/jpeg.
    """
    header, sep, payload = value.partition(DATA_URI_PAYLOAD_SEPARATOR)
    match sep:
        case "":
            return DEFAULT_IMAGE_MIME_TYPE, value
        case _:
            pass

    match _MIME_PATTERN.search(header):
        case None:
            return DEFAULT_IMAGE_MIME_TYPE, payload
        case found:
            return found.group(1), payload
