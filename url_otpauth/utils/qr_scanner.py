import logging

from PIL import Image, UnidentifiedImageError
from pyzbar.pyzbar import decode

from .otpauth_parser import parse

logger = logging.getLogger(__name__)


def _decode_first(img):
    decoded_objects = decode(img)
    if not decoded_objects:
        logger.info("No QR code found in image")
        return None
    return decoded_objects[0].data.decode('utf-8')


def read_qr_payload(image_input):
    """Decode the first QR code found in an image

    Args:
        image_input (str or PIL.Image): Path to the QR code image or a PIL Image object

    Returns:
        str: The decoded text, or None if no QR code could be read
    """
    try:
        if isinstance(image_input, str):
            # Pillow loads pixel data lazily, so truncated files fail inside decode()
            with Image.open(image_input) as img:
                return _decode_first(img)
        elif isinstance(image_input, Image.Image):
            return _decode_first(image_input)
    except (OSError, UnidentifiedImageError) as e:
        logger.error(f"Could not read image {image_input}: {e}")
        return None
    except UnicodeDecodeError as e:
        logger.error(f"QR code payload is not UTF-8 text: {e}")
        return None

    logger.error(f"Invalid image input type: {type(image_input)}")
    return None


def scan_qr_image(image_input, strict_issuer=False):
    """Scan a QR code image and parse the otpauth URI it holds

    Args:
        image_input (str or PIL.Image): Path to the QR code image or a PIL Image object
        strict_issuer (bool): Passed through to the parser

    Returns:
        OtpDescriptor: The parsed token, or None if no QR code could be read

    Raises:
        OtpauthInvalidURL: If a QR code was found but isn't a valid otpauth URI
    """
    qr_data = read_qr_payload(image_input)
    if qr_data is None:
        return None
    return parse(qr_data, strict_issuer=strict_issuer)
