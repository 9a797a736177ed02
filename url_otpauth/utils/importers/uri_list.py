import logging

from ...models.errors import OtpauthInvalidURL
from ..otpauth_parser import parse

logger = logging.getLogger(__name__)

URI_PREFIX = 'otpauth://'


def parse_uri_list(file_content, progress_callback=None, strict_issuer=False):
    """
    Parses text holding one otpauth URI per line, e.g. an Authenticator Browser
    Plugin export.

    Args:
        file_content (str): The string content of the file.
        progress_callback (callable, optional): Called with (current_line, total_lines).
        strict_issuer (bool): Passed through to the parser.

    Returns:
        dict: A dictionary containing:
            - valid_tokens (list): OtpDescriptor objects for each accepted URI.
            - skipped (int): Lines skipped (empty or not otpauth URIs).
            - failed_validation (int): otpauth URIs the parser rejected.
            - errors (list): {"line", "error", "uri"} for each rejected URI.
            - total_lines (int): Total lines processed.
            - status (str): 'success', 'warning', or 'error'.
            - message (str): A summary message.
    """
    lines = file_content.strip().splitlines()
    total_lines = len(lines)
    valid_tokens = []
    errors = []
    skipped_lines = 0

    for i, line in enumerate(lines):
        line = line.strip()
        if progress_callback:
            try:
                progress_callback(i + 1, total_lines)
            except Exception as e:
                logger.error(f"Error in progress callback: {e}")

        if not line:
            skipped_lines += 1
            continue

        if not line.startswith(URI_PREFIX):
            logger.info(f"Skipping line {i+1}: Does not start with {URI_PREFIX}")
            skipped_lines += 1
            continue

        try:
            valid_tokens.append(parse(line, strict_issuer=strict_issuer))
        except OtpauthInvalidURL as e:
            logger.warning(f"Rejected line {i+1}: {e.error_type.name}")
            errors.append({"line": i + 1, "error": e.error_type.name, "uri": line})

    failed_validation = len(errors)

    status = 'success'
    message = f"Successfully parsed {len(valid_tokens)} tokens."
    if failed_validation > 0:
        message += f" Failed to validate {failed_validation} URIs."
        status = 'warning' if valid_tokens else 'error'
    if skipped_lines > 0:
        message += f" Skipped {skipped_lines} non-URI/empty lines."
        if not valid_tokens and failed_validation == 0:
            status = 'warning'
            message = f"No valid otpauth URIs found. Skipped {skipped_lines} lines."
    elif not valid_tokens and failed_validation == 0:
        status = 'warning'
        message = "The input was empty or contained no processable lines."

    return {
        "valid_tokens": valid_tokens,
        "skipped": skipped_lines,
        "failed_validation": failed_validation,
        "errors": errors,
        "total_lines": total_lines,
        "status": status,
        "message": message,
    }
