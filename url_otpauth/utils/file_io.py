import json
import logging
import os

logger = logging.getLogger(__name__)


def read_json(file_path):
    """Read and parse a JSON file

    Args:
        file_path (str): Path to the JSON file

    Returns:
        dict: The parsed JSON data or an empty dict if file not found or invalid
    """
    if not os.path.exists(file_path):
        logger.info(f"File not found: {file_path}, returning empty dict")
        return {}

    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            data = json.load(file)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON from {file_path}: {e}")
        return {}
    except OSError as e:
        logger.error(f"Error reading {file_path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.error(f"Expected a JSON object in {file_path}, got {type(data).__name__}")
        return {}

    logger.debug(f"Read JSON data ({len(data)} items) from {file_path}")
    return data


def write_json(file_path, data):
    """Write data to a JSON file

    Args:
        file_path (str): Path to the JSON file
        data: JSON-serialisable data to write to the file

    Returns:
        bool: True if successful, False otherwise
    """
    try:
        # Create directory if it doesn't exist
        directory = os.path.dirname(file_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)
            logger.debug(f"Created directory: {directory}")

        # Write the file with explicit flush and fsync
        with open(file_path, 'w', encoding='utf-8') as file:
            json.dump(data, file, indent=4)
            file.flush()
            os.fsync(file.fileno())
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error writing JSON to {file_path}: {e}")
        return False

    logger.debug(f"JSON data written to {file_path}")
    return True
