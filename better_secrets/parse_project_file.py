"""Logic for reading the SDK marker from a single project file."""

import logging
import xml.etree.ElementTree as ET

from better_secrets.file_system import FileSystem
from better_secrets.is_web_sdk import WEB_SDK_PREFIX
from better_secrets.project_candidate import ProjectCandidate

logger = logging.getLogger(__name__)

PROJECT_ELEMENT = "Project"
SDK_ATTRIBUTE = "Sdk"


def _local_name(tag: str) -> str:
    """Strip an XML namespace from a tag: '{ns}Project' -> 'Project'."""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def parse_project_file(
    path: str,
    base_directory: str,
    fs: FileSystem,
    web_sdk_prefix: str = WEB_SDK_PREFIX,
) -> ProjectCandidate | None:
    """Parse a project file and return a candidate, or None to skip it.

    Only the root element's Sdk attribute is read. Unreadable or malformed
    files and files without an Sdk attribute are skipped.
    """
    try:
        with fs.open_binary(path) as stream:
            root = ET.parse(stream).getroot()
    except ET.ParseError as e:
        logger.debug("Skipping malformed project file %s: %s", path, e)
        return None
    except OSError as e:
        logger.debug("Skipping unreadable project file %s: %s", path, e)
        return None

    if _local_name(root.tag) != PROJECT_ELEMENT:
        logger.debug("Skipping %s: root element is <%s>", path, root.tag)
        return None

    sdk = root.get(SDK_ATTRIBUTE)
    if sdk is None:
        logger.debug("Skipping %s: no Sdk attribute", path)
        return None

    return ProjectCandidate.create(path, sdk, base_directory, web_sdk_prefix)
