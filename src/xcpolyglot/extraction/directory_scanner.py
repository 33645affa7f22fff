"""Discovery of .xcstrings catalogs in a directory."""

import logging
import os
from typing import List

from ..errors import DirectoryUnreadableError

logger = logging.getLogger(__name__)

CATALOG_SUFFIX = ".xcstrings"


def scan(directory_path: str) -> List[str]:
    """
    List the catalog files directly inside a directory.

    Subdirectories are not searched. Names are sorted so results are
    reproducible across runs.

    Args:
        directory_path: Directory to list

    Returns:
        Paths of the entries whose name ends with ".xcstrings"

    Raises:
        DirectoryUnreadableError: if the directory cannot be listed
    """
    try:
        names = os.listdir(directory_path)
    except OSError as e:
        logger.debug("Could not list %s: %s", directory_path, e)
        raise DirectoryUnreadableError(directory_path) from e

    paths = [
        os.path.join(directory_path, name)
        for name in sorted(names)
        if name.endswith(CATALOG_SUFFIX)
    ]
    logger.debug("Found %d catalog(s) in %s", len(paths), directory_path)
    return paths
