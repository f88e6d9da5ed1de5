"""Bundle identifier repair for generated Xcode projects."""

import re
from pathlib import Path
from typing import Tuple

from .errors import MetadataAccessError, MissingMetadataError
from .logger import get_logger

logger = get_logger("bundle_id")

EXTENSION_SUFFIX = ".Extension"

BUNDLE_ID_PATTERN = re.compile(r"PRODUCT_BUNDLE_IDENTIFIER = ([^;]+);")


def target_bundle_id(current: str, bundle_id: str) -> str:
    """Return the canonical value for one PRODUCT_BUNDLE_IDENTIFIER occurrence."""
    # Literal suffix check, not tied to the target that owns the line
    if current.endswith(EXTENSION_SUFFIX):
        return f"{bundle_id}{EXTENSION_SUFFIX}"
    return bundle_id


def repair_bundle_identifiers(content: str, bundle_id: str) -> Tuple[str, int]:
    """
    Rewrite every PRODUCT_BUNDLE_IDENTIFIER assignment to the canonical id.

    Args:
        content: project.pbxproj text
        bundle_id: Canonical bundle identifier

    Returns:
        Tuple of (new content, number of occurrences whose value changed)
    """
    updated = 0

    def replace(match):
        nonlocal updated
        current = match.group(1).strip()
        target = target_bundle_id(current, bundle_id)
        if target != current:
            logger.debug(f"Bundle identifier {current} -> {target}")
            updated += 1
        return f"PRODUCT_BUNDLE_IDENTIFIER = {target};"

    return BUNDLE_ID_PATTERN.sub(replace, content), updated


def fix_bundle_identifiers(pbxproj_path: Path, bundle_id: str) -> int:
    """
    Force the bundle identifiers in a project.pbxproj to the canonical id.

    The file is only written when its content actually changes.

    Raises:
        MissingMetadataError: If the project file does not exist
        MetadataAccessError: If the project file cannot be read, decoded or written
    """
    pbxproj_path = Path(pbxproj_path)
    if not pbxproj_path.is_file():
        raise MissingMetadataError(pbxproj_path)

    try:
        # newline="" keeps line endings byte-for-byte
        with open(pbxproj_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataAccessError(pbxproj_path, str(e)) from e

    new_content, updated = repair_bundle_identifiers(content, bundle_id)

    if new_content != content:
        try:
            with open(pbxproj_path, "w", encoding="utf-8", newline="") as f:
                f.write(new_content)
        except OSError as e:
            raise MetadataAccessError(pbxproj_path, str(e)) from e
        logger.info(f"Updated {pbxproj_path}")

    return updated
