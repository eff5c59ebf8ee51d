"""Backups of source files taken before docstrings are written."""

import hashlib
import json
import os
import shutil
from datetime import datetime
from typing import Any, Dict, List

from auto_doc_generator.constants import FileDefaults
from auto_doc_generator.core.logging import get_logger


def get_file_hash(file_path: str) -> str:
    """Return the SHA-256 hex digest of a file."""
    sha256 = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


def _backup_root(folder: str) -> str:
    return os.path.join(folder, FileDefaults.BACKUP_DIR)


def create_backup(file_path: str) -> str:
    """Copy a file into a timestamped backup next to it.

    Backups live in ``.auto-doc-backups/<backup_id>/`` in the file's
    directory, together with a metadata file recording the content hash.

    Args:
        file_path: File about to be rewritten

    Returns:
        backup_id: Unique identifier for this backup (timestamp-based)
    """
    logger = get_logger("documentation.backup")

    file_path = os.path.abspath(file_path)
    folder = os.path.dirname(file_path)

    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")[:-3]
    backup_id = f"backup-{timestamp}"
    backup_dir = os.path.join(_backup_root(folder), backup_id)

    # Handle collision by appending counter suffix
    counter = 1
    while os.path.exists(backup_dir):
        backup_id = f"backup-{timestamp}-{counter}"
        backup_dir = os.path.join(_backup_root(folder), backup_id)
        counter += 1

    os.makedirs(backup_dir, exist_ok=True)

    backup_file_path = os.path.join(backup_dir, os.path.basename(file_path))
    shutil.copy2(file_path, backup_file_path)

    metadata: Dict[str, Any] = {
        "backup_id": backup_id,
        "timestamp": datetime.now().isoformat(),
        "original": file_path,
        "backup": backup_file_path,
        "hash": get_file_hash(file_path),
    }
    with open(os.path.join(backup_dir, FileDefaults.METADATA_FILE), "w") as f:
        json.dump(metadata, f, indent=2)

    logger.info("backup_created", backup_id=backup_id, file_path=file_path, backup_dir=backup_dir)
    return backup_id


def restore_backup(backup_id: str, folder: str) -> Dict[str, Any]:
    """Restore a file from a backup.

    Args:
        backup_id: Identifier returned by create_backup
        folder: Directory holding the ``.auto-doc-backups`` folder

    Returns:
        Dict with restoration results:
        - success: Whether restoration was successful
        - restored_file: Path restored, if any
        - errors: List of errors encountered
    """
    logger = get_logger("documentation.backup")
    result: Dict[str, Any] = {"success": False, "restored_file": None, "errors": []}

    if not backup_id or os.path.basename(backup_id) != backup_id or backup_id in (".", ".."):
        result["errors"].append(f"Invalid backup id: {backup_id!r}")
        return result

    metadata_path = os.path.join(_backup_root(folder), backup_id, FileDefaults.METADATA_FILE)
    if not os.path.exists(metadata_path):
        result["errors"].append(f"Backup '{backup_id}' not found")
        return result

    try:
        with open(metadata_path, "r") as f:
            metadata = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        result["errors"].append(f"Failed to read backup metadata: {e}")
        return result

    backup_path = metadata.get("backup")
    original_path = metadata.get("original")
    if not backup_path or not original_path or not os.path.exists(backup_path):
        result["errors"].append(f"Invalid backup metadata: {metadata}")
        return result

    if metadata.get("hash") and get_file_hash(backup_path) != metadata["hash"]:
        result["errors"].append(f"Backup file is corrupted: {backup_path}")
        return result

    try:
        shutil.copy2(backup_path, original_path)
        result["restored_file"] = original_path
    except OSError as e:
        result["errors"].append(f"Failed to restore {original_path}: {e}")

    result["success"] = not result["errors"]

    logger.info("backup_restored", backup_id=backup_id, success=result["success"], file_path=original_path)
    return result


def list_backups(folder: str) -> List[Dict[str, Any]]:
    """List backups in a directory, newest first."""
    root = _backup_root(folder)
    if not os.path.isdir(root):
        return []

    backups = []
    for backup_id in os.listdir(root):
        metadata_path = os.path.join(root, backup_id, FileDefaults.METADATA_FILE)
        if not os.path.exists(metadata_path):
            continue
        try:
            with open(metadata_path, "r") as f:
                backups.append(json.load(f))
        except (OSError, json.JSONDecodeError):
            get_logger("documentation.backup").warning("backup_metadata_unreadable", backup_id=backup_id)

    return sorted(backups, key=lambda b: b.get("timestamp", ""), reverse=True)
