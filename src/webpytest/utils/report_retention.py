"""
Report Retention Utilities

Computes the on-disk path for a new report artifact and, before returning it,
deletes the oldest artifacts beyond the retention window.

Two naming modes are supported and never mixed:
- fixed: one file name reused (and overwritten) by every run
- timestamped: '<name>_<YYYY_MM_DD_HH_MM_SS><ext>', one file per run
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y_%m_%d_%H_%M_%S"


@dataclass(frozen=True)
class ArtifactNamePattern:
    """Naming rule for report artifacts in one directory."""

    name: str
    timestamped: bool = True
    extension: str = ".html"

    @classmethod
    def fixed(cls, name: str, extension: str = ".html") -> "ArtifactNamePattern":
        return cls(name=name, timestamped=False, extension=extension)

    @classmethod
    def with_timestamp(cls, prefix: str, extension: str = ".html") -> "ArtifactNamePattern":
        return cls(name=prefix, timestamped=True, extension=extension)

    def matches(self, file_name: str) -> bool:
        if not self.timestamped:
            return file_name == f"{self.name}{self.extension}"
        return file_name.startswith(f"{self.name}_") and file_name.endswith(self.extension)

    def build(self, now: Optional[datetime] = None) -> str:
        if not self.timestamped:
            return f"{self.name}{self.extension}"
        now = now or datetime.now()
        return f"{self.name}_{now.strftime(TIMESTAMP_FORMAT)}{self.extension}"


def list_artifacts(directory: str, name_pattern: ArtifactNamePattern) -> List[str]:
    """
    List artifact paths in directory matching name_pattern, oldest first.

    Args:
        directory: Report directory
        name_pattern: Artifact naming rule

    Returns:
        Paths sorted by modification time ascending (file name breaks ties)
    """
    entries = []
    try:
        with os.scandir(directory) as it:
            for entry in it:
                if not entry.is_file() or not name_pattern.matches(entry.name):
                    continue
                try:
                    mtime = entry.stat().st_mtime
                except FileNotFoundError:
                    continue
                entries.append((mtime, entry.name, entry.path))
    except OSError as e:
        logger.warning(f"[@utils:report_retention:list_artifacts] Cannot list {directory}: {e}")
        return []

    entries.sort()
    return [path for _, _, path in entries]


def _delete_artifact(path: str) -> bool:
    try:
        os.remove(path)
    except FileNotFoundError:
        # Already removed by a concurrent run
        return True
    except OSError as e:
        logger.warning(f"[@utils:report_retention:cleanup] Could not delete old report {path}: {e}")
        return False
    logger.info(f"[@utils:report_retention:cleanup] Deleted old report: {os.path.basename(path)}")
    return True


def cleanup_old_artifacts(directory: str, name_pattern: ArtifactNamePattern, max_count: int) -> int:
    """
    Delete the oldest artifacts so at most max_count - 1 remain.

    Returns:
        Number of artifacts actually deleted
    """
    artifacts = list_artifacts(directory, name_pattern)
    if len(artifacts) < max_count:
        return 0

    excess = len(artifacts) - max_count + 1
    deleted = 0
    for path in artifacts[:excess]:
        if _delete_artifact(path):
            deleted += 1
    return deleted


def next_artifact_path(directory: str, name_pattern: ArtifactNamePattern, max_count: int) -> str:
    """
    Generate the path for a new report artifact, pruning old ones first.

    Args:
        directory: Report directory, created (with parents) when missing
        name_pattern: Artifact naming rule
        max_count: Retention window, a positive int

    Returns:
        Full path of the artifact about to be created
    """
    if isinstance(max_count, bool) or not isinstance(max_count, int) or max_count < 1:
        raise ValueError(f"max_count must be a positive int, got {max_count!r}")

    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        logger.error(f"[@utils:report_retention:next_artifact_path] Could not create {directory}: {e}")

    # Fixed-name mode overwrites its single file, nothing to prune
    if name_pattern.timestamped:
        cleanup_old_artifacts(directory, name_pattern, max_count)

    return os.path.join(directory, name_pattern.build())
