"""Find template files by ID."""
import glob
from pathlib import Path
from typing import Optional

TEMPLATE_SUFFIXES = [".html", ".htm", ".tmpl"]


class TemplateFileFinder:
    """Search template files under the given base directory."""

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def find_by_id(self, template_id: str) -> Optional[Path]:
        """
        Find a template file by template ID.

        The ID is matched literally against the file name (glob characters
        have no special meaning) and must not contain a path component.

        Args:
            template_id: Template ID (e.g., "user-card")

        Returns:
            The Path if found, otherwise None.
        """
        if not self._is_plain_id(template_id):
            return None

        base = self.base_dir.resolve()
        candidates: list[Path] = []

        for ext in TEMPLATE_SUFFIXES:
            filename = f"{template_id}{ext}"
            for file_path in self.base_dir.rglob(glob.escape(filename)):
                if file_path.name != filename or not file_path.is_file():
                    continue
                if not file_path.resolve().is_relative_to(base):
                    continue
                candidates.append(file_path)

        if not candidates:
            return None

        # .html wins over .htm/.tmpl, then the shallowest/lexically first path
        candidates.sort(key=lambda path: (TEMPLATE_SUFFIXES.index(path.suffix), len(path.parts), str(path)))
        return candidates[0]

    @staticmethod
    def _is_plain_id(template_id: str) -> bool:
        if not template_id or template_id in (".", ".."):
            return False
        return "/" not in template_id and "\\" not in template_id
