"""Project persistence as JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from urllib.parse import quote

from ..models import Project, PROJECT_FORMAT_VERSION

logger = logging.getLogger(__name__)


class ProjectSaveError(IOError):
    """Raised when saving a project fails."""

    pass


class ProjectLoadError(IOError):
    """Raised when a project file cannot be read or is malformed."""

    pass


def _filename_stem(name: str) -> str:
    # Percent-encoding keeps distinct names in distinct files
    return quote(name, safe=" ")


def write_json_atomic(path: Path, data: object) -> None:
    """
    Write JSON to ``path`` through a temporary file and rename.

    Raises:
        ProjectSaveError: If the file cannot be written
    """
    temp_path = path.with_suffix(path.suffix + '.tmp')
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        temp_path.replace(path)

    except (OSError, TypeError) as e:
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass  # Best effort cleanup

        raise ProjectSaveError(f"Failed to write {path.name}: {e}") from e


def read_project_file(path: Path) -> Project:
    """
    Parse one project file.

    Raises:
        ProjectLoadError: On I/O errors, invalid JSON, unsupported versions
            or missing fields
    """
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ProjectLoadError(f"Invalid project file {path.name}: {e}") from e
    except OSError as e:
        raise ProjectLoadError(f"Failed to read {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise ProjectLoadError(
            f"Invalid project format in {path.name}: expected JSON object at root"
        )

    version = data.get('version', PROJECT_FORMAT_VERSION)
    if not isinstance(version, str):
        raise ProjectLoadError(
            f"Invalid project data in {path.name}: version must be a string"
        )
    if version not in ProjectStore.SUPPORTED_VERSIONS:
        raise ProjectLoadError(
            f"Unsupported project version: {version}. "
            f"Supported versions: {', '.join(sorted(ProjectStore.SUPPORTED_VERSIONS))}"
        )

    try:
        return Project.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ProjectLoadError(f"Invalid project data in {path.name}: {e}") from e


class ProjectStore:
    """
    Saves projects as one JSON file each in a directory.

    Schema Version History:
        1.0 - Tube, material id and bend list
    """

    SUFFIX = '.project.json'
    AUTOSAVE_FILENAME = 'autosave.json'
    SUPPORTED_VERSIONS = {'1.0'}

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, name: str) -> Path:
        return self._directory / f"{_filename_stem(name)}{self.SUFFIX}"

    def save(self, project: Project) -> Path:
        """
        Save a project, replacing any project with the same name.

        Raises:
            ProjectSaveError: If the file cannot be written, or it already
                holds a project with a different name
        """
        path = self.path_for(project.name)
        if path.exists():
            existing = self._stored_name(path)
            if existing is not None and existing != project.name:
                raise ProjectSaveError(
                    f"Cannot save {project.name!r}: {path.name} belongs to project {existing!r}"
                )

        project.touch()
        write_json_atomic(path, project.to_dict())
        logger.info("Project %r saved to %s", project.name, path)
        return path

    def load(self, name: str) -> Project | None:
        """
        Load a project by name.

        Returns:
            The project, or None if no project with that name exists

        Raises:
            ProjectLoadError: If the file exists but cannot be parsed
        """
        path = self.path_for(name)
        if not path.exists():
            return None
        project = read_project_file(path)
        if project.name != name:
            logger.warning("%s holds project %r, not %r", path.name, project.name, name)
            return None
        return project

    def list_projects(self) -> list[Project]:
        """
        All readable projects, sorted by name.

        Unreadable files are skipped with a warning.
        """
        if not self._directory.exists():
            return []

        projects: list[Project] = []
        for path in sorted(self._directory.glob(f"*{self.SUFFIX}")):
            try:
                projects.append(read_project_file(path))
            except ProjectLoadError as e:
                logger.warning("Skipping unreadable project file: %s", e)
        projects.sort(key=lambda p: p.name)
        return projects

    def delete(self, name: str) -> bool:
        """
        Delete a project.

        Returns:
            True if the project was found and deleted
        """
        path = self.path_for(name)
        if not path.exists() or self._stored_name(path) not in (name, None):
            return False
        try:
            path.unlink()
        except OSError as e:
            raise ProjectSaveError(f"Failed to delete project {name!r}: {e}") from e
        return True

    @staticmethod
    def _stored_name(path: Path) -> str | None:
        """Name recorded in a project file, or None if it cannot be read."""
        try:
            return read_project_file(path).name
        except ProjectLoadError:
            return None

    def autosave(self, project: Project) -> None:
        """Write the autosave slot without touching named projects."""
        write_json_atomic(self._directory / self.AUTOSAVE_FILENAME, project.to_dict())
        logger.debug("Autosaved project %r", project.name)

    def load_autosave(self) -> Project | None:
        """
        Read the autosave slot.

        A corrupted autosave is discarded with a warning rather than raised.
        """
        path = self._directory / self.AUTOSAVE_FILENAME
        if not path.exists():
            return None
        try:
            return read_project_file(path)
        except ProjectLoadError as e:
            logger.warning("Discarding unreadable autosave: %s", e)
            return None

    def clear_autosave(self) -> None:
        path = self._directory / self.AUTOSAVE_FILENAME
        if path.exists():
            path.unlink()

    @staticmethod
    def export_json(project: Project, path: str | Path) -> None:
        """Write a single project to an arbitrary file."""
        write_json_atomic(Path(path), project.to_dict())

    @staticmethod
    def import_json(path: str | Path) -> Project:
        """
        Read a single project from an arbitrary file.

        Raises:
            ProjectLoadError: If the file is missing or malformed
        """
        return read_project_file(Path(path))
