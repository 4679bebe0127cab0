"""Saved bending project model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TypedDict

from .tube import BendSpec, BendSpecDict, TubeSpec, TubeSpecDict

PROJECT_FORMAT_VERSION = '1.0'


class ProjectDict(TypedDict):
    """Type definition for Project serialization."""

    name: str
    tube: TubeSpecDict
    material_id: str
    bends: list[BendSpecDict]
    created_at: str
    modified_at: str
    version: str


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(slots=True)
class Project:
    """
    A named tube with its material and bend sequence.

    Attributes:
        name: Unique project name
        tube: Tube stock specification
        material_id: Key into the material library
        bends: Bends sorted by position
        created_at: ISO-8601 creation timestamp
        modified_at: ISO-8601 timestamp of the last save
        version: Save format version
    """

    name: str
    tube: TubeSpec
    material_id: str
    bends: tuple[BendSpec, ...] = ()
    created_at: str = field(default_factory=_now_iso)
    modified_at: str = field(default_factory=_now_iso)
    version: str = PROJECT_FORMAT_VERSION

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Project name must be a string, got {type(self.name).__name__}")
        if not isinstance(self.material_id, str):
            raise TypeError(
                f"Project material_id must be a string, got {type(self.material_id).__name__}"
            )
        if not self.name.strip():
            raise ValueError("Project name cannot be empty")
        self.bends = tuple(self.bends)

    def __repr__(self) -> str:
        return f"Project(name={self.name!r}, bends={len(self.bends)})"

    def touch(self) -> None:
        """Mark the project as modified now."""
        self.modified_at = _now_iso()

    def to_dict(self) -> ProjectDict:
        """Convert to dictionary for JSON serialization."""
        return ProjectDict(
            name=self.name,
            tube=self.tube.to_dict(),
            material_id=self.material_id,
            bends=[b.to_dict() for b in self.bends],
            created_at=self.created_at,
            modified_at=self.modified_at,
            version=self.version,
        )

    @classmethod
    def from_dict(cls, data: ProjectDict) -> Project:
        """Create Project from dictionary."""
        return cls(
            name=data['name'],
            tube=TubeSpec.from_dict(data['tube']),
            material_id=data['material_id'],
            bends=tuple(BendSpec.from_dict(b) for b in data.get('bends', [])),
            created_at=data.get('created_at') or _now_iso(),
            modified_at=data.get('modified_at') or _now_iso(),
            version=data.get('version', PROJECT_FORMAT_VERSION),
        )
