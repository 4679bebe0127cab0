"""Material library with built-in defaults and optional user materials."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from .. import config
from ..models import MaterialProfile, validate_material_values

logger = logging.getLogger(__name__)

BUILTIN_MATERIALS: dict[str, MaterialProfile] = {
    'steel': MaterialProfile(
        springback_coefficient=0.975,
        min_radius_factor=20,
        name='Mild steel',
        description='Standard carbon steel, good balance of strength and formability',
    ),
    'stainless304': MaterialProfile(
        springback_coefficient=0.965,
        min_radius_factor=22,
        name='Stainless 304',
        description='Austenitic stainless, corrosion resistant, harder to bend',
    ),
    'stainless316': MaterialProfile(
        springback_coefficient=0.960,
        min_radius_factor=24,
        name='Stainless 316',
        description='Molybdenum stainless, excellent corrosion resistance, delicate to bend',
    ),
    'copper': MaterialProfile(
        springback_coefficient=0.985,
        min_radius_factor=15,
        name='Copper',
        description='Ductile, easy to bend, low springback',
    ),
    'aluminium': MaterialProfile(
        springback_coefficient=0.980,
        min_radius_factor=18,
        name='Aluminium',
        description='Light and ductile, watch for cracking on tight radii',
    ),
    'brass': MaterialProfile(
        springback_coefficient=0.982,
        min_radius_factor=16,
        name='Brass',
        description='Copper-zinc alloy, good ductility, easy to bend',
    ),
    'pex': MaterialProfile(
        springback_coefficient=0.995,
        min_radius_factor=10,
        name='PEX',
        description='Cross-linked polyethylene, very flexible, negligible springback',
    ),
    'galvanised_steel': MaterialProfile(
        springback_coefficient=0.970,
        min_radius_factor=21,
        name='Galvanised steel',
        description='Zinc-coated steel for corrosion protection',
    ),
}


class MaterialSaveError(IOError):
    """Raised when saving user materials fails."""

    pass


class MaterialLoadError(IOError):
    """Raised when loading user materials fails due to I/O errors."""

    pass


class MaterialLibrary:
    """
    Lookup of material profiles by string id.

    Built-in materials are always available. When a data directory is
    given, user materials are read from a materials.json file in it and
    layered over the built-ins; only user materials are ever written back.

    Schema Version History:
        1.0 - Initial schema with user materials keyed by id
    """

    FILENAME = 'materials.json'
    CURRENT_VERSION = '1.0'
    SUPPORTED_VERSIONS = {'1.0'}

    def __init__(self, data_path: str | Path | None = None) -> None:
        """
        Initialize the library.

        Args:
            data_path: Directory holding materials.json, or None for
                built-in materials only
        """
        self._data_path = Path(data_path) if data_path is not None else None
        self._user: dict[str, MaterialProfile] = {}
        self._loaded = self._data_path is None
        self._load_lock = threading.Lock()

    @property
    def path(self) -> Path | None:
        if self._data_path is None:
            return None
        return self._data_path / self.FILENAME

    @property
    def user_materials(self) -> dict[str, MaterialProfile]:
        """User materials by id.

        Thread-safe lazy loading using a lock to prevent race conditions
        when multiple threads access the library simultaneously.
        """
        self._ensure_loaded()
        return self._user

    def _ensure_loaded(self) -> None:
        with self._load_lock:
            if not self._loaded:
                self.load()

    def reload(self) -> None:
        """
        Force reload user materials from disk.

        Use this when the material file may have been modified externally.
        """
        with self._load_lock:
            self._loaded = False
            self.load()

    def load(self) -> None:
        """
        Load user materials from disk.

        A missing file means no user materials. A corrupted file is logged
        and ignored. Invalid individual materials are skipped with a warning.

        Raises:
            MaterialLoadError: If the file exists but cannot be read, or has
                an unsupported structure or version
        """
        self._user = {}
        path = self.path

        if path is None or not path.exists():
            self._loaded = True
            return

        try:
            with open(path, encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Ignoring corrupted material file %s: %s", path, e)
            self._loaded = True
            return
        except OSError as e:
            raise MaterialLoadError(f"Failed to load materials: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get('materials'), dict):
            raise MaterialLoadError(
                "Invalid material file format: expected object with 'materials' mapping"
            )

        file_version = data.get('version', '1.0')
        if file_version not in self.SUPPORTED_VERSIONS:
            raise MaterialLoadError(
                f"Unsupported material schema version: {file_version}. "
                f"Supported versions: {', '.join(sorted(self.SUPPORTED_VERSIONS))}"
            )

        for material_id, material_data in data['materials'].items():
            try:
                self._user[material_id] = MaterialProfile.from_dict(material_data)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping invalid material %r: %s", material_id, e)

        self._loaded = True
        logger.debug("Loaded %d user materials from %s", len(self._user), path)

    def save(self) -> None:
        """
        Save user materials using an atomic write.

        Raises:
            MaterialSaveError: If the library has no data path or the file
                cannot be written
        """
        path = self.path
        if path is None:
            raise MaterialSaveError("No data path configured for user materials")

        temp_path = path.with_suffix('.tmp')
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            data = {
                'version': self.CURRENT_VERSION,
                'materials': {k: m.to_dict() for k, m in self._user.items()},
            }
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            temp_path.replace(path)

        except (OSError, TypeError) as e:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup

            raise MaterialSaveError(f"Failed to save materials: {e}") from e

    def get(self, material_id: str) -> MaterialProfile | None:
        """Find a material by id; user materials shadow built-ins."""
        user = self.user_materials.get(material_id)
        if user is not None:
            return user
        return BUILTIN_MATERIALS.get(material_id)

    def default(self) -> MaterialProfile:
        """The default material (mild steel)."""
        return BUILTIN_MATERIALS[config.DEFAULT_MATERIAL_ID]

    def all(self) -> list[tuple[str, MaterialProfile]]:
        """All (id, material) pairs, built-ins first."""
        merged = dict(BUILTIN_MATERIALS)
        merged.update(self.user_materials)
        return list(merged.items())

    def ids(self) -> list[str]:
        return [material_id for material_id, _ in self.all()]

    def add(self, material_id: str, name: str, springback_coefficient: float,
            min_radius_factor: float, description: str = "") -> MaterialProfile:
        """
        Add or replace a user material and save.

        Raises:
            ValueError: If the id is empty or numeric values are invalid
        """
        if not material_id.strip():
            raise ValueError("material_id cannot be empty")
        validate_material_values(
            springback_coefficient=springback_coefficient,
            min_radius_factor=min_radius_factor,
        )

        material = MaterialProfile(
            springback_coefficient=springback_coefficient,
            min_radius_factor=min_radius_factor,
            name=name,
            description=description,
        )
        self._ensure_loaded()
        with self._load_lock:
            self._user[material_id] = material
            self.save()
        return material

    def remove(self, material_id: str) -> bool:
        """
        Remove a user material.

        Returns:
            True if a user material was found and removed. Built-ins
            cannot be removed.
        """
        if material_id not in self.user_materials:
            return False
        with self._load_lock:
            if self._user.pop(material_id, None) is None:
                return False
            self.save()
        return True

    def is_builtin(self, material_id: str) -> bool:
        return material_id in BUILTIN_MATERIALS and material_id not in self.user_materials
