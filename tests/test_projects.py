"""
Tests for Project model and ProjectStore persistence.

Run with: pytest tests/test_projects.py -v
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from tube_bend_sim.core.session import BendSession
from tube_bend_sim.models import Project, TubeSpec
from tube_bend_sim.storage.materials import MaterialLibrary
from tube_bend_sim.storage.projects import ProjectLoadError, ProjectSaveError, ProjectStore

from helpers import make_bend


@pytest.fixture
def project(tube: TubeSpec) -> Project:
    return Project(
        name='Handrail',
        tube=tube,
        material_id='stainless304',
        bends=(make_bend(300), make_bend(700, angle=-45, radius=500)),
    )


@pytest.fixture
def store(tmp_path: Path) -> ProjectStore:
    return ProjectStore(tmp_path / 'projects')


class TestProjectModel:
    def test_empty_name_raises(self, tube: TubeSpec) -> None:
        with pytest.raises(ValueError, match="Project name cannot be empty"):
            Project(name='  ', tube=tube, material_id='steel')

    def test_non_string_name_raises(self, tube: TubeSpec) -> None:
        with pytest.raises(TypeError, match="must be a string"):
            Project(name=5, tube=tube, material_id='steel')  # type: ignore[arg-type]

    def test_bends_stored_as_tuple(self, tube: TubeSpec) -> None:
        project = Project(name='P', tube=tube, material_id='steel', bends=[make_bend(100)])
        assert isinstance(project.bends, tuple)

    def test_dict_roundtrip(self, project: Project) -> None:
        restored = Project.from_dict(project.to_dict())
        assert restored.name == project.name
        assert restored.tube == project.tube
        assert restored.bends == project.bends
        assert restored.created_at == project.created_at

    def test_to_dict_is_json_serializable(self, project: Project) -> None:
        text = json.dumps(project.to_dict())
        assert '"material_id": "stainless304"' in text


class TestProjectStore:
    def test_save_and_load(self, store: ProjectStore, project: Project) -> None:
        path = store.save(project)
        assert path.exists()
        loaded = store.load('Handrail')
        assert loaded is not None
        assert loaded.bends == project.bends
        assert loaded.material_id == 'stainless304'

    def test_save_updates_modified_time(self, store: ProjectStore, project: Project) -> None:
        project.modified_at = '2000-01-01T00:00:00+00:00'
        store.save(project)
        assert project.modified_at != '2000-01-01T00:00:00+00:00'

    def test_save_replaces_same_name(self, store: ProjectStore, project: Project,
                                     tube: TubeSpec) -> None:
        store.save(project)
        store.save(Project(name='Handrail', tube=tube, material_id='copper'))
        projects = store.list_projects()
        assert len(projects) == 1
        assert projects[0].material_id == 'copper'

    def test_load_missing_returns_none(self, store: ProjectStore) -> None:
        assert store.load('nothing') is None

    def test_list_sorted_and_skips_bad_files(self, store: ProjectStore,
                                            tube: TubeSpec) -> None:
        store.save(Project(name='Zeta', tube=tube, material_id='steel'))
        store.save(Project(name='Alpha', tube=tube, material_id='steel'))
        (store.directory / 'broken.project.json').write_text('not json')
        assert [p.name for p in store.list_projects()] == ['Alpha', 'Zeta']

    def test_list_empty_directory(self, tmp_path: Path) -> None:
        assert ProjectStore(tmp_path / 'missing').list_projects() == []

    def test_delete(self, store: ProjectStore, project: Project) -> None:
        store.save(project)
        assert store.delete('Handrail') is True
        assert store.delete('Handrail') is False
        assert store.load('Handrail') is None

    def test_names_with_separators_stay_in_directory(self, store: ProjectStore, tube: TubeSpec) -> None:
        path = store.save(Project(name='../etc/pass wd', tube=tube, material_id='steel'))
        assert path.parent == store.directory
        assert store.load('../etc/pass wd') is not None

    def test_similar_names_kept_apart(self, store: ProjectStore, tube: TubeSpec) -> None:
        store.save(Project(name='a b', tube=tube, material_id='steel'))
        store.save(Project(name='a_b', tube=tube, material_id='copper'))
        loaded = store.load('a b')
        assert loaded is not None
        assert loaded.name == 'a b'
        assert loaded.material_id == 'steel'
        assert [p.name for p in store.list_projects()] == ['a b', 'a_b']

    def test_file_holding_other_name_is_not_loaded(self, store: ProjectStore,
                                                  project: Project) -> None:
        store.directory.mkdir(parents=True)
        store.path_for('Other').write_text(json.dumps(project.to_dict()))
        assert store.load('Other') is None
        assert store.delete('Other') is False

    def test_save_refuses_to_overwrite_other_name(self, store: ProjectStore,
                                                 project: Project, tube: TubeSpec) -> None:
        store.directory.mkdir(parents=True)
        store.path_for('Other').write_text(json.dumps(project.to_dict()))
        with pytest.raises(ProjectSaveError, match="belongs to project 'Handrail'"):
            store.save(Project(name='Other', tube=tube, material_id='steel'))

    def test_non_string_name_is_load_error(self, store: ProjectStore,
                                           project: Project) -> None:
        data = project.to_dict()
        data['name'] = 5
        store.directory.mkdir(parents=True)
        store.path_for('Handrail').write_text(json.dumps(data))
        with pytest.raises(ProjectLoadError, match="Invalid project data"):
            store.load('Handrail')

    def test_non_string_version_is_load_error(self, store: ProjectStore,
                                              project: Project) -> None:
        data = project.to_dict()
        data['version'] = ['1.0']
        store.directory.mkdir(parents=True)
        store.path_for('Handrail').write_text(json.dumps(data))
        with pytest.raises(ProjectLoadError, match="version must be a string"):
            store.load('Handrail')

    def test_list_skips_malformed_fields(self, store: ProjectStore, tube: TubeSpec) -> None:
        store.save(Project(name='Good', tube=tube, material_id='steel'))
        bad = Project(name='Bad', tube=tube, material_id='steel').to_dict()
        bad['name'] = 5
        (store.directory / 'bad.project.json').write_text(json.dumps(bad))
        listed = dict(bad, name='Listed', version=['1.0'])
        (store.directory / 'listed.project.json').write_text(json.dumps(listed))
        assert [p.name for p in store.list_projects()] == ['Good']

    def test_unsupported_version(self, store: ProjectStore, project: Project) -> None:
        data = project.to_dict()
        data['version'] = '2.0'
        store.directory.mkdir(parents=True)
        store.path_for('Handrail').write_text(json.dumps(data))
        with pytest.raises(ProjectLoadError, match="Unsupported project version"):
            store.load('Handrail')

    def test_missing_fields(self, store: ProjectStore) -> None:
        store.directory.mkdir(parents=True)
        store.path_for('Broken').write_text(json.dumps({'name': 'Broken'}))
        with pytest.raises(ProjectLoadError, match="Invalid project data"):
            store.load('Broken')


class TestAutosaveAndExport:
    def test_autosave_roundtrip(self, store: ProjectStore, project: Project) -> None:
        assert store.load_autosave() is None
        store.autosave(project)
        restored = store.load_autosave()
        assert restored is not None
        assert restored.bends == project.bends
        assert store.list_projects() == []

    def test_corrupt_autosave_discarded(self, store: ProjectStore) -> None:
        store.directory.mkdir(parents=True)
        (store.directory / ProjectStore.AUTOSAVE_FILENAME).write_text('{')
        assert store.load_autosave() is None

    def test_clear_autosave(self, store: ProjectStore, project: Project) -> None:
        store.autosave(project)
        store.clear_autosave()
        assert store.load_autosave() is None

    def test_export_import(self, tmp_path: Path, project: Project) -> None:
        target = tmp_path / 'exported' / 'handrail.json'
        ProjectStore.export_json(project, target)
        assert ProjectStore.import_json(target).name == 'Handrail'

    def test_import_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectLoadError):
            ProjectStore.import_json(tmp_path / 'nope.json')

    def test_loaded_project_drives_session(self, store: ProjectStore,
                                           project: Project) -> None:
        store.save(project)
        loaded = store.load('Handrail')
        assert loaded is not None
        material = MaterialLibrary().get(loaded.material_id)
        assert material is not None

        session = BendSession(loaded.tube, material)
        session.load(loaded.tube, material, loaded.bends)
        assert len(session.simulate()) == 2 + 41 * 2
