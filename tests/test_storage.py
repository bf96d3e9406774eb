"""Tests for snapshot file storage."""

from pertplan.application import export_json
from pertplan.domain.shared import Err, Ok
from pertplan.infrastructure.storage import JsonStorage, SnapshotRepository


class TestJsonStorage:
    def test_save_and_load(self, tmp_path):
        storage = JsonStorage()
        path = tmp_path / "nested" / "data.json"

        assert isinstance(storage.write(path, {"a": [1, 2], "b": "é"}), Ok)
        assert storage.read(path) == Ok({"a": [1, 2], "b": "é"})

    def test_overwrite_leaves_no_temp_file(self, tmp_path):
        storage = JsonStorage()
        path = tmp_path / "data.json"
        storage.write(path, {"v": 1})
        storage.write(path, {"v": 2})

        assert storage.read(path) == Ok({"v": 2})
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

    def test_missing_file(self, tmp_path):
        result = JsonStorage().read(tmp_path / "missing.json")
        assert isinstance(result, Err)
        assert "File not found" in result.error

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = JsonStorage().read(path)
        assert isinstance(result, Err)
        assert "Invalid JSON" in result.error

    def test_unserializable_data(self, tmp_path):
        result = JsonStorage().write(tmp_path / "x.json", {"a": object()})
        assert isinstance(result, Err)
        assert "not JSON serializable" in result.error


class TestSnapshotRepository:
    def test_save_and_load(self, tmp_path, sample_project):
        repo = SnapshotRepository()
        path = tmp_path / "pert-estimation.json"

        assert repo.save(path, sample_project) == Ok(None)
        assert repo.exists(path)
        assert repo.load(path) == Ok(sample_project)

    def test_written_file_is_the_json_export(self, tmp_path, sample_project):
        path = tmp_path / "pert-estimation.json"
        SnapshotRepository().save(path, sample_project)
        assert path.read_text(encoding="utf-8") == export_json(sample_project)

    def test_invalid_snapshot(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"projectName": "X"}', encoding="utf-8")
        result = SnapshotRepository().load(path)
        assert isinstance(result, Err)
        assert "Invalid snapshot" in result.error

    def test_missing_file(self, tmp_path):
        repo = SnapshotRepository()
        path = tmp_path / "none.json"
        assert not repo.exists(path)
        assert isinstance(repo.load(path), Err)
