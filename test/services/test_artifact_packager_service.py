import os
import shutil
import pytest
from buildrun.errors import ArtifactEmpty, ArtifactMissing, ArtifactStagingFailure
from buildrun.models import Artifact, PackageSpec
from buildrun.services.artifact_packager_service import ArtifactPackagerService


@pytest.fixture
def runtime_root(tmp_path):
    return tmp_path / "runtime"


@pytest.fixture
def jar(tmp_path):
    path = tmp_path / "target" / "service.jar"
    path.parent.mkdir()
    path.write_bytes(b"\0" * 2 * 1024 * 1024)
    return Artifact.from_path(str(path))


def test_copy_into_runtime_root(jar, runtime_root):
    packaged = ArtifactPackagerService(PackageSpec(runtime_root=str(runtime_root))).package(jar)

    assert packaged.path == str(runtime_root / "service.jar")
    assert packaged.name == "service"
    assert os.path.getsize(packaged.path) == 2 * 1024 * 1024
    assert not os.path.islink(packaged.path)


def test_link_into_runtime_root(jar, runtime_root):
    packaged = ArtifactPackagerService(PackageSpec(runtime_root=str(runtime_root), mode="link")).package(jar)

    assert os.path.islink(packaged.path)
    assert os.path.realpath(packaged.path) == os.path.realpath(jar.path)


def test_repackaging_replaces_previous_copy(jar, runtime_root):
    service = ArtifactPackagerService(PackageSpec(runtime_root=str(runtime_root)))
    service.package(jar)
    with open(jar.path, "ab") as f:
        f.write(b"more")

    packaged = service.package(jar)
    assert os.path.getsize(packaged.path) == 2 * 1024 * 1024 + 4


def test_artifact_missing(tmp_path, runtime_root):
    service = ArtifactPackagerService(PackageSpec(runtime_root=str(runtime_root)))
    with pytest.raises(ArtifactMissing) as exc:
        service.package(Artifact.from_path(str(tmp_path / "target" / "service.jar")))
    assert exc.value.exit_code == 2
    assert not runtime_root.exists()


def test_artifact_empty(tmp_path, runtime_root):
    path = tmp_path / "service.jar"
    path.write_bytes(b"0123456789")
    service = ArtifactPackagerService(PackageSpec(runtime_root=str(runtime_root)))

    with pytest.raises(ArtifactEmpty) as exc:
        service.package(Artifact.from_path(str(path)))
    assert exc.value.size == 10
    assert exc.value.exit_code == 2


def test_zero_byte_artifact_is_empty_with_minimal_threshold(tmp_path, runtime_root):
    path = tmp_path / "service.jar"
    path.touch()
    service = ArtifactPackagerService(PackageSpec(runtime_root=str(runtime_root), min_size_bytes=1))
    with pytest.raises(ArtifactEmpty):
        service.package(Artifact.from_path(str(path)))


def test_already_staged_artifact_is_left_in_place(tmp_path):
    path = tmp_path / "service.jar"
    path.write_bytes(b"\0" * 4096)
    artifact = Artifact.from_path(str(path))

    packaged = ArtifactPackagerService(PackageSpec(runtime_root=str(tmp_path))).package(artifact)
    assert packaged == artifact
    assert path.exists()


def test_runtime_root_is_a_file(jar, tmp_path):
    runtime_root = tmp_path / "runtime"
    runtime_root.write_text("not a directory")
    service = ArtifactPackagerService(PackageSpec(runtime_root=str(runtime_root)))

    with pytest.raises(ArtifactStagingFailure) as exc:
        service.package(jar)
    assert exc.value.exit_code == 2
    assert isinstance(exc.value.__cause__, OSError)


def test_target_is_a_directory(jar, runtime_root):
    (runtime_root / "service.jar").mkdir(parents=True)
    service = ArtifactPackagerService(PackageSpec(runtime_root=str(runtime_root)))

    with pytest.raises(ArtifactStagingFailure):
        service.package(jar)
    assert not (runtime_root / "service.jar.staging").exists()


def test_failed_copy_keeps_previous_artifact(jar, runtime_root, monkeypatch):
    service = ArtifactPackagerService(PackageSpec(runtime_root=str(runtime_root)))
    service.package(jar)

    def failing_copy(source, target):
        with open(target, "wb") as f:
            f.write(b"partial")
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(shutil, "copy2", failing_copy)
    with pytest.raises(ArtifactStagingFailure):
        service.package(jar)

    assert os.path.getsize(runtime_root / "service.jar") == 2 * 1024 * 1024
    assert not (runtime_root / "service.jar.staging").exists()
