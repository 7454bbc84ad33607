from __future__ import annotations

from pathlib import Path

from portfolio_hub import actions
from portfolio_hub.github import PublishTarget
from portfolio_hub.repository import ProjectRepository
from portfolio_hub.store import LocalProjectStore, MemoryStorage


def _repo() -> ProjectRepository:
    return ProjectRepository(LocalProjectStore(MemoryStorage()))


def _target(token: str | None = "ghp_token") -> PublishTarget:
    return PublishTarget(owner="luotun", repo="luotun.github.io", token=token)


class _Replay:
    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.calls: list[str] = []

    def __call__(self, method, url, **kwargs):
        self.calls.append(method)
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


def test_add_project_success() -> None:
    repo = _repo()
    status = actions.add_project(repo, "Demo", "d")
    assert status.ok
    assert status.project is not None
    assert status.message == actions.SAVED_LOCALLY
    assert repo.list() == [status.project]


def test_add_project_empty_title() -> None:
    repo = _repo()
    status = actions.add_project(repo, "")
    assert not status.ok
    assert status.message == "Please enter a title"
    assert repo.list() == []


def test_add_project_unreadable_file(tmp_path: Path) -> None:
    repo = _repo()
    status = actions.add_project(repo, "Demo", file_path=tmp_path / "missing")
    assert not status.ok
    assert status.message.startswith("Could not read file")
    assert repo.list() == []


def test_delete_project_outcomes() -> None:
    repo = _repo()
    project = repo.create("Demo")

    assert actions.delete_project(repo, "missing", True).message == "Project missing not found"
    declined = actions.delete_project(repo, project.id, lambda: False)
    assert not declined.ok
    assert declined.message == "Delete cancelled"
    assert repo.list() == [project]

    deleted = actions.delete_project(repo, project.id, True)
    assert deleted.ok
    assert repo.list() == []


def test_download_project(tmp_path: Path) -> None:
    source = tmp_path / "in.txt"
    source.write_bytes(b"payload")
    repo = _repo()
    with_file = repo.create("File", file_path=source)
    without_file = repo.create("Bare")

    status = actions.download_project(repo, with_file.id, tmp_path / "out")
    assert status.ok
    assert Path(status.path).read_bytes() == b"payload"

    missing = actions.download_project(repo, without_file.id, tmp_path / "out")
    assert not missing.ok
    assert missing.message == "This project has no file to download"


def test_publish_success_reports_path() -> None:
    repo = _repo()
    project = repo.create("Demo")
    fake = _Replay((404, None), (201, {"content": {"path": "_projects/x.data"}}))

    status = actions.publish(repo, project.id, _target(), request=fake)

    assert status.ok
    assert status.message == "Uploaded: _projects/x.data"
    assert status.path == "_projects/x.data"


def test_publish_rejection_reports_remote_message() -> None:
    repo = _repo()
    project = repo.create("Demo")
    fake = _Replay((404, None), (422, {"message": "sha does not match"}))

    status = actions.publish(repo, project.id, _target(), request=fake)

    assert not status.ok
    assert status.message == "Upload failed: sha does not match"


def test_publish_transport_error() -> None:
    repo = _repo()
    project = repo.create("Demo")
    fake = _Replay(OSError("Name or service not known"))

    status = actions.publish(repo, project.id, _target(), request=fake)

    assert not status.ok
    assert status.message == "Upload error: Name or service not known"


def test_publish_without_token_makes_no_request() -> None:
    repo = _repo()
    project = repo.create("Demo")
    fake = _Replay()

    status = actions.publish(repo, project.id, _target(""), request=fake)

    assert not status.ok
    assert status.message == actions.MISSING_TOKEN
    assert fake.calls == []


def test_publish_leaves_local_state_alone() -> None:
    storage = MemoryStorage()
    repo = ProjectRepository(LocalProjectStore(storage))
    project = repo.create("Demo")
    before = storage.items["lt_projects_v1"]

    rejected = _Replay((404, None), (403, {"message": "no"}))
    accepted = _Replay((404, None), (201, {"content": {}}))
    actions.publish(repo, project.id, _target(), request=rejected)
    actions.publish(repo, project.id, _target(), request=accepted)

    assert storage.items["lt_projects_v1"] == before
    assert repo.list() == [project]


def test_publish_unknown_project() -> None:
    status = actions.publish(_repo(), "nope", _target(), request=_Replay())
    assert status.message == "Project nope not found"
