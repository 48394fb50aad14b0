from __future__ import annotations

import json

import pytest

from marathon_deployer.infrastructure.config import DeployOptions
from marathon_deployer.infrastructure.placeholder_resolver import PlaceholderResolver
from marathon_deployer.infrastructure.task_loader import load_task, read_image
from marathon_deployer.shared.infrastructure_exceptions import TaskFileError

TASK = {
    "endpoint": "http://m:8080",
    "id": "/web",
    "instances": 2,
    "container": {"docker": {"image": "{image}"}},
    "labels": {"owner": "{user}"},
}


@pytest.fixture
def task_file(tmp_path):
    path = tmp_path / "marathon.json"
    path.write_text(json.dumps(TASK))
    return path


def test_load_task_resolves_placeholders(task_file) -> None:
    options = DeployOptions(task_file=str(task_file), user="alice", hostname="h1", image="app:1", api_version=3)

    descriptor = load_task(options)

    assert descriptor.endpoint == "http://m:8080"
    assert descriptor.id == "/web"
    assert descriptor.api_version == 3
    assert descriptor.instances == 2
    assert descriptor.image == "app:1"
    assert descriptor.labels == {"owner": "alice"}
    assert descriptor.raw_body["container"]["docker"]["image"] == "app:1"


def test_image_from_file_is_read_and_deleted(task_file, tmp_path) -> None:
    image_file = tmp_path / "image.txt"
    image_file.write_text("registry/app@sha256:abc\n")
    options = DeployOptions(
        task_file=str(task_file), image="ignored", image_from_file=str(image_file), delete_image_file=True,
    )

    descriptor = load_task(options)

    assert descriptor.image == "registry/app@sha256:abc"
    assert not image_file.exists()


def test_image_file_kept_without_delete_flag(tmp_path) -> None:
    image_file = tmp_path / "image.txt"
    image_file.write_text("app:2")

    assert read_image(DeployOptions(image_from_file=str(image_file))) == "app:2"
    assert image_file.exists()


def test_missing_task_file(tmp_path) -> None:
    with pytest.raises(TaskFileError):
        load_task(DeployOptions(task_file=str(tmp_path / "nope.json")))


def test_invalid_json(tmp_path) -> None:
    path = tmp_path / "marathon.json"
    path.write_text("{not json")

    with pytest.raises(TaskFileError):
        load_task(DeployOptions(task_file=str(path)))


def test_unknown_placeholders_are_left_untouched() -> None:
    resolver = PlaceholderResolver()

    result = resolver.resolve_placeholders('{"cmd": "echo {other} {hostname}"}', {"hostname": "h1"})

    assert result == '{"cmd": "echo {other} h1"}'
    assert resolver.find_unresolved(result) == ["{other}"]
