"""Shared test fixtures for gitprompt tests."""

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from dulwich.objects import Blob, Commit, Tag, Tree
from dulwich.repo import Repo
from rich.console import Console

_AUTHOR = b"Test User <test@example.com>"
_BASE_TIME = 1_700_000_000


@dataclass
class GitRepo:
    """A real repository in a temporary directory with builder helpers."""

    path: Path
    repo: Repo
    _clock: int = field(default=0, repr=False)

    @property
    def git_dir(self) -> Path:
        return Path(self.repo.controldir())

    def add_blob(self, data: bytes) -> str:
        blob = Blob.from_string(data)
        self.repo.object_store.add_object(blob)
        return blob.id.decode()

    def commit(
        self,
        message: str = "commit",
        *,
        ref: bytes = b"HEAD",
        parents: list[str] | None = None,
    ) -> str:
        """Create a commit with one file and point ref at it.

        Without explicit parents, the commit ref currently points at (if any)
        becomes the parent.
        """
        self._clock += 1
        blob = Blob.from_string(message.encode())
        tree = Tree()
        tree.add(b"file.txt", 0o100644, blob.id)

        if parents is None:
            try:
                parents = [self.repo.refs[ref].decode()]
            except KeyError:
                parents = []

        commit = Commit()
        commit.tree = tree.id
        commit.parents = [p.encode() for p in parents]
        commit.author = commit.committer = _AUTHOR
        commit.author_time = commit.commit_time = _BASE_TIME + self._clock
        commit.author_timezone = commit.commit_timezone = 0
        commit.encoding = b"UTF-8"
        commit.message = message.encode() + b"\n"

        store = self.repo.object_store
        store.add_object(blob)
        store.add_object(tree)
        store.add_object(commit)
        self.repo.refs[ref] = commit.id
        return commit.id.decode()

    def tag(self, name: str, target: str, message: str = "tag") -> str:
        """Create an annotated tag refs/tags/<name> pointing at target."""
        tag = Tag()
        tag.name = name.encode()
        tag.message = message.encode() + b"\n"
        tag.tagger = _AUTHOR
        tag.tag_time = _BASE_TIME
        tag.tag_timezone = 0
        tag.object = (Commit, target.encode())
        self.repo.object_store.add_object(tag)
        self.repo.refs[b"refs/tags/" + name.encode()] = tag.id
        return tag.id.decode()

    def detach(self, object_id: str) -> None:
        """Point HEAD directly at object_id."""
        (self.git_dir / "HEAD").write_text(f"{object_id}\n")

    def write_marker(self, relative: str, content: str | bytes = "") -> Path:
        """Write a marker file under the control directory."""
        path = self.git_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path

    def set_config(self, section: str, name: str, value: str) -> None:
        config = self.repo.get_config()
        config.set((section.encode(),), name.encode(), value.encode())
        config.write_to_path()


def find_colliding_blobs(length: int = 4) -> tuple[Blob, Blob]:
    """Find two blobs whose ids share their first length hex digits."""
    seen: dict[str, Blob] = {}
    index = 0
    while True:
        blob = Blob.from_string(f"collision candidate {index}\n".encode())
        prefix = blob.id.decode()[:length]
        if prefix in seen:
            return seen[prefix], blob
        seen[prefix] = blob
        index += 1


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep user git and gitprompt settings out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for key in list(os.environ):
        if key.startswith("GITPROMPT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def git_repo(tmp_path: Path) -> Iterator[GitRepo]:
    """Create an empty repository whose HEAD points at unborn main."""
    path = tmp_path / "repo"
    path.mkdir()
    repo = Repo.init(str(path))
    repo.refs.set_symbolic_ref(b"HEAD", b"refs/heads/main")
    yield GitRepo(path=path, repo=repo)
    repo.close()


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
