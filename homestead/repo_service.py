"""Git-backed dotfiles repository: init, copy, commit, push, clone and restore."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from homestead.errors import HomesteadError

DEFAULT_REPO_DIR_NAME = "homestead-dotfiles"
"""Default directory name of the dotfiles repository."""

DEFAULT_DOTFILES_PATHS = (".zshrc", ".zsh")
"""Paths relative to the home directory that are kept in the repository."""

PathLike = Union[str, "os.PathLike[str]"]


class RepoError(HomesteadError):
    """A repository operation or one of the commands it runs failed."""

    default_message = "repository operation failed"


def expand_home(path: PathLike) -> Path:
    """Return an absolute path; '' is the home directory and '~/' is expanded."""
    text = os.fspath(path)
    if not text:
        return Path.home()
    if text.startswith("~/"):
        return Path.home() / text[2:]
    return Path(os.path.abspath(text))


def _run_combined(
    label: str, args: Sequence[str], cwd: Optional[Path] = None
) -> str:
    """Run a command, returning its combined output or raising RepoError."""
    try:
        result = subprocess.run(
            list(args),
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OSError as err:
        raise RepoError(f"{label}: {err}") from err
    output = result.stdout or ""
    if result.returncode != 0:
        raise RepoError(
            f"{label}: exit status {result.returncode} ({output.strip()})"
        )
    return output


def _copy_path(src: Path, dst: Path) -> None:
    """Copy a file or a directory tree from src to dst, overwriting files."""
    if src.is_dir():
        shutil.copytree(src, dst, dirs_exist_ok=True)
    elif src.exists():
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dst)
    else:
        raise FileNotFoundError(f"no such file or directory: {src}")


def _copy_all(src_root: Path, dst_root: Path, paths: Iterable[str], verb: str) -> None:
    for rel in paths:
        try:
            _copy_path(src_root / rel, dst_root / rel)
        except OSError as err:
            raise RepoError(f"{verb} {rel}: {err}") from err


class RepoService:
    """Manages a git repository holding the user's shell dotfiles."""

    def __init__(self, repo_dir: PathLike) -> None:
        self._repo_dir = expand_home(repo_dir)

    @property
    def repo_dir(self) -> Path:
        """Absolute path of the repository directory."""
        return self._repo_dir

    def is_repo(self) -> bool:
        """Return True if the directory exists and is a git repository."""
        return (self._repo_dir / ".git").is_dir()

    def init_repo(self) -> None:
        """Create the directory and run git init in it."""
        try:
            self._repo_dir.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise RepoError(f"create repo dir: {err}") from err
        _run_combined("git init", ["git", "init"], self._repo_dir)

    def add_remote(self, name: str, url: str) -> None:
        """Add a remote with the given name and URL."""
        _run_combined(
            "git remote add", ["git", "remote", "add", name, url], self._repo_dir
        )

    def has_remote(self, name: str) -> bool:
        """Return True if the remote exists."""
        try:
            result = subprocess.run(
                ["git", "remote", "get-url", name],
                cwd=self._repo_dir,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError:
            return False
        return result.returncode == 0

    def get_remote_url(self, name: str) -> str:
        """Return the URL of the remote, or '' if it is not set."""
        try:
            result = subprocess.run(
                ["git", "remote", "get-url", name],
                cwd=self._repo_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
            )
        except OSError:
            return ""
        if result.returncode != 0:
            return ""
        return (result.stdout or "").strip()

    def copy_to_repo(self, home_dir: PathLike, paths: Iterable[str]) -> None:
        """Copy paths relative to home_dir into the repository."""
        _copy_all(expand_home(home_dir), self._repo_dir, paths, "copy")

    def commit_all(self, message: str) -> None:
        """Stage everything and commit; having nothing to commit is not an error."""
        _run_combined("git add", ["git", "add", "-A"], self._repo_dir)
        try:
            result = subprocess.run(
                ["git", "commit", "-m", message],
                cwd=self._repo_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as err:
            raise RepoError(f"git commit: {err}") from err
        output = result.stdout or ""
        if result.returncode != 0:
            if "nothing to commit" in output:
                return
            raise RepoError(
                f"git commit: exit status {result.returncode} ({output.strip()})"
            )

    def push(self, remote: str = "origin", branch: str = "main") -> None:
        """Push the branch (default 'main') to the remote and track it."""
        branch = branch or "main"
        _run_combined(
            "git push", ["git", "push", "-u", remote, branch], self._repo_dir
        )

    def clone(self, repo_url: str) -> None:
        """Clone repo_url into the repository directory, creating its parent."""
        try:
            self._repo_dir.parent.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise RepoError(f"create parent dir: {err}") from err
        _run_combined(
            "git clone", ["git", "clone", repo_url, str(self._repo_dir)]
        )

    def pull(self) -> None:
        """Fast-forward the repository from its upstream."""
        _run_combined("git pull", ["git", "pull", "--ff-only"], self._repo_dir)

    def restore_to_home(self, home_dir: PathLike, paths: Iterable[str]) -> None:
        """Copy paths from the repository into home_dir, overwriting files."""
        _copy_all(self._repo_dir, expand_home(home_dir), paths, "restore")


def create_github_repo_with_gh(
    repo_dir: PathLike, repo_name: str, private: bool
) -> None:
    """Create a GitHub repository with the gh tool and push repo_dir to it."""
    directory = os.fspath(repo_dir)
    visibility = "--private" if private else "--public"
    args = [
        "gh", "repo", "create", repo_name, visibility,
        "--source", directory, "--remote", "origin", "--push",
    ]
    try:
        result = subprocess.run(
            args,
            cwd=directory,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except FileNotFoundError as err:
        raise RepoError(
            f"gh is not installed; install the GitHub CLI first: {err}"
        ) from err
    except OSError as err:
        raise RepoError(f"gh repo create: {err}") from err
    if result.returncode == 0:
        return
    output = result.stdout or ""
    status = f"exit status {result.returncode}"
    message = output.strip() or status
    if "could not find gh" in output or "command not found" in output:
        raise RepoError(
            f"gh is not installed; install the GitHub CLI first: {status}"
        )
    if "authentication required" in output or "failed to authenticate" in output:
        raise RepoError(f"gh is not authenticated; run: gh auth login: {status}")
    raise RepoError(f"gh repo create: {status} ({message})")