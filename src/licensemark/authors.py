# topmark:header:start
#
#   project      : LicenseMark
#   file         : authors.py
#   file_relpath : src/licensemark/authors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Primary-author resolution for the ``{author}`` placeholder.

The header writer only depends on the `AuthorResolver` protocol. Two
implementations are provided:

- `GitBlameAuthorResolver`: blames the file at ``HEAD`` with GitPython and picks
  the author of the most lines.
- `StaticAuthorResolver`: always returns the same name (``--author`` on the CLI,
  and tests).
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Protocol

import git
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from licensemark.config.logging import get_logger
from licensemark.core.errors import NoAuthorInfoError, RepositoryNotFoundError

logger = get_logger(__name__)


class AuthorResolver(Protocol):
    """Resolves the name substituted for ``{author}``."""

    def resolve_primary_author(self, path: Path) -> str:
        """Return the primary author of ``path``.

        Raises:
            AuthorResolutionError: If no author can be determined.
        """
        ...


class StaticAuthorResolver:
    """Author resolver returning a fixed name."""

    def __init__(self, name: str) -> None:
        self.name = name

    def resolve_primary_author(self, path: Path) -> str:
        logger.trace("Static author for %s: %s", path, self.name)
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class GitBlameAuthorResolver:
    """Author resolver backed by ``git blame``.

    The repository is discovered by walking up from the file's directory. Blamed
    lines at ``rev`` are tallied per author name; the author with the most lines
    wins, ties going to the author seen first in the file.

    Args:
        rev (str): Revision to blame.
    """

    def __init__(self, rev: str = "HEAD") -> None:
        self.rev = rev

    def resolve_primary_author(self, path: Path) -> str:
        """Return the author of most lines of ``path`` at ``self.rev``.

        Raises:
            RepositoryNotFoundError: ``path`` is not inside a git working tree.
            NoAuthorInfoError: The file has no history or no named author.
        """
        tally = self.tally_authors(path)
        if not tally:
            raise NoAuthorInfoError(path)
        author, lines = tally.most_common(1)[0]
        logger.debug("Primary author of %s: %s (%d line(s))", path, author, lines)
        return author

    def tally_authors(self, path: Path) -> Counter[str]:
        """Return blamed line counts per author name for ``path``."""
        abs_path = path.resolve()
        try:
            repo = git.Repo(abs_path.parent, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise RepositoryNotFoundError(path) from e

        with repo:
            if repo.working_tree_dir is None:
                raise RepositoryNotFoundError(path, "bare repository")
            rel_path = abs_path.relative_to(Path(repo.working_tree_dir).resolve())
            try:
                entries = repo.blame(self.rev, rel_path.as_posix())
            except (GitCommandError, ValueError) as e:
                # no commits yet, untracked file, unknown revision
                logger.debug("git blame failed for %s: %s", path, e)
                raise NoAuthorInfoError(path, "no history") from e

        tally: Counter[str] = Counter()
        for commit, lines in entries or ():
            name = commit.author.name
            if name:
                tally[name] += len(lines)
        logger.trace("Blame tally for %s: %s", path, dict(tally))
        return tally
