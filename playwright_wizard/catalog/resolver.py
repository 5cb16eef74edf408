"""
Content Resolver

Reads catalog files relative to an ordered list of candidate roots:
1. Configured root (PLAYWRIGHT_WIZARD_ROOT), when set
2. The installed package directory, which ships `.github/prompts/` as package data
3. The current working directory

The first root that yields a readable file wins. Any read failure on one
root moves on to the next; every attempt is reported when all fail.
"""

import asyncio
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from playwright_wizard.catalog.errors import ContentReadFailure
from playwright_wizard.utils import Logger

# Directory of the playwright_wizard package
PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def candidate_roots(override: Optional[Path] = None) -> List[Path]:
    """Ordered roots to try; the working directory is read at call time."""
    roots: List[Path] = []
    if override is not None:
        roots.append(Path(override))
    roots.append(PACKAGE_ROOT)
    roots.append(Path.cwd())
    return roots


def _read_file(path: Path) -> str:
    # newline="" keeps line endings exactly as stored
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


class ContentResolver:
    """Locates and reads catalog files across candidate roots."""

    def __init__(self, logger: Logger, roots: Optional[Sequence[Path]] = None):
        self.logger = logger
        self._roots: Optional[tuple] = tuple(Path(r) for r in roots) if roots is not None else None

    @property
    def roots(self) -> List[Path]:
        if self._roots is not None:
            return list(self._roots)
        return candidate_roots()

    def candidates(self, relative_path: str) -> Iterator[Path]:
        """Absolute paths for `relative_path`, in root order."""
        for root in self.roots:
            yield root / relative_path

    def resolve_path(self, relative_path: str) -> Path:
        """
        Path that `read_text` would read from, without reading it.

        A candidate counts when it can be opened for reading, so permission
        errors are skipped the same way `read_text` skips them. Decoding is
        not checked.

        Raises:
            ContentReadFailure: if no candidate can be opened
        """
        attempts: List[Tuple[Path, BaseException]] = []
        for candidate in self.candidates(relative_path):
            try:
                with open(candidate, "rb"):
                    pass
            except OSError as e:
                attempts.append((candidate, e))
                continue
            return candidate

        raise ContentReadFailure(relative_path, attempts)

    async def read_text(self, relative_path: str) -> str:
        """
        Read a catalog file as UTF-8 text, line endings untouched.

        Raises:
            ContentReadFailure: if every candidate root failed
        """
        attempts: List[Tuple[Path, BaseException]] = []

        for candidate in self.candidates(relative_path):
            try:
                content = await asyncio.to_thread(_read_file, candidate)
            except (OSError, UnicodeDecodeError) as e:
                self.logger.debug(f"Could not read {candidate}: {e}")
                attempts.append((candidate, e))
                continue

            self.logger.debug(f"Read {relative_path} from {candidate}")
            return content

        error = ContentReadFailure(relative_path, attempts)
        raise error from error.cause
