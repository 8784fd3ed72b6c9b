"""Template file tracking and placeholder substitution."""

import logging
import re
from pathlib import Path
from typing import Dict, Iterator, List, Union


logger = logging.getLogger(__name__)

# Container files are not guaranteed to be UTF-8; undecodable bytes round-trip
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


class TemplateFileRegistry:
    """Ordered set of files that receive placeholder substitution."""

    def __init__(self, *paths: Union[str, Path]):
        self._paths: List[Path] = []
        for path in paths:
            self.add(path)

    def add(self, path: Union[str, Path]) -> None:
        """Register a file, keeping insertion order."""
        path = Path(path)
        if path in self._paths:
            return
        self._paths.append(path)
        logger.debug(f"Registered template file {path}")

    @property
    def paths(self) -> List[Path]:
        return list(self._paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(list(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path) -> bool:
        return Path(path) in self._paths


def _token_pattern(tokens) -> "re.Pattern":
    # Longest first so alternation never settles on a shorter token
    names = sorted(tokens, key=len, reverse=True)
    return re.compile(
        r'(?<![A-Za-z0-9_])(?P<token>{})(?![A-Za-z0-9_])'.format(
            '|'.join(map(re.escape, names))
        )
    )


def substitute_tokens(text: str, values: Dict[str, str]) -> str:
    """Replace whole placeholder tokens with their literal values.

    A token only matches when it is not part of a longer identifier, so
    ``LXC_NAME_2`` is left alone. Replacement values are inserted verbatim
    and never rescanned.
    """
    if not values:
        return text

    pattern = _token_pattern(values)
    return pattern.sub(lambda match: values[match.group('token')], text)


def substitute_file(path: Path, values: Dict[str, str]) -> bool:
    """Rewrite a file in place. Returns True if its content changed."""
    content = path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
    updated = substitute_tokens(content, values)
    if updated == content:
        return False

    path.write_text(updated, encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
    return True
