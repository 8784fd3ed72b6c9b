"""Split and re-assemble the container configuration file.

The LXC config is line-oriented ``key = value`` text. Lines are never
parsed: they are classified by prefix and moved around verbatim. The
final document is laid out as::

    <lines without an lxc. prefix>

    # Distribution configuration
    <config shipped in the metadata tarball>

    # Container specific configuration
    <lxc.* lines the caller had written>

    # Network configuration
    <lxc.net* lines the caller had written>

Later keys override earlier ones when LXC reads the file, so the caller's
settings must come after the distribution defaults.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from lxclocal.errors import FatalInputError
from lxclocal.utils.templates import TEXT_ENCODING, TEXT_ERRORS


logger = logging.getLogger(__name__)

NETWORK_PREFIX = "lxc.net"
KEY_PREFIX = "lxc."

DISTRIBUTION_HEADER = "Distribution configuration"
EXTRA_HEADER = "Container specific configuration"
NETWORK_HEADER = "Network configuration"


def is_network_line(line: str) -> bool:
    return line.startswith(NETWORK_PREFIX)


def is_key_line(line: str) -> bool:
    return line.startswith(KEY_PREFIX) and not is_network_line(line)


@dataclass
class ConfigSections:
    """Lines of a config document grouped by kind, in original order."""
    network: List[str] = field(default_factory=list)
    extra: List[str] = field(default_factory=list)
    remainder: List[str] = field(default_factory=list)


def classify_lines(lines: Iterable[str]) -> ConfigSections:
    """Split config lines into network, other lxc.* and everything else."""
    sections = ConfigSections()
    for line in lines:
        if is_network_line(line):
            sections.network.append(line)
        elif is_key_line(line):
            sections.extra.append(line)
        else:
            sections.remainder.append(line)
    return sections


def append_config_line(document: Path, line: str) -> None:
    """Append a single directive to a config document."""
    with document.open("a", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as fh:
        fh.write(f"{line}\n")


def _read(path: Path) -> str:
    return path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)


def _require_distribution(distribution_config: Union[str, Path]) -> Path:
    distribution_config = Path(distribution_config)
    if not distribution_config.is_file():
        raise FatalInputError("Metadata tarball is missing the configuration file")
    return distribution_config


class ConfigMerger:
    """Move the caller's lxc.* entries behind the distribution config."""

    def __init__(self, document: Union[str, Path], workdir: Union[str, Path]):
        self.document = Path(document)
        self.workdir = Path(workdir)
        self.network: List[str] = []
        self.extra: List[str] = []

    @property
    def network_file(self) -> Path:
        return self.workdir / "network-config"

    @property
    def extra_file(self) -> Path:
        return self.workdir / "extra-config"

    def _read_lines(self) -> List[str]:
        if not self.document.exists():
            return []
        return _read(self.document).splitlines()

    def _write_lines(self, path: Path, lines: List[str]) -> None:
        path.write_text(
            "".join(f"{line}\n" for line in lines),
            encoding=TEXT_ENCODING,
            errors=TEXT_ERRORS,
        )

    def _append_section(self, header: str, content: str) -> None:
        if content and not content.endswith("\n"):
            content += "\n"
        with self.document.open("a", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as fh:
            fh.write("\n")
            fh.write(f"# {header}\n")
            fh.write(content)

    def extract_network(self) -> List[str]:
        """Pull lxc.net* lines out of the document into the network buffer."""
        if not self.document.exists():
            return []

        lines = self._read_lines()
        found = [line for line in lines if is_network_line(line)]
        self._write_lines(self.document, [line for line in lines if not is_network_line(line)])

        self.network.extend(found)
        if self.network:
            self._write_lines(self.network_file, self.network)
        if found:
            logger.debug(f"Extracted {len(found)} network entries from {self.document}")
        return found

    def extract_other(self) -> List[str]:
        """Pull the remaining lxc.* lines into the extra buffer."""
        if not self.document.exists():
            return []

        lines = self._read_lines()
        found = [line for line in lines if is_key_line(line)]
        self._write_lines(self.document, [line for line in lines if not is_key_line(line)])

        self.extra.extend(found)
        if self.extra:
            self._write_lines(self.extra_file, self.extra)
        if found:
            logger.debug(f"Extracted {len(found)} container entries from {self.document}")
        return found

    def merge_distribution(self, distribution_config: Union[str, Path]) -> None:
        """Append the config shipped in the metadata tarball."""
        distribution_config = _require_distribution(distribution_config)

        self._append_section(DISTRIBUTION_HEADER, _read(distribution_config))
        logger.debug(f"Merged distribution config from {distribution_config.name}")

    def merge_extra_then_network(self) -> None:
        """Restore the caller's entries, container-specific before network."""
        for header, side_file in (
            (EXTRA_HEADER, self.extra_file),
            (NETWORK_HEADER, self.network_file),
        ):
            if not side_file.exists():
                continue
            self._append_section(header, _read(side_file))
            side_file.unlink()

        self.extra.clear()
        self.network.clear()

    def run(self, distribution_config: Union[str, Path]) -> None:
        """Run the whole split-and-merge sequence.

        The distribution config is checked before anything is extracted, so
        a bad metadata tarball leaves the caller's document untouched.
        """
        distribution_config = _require_distribution(distribution_config)

        self.extract_network()
        self.extract_other()
        self.merge_distribution(distribution_config)
        self.merge_extra_then_network()
        logger.info(f"Updated container configuration {self.document}")
