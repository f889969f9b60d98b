"""Alacritty config discovery and colour-scheme substitution.

Finds ``alacritty.yml`` and ``alacritty_color_schemes.yml`` in the usual XDG
and home-directory locations, lists the scheme anchors defined in the schemes
file, and splices a chosen scheme into the config's ``scheme:`` block.
Edits are plain regex substitutions; the YAML is never parsed.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "alacritty.yml"
COLOR_SCHEMES_FILENAME = "alacritty_color_schemes.yml"

CURRENT_SCHEME_RE = re.compile(r"\bscheme:\s{1}&[A-Za-z0-9_]+")
SCHEME_BLOCK_RE = re.compile(r"\bscheme:.*(?:\n\s{2,}.+)+")
COLORS_LINE_RE = re.compile(r"\bcolors:.*")
SCHEME_ANCHOR_RE = re.compile(r"&[A-Za-z0-9_-]+")


class ConfigError(Exception):
    """Base class for Alacritty configuration problems."""


class ReadHomeVarError(ConfigError):
    def __init__(self) -> None:
        super().__init__("Unable to read $HOME or $XDG_CONFIG_HOME shell variables.")


class DuplicateConfigFiles(ConfigError):
    def __init__(self, paths: list[Path]) -> None:
        self.paths = paths
        super().__init__(
            "Looks like you may have duplicate alacritty.yml and/or "
            "alacritty_color_schemes.yml files."
        )


class MissingConfigFile(ConfigError):
    def __init__(self, candidates: list[Path]) -> None:
        self.candidates = candidates
        listing = "".join(f"{path}\n" for path in candidates)
        super().__init__(
            f"Ensure your config and/or colorschemes are at one of the following: {listing}"
        )


class MissingAlacrittyYaml(MissingConfigFile):
    pass


class MissingColorSchemes(MissingConfigFile):
    pass


class CurrentSchemeError(ConfigError):
    def __init__(self) -> None:
        super().__init__("Could not ascertain current color scheme.")


class InvalidColorScheme(ConfigError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Could not find scheme '{name}' in {COLOR_SCHEMES_FILENAME}.")


@dataclass(frozen=True)
class ColorScheme:
    """One named scheme block copied out of the schemes file."""

    name: str
    data: str


@dataclass
class AlacrittyConfig:
    """Text of ``alacritty.yml`` plus the path it is written back to."""

    path: Path
    data: str

    @classmethod
    def load(cls, path: Path) -> AlacrittyConfig:
        return cls(path, path.read_text(encoding="utf-8"))

    def current_scheme_name(self) -> str:
        """Return the anchor name on the ``scheme:`` key."""
        match = CURRENT_SCHEME_RE.search(self.data)
        if match is None:
            raise CurrentSchemeError()
        return match.group(0).removeprefix("scheme: &")

    def set_scheme(self, scheme: ColorScheme) -> None:
        """Replace the ``scheme:`` block with ``scheme`` and point ``colors`` at it."""
        block = re.sub(f"{re.escape(scheme.name)}:", "scheme:", scheme.data, count=1)
        data = SCHEME_BLOCK_RE.sub(lambda _match: block, self.data, count=1)
        self.data = COLORS_LINE_RE.sub(lambda _match: f"colors: *{scheme.name}", data, count=1)

    def apply_scheme(self) -> None:
        """Write the edited config back to disk."""
        self.path.write_text(self.data, encoding="utf-8")
        logger.info("wrote %s", self.path)


@dataclass
class ColorSchemes:
    """Text of ``alacritty_color_schemes.yml``."""

    path: Path
    data: str

    @classmethod
    def load(cls, path: Path) -> ColorSchemes:
        return cls(path, path.read_text(encoding="utf-8"))

    def available_schemes(self) -> list[str]:
        """Return every anchor name in file order."""
        return [match.removeprefix("&") for match in SCHEME_ANCHOR_RE.findall(self.data)]

    def get_scheme(self, name: str) -> ColorScheme:
        """Extract the ``name:`` block and its indented body."""
        pattern = re.compile(rf"{re.escape(name)}:.*(?:\n\s{{4,}}.+)+")
        match = pattern.search(self.data)
        if match is None:
            raise InvalidColorScheme(name)
        return ColorScheme(name, match.group(0))


def _xdg_config_home() -> Path:
    """Return ``$XDG_CONFIG_HOME``, or the platform default when unset."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path(user_config_dir())


def candidate_paths(filename: str) -> list[Path]:
    """Return the locations searched for ``filename``, most preferred first."""
    home = os.environ.get("HOME")
    if not home and not os.environ.get("XDG_CONFIG_HOME"):
        raise ReadHomeVarError()

    xdg_base = _xdg_config_home()
    paths = [xdg_base / "alacritty" / filename, xdg_base / filename]
    if home:
        paths.extend([Path(home) / ".config" / "alacritty" / filename, Path(home) / f".{filename}"])

    unique: list[Path] = []
    for path in paths:
        if path not in unique:
            unique.append(path)
    return unique


def find_config_paths() -> tuple[Path, Path]:
    """Locate ``(alacritty.yml, alacritty_color_schemes.yml)``.

    Raises ``DuplicateConfigFiles`` when more than two candidates exist, since
    the choice between them would be ambiguous.
    """
    config_candidates = candidate_paths(CONFIG_FILENAME)
    scheme_candidates = candidate_paths(COLOR_SCHEMES_FILENAME)
    existing = [path for path in config_candidates + scheme_candidates if path.is_file()]
    logger.debug("found alacritty files: %s", existing)

    if len(existing) > 2:
        raise DuplicateConfigFiles(existing)

    schemes_path = next((path for path in existing if path in scheme_candidates), None)
    if schemes_path is None:
        raise MissingColorSchemes(config_candidates + scheme_candidates)

    config_path = next((path for path in existing if path in config_candidates), None)
    if config_path is None:
        raise MissingAlacrittyYaml(config_candidates + scheme_candidates)

    return config_path, schemes_path


def find_config_path(filename: str) -> Path:
    """Locate one of the two files on its own, for when the other was given."""
    candidates = candidate_paths(filename)
    existing = [path for path in candidates if path.is_file()]
    logger.debug("found %s files: %s", filename, existing)

    if len(existing) > 1:
        raise DuplicateConfigFiles(existing)
    if not existing:
        missing = MissingColorSchemes if filename == COLOR_SCHEMES_FILENAME else MissingAlacrittyYaml
        raise missing(candidates)
    return existing[0]


def load_alacritty_configs(
    config_path: Path | None = None,
    schemes_path: Path | None = None,
) -> tuple[AlacrittyConfig, ColorSchemes]:
    """Load both files, discovering only whichever path was not given."""
    if config_path is None and schemes_path is None:
        config_path, schemes_path = find_config_paths()
    elif config_path is None:
        config_path = find_config_path(CONFIG_FILENAME)
    elif schemes_path is None:
        schemes_path = find_config_path(COLOR_SCHEMES_FILENAME)
    return AlacrittyConfig.load(config_path), ColorSchemes.load(schemes_path)
