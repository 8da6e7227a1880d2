# topmark:header:start
#
#   project      : ReflowPP
#   file         : model.py
#   file_relpath : src/reflowpp/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot read by the CLI commands.
    - `MutableConfig`: a mutable builder used during discovery and merging; it
      can be frozen into `Config` and thawed back for edits.

Layers (lowest → highest precedence):
    1. Runtime defaults (`reflowpp.config.io.load_defaults_dict`).
    2. Project files discovered upward from the anchor directory, root-most
       first; within a directory ``pyproject.toml`` (``[tool.reflowpp]``) is
       merged before ``reflowpp.toml``.
    3. Explicit ``--config`` files, in the given order.
    4. CLI overrides (`MutableConfig.apply_cli_args`).

Builder fields are tri-state: ``None`` means "not set by this layer" and
inherits from the layer below on merge.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from reflowpp.config.io import (
    extract_tool_table,
    get_bool_value,
    get_int_value,
    get_string_value,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
    warn_unknown_keys,
)
from reflowpp.config.keys import ArgKey, Toml
from reflowpp.config.logging import get_logger
from reflowpp.constants import (
    CONFIG_FILE_NAME,
    DATA_FORMAT_CHOICES,
    DEFAULT_DATA_FORMAT,
    DEFAULT_INDENTATION,
    DEFAULT_LINE_WIDTH,
    DEFAULT_MARKUP_INDENTATION,
    PYPROJECT_FILE_NAME,
)

if TYPE_CHECKING:
    from reflowpp.config.io import TomlTable
    from reflowpp.config.logging import ReflowLogger

# Generic mapping accepted by `MutableConfig.apply_cli_args` (CLI kwargs or API dicts).
ArgsLike = Mapping[str, Any]

logger: ReflowLogger = get_logger(__name__)

CLI_OVERRIDE_MARKER: str = "<CLI overrides>"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ReflowPP.

    Produced by `MutableConfig.freeze` after merging all layers. Use `thaw`
    to obtain a builder for edits.

    Attributes:
        line_width (int): Maximum line width of the rendered output.
        indentation (int): Default group indentation for data printing.
        markup_indentation (int): Indentation of child elements in markup outlines.
        declaration (bool): Print the XML declaration before the outline.
        fontify (bool): Emphasize tag names in markup outlines.
        data_format (str): One of ``auto``, ``json``, ``toml``.
        detect_cycles (bool): Print ``<...>`` for self-referencing containers.
        config_files (tuple[Path | str, ...]): Sources merged into this config,
            lowest precedence first.
    """

    line_width: int = DEFAULT_LINE_WIDTH
    indentation: int = DEFAULT_INDENTATION
    markup_indentation: int = DEFAULT_MARKUP_INDENTATION
    declaration: bool = True
    fontify: bool = False
    data_format: str = DEFAULT_DATA_FORMAT
    detect_cycles: bool = False
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-shaped dict (same schema as the files)."""
        return {
            Toml.SECTION_LAYOUT: {
                Toml.KEY_LINE_WIDTH: self.line_width,
                Toml.KEY_INDENTATION: self.indentation,
            },
            Toml.SECTION_MARKUP: {
                Toml.KEY_INDENTATION: self.markup_indentation,
                Toml.KEY_DECLARATION: self.declaration,
                Toml.KEY_FONTIFY: self.fontify,
            },
            Toml.SECTION_DATA: {
                Toml.KEY_FORMAT: self.data_format,
                Toml.KEY_DETECT_CYCLES: self.detect_cycles,
            },
        }

    def to_toml(self) -> str:
        """Render `to_toml_dict` as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            line_width=self.line_width,
            indentation=self.indentation,
            markup_indentation=self.markup_indentation,
            declaration=self.declaration,
            fontify=self.fontify,
            data_format=self.data_format,
            detect_cycles=self.detect_cycles,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every setting is ``None`` until a layer sets it; `freeze` falls back to
    the runtime defaults for settings no layer provided.
    """

    line_width: int | None = None
    indentation: int | None = None
    markup_indentation: int | None = None
    declaration: bool | None = None
    fontify: bool | None = None
    data_format: str | None = None
    detect_cycles: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            line_width=self.line_width if self.line_width is not None else DEFAULT_LINE_WIDTH,
            indentation=self.indentation if self.indentation is not None else DEFAULT_INDENTATION,
            markup_indentation=self.markup_indentation
            if self.markup_indentation is not None
            else DEFAULT_MARKUP_INDENTATION,
            declaration=self.declaration if self.declaration is not None else True,
            fontify=self.fontify if self.fontify is not None else False,
            data_format=self.data_format if self.data_format is not None else DEFAULT_DATA_FORMAT,
            detect_cycles=self.detect_cycles if self.detect_cycles is not None else False,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a builder from a parsed ReflowPP table.

        Unknown keys and ill-typed values are logged as warnings and ignored.

        Args:
            data (TomlTable): The ReflowPP table (``reflowpp.toml`` content or
                ``[tool.reflowpp]``).
            config_file (Path | None): Source file, recorded in ``config_files``.

        Returns:
            MutableConfig: The resulting builder.
        """
        where: str = str(config_file) if config_file is not None else "<defaults>"
        warn_unknown_keys(data, Toml.ALLOWED_TOP_LEVEL_KEYS, where=where)

        layout: TomlTable = get_table_value(data, Toml.SECTION_LAYOUT)
        markup: TomlTable = get_table_value(data, Toml.SECTION_MARKUP)
        data_tbl: TomlTable = get_table_value(data, Toml.SECTION_DATA)
        for section, table in (
            (Toml.SECTION_LAYOUT, layout),
            (Toml.SECTION_MARKUP, markup),
            (Toml.SECTION_DATA, data_tbl),
        ):
            warn_unknown_keys(table, Toml.ALLOWED_SECTION_KEYS[section], where=section)

        return cls(
            line_width=get_int_value(
                layout, Toml.KEY_LINE_WIDTH, where=Toml.SECTION_LAYOUT, minimum=1
            ),
            indentation=get_int_value(
                layout, Toml.KEY_INDENTATION, where=Toml.SECTION_LAYOUT, minimum=0
            ),
            markup_indentation=get_int_value(
                markup, Toml.KEY_INDENTATION, where=Toml.SECTION_MARKUP, minimum=0
            ),
            declaration=get_bool_value(markup, Toml.KEY_DECLARATION, where=Toml.SECTION_MARKUP),
            fontify=get_bool_value(markup, Toml.KEY_FONTIFY, where=Toml.SECTION_MARKUP),
            data_format=get_string_value(
                data_tbl, Toml.KEY_FORMAT, where=Toml.SECTION_DATA, choices=DATA_FORMAT_CHOICES
            ),
            detect_cycles=get_bool_value(
                data_tbl, Toml.KEY_DETECT_CYCLES, where=Toml.SECTION_DATA
            ),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``reflowpp.toml`` and ``pyproject.toml`` (its
        ``[tool.reflowpp]`` table).

        Returns:
            MutableConfig | None: The builder; None if a ``pyproject.toml`` has no
                ReflowPP section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_tool_table(path, load_toml_dict(path))
        if table is None:
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned root-most first, nearest last; within one directory
        ``pyproject.toml`` precedes ``reflowpp.toml``. A file setting
        ``root = true`` stops the walk after its directory.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here: bool = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                table: TomlTable | None = extract_tool_table(p, load_toml_dict(p))
                if table is None:
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if table.get(Toml.KEY_ROOT) is True:
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a builder.

        Args:
            start (Path | None): Discovery anchor; the CWD when None.
            extra_config_files (Iterable[Path] | None): Files merged after
                discovery, in the given order.
            no_config (bool): Skip discovery (defaults and explicit files only).

        Returns:
            MutableConfig: The merged builder, ready for CLI overrides.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(start or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)
            else:
                logger.warning("No ReflowPP configuration found in %s", extra)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where settings made by ``other`` override this one."""

        def pick(name: str) -> Any:
            value: Any = getattr(other, name)
            return value if value is not None else getattr(self, name)

        return MutableConfig(
            line_width=pick("line_width"),
            indentation=pick("indentation"),
            markup_indentation=pick("markup_indentation"),
            declaration=pick("declaration"),
            fontify=pick("fontify"),
            data_format=pick("data_format"),
            detect_cycles=pick("detect_cycles"),
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from an argument mapping (CLI or API).

        Only keys present with a non-None value override; the CLI passes None
        for options the user did not give.

        Returns:
            MutableConfig: This builder, updated.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        applied: bool = False
        for key in (
            ArgKey.LINE_WIDTH,
            ArgKey.INDENTATION,
            ArgKey.MARKUP_INDENTATION,
            ArgKey.DECLARATION,
            ArgKey.FONTIFY,
            ArgKey.DATA_FORMAT,
            ArgKey.DETECT_CYCLES,
        ):
            value: Any = args.get(key)
            if value is not None:
                setattr(self, key, value)
                applied = True
        if applied:
            self.config_files.append(CLI_OVERRIDE_MARKER)
        return self
