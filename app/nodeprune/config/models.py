"""Pydantic models for the nodeprune configuration file.

Top-level keys configure the run; the optional [rules] table replaces
the built-in rule tables and the optional [colors] table overrides the
CLI theme.
"""

from collections.abc import Iterable
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nodeprune.engine import DEFAULT_DIRECTORY, PruneOptions


class RulesConfig(BaseModel):
    """Replacement rule tables.

    A table left unset keeps the built-in defaults; an empty list
    disables that kind of rule entirely.

    Attributes:
        files: File names or relative paths to prune.
        directories: Directory names to prune.
        extensions: File extensions to prune, with leading dot.
    """

    model_config = ConfigDict(extra="forbid")

    files: Annotated[list[str] | None, Field(description="File names to prune")] = None
    directories: Annotated[
        list[str] | None, Field(description="Directory names to prune")
    ] = None
    extensions: Annotated[list[str] | None, Field(description="Extensions to prune")] = None

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str] | None) -> list[str] | None:
        """Validate that every extension starts with a dot."""
        if v is None:
            return v
        for ext in v:
            if not ext.startswith(".") or len(ext) < 2:
                msg = f"Extension must start with '.', got {ext!r}"
                raise ValueError(msg)
        return v


class PruneConfig(BaseModel):
    """Top-level configuration file model.

    Attributes:
        directory: Directory pruned when none is given on the command line.
        workers: Deletion pool size (unset for one per CPU core).
        dry_run: Never remove anything.
        include: Extra patterns that are always pruned.
        exclude: Globs that are never pruned.
        rules: Replacement rule tables.
        colors: Theme color overrides.
    """

    model_config = ConfigDict(extra="forbid")

    directory: Annotated[str, Field(min_length=1, description="Root directory")] = (
        DEFAULT_DIRECTORY
    )
    workers: Annotated[int | None, Field(ge=1, description="Deletion workers")] = None
    dry_run: Annotated[bool, Field(description="Simulate removals")] = False
    include: Annotated[
        list[str],
        Field(default_factory=list, description="Patterns always pruned"),
    ]
    exclude: Annotated[
        list[str],
        Field(default_factory=list, description="Globs never pruned"),
    ]
    rules: Annotated[
        RulesConfig,
        Field(default_factory=RulesConfig, description="Replacement rule tables"),
    ]
    colors: Annotated[
        dict[str, str],
        Field(default_factory=dict, description="Theme color overrides"),
    ]

    @field_validator("include", "exclude")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Validate that no pattern is empty."""
        if any(not pattern.strip() for pattern in v):
            msg = "Patterns cannot be empty"
            raise ValueError(msg)
        return v

    def to_options(
        self,
        *,
        directory: str | None = None,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
        workers: int | None = None,
        dry_run: bool = False,
        verbose: bool = False,
    ) -> PruneOptions:
        """Merge command-line values over this configuration.

        Scalars given on the command line win; include/exclude patterns
        are appended to the configured lists.

        Returns:
            PruneOptions for a single run.
        """

        def _table(values: list[str] | None) -> tuple[str, ...] | None:
            return None if values is None else tuple(values)

        return PruneOptions(
            directory=directory or self.directory,
            files=_table(self.rules.files),
            directories=_table(self.rules.directories),
            extensions=_table(self.rules.extensions),
            include=(*self.include, *include),
            exclude=(*self.exclude, *exclude),
            workers=workers if workers is not None else self.workers,
            dry_run=dry_run or self.dry_run,
            verbose=verbose,
        )
