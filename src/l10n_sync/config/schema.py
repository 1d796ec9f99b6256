"""Configuration schema for l10n-sync using nested Pydantic models."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RepositoryConfig(BaseModel):
    """Layout of the repository being synchronized."""

    model_config = ConfigDict(extra="forbid")

    root: Path = Field(
        default=Path("."),
        description="Root of the git working tree",
    )
    translations_dir: Path = Field(
        default=Path("static/translations"),
        description="Directory holding one translation file per language, relative to root",
    )
    languages_file: Path = Field(
        default=Path("src/i18n/languages.py"),
        description="File listing the supported languages, named in new-language guidance",
    )
    sibling_checkout: Path | None = Field(
        default=None,
        description="Related repository expected next to this one (e.g. ../server)",
    )

    @field_validator("translations_dir")
    @classmethod
    def validate_translations_dir(cls, v: Path) -> Path:
        """Keep the translations directory inside the working tree."""
        if v.is_absolute() or ".." in v.parts:
            raise ValueError("translations_dir must be a path inside the repository root")
        return v


class WeblateConfig(BaseModel):
    """Weblate REST API access."""

    model_config = ConfigDict(extra="forbid")

    api_url: str = Field(
        default="https://hosted.weblate.org/api",
        description="Weblate API base URL",
        pattern=r"^https?://.*",
    )
    api_key: str | None = Field(
        default=None,
        description="Weblate API token; falls back to the WEBLATE_API_KEY environment variable",
    )
    project: str = Field(default="", description="Weblate project slug")
    component: str = Field(default="", description="Weblate component slug")
    source_language: str = Field(
        default="en",
        description="Language code of the source strings",
        min_length=1,
    )
    file_template: str = Field(
        default="{language}.json",
        description="Translation file name inside translations_dir",
    )
    source_file: Path | None = Field(
        default=None,
        description="Source strings file, relative to root; defaults to the source language's file",
    )
    timeout: Annotated[int, Field(ge=1, le=600)] = Field(
        default=30,
        description="HTTP request timeout in seconds",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Normalize the API URL."""
        return v.rstrip("/")

    @field_validator("file_template")
    @classmethod
    def validate_file_template(cls, v: str) -> str:
        """Require the language placeholder and no other fields."""
        if "{language}" not in v:
            raise ValueError("file_template must contain the {language} placeholder")
        try:
            sample = Path(v.format(language="xx"))
        except (AttributeError, IndexError, KeyError, ValueError) as e:
            raise ValueError(
                f"file_template may only use the {{language}} placeholder: {e}"
            ) from e
        if sample.is_absolute() or ".." in sample.parts:
            raise ValueError("file_template must stay inside translations_dir")
        return v


class PlatformConfig(BaseModel):
    """Translation platform client configuration."""

    model_config = ConfigDict(extra="forbid")

    backend: Literal["command", "weblate"] = Field(
        default="command",
        description="How to talk to the translation platform",
    )
    pull_command: list[str] = Field(
        default_factory=lambda: ["tx", "pull", "--all", "--force"],
        description="Command that downloads translations into the working tree",
        min_length=1,
    )
    push_command: list[str] = Field(
        default_factory=lambda: ["tx", "push", "--source"],
        description="Command that uploads the current source strings",
        min_length=1,
    )
    weblate: WeblateConfig = Field(default_factory=WeblateConfig)

    @model_validator(mode="after")
    def validate_weblate_target(self) -> "PlatformConfig":
        """The weblate backend needs a project and component."""
        if self.backend == "weblate" and not (self.weblate.project and self.weblate.component):
            raise ValueError("platform.weblate.project and component are required for the weblate backend")
        return self


class CommitConfig(BaseModel):
    """Commit messages used by the sync steps."""

    model_config = ConfigDict(extra="forbid")

    translations_message: str = Field(
        default="i18n: Sync translations from the translation platform.",
        min_length=1,
    )
    source_message: str = Field(
        default="i18n: Sync new source strings with the translation platform.",
        min_length=1,
    )


class SyncConfig(BaseModel):
    """Top-level l10n-sync configuration."""

    model_config = ConfigDict(extra="forbid")

    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    platform: PlatformConfig = Field(default_factory=PlatformConfig)
    commits: CommitConfig = Field(default_factory=CommitConfig)

    @model_validator(mode="after")
    def validate_distinct_messages(self) -> "SyncConfig":
        """Each step's commit must be distinguishable in history."""
        if self.commits.translations_message == self.commits.source_message:
            raise ValueError("commits.translations_message and commits.source_message must differ")
        return self

    def resolve_paths(self, base_dir: Path) -> "SyncConfig":
        """
        Return a copy with repository paths anchored at ``base_dir``.

        Args:
            base_dir: Directory relative paths are interpreted against

        Returns:
            SyncConfig: Copy with an absolute root and sibling checkout
        """
        repository = self.repository
        root = repository.root if repository.root.is_absolute() else base_dir / repository.root
        sibling = repository.sibling_checkout
        if sibling is not None and not sibling.is_absolute():
            sibling = base_dir / sibling

        resolved = repository.model_copy(
            update={"root": root.resolve(), "sibling_checkout": sibling}
        )
        return self.model_copy(update={"repository": resolved})
