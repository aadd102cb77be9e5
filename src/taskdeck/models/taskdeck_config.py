"""Configuration models for taskdeck.yml."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_TASKS_FILE = "tasks.md"
DEFAULT_CATEGORY = "unclassified"
DEFAULT_COMPLETED_TITLE = "Completed (Recent)"


class GrammarConfig(BaseModel):
    """Feature flags for the task list dialect.

    One grammar covers every dialect the task file has used: the strict
    form requires a ``[category]`` tag on every task line, the loose form
    also accepts ``*`` bullets and untagged lines.
    """

    version: int = Field(default=2, ge=1)
    category_required: bool = True
    urgency_subsections: bool = True
    default_category: str = DEFAULT_CATEGORY
    must_caption: str = Field(default="Must Do Today", min_length=1)
    should_caption: str = Field(default="Should Do Today", min_length=1)
    completed_title: str = Field(default=DEFAULT_COMPLETED_TITLE, min_length=1)

    @field_validator("default_category")
    @classmethod
    def validate_default_category(cls, v: str) -> str:
        """Categories are stored lowercase and may not contain brackets."""
        v = v.strip().lower()
        if not v:
            raise ValueError("default_category cannot be empty")
        if "[" in v or "]" in v:
            raise ValueError("default_category cannot contain brackets")
        return v

    @field_validator("completed_title")
    @classmethod
    def validate_completed_title(cls, v: str) -> str:
        """The completed header must still be recognised after it is written."""
        if not v.lower().startswith("completed"):
            raise ValueError("completed_title must start with 'Completed'")
        return v

    @property
    def completed_header(self) -> str:
        return f"## {self.completed_title}"

    @classmethod
    def loose(cls) -> "GrammarConfig":
        """Dialect of the first task view: untagged lines allowed, no tiers."""
        return cls(version=1, category_required=False, urgency_subsections=False)


class TaskDeckConfig(BaseModel):
    """Root configuration model for taskdeck.yml."""

    version: int = 1
    tasks_file: str = Field(default=DEFAULT_TASKS_FILE, min_length=1)
    grammar: GrammarConfig = Field(default_factory=GrammarConfig)

    @field_validator("tasks_file")
    @classmethod
    def validate_tasks_file(cls, v: str) -> str:
        if not v.endswith(".md"):
            raise ValueError("tasks_file must be a markdown file (.md)")
        return v

    @classmethod
    def default(cls) -> "TaskDeckConfig":
        return cls()
