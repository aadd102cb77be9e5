"""Generate command for creating default config and a starter task file."""

import logging
from datetime import date, timedelta
from pathlib import Path

import yaml

from ..models import TaskDeckConfig
from ..services import ConfigService
from ..utils import local_today, short_date_label, weekday_name
from .output import error, info, success

logger = logging.getLogger(__name__)

CONFIG_FILE = ConfigService.CONFIG_FILE

# Header comments for generated file
CONFIG_HEADER = """\
# taskdeck Workspace Configuration
#
# tasks_file: Workspace-relative path of the task list (must end in .md)
#
# grammar:
#   category_required: every task line needs a [category] tag.
#     Set to false to also accept "* [ ] text" and untagged lines,
#     which are filed under default_category.
#   urgency_subsections: recognise "### Must Do Today" and
#     "### Should Do Today" headers inside a day.
#   must_caption / should_caption: caption text matched in those headers
#     (any leading emoji marker is ignored).
#   completed_title: header written when a Completed section is created.

"""


def generate_config_yaml(tasks_file: str | None = None) -> str:
    """Generate YAML config from the default TaskDeckConfig model.

    Uses TaskDeckConfig.default() as the single source of truth,
    so the generated file always matches internal defaults.
    """
    config_dict = TaskDeckConfig.default().model_dump()
    if tasks_file:
        config_dict["tasks_file"] = tasks_file
    yaml_content = yaml.safe_dump(config_dict, default_flow_style=False, sort_keys=False)
    return CONFIG_HEADER + yaml_content


def starter_document(today: date | None = None) -> str:
    """A small task file for today and tomorrow in the default dialect."""
    today = today or local_today()
    tomorrow = today + timedelta(days=1)
    lines = [
        "# Tasks",
        "",
        f"## {weekday_name(today)}, {short_date_label(today)}",
        "### 🔴 Must Do Today",
        "- [ ] [setup] Review taskdeck.yml",
        "### 🟡 Should Do Today",
        "- [ ] [setup] Add this week's days",
        "",
        f"## {weekday_name(tomorrow)}, {short_date_label(tomorrow)}",
        "",
        "## Backlog",
        "",
        "## Completed (Recent)",
        "",
    ]
    return "\n".join(lines)


def run_generate(workspace_root: Path, today: date | None = None) -> int:
    """
    Generate default configuration and task file.

    Args:
        workspace_root: Workspace directory where taskdeck.yml will be created

    Returns:
        Exit code (0 = success, 1 = nothing to do or error)
    """
    config_created = False
    tasks_created = False

    if workspace_root.exists() and not workspace_root.is_dir():
        error(f"Workspace is not a directory: {workspace_root}")
        return 1
    workspace_root.mkdir(parents=True, exist_ok=True)

    config_path = workspace_root / CONFIG_FILE
    if config_path.exists():
        info(f"Config exists: {config_path}")
        config_service = ConfigService(workspace_root)
        tasks_file = config_service.tasks_file
        if config_service.has_config_error:
            error(f"{config_service.config_error} (using {tasks_file})")
    else:
        config_path.write_text(generate_config_yaml())
        success(f"Generated config: {config_path}")
        tasks_file = TaskDeckConfig.default().tasks_file
        config_created = True

    tasks_path = workspace_root / tasks_file
    if tasks_path.exists():
        info(f"Task file exists: {tasks_path}")
    else:
        tasks_path.parent.mkdir(parents=True, exist_ok=True)
        tasks_path.write_text(starter_document(today), encoding="utf-8")
        success(f"Created task file: {tasks_path}")
        tasks_created = True

    if not config_created and not tasks_created:
        print("Nothing to generate.")
        return 1

    logger.info("Generated workspace files in %s", workspace_root)
    return 0
