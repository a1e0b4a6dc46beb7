"""
Settings management for commitgraph
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any

from commitgraph.constants import (
    DEFAULT_BUFFER_ROWS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_ROW_HEIGHT,
    DEFAULT_SCROLL_DURATION,
)

logger = logging.getLogger(__name__)


class Settings:
    """Manages application settings"""

    DEFAULT_SETTINGS: dict[str, Any] = {
        "graph": {
            "row_height": DEFAULT_ROW_HEIGHT,
            "buffer_rows": DEFAULT_BUFFER_ROWS,
            "scroll_duration": DEFAULT_SCROLL_DURATION,  # ms, 0 jumps instantly
        },
        "history": {
            "page_size": DEFAULT_PAGE_SIZE,  # Commits fetched per "load more"
            "show_remote_branches": False,
            "show_tags": False,
        },
        "ui": {
            "window_size": [1100, 700],
        },
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = Path.home() / ".config" / "commitgraph" / "settings.json"

        self.config_path = config_path
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file"""
        if not self.config_path.exists():
            return
        try:
            with open(self.config_path) as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.config_path, e)
            return
        if isinstance(loaded, dict):
            # Merge with defaults to handle new settings
            self._merge_settings(self.settings, loaded)

    def save(self) -> None:
        """Save settings to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.settings, f, indent=2)

    def _merge_settings(self, base: dict[str, Any], updates: dict[str, Any]) -> None:
        """Recursively merge settings dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                base_dict: dict[str, Any] = base[key]
                value_dict: dict[str, Any] = value
                self._merge_settings(base_dict, value_dict)
            else:
                base[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get a setting by dot-separated path (e.g., 'graph.row_height')"""
        parts = path.split(".")
        value: Any = self.settings

        for part in parts:
            if isinstance(value, dict):
                value_dict: dict[str, Any] = value
                if part in value_dict:
                    value = value_dict[part]
                else:
                    return default
            else:
                return default

        return value

    def set(self, path: str, value: Any) -> None:
        """Set a setting by dot-separated path"""
        parts = path.split(".")
        target: Any = self.settings

        for part in parts[:-1]:
            if part not in target:
                target[part] = {}
            target = target[part]

        target[parts[-1]] = value

    def get_row_height(self) -> int:
        """Get the height of one commit row in pixels."""
        height: int = int(self.get("graph.row_height", DEFAULT_ROW_HEIGHT))
        return max(12, height)  # Room for the node and one line of text

    def get_buffer_rows(self) -> int:
        """Get how many rows are rendered beyond each edge of the visible area."""
        rows: int = int(self.get("graph.buffer_rows", DEFAULT_BUFFER_ROWS))
        return max(0, rows)

    def get_scroll_duration(self) -> int:
        duration: int = int(self.get("graph.scroll_duration", DEFAULT_SCROLL_DURATION))
        return max(0, duration)

    def get_page_size(self) -> int:
        """Get the number of commits loaded initially and per "load more"."""
        size: int = int(self.get("history.page_size", DEFAULT_PAGE_SIZE))
        return max(1, size)

    def get_show_remote_branches(self) -> bool:
        return bool(self.get("history.show_remote_branches", False))

    def get_show_tags(self) -> bool:
        return bool(self.get("history.show_tags", False))
