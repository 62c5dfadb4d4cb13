"""Application wiring shared by every front end.

Startup reads storage once: the task list hydrates a TaskStore and the
theme flag is read into App. Every later change is written back right away.
"""

import logging
from dataclasses import dataclass

from .adapters.json_prefs import JsonFileKeyValueStore
from .config import Config, load_config
from .gateway import PersistenceGateway
from .ports.kv_store import KeyValueStore
from .store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class App:
    """Process-wide state: the task store and the theme flag."""

    config: Config
    gateway: PersistenceGateway
    store: TaskStore
    is_dark: bool = False

    def set_theme(self, is_dark: bool) -> None:
        """Set and persist the theme flag."""
        self.is_dark = is_dark
        self.gateway.save_theme_flag(is_dark)
        logger.info(f"Theme set to {'dark' if is_dark else 'light'}")

    def toggle_theme(self) -> bool:
        """Flip the theme flag. Returns the new value."""
        self.set_theme(not self.is_dark)
        return self.is_dark


def get_kv_store(config: Config) -> JsonFileKeyValueStore:
    """Resolve the prefs file from config."""
    return JsonFileKeyValueStore(config.prefs_file)


def open_app(config: Config | None = None, kv: KeyValueStore | None = None) -> App:
    """Build the app and hydrate it from storage."""
    config = config or load_config()
    gateway = PersistenceGateway(kv if kv is not None else get_kv_store(config))
    store = TaskStore(
        gateway,
        sort_high_first=config.sort_high_first,
        sort_on_add=config.sort_on_add,
    )
    store.load()
    return App(
        config=config,
        gateway=gateway,
        store=store,
        is_dark=gateway.load_theme_flag(),
    )
