"""
Hotkey Registry - Routes key combos to actions.

The routing table maps each combo identifier ("<prefix>-<key>") to one
tagged action:
  - LaunchOrFocus(binding): handed to the ActionResolver
  - WindowOp(name): handed to the WindowOperation registered under name

The table is filled once at startup, frozen, and only read afterwards.
Registering an existing combo again replaces its action.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from loguru import logger

from uiauto.hotkeys.combo import ComboError, join_combo, to_hotkey
from uiauto.utils.helpers import AppBinding


@dataclass(frozen=True)
class LaunchOrFocus:
    """Start the application, or focus it if already running."""
    binding: AppBinding


@dataclass(frozen=True)
class WindowOp:
    """Run a named operation on the active window."""
    name: str


Action = Union[LaunchOrFocus, WindowOp]


@dataclass(frozen=True)
class Route:
    """One entry of the routing table."""
    combo: str
    hotkey: str  # pynput syntax, used by the session to subscribe
    action: Action


class WindowOperation(ABC):
    """Base class for operations on the active window."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Operation name used in the [window_manage] table."""
        ...

    @abstractmethod
    def run(self) -> None:
        """Apply the operation. Must log and return on failure."""
        ...


class HotkeyRegistry:
    """
    Static routing table from key combos to actions.

    Args:
        resolver: Object with resolve(AppBinding), normally ActionResolver
        operations: Window operations available to WindowOp actions
        subscribe: Validates a combo and returns the session hotkey for it,
            raising ComboError if the combo cannot be bound
    """

    def __init__(
        self,
        resolver,
        operations: tuple = (),
        subscribe: Callable[[str], str] = to_hotkey,
    ):
        self._resolver = resolver
        self._operations: dict[str, WindowOperation] = {op.name: op for op in operations}
        self._subscribe = subscribe
        self._routes: dict[str, Route] = {}
        self._frozen = False

    def register_app_binding(self, prefix: str, key: str, binding: AppBinding) -> bool:
        """Bind prefix-key to launch-or-focus for binding."""
        return self._add(join_combo(prefix, key), LaunchOrFocus(binding), binding.command)

    def register_window_action(self, prefix: str, key: str, action_name: str) -> bool:
        """Bind prefix-key to the named window operation."""
        return self._add(join_combo(prefix, key), WindowOp(action_name), action_name)

    def _add(self, combo: str, action: Action, label: str) -> bool:
        if self._frozen:
            raise RuntimeError("Hotkey registry is frozen")

        try:
            hotkey = self._subscribe(combo)
        except ComboError as e:
            logger.error(f"Error binding key for {label}: {e}")
            return False

        if combo in self._routes:
            logger.debug(f"Rebinding {combo}, previous action replaced")
        self._routes[combo] = Route(combo=combo, hotkey=hotkey, action=action)
        return True

    def freeze(self) -> Mapping[str, Route]:
        """Stop accepting registrations and return the read-only table."""
        self._frozen = True
        return self.routes

    @property
    def routes(self) -> Mapping[str, Route]:
        return MappingProxyType(self._routes)

    def lookup(self, combo: str) -> Optional[Action]:
        route = self._routes.get(combo)
        return route.action if route else None

    def dispatch(self, combo: str) -> None:
        """
        Run the action bound to combo.

        Never raises: anything escaping an action is logged so the event
        loop keeps delivering the remaining hotkeys.
        """
        action = self.lookup(combo)
        if action is None:
            logger.debug(f"No action bound to {combo}")
            return

        try:
            if isinstance(action, LaunchOrFocus):
                self._resolver.resolve(action.binding)
            elif isinstance(action, WindowOp):
                operation = self._operations.get(action.name)
                # Unknown operation names are a no-op
                if operation is not None:
                    operation.run()
        except Exception:
            logger.exception(f"Action for {combo} failed")


def build_registry(config, resolver, operations: tuple = (), subscribe=to_hotkey) -> HotkeyRegistry:
    """
    Register every binding from the configuration and freeze the table.

    Combos that fail to bind are logged and skipped; the rest install.

    Args:
        config: Loaded Configuration
        resolver: ActionResolver for app bindings
        operations: Available WindowOperation instances
        subscribe: Combo validator, see HotkeyRegistry

    Returns:
        Frozen HotkeyRegistry
    """
    registry = HotkeyRegistry(resolver, operations, subscribe)

    for key, binding in config.app_select.items():
        registry.register_app_binding(config.app_select_prefix, key, binding)
    logger.info(
        f"Keymaps set. Use {config.app_select_prefix}-[key] to launch or focus applications."
    )

    for key, action in config.window_manage.items():
        registry.register_window_action(config.window_manage_prefix, key, action.name)
    logger.info(f"Keymaps set. Use {config.window_manage_prefix}-[key] to manage windows.")

    registry.freeze()
    return registry
