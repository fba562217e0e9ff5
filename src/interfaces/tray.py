"""
OPSIS Control Panel - System Tray Integration

Defines the tray menu and dispatches its items to a Platform. The GUI shell
owns the actual tray icon and window; it builds the menu from TRAY_MENU and
calls handle_menu_event() with the id of whatever the user clicked. Shells
that run out of process use the command line instead:

    python -m src.interfaces.tray --menu
    python -m src.interfaces.tray restart_service
"""

import argparse
import json
import logging
import sys
import subprocess
import threading
import webbrowser
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Tuple

from src.config import Settings, get_settings
from src.utils.paths import agent_log_path

logger = logging.getLogger(__name__)

TRAY_TOOLTIP = "OPSIS Agent - Autonomous IT Management"

SEPARATOR = None

# (id, label); SEPARATOR entries draw a divider
TRAY_MENU: List[Optional[Tuple[str, str]]] = [
    ("show", "Show Control Panel"),
    ("get_help", "Get Help"),
    ("view_logs", "View Logs"),
    SEPARATOR,
    ("restart_service", "Restart Service"),
    SEPARATOR,
    ("quit", "Quit"),
]


# ============================================================================
# Platform Abstraction
# ============================================================================

class Platform(Protocol):
    """OS and window operations the tray menu needs."""

    def show_window(self) -> None: ...

    def open_url(self, url: str) -> None: ...

    def open_path(self, path: Path) -> None: ...

    def restart_service(self, service_name: str) -> None: ...

    def quit(self) -> None: ...


class DesktopPlatform:
    """Platform backed by the default browser and the Windows service manager.

    Window visibility and shutdown belong to the GUI shell, which passes them
    in as callbacks.
    """

    def __init__(self, on_show: Callable[[], None], on_quit: Callable[[], None]):
        self._on_show = on_show
        self._on_quit = on_quit
        self._workers: List[threading.Thread] = []

    def show_window(self) -> None:
        self._on_show()

    def open_url(self, url: str) -> None:
        if not webbrowser.open(url):
            logger.warning(f"No browser available to open {url}")

    def open_path(self, path: Path) -> None:
        if not webbrowser.open(path.resolve().as_uri()):
            logger.warning(f"No handler available to open {path}")

    def restart_service(self, service_name: str) -> None:
        # net stop blocks until the service is down; keep the tray responsive
        command = f'net stop "{service_name}" && net start "{service_name}"'
        worker = threading.Thread(
            target=self._run_restart, args=(command,), name="restart-service", daemon=True
        )
        worker.start()
        self._workers.append(worker)

    def quit(self) -> None:
        self._on_quit()

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until background work (service restarts) has finished."""
        for worker in self._workers:
            worker.join(timeout)

    @staticmethod
    def _run_restart(command: str) -> None:
        try:
            result = subprocess.run(["cmd", "/c", command], capture_output=True, text=True)
        except OSError as e:
            logger.error(f"Service restart failed to launch: {e}")
            return
        if result.returncode != 0:
            logger.error(f"Service restart exited with {result.returncode}: {result.stderr.strip()}")
        else:
            logger.info("Service restarted")


# ============================================================================
# Menu Dispatch
# ============================================================================

def handle_menu_event(
    item_id: str,
    platform: Platform,
    settings: Settings,
    executable: Optional[Path] = None,
) -> bool:
    """Run the action for a tray menu item.

    Returns:
        True if the id was recognised and an action ran, False otherwise.
        "View Logs" with no log file on disk counts as not run.
    """
    if item_id == "show":
        platform.show_window()
    elif item_id == "get_help":
        platform.open_url(settings.self_service_url)
    elif item_id == "view_logs":
        log_path = agent_log_path(executable)
        if log_path is None or not log_path.exists():
            logger.info("No agent log to open")
            return False
        platform.open_path(log_path)
    elif item_id == "restart_service":
        logger.info(f"Restarting {settings.service_name}")
        platform.restart_service(settings.service_name)
    elif item_id == "quit":
        platform.quit()
    else:
        logger.debug(f"Ignoring unknown tray menu item '{item_id}'")
        return False
    return True


def handle_tray_double_click(platform: Platform) -> None:
    platform.show_window()


# ============================================================================
# Main Entry Point
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Command line used by the GUI shell.

    ``--menu`` prints TRAY_MENU as JSON for the shell to build its tray from.
    Otherwise the given menu item is dispatched once; window actions the shell
    must perform itself ("show", "quit") are echoed on stdout.

    Returns:
        0 if the item ran, 1 if it was unknown or had nothing to do.
    """
    parser = argparse.ArgumentParser(prog="opsis-tray", description="OPSIS tray menu actions")
    parser.add_argument("item", nargs="?", help="menu item id, e.g. restart_service")
    parser.add_argument("--menu", action="store_true", help="print the tray menu as JSON")
    args = parser.parse_args(argv)

    if args.menu or not args.item:
        menu = [None if item is SEPARATOR else {"id": item[0], "label": item[1]} for item in TRAY_MENU]
        print(json.dumps({"tooltip": TRAY_TOOLTIP, "items": menu}))
        return 0

    settings = get_settings()
    logging.basicConfig(level=settings.resolved_log_level())
    platform = DesktopPlatform(on_show=lambda: print("show"), on_quit=lambda: print("quit"))
    handled = handle_menu_event(args.item, platform, settings)
    platform.wait()
    return 0 if handled else 1


if __name__ == "__main__":
    sys.exit(main())
