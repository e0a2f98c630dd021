"""
Action Resolver - Launch an application or focus its running instance.

Decision per trigger:
  1. Some process command line contains process_name -> focus by window class
  2. Otherwise -> split the command on whitespace and spawn it detached

An empty process_name never matches, so such bindings always launch.
There is a window between spawning a process and the process table
showing it; two triggers inside that window launch twice.
"""

import os
import subprocess

import psutil
from loguru import logger

from uiauto.services import wmctrl
from uiauto.utils.helpers import AppBinding


class ProcessQueryError(Exception):
    """The process table could not be queried."""


class ActionResolver:
    """
    Carries out the launch-or-focus decision for app bindings.

    Every failure is logged and turns the trigger into a no-op; nothing
    is retried and no child process handle is kept.
    """

    def resolve(self, binding: AppBinding) -> None:
        """
        Focus the application if it is running, start it otherwise.

        Args:
            binding: Application descriptor from the configuration
        """
        try:
            running = self.is_running(binding.process_name)
        except ProcessQueryError as e:
            logger.error(f"Error checking whether {binding.command} is running: {e}")
            return

        if running:
            logger.debug(f"{binding.process_name} is running, focusing {binding.window_class!r}")
            self.focus(binding.window_class)
        else:
            logger.debug(f"{binding.process_name or binding.command} not running, launching")
            self.launch(binding.command)

    def is_running(self, process_name: str) -> bool:
        """
        Check whether any process command line contains process_name.

        The name is matched as a literal substring of the space-joined
        command line. This process is never counted.

        Raises:
            ProcessQueryError: If the process table cannot be read
        """
        if not process_name:
            return False

        own_pid = os.getpid()
        try:
            for proc in psutil.process_iter(["pid", "cmdline"]):
                info = proc.info
                if info["pid"] == own_pid or not info["cmdline"]:
                    continue
                if process_name in " ".join(info["cmdline"]):
                    return True
        except psutil.Error as e:
            raise ProcessQueryError(f"Could not list processes: {e}") from e
        return False

    def focus(self, window_class: str) -> bool:
        """Bring the window with the given class to the foreground."""
        if not window_class:
            logger.warning("No window_class configured, skipping focus")
            return False
        return wmctrl.focus_window(window_class)

    def launch(self, command: str) -> bool:
        """
        Start the command without waiting for it.

        The command is split on whitespace; quoting is not supported.

        Returns:
            True if the process was started
        """
        parts = command.split()
        if not parts:
            logger.error("Error starting application: empty command")
            return False

        try:
            subprocess.Popen(
                parts,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            logger.error(f"Error starting {command}: {e}")
            return False

        logger.info(f"Launched {command}")
        return True
