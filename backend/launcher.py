"""Unit Converter desktop launcher — starts the server and opens the browser."""

from __future__ import annotations

import logging
import os
import socket
import sys
import threading
import time
import traceback
import webbrowser

import uvicorn

logger = logging.getLogger("unitconverter.launcher")


def _get_log_path() -> str:
    """Return a path for the crash log next to the executable or this file."""
    if getattr(sys, "_MEIPASS", None):
        return os.path.join(os.path.dirname(sys.executable), "unitconverter_crash.log")
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "unitconverter_crash.log")


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def wait_for_port(port: int, attempts: int = 50, delay: float = 0.1) -> bool:
    """Poll until something listens on the port. Returns False if it never does."""
    for _ in range(attempts):
        try:
            with socket.create_connection(("127.0.0.1", port), timeout=delay):
                return True
        except OSError:
            time.sleep(delay)
    return False


def open_browser(port: int) -> None:
    """Wait for the server to start, then open the API docs."""
    if not wait_for_port(port):
        logger.warning("Server did not come up on port %d; not opening a browser", port)
        return
    webbrowser.open(f"http://127.0.0.1:{port}/docs")


def main() -> None:
    port = find_free_port()
    print(f"Starting Unit Converter on http://127.0.0.1:{port}")
    print("Close this window or press Ctrl+C to stop.\n")

    threading.Thread(target=open_browser, args=(port,), daemon=True).start()

    uvicorn.run(
        "unitconverter.main:app",
        host="127.0.0.1",
        port=port,
        log_level="info",
    )


def run() -> None:
    try:
        main()
    except Exception:
        err = traceback.format_exc()
        print(err)
        log_path = _get_log_path()
        try:
            with open(log_path, "w", encoding="utf-8") as f:
                f.write(err)
        except OSError as exc:
            print(f"\nCould not write crash log to {log_path}: {exc}")
        else:
            print(f"\nCrash log saved to: {log_path}")
        sys.exit(1)


if __name__ == "__main__":
    run()
