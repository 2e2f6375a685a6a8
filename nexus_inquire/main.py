"""Nexus Inquire server entry point.

Two layouts are supported:
    - integrated (default): one uvicorn server on PORT serves the completion
      proxy and the NiceGUI sidebar, and the sidebar posts back to that port.
    - separate: the proxy runs on API_PORT and the sidebar on UI_PORT, each in
      its own process, with the sidebar pointed at the proxy via API_BASE_URL.

Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def local_url(port: int) -> str:
    return f"http://localhost:{port}"


def run_integrated() -> None:
    """Serve the proxy and the sidebar from one process on PORT."""
    import uvicorn
    from nicegui import ui

    port = int(os.getenv("PORT", "8000"))
    # The sidebar reaches the proxy over HTTP, so it must target our own port
    os.environ.setdefault("API_BASE_URL", local_url(port))

    from nexus_inquire.api.app import create_app
    from nexus_inquire.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    ui.run_with(
        app,
        title="Nexus Inquire",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "nexus-inquire-secret"),
    )

    logger.info(f"Sidebar and completion proxy on {local_url(port)}")
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run the proxy and the sidebar as two child processes.

    Returns once either child exits; the other one is then terminated.
    """
    import subprocess
    import time

    api_port = int(os.getenv("API_PORT", "8000"))
    ui_port = int(os.getenv("UI_PORT", "8080"))

    ui_env = dict(os.environ)
    ui_env.setdefault("API_BASE_URL", local_url(api_port))
    ui_env["UI_PORT"] = str(ui_port)

    logger.info(f"Completion proxy on {local_url(api_port)}")
    logger.info(f"Sidebar on {local_url(ui_port)}, posting to {ui_env['API_BASE_URL']}")

    children = [
        subprocess.Popen(
            [
                sys.executable,
                "-m",
                "uvicorn",
                "nexus_inquire.api.app:app",
                "--host",
                os.getenv("HOST", "0.0.0.0"),
                "--port",
                str(api_port),
            ]
        ),
        subprocess.Popen([sys.executable, "-m", "nexus_inquire.ui.chat_page"], env=ui_env),
    ]

    try:
        while all(child.poll() is None for child in children):
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        for child in children:
            child.terminate()
        for child in children:
            child.wait()


def main() -> None:
    """Start Nexus Inquire in the layout named by RUN_MODE."""
    configure_logging()
    mode = os.getenv("RUN_MODE", "integrated").lower()
    logger.info(f"Starting Nexus Inquire in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
