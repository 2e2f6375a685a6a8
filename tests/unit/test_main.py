"""Unit tests for the server entry point wiring.

Servers are never started: uvicorn, NiceGUI and subprocess are patched.
"""

import os
from unittest.mock import MagicMock, patch

from nexus_inquire import main as entry


class TestRunIntegrated:
    """Tests for the single-server layout."""

    @patch("nicegui.ui.run_with")
    @patch("uvicorn.run")
    def test_sidebar_targets_own_port(
        self, mock_uvicorn_run: MagicMock, mock_run_with: MagicMock
    ) -> None:
        """Without API_BASE_URL the sidebar posts to the port being served."""
        with patch.dict("os.environ", {"PORT": "9000"}):
            os.environ.pop("API_BASE_URL", None)

            entry.run_integrated()

            assert os.environ["API_BASE_URL"] == "http://localhost:9000"

        mock_run_with.assert_called_once()
        assert mock_uvicorn_run.call_args.kwargs["port"] == 9000

    @patch("nicegui.ui.run_with")
    @patch("uvicorn.run")
    def test_explicit_base_url_is_kept(
        self, mock_uvicorn_run: MagicMock, mock_run_with: MagicMock
    ) -> None:
        with patch.dict(
            "os.environ", {"PORT": "9000", "API_BASE_URL": "http://proxy.internal:7000"}
        ):
            entry.run_integrated()

            assert os.environ["API_BASE_URL"] == "http://proxy.internal:7000"


class TestRunSeparate:
    """Tests for the two-process layout."""

    @patch("subprocess.Popen")
    def test_sidebar_process_points_at_api_port(self, mock_popen: MagicMock) -> None:
        mock_popen.return_value.poll.return_value = 0

        with patch.dict("os.environ", {"API_PORT": "8100", "UI_PORT": "8200"}):
            os.environ.pop("API_BASE_URL", None)

            entry.run_separate()

        api_call, ui_call = mock_popen.call_args_list
        api_args = api_call.args[0]
        assert api_args[api_args.index("--port") + 1] == "8100"
        assert ui_call.kwargs["env"]["API_BASE_URL"] == "http://localhost:8100"
        assert ui_call.kwargs["env"]["UI_PORT"] == "8200"
        assert mock_popen.return_value.terminate.call_count == 2
