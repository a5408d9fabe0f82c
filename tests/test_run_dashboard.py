from unittest.mock import patch

from leverage_dashboard import config, run_dashboard


def test_command_runs_app_with_default_flags():
    command = run_dashboard.build_command()
    assert command[1:4] == ["-m", "streamlit", "run"]
    assert command[4].endswith("app.py")
    assert command[5:] == config.STREAMLIT_FLAGS
    assert "--browser.gatherUsageStats" in command


def test_extra_args_appended_after_defaults():
    command = run_dashboard.build_command(["--server.port", "9000"])
    assert command[-2:] == ["--server.port", "9000"]


def test_main_invokes_streamlit():
    with patch("leverage_dashboard.run_dashboard.subprocess.call", return_value=0) as mock_call, \
         patch("sys.argv", ["leverage-dashboard"]):
        assert run_dashboard.main() == 0
    mock_call.assert_called_once_with(run_dashboard.build_command([]))
