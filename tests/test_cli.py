from unittest import mock

import pytest

from jewel_appraiser import cli


def test_cli_runs_streamlit_with_store(tmp_path):
    with mock.patch.object(cli.subprocess, "call", return_value=0) as call:
        with pytest.raises(SystemExit) as exc:
            cli.main(["--port", "9000", "--headless", "--store", str(tmp_path / "s.json")])
    assert exc.value.code == 0
    cmd = call.call_args[0][0]
    assert cmd[1:4] == ["-m", "streamlit", "run"]
    assert cmd[4].endswith("streamlit_app.py")
    assert "9000" in cmd and "--server.headless" in cmd
    assert call.call_args[1]["env"]["JEWEL_APPRAISER_STORE"] == str(tmp_path / "s.json")
