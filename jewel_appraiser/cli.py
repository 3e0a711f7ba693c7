import argparse
import os
import sys
import subprocess
from importlib import resources


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="jewel-appraiser",
        description="Launch the Jewel Appraiser Streamlit app."
    )
    parser.add_argument("--port", type=int, default=8501, help="Port to serve on (default: 8501)")
    parser.add_argument("--headless", action="store_true", help="Run in headless mode (no auto-browser)")
    parser.add_argument("--server-address", default="localhost", help="Bind address (default: localhost)")
    parser.add_argument("--store", default=None, help="Path of the local JSON store (history, custom materials)")
    args = parser.parse_args(argv)

    # Locate the packaged entry script on disk
    app_path = resources.files("jewel_appraiser").joinpath("streamlit_app.py")
    if not app_path.is_file():
        print("Could not locate jewel_appraiser/streamlit_app.py inside the package.", file=sys.stderr)
        sys.exit(1)

    cmd = [
        sys.executable, "-m", "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.address", args.server_address,
        "--browser.gatherUsageStats", "false",
    ]
    if args.headless:
        cmd += ["--server.headless", "true"]

    env = dict(os.environ)
    if args.store:
        env["JEWEL_APPRAISER_STORE"] = args.store

    # Defer all runtime logging/serving to Streamlit
    sys.exit(subprocess.call(cmd, env=env))


if __name__ == "__main__":
    main()
