import logging
import socket

import uvicorn
from dishbank.api.api_run import app
from dishbank.utilities.config import APP_HOST, APP_PORT, DEBUG


def get_local_ip() -> str:
    """Non-loopback LAN address if the OS can pick one, otherwise '127.0.0.1'.

    Connecting a UDP socket sends nothing; it only makes the OS choose the
    outgoing interface.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
        try:
            s.connect(("8.8.8.8", 80))
            return str(s.getsockname()[0])
        except OSError:
            return "127.0.0.1"


def main():
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    local_url = f"http://localhost:{APP_PORT}"
    local_ip = get_local_ip()
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    # Phones on the same network can open the planner too
    if local_ip not in ("127.0.0.1", "localhost"):
        print(f"Accessible from other devices at: http://{local_ip}:{APP_PORT}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    main()
