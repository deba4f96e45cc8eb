import socket

from core.config import PORT_SCAN_RANGE, SERVER_HOST


def find_free_port(host=SERVER_HOST, start_port=PORT_SCAN_RANGE[0], max_port=PORT_SCAN_RANGE[1]):
    """Return the first port in [start_port, max_port] that can be bound on host, else None."""
    for port in range(start_port, max_port + 1):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((host, port))
                return port
            except OSError:
                continue
    return None


if __name__ == "__main__":
    print(find_free_port())
