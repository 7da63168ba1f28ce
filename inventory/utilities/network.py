"""Network helper used by `inventory.main` to print the LAN address at startup."""
import socket


def get_local_ip() -> str:
    """Return the local (LAN) IP the OS would use for outbound traffic, or '127.0.0.1'.

    Connecting a UDP socket sends nothing; it only makes the OS pick a source address.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip
