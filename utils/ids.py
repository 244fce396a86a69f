import time
import secrets


def create_id_with_prefix(prefix: str) -> str:
    # timestamp + 8 random hex chars; same-millisecond calls stay distinct
    stamp = int(time.time() * 1000)
    return f"{prefix}_{stamp}_{secrets.token_hex(4)}"
