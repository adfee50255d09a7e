import datetime
import time


def now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def elapsed_ms(started: float) -> str:
    return f"{int((time.perf_counter() - started) * 1000)}ms"
