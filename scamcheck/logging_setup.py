import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configures root logging to write to stdout."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # The SDK logs every request at INFO; keep only its warnings.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    # uvicorn records go through the stdout handler above.
    logging.getLogger("uvicorn").handlers = []
    logging.getLogger("uvicorn").propagate = True
