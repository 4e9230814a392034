from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    return int(raw)


@dataclass(frozen=True)
class Settings:
    content_dir: str | None = os.getenv("CONTENT_DIR") or None
    dev_mode: bool = os.getenv("DEV_MODE", "0") == "1"
    rng_seed: int = _env_int("RNG_SEED", 1337)

    def describe(self) -> dict[str, object]:
        return {
            "content_dir": self.content_dir or "<packaged>",
            "dev_mode": self.dev_mode,
            "rng_seed": self.rng_seed,
        }


def configure_logging(dev_mode: bool) -> None:
    level = logging.DEBUG if dev_mode else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
