import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from sss.models import ThresholdConfig


@dataclass(frozen=True)
class Settings:
    threshold_config: ThresholdConfig
    custodian_ids: list[str]
    log_level: str


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))

    threshold = _int_env("SSS_THRESHOLD", 3)
    total_shares = _int_env("SSS_TOTAL_SHARES", 5)
    config = ThresholdConfig(threshold=threshold, total_shares=total_shares).validate()

    custodians_env = os.getenv("SSS_CUSTODIANS")
    if custodians_env:
        custodian_ids = [c.strip() for c in custodians_env.split(",") if c.strip()]
        if len(custodian_ids) != total_shares:
            raise ValueError(
                f"SSS_CUSTODIANS lists {len(custodian_ids)} custodians, SSS_TOTAL_SHARES is {total_shares}"
            )
    else:
        custodian_ids = [f"custodian{i}" for i in range(1, total_shares + 1)]

    log_level = (os.getenv("SSS_LOG_LEVEL") or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"SSS_LOG_LEVEL must be a logging level name, got {log_level!r}")
    return Settings(threshold_config=config, custodian_ids=custodian_ids, log_level=log_level)


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
