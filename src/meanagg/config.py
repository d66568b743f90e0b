# environment-driven settings for the service layer, mean() itself never reads them
# .env is honoured for local work; in production the variables are injected by the deployment

from __future__ import annotations
import logging
import os

from dotenv import load_dotenv

from .models import DEFAULT_ACCUMULATOR, InvalidArgument, resolve_accumulator

load_dotenv()

logger = logging.getLogger(__name__)

ACCUMULATOR_ENV = "MEANAGG_ACCUMULATOR"


def default_accumulator() -> str:
    # read at call time so a changed environment is picked up without re-importing
    name = os.getenv(ACCUMULATOR_ENV, "").strip()
    if not name:
        return DEFAULT_ACCUMULATOR

    try:
        resolve_accumulator(name)
    except InvalidArgument as exc:
        # fail early and name the variable, otherwise the error looks like a bad call argument
        raise InvalidArgument(f"{ACCUMULATOR_ENV}={name!r} is not usable: {exc}") from exc

    logger.debug("accumulator %r taken from %s", name, ACCUMULATOR_ENV)
    return name
