from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import uuid4

from core.config import FixtureConf
from core.logger import Logger
from core.utils import rfc3339
from generators.software.structs import (
    PUBLICCODE_YML,
    URL_SUFFIXES,
    URL_TEMPLATE,
    FixtureSet,
    Software,
    SoftwareURL,
)

logger = Logger("software.generator")


def new_id() -> str:
    return str(uuid4())


def generate_url(index: int, suffix: str) -> str:
    return URL_TEMPLATE.format(index=index, suffix=suffix)


def generate_software(software_id: str, now: datetime) -> Software:
    """Creates a new Software record, created_at == updated_at"""
    timestamp = rfc3339(now)
    return Software(software_id, PUBLICCODE_YML, timestamp, timestamp)


def generate_software_urls(
    software: Software, index: int, id_factory: Callable[[], str] = new_id
) -> list[SoftwareURL]:
    """The a and b URLs for one Software record, sharing its timestamp"""
    return [
        SoftwareURL(
            id_factory(),
            software.id,
            generate_url(index, suffix),
            software.created_at,
            software.updated_at,
        )
        for suffix in URL_SUFFIXES
    ]


def generate(
    config: FixtureConf, id_factory: Callable[[], str] = new_id
) -> FixtureSet:
    """
    Builds config.count Software records, each with two Software URL records.

    Indices run 1..count; the clock starts at config.start and moves forward
    config.step_days days after every record.
    """
    fixtures = FixtureSet()
    now = config.start
    step = timedelta(days=config.step_days)

    for index in range(1, config.count + 1):
        software = generate_software(id_factory(), now)
        fixtures.software_urls.extend(
            generate_software_urls(software, index, id_factory)
        )
        fixtures.software.append(software)
        now += step

    logger.debug(
        f"generated {len(fixtures.software)} software, "
        f"{len(fixtures.software_urls)} software urls"
    )
    return fixtures
