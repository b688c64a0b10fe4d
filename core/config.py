from argparse import Namespace
from datetime import datetime
from os import getenv

from core.logger import Logger
from core.utils import env_int, env_vars, parse_date

logger = Logger("config")

QUIET = env_vars("QUIET", "false")
OUTPUT_DIR = getenv("FIXTURES_OUTPUT_DIR", ".")
COUNT = env_int("FIXTURES_COUNT", 30)
START_DATE = getenv("FIXTURES_START_DATE", "2014-05-01")
STEP_DAYS = env_int("FIXTURES_STEP_DAYS", 15)

SOFTWARE_FILE = "software.yml"
SOFTWARE_URLS_FILE = "software_urls.yml"


class ExecConf:
    quiet: bool

    def __init__(self, quiet: bool = QUIET) -> None:
        self.quiet = quiet

    def __str__(self):
        return f"ExecConf(quiet={self.quiet})"


class FixtureConf:
    count: int
    start: datetime
    step_days: int
    output_dir: str
    software_file: str
    software_urls_file: str

    def __init__(
        self,
        count: int = COUNT,
        start: datetime | str = START_DATE,
        step_days: int = STEP_DAYS,
        output_dir: str = OUTPUT_DIR,
    ) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if step_days <= 0:
            raise ValueError(f"step_days must be positive, got {step_days}")

        self.count = count
        self.start = parse_date(start) if isinstance(start, str) else start
        self.step_days = step_days
        self.output_dir = output_dir
        self.software_file = SOFTWARE_FILE
        self.software_urls_file = SOFTWARE_URLS_FILE

    def __str__(self):
        return f"FixtureConf(count={self.count},start={self.start.date()},step_days={self.step_days},output_dir={self.output_dir})"  # noqa


class Config:
    exec_config: ExecConf
    fixture_config: FixtureConf

    def __init__(
        self,
        exec_config: ExecConf | None = None,
        fixture_config: FixtureConf | None = None,
    ) -> None:
        self.exec_config = exec_config or ExecConf()
        self.fixture_config = fixture_config or FixtureConf()

    @classmethod
    def from_args(cls, args: Namespace) -> "Config":
        """CLI flags win over env vars; unset flags fall back to them"""
        exec_config = ExecConf(quiet=args.quiet or QUIET)
        fixture_config = FixtureConf(
            count=args.count if args.count is not None else COUNT,
            start=args.start_date or START_DATE,
            step_days=args.step_days if args.step_days is not None else STEP_DAYS,
            output_dir=args.output_dir or OUTPUT_DIR,
        )
        logger.debug(f"CLI overrides: {vars(args)}")
        return cls(exec_config, fixture_config)

    def __str__(self):
        return f"Config(exec_config={self.exec_config}, fixture_config={self.fixture_config})"  # noqa
