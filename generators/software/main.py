#!/usr/bin/env uv run --with pyyaml==6.0.2

import argparse
import sys

from core.config import Config
from core.logger import Logger
from core.writer import Document, Writer, load, to_yaml
from generators.software.generator import generate
from generators.software.validator import FixtureValidator

logger = Logger("software")


def run(config: Config) -> tuple[str, str]:
    """Generates the fixtures, writes both files, returns the two YAML documents"""
    fixture_config = config.fixture_config
    fixtures = generate(fixture_config)

    software_yml = to_yaml(fixtures.software)
    software_urls_yml = to_yaml(fixtures.software_urls)

    if not config.exec_config.quiet:
        print(software_yml, end="")

    writer = Writer(fixture_config.output_dir)
    paths = writer.write(
        [
            Document(fixture_config.software_file, software_yml),
            Document(fixture_config.software_urls_file, software_urls_yml),
        ]
    )
    logger.log(f"Wrote {', '.join(paths)}")

    return software_yml, software_urls_yml


def validate(config: Config) -> bool:
    fixture_config = config.fixture_config
    software = load(fixture_config.output_dir, fixture_config.software_file)
    software_urls = load(fixture_config.output_dir, fixture_config.software_urls_file)
    validator = FixtureValidator(fixture_config, software, software_urls)
    return validator.run_validation()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate software and software url seed fixtures"
    )
    parser.add_argument("--output-dir", help="Directory to write the YAML files to")
    parser.add_argument("--count", type=int, help="Number of software records")
    parser.add_argument("--start-date", help="First created_at, YYYY-MM-DD")
    parser.add_argument("--step-days", type=int, help="Days between records")
    parser.add_argument(
        "--quiet", action="store_true", help="Don't print software.yml to stdout"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check previously written fixtures instead of generating",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = Config.from_args(args)
    logger.debug(str(config))

    if args.validate:
        return 0 if validate(config) else 1

    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
