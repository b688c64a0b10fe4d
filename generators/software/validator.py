"""Invariant checks over a generated software fixture set."""

from collections import Counter, defaultdict
from datetime import datetime, timedelta
from typing import Any

from core.config import FixtureConf
from core.logger import Logger
from core.utils import rfc3339
from generators.software.generator import generate_url
from generators.software.structs import URL_SUFFIXES

logger = Logger("software.validator")


class FixtureValidator:
    """
    Collects errors and warnings for a fixture set given as plain dicts, the
    shape yaml.safe_load hands back for software.yml and software_urls.yml.
    """

    def __init__(
        self,
        config: FixtureConf,
        software: list[Any],
        software_urls: list[Any],
    ):
        self.config = config
        self.logger = logger
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.software = self.mappings("software", software)
        self.software_urls = self.mappings("software url", software_urls)

    def mappings(self, entity_type: str, rows: list[Any]) -> list[dict[str, Any]]:
        """Keeps the dict rows, records an error for anything else"""
        kept = []
        for position, row in enumerate(rows):
            if isinstance(row, dict):
                kept.append(row)
            else:
                self.errors.append(
                    f"{entity_type.capitalize()} row {position} is not a mapping: "
                    f"{row!r}"
                )
        return kept

    def validate_counts(self) -> None:
        expected = self.config.count
        if len(self.software) != expected:
            self.errors.append(
                f"Expected {expected} software, found {len(self.software)}"
            )
        if len(self.software_urls) != 2 * expected:
            self.errors.append(
                f"Expected {2 * expected} software urls, "
                f"found {len(self.software_urls)}"
            )

    def validate_unique_ids(self) -> None:
        for entity_type, rows in (
            ("software", self.software),
            ("software url", self.software_urls),
        ):
            counts = Counter(row.get("id") for row in rows)
            for row_id, count in counts.items():
                if count > 1:
                    self.errors.append(
                        f"Duplicate {entity_type} id: {row_id} (count: {count})"
                    )

    def validate_timestamps(self) -> None:
        step = timedelta(days=self.config.step_days)
        expected: datetime = self.config.start

        for position, row in enumerate(self.software):
            if row.get("created_at") != rfc3339(expected):
                self.errors.append(
                    f"Software {position}: created_at {row.get('created_at')}, "
                    f"expected {rfc3339(expected)}"
                )
            if row.get("updated_at") != row.get("created_at"):
                self.errors.append(f"Software {position}: updated_at != created_at")
            expected += step

    def validate_urls(self) -> None:
        by_software: dict[str, list[dict[str, Any]]] = defaultdict(list)
        for row in self.software_urls:
            by_software[row.get("software_id")].append(row)

        known = {row.get("id") for row in self.software}
        orphaned = [sid for sid in by_software if sid not in known]
        if orphaned:
            self.errors.append(f"Found {len(orphaned)} orphaned software urls")

        for index, software in enumerate(self.software, start=1):
            urls = by_software.get(software.get("id"), [])
            if len(urls) != len(URL_SUFFIXES):
                self.errors.append(
                    f"Software {software.get('id')} has {len(urls)} urls, "
                    f"expected {len(URL_SUFFIXES)}"
                )
                continue

            expected_urls = {generate_url(index, suffix) for suffix in URL_SUFFIXES}
            actual_urls = {url.get("url") for url in urls}
            self.compare_sets(actual_urls, expected_urls, f"urls for index {index}")

            for url in urls:
                if url.get("created_at") != software.get("created_at"):
                    self.errors.append(
                        f"Software url {url.get('id')} timestamp differs from "
                        f"its software"
                    )

    def compare_sets(self, actual: set[str], expected: set[str], what: str) -> None:
        missing = expected - actual
        extra = actual - expected
        if missing:
            self.errors.append(f"Missing {what}: {sorted(missing)}")
        if extra:
            self.warnings.append(f"Extra {what}: {sorted(extra)}")

    def run_validation(self) -> bool:
        self.validate_counts()
        self.validate_unique_ids()
        self.validate_timestamps()
        self.validate_urls()

        for warning in self.warnings:
            self.logger.warn(warning)

        if self.errors:
            for error in self.errors:
                self.logger.error(error)
            self.logger.log(f"Validation failed with {len(self.errors)} errors")
            return False

        self.logger.log("Validation passed")
        return True
