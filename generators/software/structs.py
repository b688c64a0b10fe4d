from dataclasses import dataclass, field

URL_TEMPLATE = "https://{index}-{suffix}.example.org/code/repo"
URL_SUFFIXES = ("a", "b")
PUBLICCODE_YML = "-"


# field order here is the order the fixture loader sees in the YAML
@dataclass(frozen=True)
class Software:
    id: str
    publiccode_yml: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class SoftwareURL:
    id: str
    software_id: str
    url: str
    created_at: str
    updated_at: str


@dataclass
class FixtureSet:
    software: list[Software] = field(default_factory=list)
    software_urls: list[SoftwareURL] = field(default_factory=list)
