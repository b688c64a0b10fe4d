from datetime import date, datetime, timezone
from os import getenv
from os.path import exists, join


# env vars could be true or 1, or anything else -- here's a centralized location to
# handle that
def env_vars(env_var: str, default: str) -> bool:
    var = getenv(env_var, default).lower()
    return var == "true" or var == "1"


def env_int(env_var: str, default: int) -> int:
    val = getenv(env_var, "")
    if val == "":
        return default
    return int(val)


def parse_date(val: str) -> datetime:
    """YYYY-MM-DD to midnight UTC"""
    day = date.fromisoformat(val)
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def rfc3339(moment: datetime) -> str:
    """2014-05-01T00:00:00+00:00; naive datetimes are treated as UTC"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.isoformat()


def file_exists(*args) -> str:
    """Confirms if a file exists"""
    file_path = join(*args)
    if not exists(file_path):
        raise FileNotFoundError(f"{file_path} not found")
    return file_path
