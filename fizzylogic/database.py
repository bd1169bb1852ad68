# fizzylogic/database.py - Connection string handling
from django.core.exceptions import ImproperlyConfigured

# Keys accepted in the DefaultDatabase connection string, mapped to the
# Django DATABASES option they configure.
POSTGRES_KEYS = {
    "host": "HOST",
    "server": "HOST",
    "port": "PORT",
    "database": "NAME",
    "username": "USER",
    "user id": "USER",
    "password": "PASSWORD",
}

SQLITE_KEYS = {"data source", "filename"}


def split_connection_string(value):
    """Split a ``Key=Value;Key=Value`` string into a dict with lowercased keys"""
    pairs = {}
    for part in value.split(";"):
        part = part.strip()
        if not part:
            continue
        if "=" not in part:
            raise ImproperlyConfigured(f"Malformed connection string segment: '{part}'")
        key, _, raw = part.partition("=")
        pairs[key.strip().lower()] = raw.strip()
    return pairs


def parse_connection_string(value, conn_max_age=60):
    """
    Build a Django database configuration from the DefaultDatabase connection string.

    ``Host=db;Port=5432;Database=fizzylogic;Username=app;Password=secret`` maps to
    PostgreSQL, ``Data Source=/var/lib/fizzylogic/app.db`` maps to SQLite.
    """
    if not value or not value.strip():
        raise ImproperlyConfigured("The DefaultDatabase connection string is empty")

    pairs = split_connection_string(value)

    sqlite_keys = SQLITE_KEYS & pairs.keys()
    if sqlite_keys:
        unknown = set(pairs) - SQLITE_KEYS
        if unknown:
            raise ImproperlyConfigured(
                f"Unsupported SQLite connection string keys: {', '.join(sorted(unknown))}"
            )
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": pairs[sqlite_keys.pop()],
        }

    unknown = set(pairs) - POSTGRES_KEYS.keys()
    if unknown:
        raise ImproperlyConfigured(
            f"Unsupported connection string keys: {', '.join(sorted(unknown))}"
        )

    config = {
        "ENGINE": "django.db.backends.postgresql",
        "HOST": "",
        "PORT": "",
        "NAME": "",
        "USER": "",
        "PASSWORD": "",
        "CONN_MAX_AGE": conn_max_age,
    }
    for key, raw in pairs.items():
        config[POSTGRES_KEYS[key]] = raw

    if not config["NAME"]:
        raise ImproperlyConfigured("The DefaultDatabase connection string has no Database")

    return config
