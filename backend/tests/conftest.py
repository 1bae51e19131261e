"""Root conftest: shared test configuration."""

import os

# Never talk to a real LMS from tests; keep logs readable
os.environ.setdefault("CATALOG_API_URL", "http://catalog.test/api/v1")
os.environ.setdefault("SCHOOL_SOURCE", "remote")
os.environ.setdefault("LOG_FORMAT", "text")
